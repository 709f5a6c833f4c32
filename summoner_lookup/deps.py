# summoner_lookup/deps.py
from typing import AsyncIterator

from fastapi import Request

from summoner_lookup.riot_client import RiotClient
from summoner_lookup.util.champion_catalog import ChampionCatalog


async def get_riot_client() -> AsyncIterator[RiotClient]:
  async with RiotClient() as rc:
    yield rc


def get_catalog(request: Request) -> ChampionCatalog:
  return request.app.state.catalog
