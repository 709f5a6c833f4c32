# summoner_lookup/routes/player_stats.py
import asyncio
import logging
from typing import Awaitable, TypeVar

from fastapi import APIRouter, Depends

from summoner_lookup.config import (
  MASTERY_TOP_COUNT, RANKED_SOLO_QUEUE, STATS_MATCH_ID_COUNT, STATS_MATCH_DETAIL_COUNT,
)
from summoner_lookup.deps import get_catalog, get_riot_client
from summoner_lookup.errors import ServiceError
from summoner_lookup.models import (
  MasteryEntry, PlayerStatsResponse, RankedEntry, RiotIdRequest, SummonerView,
)
from summoner_lookup.riot_client import RiotClient
from summoner_lookup.riot_models import MatchDto
from summoner_lookup.services.champion_agg import aggregate_winrates
from summoner_lookup.services.identity import resolve_puuid
from summoner_lookup.util.champion_catalog import ChampionCatalog

log = logging.getLogger("player_stats")
if not log.handlers:
  h = logging.StreamHandler()
  h.setFormatter(logging.Formatter("[STATS] %(levelname)s: %(message)s"))
  log.addHandler(h)
  log.setLevel(logging.INFO)

router = APIRouter(prefix="/api", tags=["player-stats"])

T = TypeVar("T")


async def _best_effort(label: str, call: Awaitable[list[T]]) -> list[T]:
  # new accounts legitimately have no mastery / ranked rows
  try:
    return await call
  except ServiceError as e:
    log.warning("%s unavailable: %s (%s) %s", label, e.message, e.status_code, e.details or "")
    return []


async def _ranked_sample(rc: RiotClient, puuid: str) -> list[MatchDto]:
  ids = await rc.match_ids(puuid, start=0, count=STATS_MATCH_ID_COUNT, queue=RANKED_SOLO_QUEUE)
  return await rc.matches(ids[:STATS_MATCH_DETAIL_COUNT])


@router.post("/lol-player-stats", response_model=PlayerStatsResponse)
async def lol_player_stats(
    body: RiotIdRequest,
    rc: RiotClient = Depends(get_riot_client),
    catalog: ChampionCatalog = Depends(get_catalog),
):
  # required: account + summoner
  puuid = await resolve_puuid(rc, body.gameName, body.tagLine)
  summoner = await rc.summoner_by_puuid(puuid)

  # optional: each may fail on its own
  mastery_raw, ranked_raw, sample = await asyncio.gather(
      _best_effort("mastery", rc.top_masteries(puuid, MASTERY_TOP_COUNT)),
      _best_effort("ranked", rc.ranked_entries_by_puuid(puuid)),
      _best_effort("match sample", _ranked_sample(rc, puuid)),
  )

  names = await catalog.names_for([m.championId for m in mastery_raw])
  mastery = [
    MasteryEntry(
        championId=m.championId,
        championName=names[m.championId],
        championLevel=m.championLevel,
        championPoints=m.championPoints,
        championPointsSinceLastLevel=m.championPointsSinceLastLevel,
        chestGranted=m.chestGranted,
    )
    for m in mastery_raw
  ]
  ranked = [RankedEntry(**r.model_dump()) for r in ranked_raw]
  winrates = aggregate_winrates(sample, puuid)

  log.info("mastery=%d ranked=%d winrates=%d", len(mastery), len(ranked), len(winrates))
  return PlayerStatsResponse(
      summoner=SummonerView(puuid=puuid, summonerLevel=summoner.summonerLevel,
                            profileIconId=summoner.profileIconId),
      mastery=mastery,
      ranked=ranked,
      winrates=winrates,
  )
