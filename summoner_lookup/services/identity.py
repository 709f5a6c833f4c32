# summoner_lookup/services/identity.py
from summoner_lookup.errors import InvalidRequest, NotFound, UpstreamUnavailable
from summoner_lookup.riot_client import RiotClient


def require_riot_id(game_name: str, tag_line: str) -> tuple[str, str]:
  name, tag = (game_name or "").strip(), (tag_line or "").strip()
  if not name or not tag:
    raise InvalidRequest("Missing gameName or tagLine")
  return name, tag


async def resolve_puuid(rc: RiotClient, game_name: str, tag_line: str) -> str:
  """
  Riot ID -> PUUID. Re-resolved on every call, never cached.
  Any HTTP failure other than 429 reads as an unknown account.
  """
  name, tag = require_riot_id(game_name, tag_line)
  try:
    account = await rc.account_by_riot_id(name, tag)
  except UpstreamUnavailable as e:
    if e.upstream_status is None:
      raise
    raise NotFound("Account not found", details=e.details) from e
  return account.puuid
