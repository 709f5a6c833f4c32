# summoner_lookup/routes/history.py
import logging

from fastapi import APIRouter, Depends

from summoner_lookup.config import HISTORY_MATCH_COUNT
from summoner_lookup.deps import get_riot_client
from summoner_lookup.errors import NotFound, UpstreamUnavailable
from summoner_lookup.models import HistoryResponse, RiotIdRequest
from summoner_lookup.riot_client import RiotClient
from summoner_lookup.services.identity import resolve_puuid
from summoner_lookup.services.match_summary import summarize_match

log = logging.getLogger("history")
if not log.handlers:
  h = logging.StreamHandler()
  h.setFormatter(logging.Formatter("[HIST] %(levelname)s: %(message)s"))
  log.addHandler(h)
  log.setLevel(logging.INFO)

router = APIRouter(prefix="/api", tags=["history"])


@router.post("/lol-history", response_model=HistoryResponse)
async def lol_history(body: RiotIdRequest, rc: RiotClient = Depends(get_riot_client)):
  """
  Example body:
    {"gameName": "MK1Paris", "tagLine": "NA1"}
  """
  # 1) PUUID
  puuid = await resolve_puuid(rc, body.gameName, body.tagLine)

  # 2) last N match ids, most recent first
  try:
    ids = await rc.match_ids(puuid, start=0, count=HISTORY_MATCH_COUNT)
  except UpstreamUnavailable as e:
    if e.upstream_status is None:
      raise
    raise NotFound("Could not fetch match IDs", details=e.details) from e

  # 3) details concurrently; failures are dropped
  matches = await rc.matches(ids)

  summaries = []
  for m in matches:
    s = summarize_match(m, puuid)
    if s is None:
      log.warning("player missing from match %s, skipped", m.metadata.matchId)
      continue
    summaries.append(s)

  log.info("%d/%d matches summarized", len(summaries), len(ids))
  return HistoryResponse(matches=summaries)
