# summoner_lookup/routes/match_details.py
import logging
import re

from fastapi import APIRouter, Depends

from summoner_lookup.deps import get_riot_client
from summoner_lookup.errors import InvalidRequest, NotFound, ServiceError, UpstreamUnavailable
from summoner_lookup.models import MatchDetailsRequest, MatchDetailsResponse
from summoner_lookup.riot_client import RiotClient
from summoner_lookup.services.match_detail import (
  match_info, player_stats, player_timeline, team_objectives,
)

log = logging.getLogger("match_details")
if not log.handlers:
  h = logging.StreamHandler()
  h.setFormatter(logging.Formatter("[MD] %(levelname)s: %(message)s"))
  log.addHandler(h)
  log.setLevel(logging.INFO)

router = APIRouter(prefix="/api", tags=["match-details"])

# platform prefix + numeric game id, e.g. NA1_4987654321
MATCH_ID = re.compile(r"^[A-Za-z0-9]+_\d+$")


@router.post("/lol-match-details", response_model=MatchDetailsResponse)
async def lol_match_details(body: MatchDetailsRequest, rc: RiotClient = Depends(get_riot_client)):
  match_id, puuid = body.matchId.strip(), body.puuid.strip()
  if not match_id or not puuid:
    raise InvalidRequest("Missing matchId or puuid")
  if not MATCH_ID.match(match_id):
    raise InvalidRequest("Invalid matchId", details=match_id[:100])

  try:
    match = await rc.match(match_id)
  except UpstreamUnavailable as e:
    if e.upstream_status is None:
      raise
    raise NotFound("Match not found", details=e.details) from e

  # timeline is optional
  try:
    timeline = await rc.match_timeline(match_id)
  except ServiceError as e:
    log.warning("timeline for %s unavailable: %s (%s)", match_id, e.message, e.status_code)
    timeline = None

  you = match.participant(puuid)
  if you is None:
    raise NotFound("Player not found in match")

  return MatchDetailsResponse(
      playerStats=player_stats(match, you),
      playerTimeline=player_timeline(timeline, you.participantId),
      teamObjectives=team_objectives(match),
      matchInfo=match_info(match),
  )
