# summoner_lookup/services/match_summary.py
import time
from typing import List, Optional

from summoner_lookup.config import QUEUE_NAMES, REMAKE_MAX_SECONDS
from summoner_lookup.models import MatchSummary, ParticipantView
from summoner_lookup.riot_models import InfoDto, MatchDto, ParticipantDto

BLUE_TEAM = 100
RED_TEAM = 200

ROLE_ORDER = ["top", "jungle", "mid", "adc", "support"]

# teamPosition values: TOP, JUNGLE, MIDDLE, BOTTOM, UTILITY
ROLE_MAP = {
  "TOP": "top",
  "JUNGLE": "jungle",
  "MIDDLE": "mid",
  "BOTTOM": "adc",
  "UTILITY": "support",
}

NON_COMPETITIVE_MODES = {"PRACTICETOOL", "TUTORIAL"}
NON_COMPETITIVE_TYPES = {"CUSTOM_GAME"}


def role_of(p: ParticipantDto) -> str:
  role = ROLE_MAP.get(p.teamPosition)
  if role:
    return role
  # lane/role are less reliable, only used when teamPosition is empty
  lane, lane_role = p.lane, p.role
  if lane in ("TOP", "JUNGLE", "MIDDLE"):
    return ROLE_MAP[lane]
  if lane == "BOTTOM" and lane_role == "CARRY":
    return "adc"
  if lane == "BOTTOM" and lane_role == "SUPPORT":
    return "support"
  if lane == "UTILITY":
    return "support"
  return "unknown"


def sort_by_role(players: List[ParticipantView]) -> List[ParticipantView]:
  # stable; unknown sorts last
  return sorted(players, key=lambda p: ROLE_ORDER.index(p.role) if p.role in ROLE_ORDER else len(ROLE_ORDER))


def game_mode_name(queue_id: int, game_mode: str) -> str:
  return QUEUE_NAMES.get(queue_id) or game_mode


def format_duration(seconds: int) -> str:
  minutes, rest = divmod(max(0, int(seconds)), 60)
  return f"{minutes}:{rest:02d}"


def _plural(n: int, unit: str) -> str:
  return f"{n} {unit}{'' if n == 1 else 's'} ago"


def time_ago(timestamp_ms: int, now_ms: Optional[int] = None) -> str:
  now_ms = int(time.time() * 1000) if now_ms is None else now_ms
  diff = max(0, now_ms - timestamp_ms)
  minutes = diff // (1000 * 60)
  hours = diff // (1000 * 60 * 60)
  days = diff // (1000 * 60 * 60 * 24)
  if days > 0:
    return _plural(days, "day")
  if hours > 0:
    return _plural(hours, "hour")
  return _plural(minutes, "minute")


def is_remake(info: InfoDto) -> bool:
  return (
      info.gameDuration < REMAKE_MAX_SECONDS
      or info.gameMode in NON_COMPETITIVE_MODES
      or info.gameType in NON_COMPETITIVE_TYPES
  )


def participant_view(p: ParticipantDto, puuid: str) -> ParticipantView:
  return ParticipantView(
      summonerName=p.display_name,
      championName=p.championName,
      teamId=p.teamId,
      kills=p.kills,
      deaths=p.deaths,
      assists=p.assists,
      role=role_of(p),
      isCurrentPlayer=p.puuid == puuid,
      puuid=p.puuid,
  )


def summarize_match(match: MatchDto, puuid: str, now_ms: Optional[int] = None) -> Optional[MatchSummary]:
  """Compact history row for `puuid`, or None when the player is not in the match."""
  info = match.info
  you = match.participant(puuid)
  if you is None:
    return None

  players = [participant_view(p, puuid) for p in info.participants]
  remake = is_remake(info)
  outcome = "remake" if remake else ("win" if you.win else "loss")

  return MatchSummary(
      matchId=match.metadata.matchId,
      win=you.win,
      outcome=outcome,
      isRemake=remake,
      champion=you.championName,
      blueTeam=sort_by_role([p for p in players if p.teamId == BLUE_TEAM]),
      redTeam=sort_by_role([p for p in players if p.teamId == RED_TEAM]),
      gameMode=game_mode_name(info.queueId, info.gameMode),
      gameDuration=format_duration(info.gameDuration),
      gameDurationSeconds=info.gameDuration,
      timeAgo=time_ago(info.gameCreation, now_ms),
  )
