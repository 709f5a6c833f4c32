# summoner_lookup/services/match_detail.py
from typing import Any, Dict, List, Optional

from summoner_lookup.models import (
  MatchInfo, ObjectiveCount, PlayerStats, TeamObjectiveCounts, TeamObjectives,
)
from summoner_lookup.riot_models import MatchDto, ObjectiveDto, ParticipantDto, TimelineDto


def kda_ratio(kills: int, deaths: int, assists: int) -> str:
  if kills + assists <= 0:
    return "0.00"
  return f"{(kills + assists) / max(deaths, 1):.2f}"


def cs_per_minute(p: ParticipantDto, duration_sec: int) -> str:
  if duration_sec <= 0:
    return "0.0"
  cs = p.totalMinionsKilled + p.neutralMinionsKilled
  return f"{cs / (duration_sec / 60):.1f}"


def player_stats(match: MatchDto, p: ParticipantDto) -> PlayerStats:
  info = match.info
  return PlayerStats(
      kills=p.kills,
      deaths=p.deaths,
      assists=p.assists,
      kda=kda_ratio(p.kills, p.deaths, p.assists),
      totalDamageDealtToChampions=p.totalDamageDealtToChampions,
      physicalDamageDealtToChampions=p.physicalDamageDealtToChampions,
      magicDamageDealtToChampions=p.magicDamageDealtToChampions,
      trueDamageDealtToChampions=p.trueDamageDealtToChampions,
      goldEarned=p.goldEarned,
      goldSpent=p.goldSpent,
      visionScore=p.visionScore,
      wardsPlaced=p.wardsPlaced,
      wardsKilled=p.wardsKilled,
      totalMinionsKilled=p.totalMinionsKilled,
      neutralMinionsKilled=p.neutralMinionsKilled,
      csPerMinute=cs_per_minute(p, info.gameDuration),
      items=p.items,
      summoner1Id=p.summoner1Id,
      summoner2Id=p.summoner2Id,
      championName=p.championName,
      championLevel=p.champLevel,
      championTransform=p.championTransform,
      teamPosition=p.teamPosition,
      individualPosition=p.individualPosition,
      win=p.win,
      gameDuration=info.gameDuration,
      gameMode=info.gameMode,
      queueId=info.queueId,
  )


def player_timeline(timeline: Optional[TimelineDto], participant_id: int) -> List[Dict[str, Any]]:
  """Events the participant took part in, flattened across frames and stamped with the frame time."""
  if timeline is None:
    return []
  out = []
  for frame in timeline.info.frames:
    for ev in frame.events:
      if not ev.involves(participant_id):
        continue
      row = ev.model_dump(exclude_unset=True)
      row["timestamp"] = frame.timestamp
      row["realTimestamp"] = ev.realTimestamp or frame.timestamp
      out.append(row)
  return sorted(out, key=lambda e: e["timestamp"])


def _count(o: ObjectiveDto) -> ObjectiveCount:
  return ObjectiveCount(first=o.first, kills=o.kills)


def team_objectives(match: MatchDto) -> List[TeamObjectives]:
  out = []
  for t in match.info.teams:
    o = t.objectives
    out.append(TeamObjectives(
        teamId=t.teamId,
        win=t.win,
        objectives=TeamObjectiveCounts(
            baron=_count(o.baron),
            dragon=_count(o.dragon),
            inhibitor=_count(o.inhibitor),
            riftHerald=_count(o.riftHerald),
            tower=_count(o.tower),
        ),
    ))
  return out


def match_info(match: MatchDto) -> MatchInfo:
  info = match.info
  return MatchInfo(
      gameCreation=info.gameCreation,
      gameDuration=info.gameDuration,
      gameMode=info.gameMode,
      queueId=info.queueId,
  )
