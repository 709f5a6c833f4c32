from pydantic import AliasChoices, BaseModel, Field
from typing import Any, Dict, List, Literal, Optional


# ----------------------------
# Requests
# ----------------------------
class RiotIdRequest(BaseModel):
  gameName: str = Field("", validation_alias=AliasChoices("gameName", "displayName"))
  tagLine: str = Field("", validation_alias=AliasChoices("tagLine", "discriminator"))


class MatchDetailsRequest(BaseModel):
  matchId: str = ""
  puuid: str = Field("", validation_alias=AliasChoices("puuid", "playerId"))


# ----------------------------
# History
# ----------------------------
Role = Literal["top", "jungle", "mid", "adc", "support", "unknown"]


class ParticipantView(BaseModel):
  summonerName: str = ""
  championName: str
  teamId: int
  kills: int = 0
  deaths: int = 0
  assists: int = 0
  role: Role = "unknown"
  isCurrentPlayer: bool = False
  puuid: Optional[str] = None


class MatchSummary(BaseModel):
  matchId: str
  win: bool
  outcome: Literal["win", "loss", "remake"]
  isRemake: bool = False
  champion: str
  blueTeam: List[ParticipantView] = []
  redTeam: List[ParticipantView] = []
  gameMode: str = ""
  gameDuration: str = "0:00"
  gameDurationSeconds: int = 0
  timeAgo: str = ""


class HistoryResponse(BaseModel):
  matches: List[MatchSummary] = []


# ----------------------------
# Player stats
# ----------------------------
class SummonerView(BaseModel):
  puuid: str
  summonerLevel: int = 0
  profileIconId: int = 0


class MasteryEntry(BaseModel):
  championId: int
  championName: str = ""
  championLevel: int = 0
  championPoints: int = 0
  championPointsSinceLastLevel: int = 0
  chestGranted: bool = False


class RankedEntry(BaseModel):
  queueType: str
  tier: str = ""
  rank: str = ""
  leaguePoints: int = 0
  wins: int = 0
  losses: int = 0


class ChampionAggregate(BaseModel):
  champion: str
  wins: int = 0
  losses: int = 0
  winrate: str = "0.0"
  totalGames: int = 0
  avgDamage: int = 0
  avgGold: int = 0


class PlayerStatsResponse(BaseModel):
  summoner: SummonerView
  mastery: List[MasteryEntry] = []
  ranked: List[RankedEntry] = []
  winrates: List[ChampionAggregate] = []


# ----------------------------
# Match details
# ----------------------------
class PlayerStats(BaseModel):
  kills: int
  deaths: int
  assists: int
  kda: str

  totalDamageDealtToChampions: int = 0
  physicalDamageDealtToChampions: int = 0
  magicDamageDealtToChampions: int = 0
  trueDamageDealtToChampions: int = 0

  goldEarned: int = 0
  goldSpent: int = 0

  visionScore: int = 0
  wardsPlaced: int = 0
  wardsKilled: int = 0

  totalMinionsKilled: int = 0
  neutralMinionsKilled: int = 0
  csPerMinute: str = "0.0"

  items: List[int] = []
  summoner1Id: int = 0
  summoner2Id: int = 0

  championName: str
  championLevel: int = 0
  championTransform: int = 0  # Kayn form

  teamPosition: str = ""
  individualPosition: str = ""

  win: bool
  gameDuration: int
  gameMode: str = ""
  queueId: int = 0


class ObjectiveCount(BaseModel):
  first: bool = False
  kills: int = 0


class TeamObjectiveCounts(BaseModel):
  baron: ObjectiveCount
  dragon: ObjectiveCount
  inhibitor: ObjectiveCount
  riftHerald: ObjectiveCount
  tower: ObjectiveCount


class TeamObjectives(BaseModel):
  teamId: int
  win: bool = False
  objectives: TeamObjectiveCounts


class MatchInfo(BaseModel):
  gameCreation: int = 0
  gameDuration: int = 0
  gameMode: str = ""
  queueId: int = 0


class MatchDetailsResponse(BaseModel):
  playerStats: PlayerStats
  playerTimeline: List[Dict[str, Any]] = []
  teamObjectives: List[TeamObjectives] = []
  matchInfo: MatchInfo


# ----------------------------
# Champions
# ----------------------------
class ChampionView(BaseModel):
  key: str
  id: str
  name: str
  title: str = ""
  imageUrl: str
