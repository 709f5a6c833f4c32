# summoner_lookup/riot_models.py
# Upstream payloads, validated at the client boundary. Only the fields we read
# are declared; everything else the API sends is ignored.
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AccountDto(BaseModel):
  puuid: str
  gameName: Optional[str] = None
  tagLine: Optional[str] = None


class SummonerDto(BaseModel):
  puuid: str
  id: Optional[str] = None
  profileIconId: int = 0
  summonerLevel: int = 0


class ParticipantDto(BaseModel):
  puuid: str
  participantId: int = 0
  teamId: int
  win: bool
  championId: int = 0
  championName: str
  champLevel: int = 0
  championTransform: int = 0
  riotIdGameName: Optional[str] = None
  summonerName: Optional[str] = None

  kills: int
  deaths: int
  assists: int

  teamPosition: str = ""
  individualPosition: str = ""
  lane: str = ""
  role: str = ""

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

  item0: int = 0
  item1: int = 0
  item2: int = 0
  item3: int = 0
  item4: int = 0
  item5: int = 0
  item6: int = 0
  summoner1Id: int = 0
  summoner2Id: int = 0

  @property
  def display_name(self) -> str:
    return self.riotIdGameName or self.summonerName or ""

  @property
  def items(self) -> List[int]:
    slots = [self.item0, self.item1, self.item2, self.item3, self.item4, self.item5, self.item6]
    return [i for i in slots if i != 0]


class ObjectiveDto(BaseModel):
  first: bool = False
  kills: int = 0


class ObjectivesDto(BaseModel):
  baron: ObjectiveDto = Field(default_factory=ObjectiveDto)
  dragon: ObjectiveDto = Field(default_factory=ObjectiveDto)
  inhibitor: ObjectiveDto = Field(default_factory=ObjectiveDto)
  riftHerald: ObjectiveDto = Field(default_factory=ObjectiveDto)
  tower: ObjectiveDto = Field(default_factory=ObjectiveDto)


class TeamDto(BaseModel):
  teamId: int
  win: bool = False
  objectives: ObjectivesDto = Field(default_factory=ObjectivesDto)


class InfoDto(BaseModel):
  gameCreation: int = 0
  gameDuration: int
  gameMode: str = ""
  gameType: str = ""
  queueId: int = 0
  participants: List[ParticipantDto]
  teams: List[TeamDto] = []


class MetadataDto(BaseModel):
  matchId: str
  participants: List[str] = []


class MatchDto(BaseModel):
  metadata: MetadataDto
  info: InfoDto

  def participant(self, puuid: str) -> Optional[ParticipantDto]:
    return next((p for p in self.info.participants if p.puuid == puuid), None)


# ----------------------------
# Timeline
# ----------------------------
class EventDto(BaseModel):
  # events carry type-specific fields (itemId, position, wardType, ...)
  model_config = ConfigDict(extra="allow")

  type: str = ""
  timestamp: int = 0
  realTimestamp: Optional[int] = None
  participantId: Optional[int] = None
  killerId: Optional[int] = None
  victimId: Optional[int] = None
  assistingParticipantIds: List[int] = []

  def involves(self, participant_id: int) -> bool:
    return (
        self.participantId == participant_id
        or self.killerId == participant_id
        or self.victimId == participant_id
        or participant_id in self.assistingParticipantIds
    )


class FrameDto(BaseModel):
  timestamp: int
  events: List[EventDto] = []


class TimelineInfoDto(BaseModel):
  frames: List[FrameDto] = []


class TimelineDto(BaseModel):
  info: TimelineInfoDto


# ----------------------------
# Mastery / League
# ----------------------------
class MasteryDto(BaseModel):
  championId: int
  championLevel: int = 0
  championPoints: int = 0
  championPointsSinceLastLevel: int = 0
  chestGranted: bool = False


class LeagueEntryDto(BaseModel):
  queueType: str
  tier: str = ""
  rank: str = ""
  leaguePoints: int = 0
  wins: int = 0
  losses: int = 0


# ----------------------------
# Data Dragon
# ----------------------------
class ChampionImage(BaseModel):
  full: str


class ChampionInfo(BaseModel):
  id: str
  key: str
  name: str
  title: str = ""
  image: ChampionImage


class ChampionListDto(BaseModel):
  data: Dict[str, ChampionInfo]
