"""Shared fixtures: a fake Riot API behind httpx.MockTransport and match payload builders."""
from typing import Any, Dict, List, Optional

import httpx
import pytest

from summoner_lookup.deps import get_catalog, get_riot_client
from summoner_lookup.main import app
from summoner_lookup.retry import RetryPolicy
from summoner_lookup.riot_client import RiotClient
from summoner_lookup.util.champion_catalog import ChampionCatalog

ME = "puuid-me"
NOW_MS = 1_700_000_000_000


@pytest.fixture
def anyio_backend():
  return "asyncio"


# ----------------------------
# Payload builders
# ----------------------------
def participant(
    puuid: str,
    champion: str = "Ahri",
    team: int = 100,
    win: bool = True,
    position: str = "MIDDLE",
    pid: int = 1,
    **extra: Any,
) -> Dict[str, Any]:
  p = {
    "puuid": puuid,
    "participantId": pid,
    "teamId": team,
    "win": win,
    "championName": champion,
    "riotIdGameName": f"name-{puuid}",
    "kills": 5,
    "deaths": 2,
    "assists": 7,
    "teamPosition": position,
    "totalDamageDealtToChampions": 20000,
    "goldEarned": 10000,
  }
  p.update(extra)
  return p


POSITIONS = ["TOP", "JUNGLE", "MIDDLE", "BOTTOM", "UTILITY"]


def lobby(me_champion: str = "Ahri", me_win: bool = True, **me_extra: Any) -> List[Dict[str, Any]]:
  """Ten participants; ME plays mid on blue side."""
  out = []
  for i, pos in enumerate(POSITIONS):
    puuid = ME if pos == "MIDDLE" else f"blue-{pos.lower()}"
    champ = me_champion if puuid == ME else f"Blue{pos.title()}"
    extra = me_extra if puuid == ME else {}
    out.append(participant(puuid, champ, 100, me_win, pos, pid=i + 1, **extra))
  for i, pos in enumerate(POSITIONS):
    out.append(participant(f"red-{pos.lower()}", f"Red{pos.title()}", 200, not me_win, pos, pid=i + 6))
  return out


def match(
    match_id: str,
    participants: Optional[List[Dict[str, Any]]] = None,
    duration: int = 1800,
    queue: int = 420,
    mode: str = "CLASSIC",
    game_type: str = "MATCHED_GAME",
    creation: int = NOW_MS - 2 * 3600 * 1000,
    teams: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
  parts = participants if participants is not None else lobby()
  return {
    "metadata": {"matchId": match_id, "participants": [p["puuid"] for p in parts]},
    "info": {
      "gameCreation": creation,
      "gameDuration": duration,
      "gameMode": mode,
      "gameType": game_type,
      "queueId": queue,
      "participants": parts,
      "teams": teams if teams is not None else [
        {"teamId": 100, "win": True, "objectives": {"baron": {"first": True, "kills": 1},
                                                     "tower": {"first": True, "kills": 9}}},
        {"teamId": 200, "win": False, "objectives": {"dragon": {"first": True, "kills": 2}}},
      ],
    },
  }


def champion_json() -> Dict[str, Any]:
  return {
    "data": {
      "Ahri": {"id": "Ahri", "key": "103", "name": "Ahri", "title": "the Nine-Tailed Fox",
               "image": {"full": "Ahri.png"}},
      "Aatrox": {"id": "Aatrox", "key": "266", "name": "Aatrox", "title": "the Darkin Blade",
                 "image": {"full": "Aatrox.png"}},
      "MonkeyKing": {"id": "MonkeyKing", "key": "62", "name": "Wukong", "title": "the Monkey King",
                     "image": {"full": "MonkeyKing.png"}},
    }
  }


# ----------------------------
# Fake upstream
# ----------------------------
class FakeUpstream:
  """
  Path -> reply table. A reply is (status, json_body), a list of those consumed
  in order (the last one repeats), or a callable taking the request.
  Unknown paths answer 404. Every request is recorded.
  """

  def __init__(self):
    self.routes: Dict[str, Any] = {}
    self.requests: List[httpx.Request] = []
    self.sleeps: List[float] = []

  def on(self, path: str, reply: Any) -> "FakeUpstream":
    self.routes[path] = reply
    return self

  def calls(self, path: str) -> int:
    return sum(1 for r in self.requests if r.url.path == path)

  def _handle(self, request: httpx.Request) -> httpx.Response:
    self.requests.append(request)
    reply = self.routes.get(request.url.path)
    if reply is None:
      return httpx.Response(404, json={"status": {"status_code": 404, "message": "Data not found"}})
    if callable(reply):
      return reply(request)
    if isinstance(reply, list):
      reply = reply.pop(0) if len(reply) > 1 else reply[0]
    status, body = reply
    if isinstance(body, (dict, list)):
      return httpx.Response(status, json=body)
    return httpx.Response(status, text=body or "")

  @property
  def transport(self) -> httpx.MockTransport:
    return httpx.MockTransport(self._handle)

  async def sleep(self, seconds: float) -> None:
    self.sleeps.append(seconds)

  def retry(self) -> RetryPolicy:
    return RetryPolicy(sleep=self.sleep)

  def client(self) -> RiotClient:
    return RiotClient("test-key", region="americas", platform="na1", retry=self.retry(), transport=self.transport)


@pytest.fixture
def riot() -> FakeUpstream:
  return FakeUpstream()


@pytest.fixture
def ddragon() -> FakeUpstream:
  return FakeUpstream().on("/cdn/14.15.1/data/en_US/champion.json", (200, champion_json()))


@pytest.fixture
async def api(riot, ddragon):
  """ASGI client with the Riot client and champion catalog swapped for fakes."""
  catalog = ChampionCatalog(version="14.15.1", locale="en_US", transport=ddragon.transport)

  async def _client():
    async with riot.client() as rc:
      yield rc

  app.dependency_overrides[get_riot_client] = _client
  app.dependency_overrides[get_catalog] = lambda: catalog
  transport = httpx.ASGITransport(app=app)
  async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
    yield client
  app.dependency_overrides.clear()


# ----------------------------
# Common upstream paths
# ----------------------------
ACCOUNT = "/riot/account/v1/accounts/by-riot-id/Faker/KR1"
MATCH_IDS = f"/lol/match/v5/matches/by-puuid/{ME}/ids"
SUMMONER = f"/lol/summoner/v4/summoners/by-puuid/{ME}"
MASTERY = f"/lol/champion-mastery/v4/champion-masteries/by-puuid/{ME}/top"
RANKED = f"/lol/league/v4/entries/by-puuid/{ME}"


def match_path(match_id: str) -> str:
  return f"/lol/match/v5/matches/{match_id}"
