# summoner_lookup/riot_client.py
import asyncio
import logging
from typing import Any, List, Optional
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from summoner_lookup.config import (
  RIOT_API_KEY, REGIONAL, PLATFORM, PLATFORM_ALIASES, RIOT_REGION, RIOT_PLATFORM,
  MASTERY_TOP_COUNT, MATCH_FETCH_CONCURRENCY,
)
from summoner_lookup.errors import NotFound, RateLimited, ServiceError, UpstreamUnavailable
from summoner_lookup.retry import RetryPolicy, RATE_LIMITED
from summoner_lookup.riot_models import (
  AccountDto, SummonerDto, MatchDto, TimelineDto, MasteryDto, LeagueEntryDto,
)

log = logging.getLogger("riot_client")
if not log.handlers:
  h = logging.StreamHandler()
  h.setFormatter(logging.Formatter("[RIOT] %(levelname)s: %(message)s"))
  log.addHandler(h)
  log.setLevel(logging.INFO)


def _seg(value: str) -> str:
  return quote(value, safe="")


def _details(r: httpx.Response) -> str:
  return f"Status: {r.status_code}, Response: {r.text[:500]}"


class RiotClient:
  def __init__(
      self,
      api_key: Optional[str] = None,
      *,
      region: str = RIOT_REGION,
      platform: str = RIOT_PLATFORM,
      retry: Optional[RetryPolicy] = None,
      transport: Optional[httpx.AsyncBaseTransport] = None,
  ):
    self.api_key = api_key or RIOT_API_KEY
    if not self.api_key:
      raise RuntimeError("Missing RIOT_API_KEY in environment")
    self.region = self._norm_region(region)
    self.platform = self._norm_platform(platform)
    self.retry = retry or RetryPolicy()
    self._transport = transport
    self._client: Optional[httpx.AsyncClient] = None

  async def __aenter__(self):
    limits = httpx.Limits(max_keepalive_connections=10, max_connections=20)
    # Small connect timeout; generous read timeout because match bodies are a bit larger
    self._client = httpx.AsyncClient(
        timeout=httpx.Timeout(15.0, connect=5.0), limits=limits, transport=self._transport,
    )
    return self

  async def __aexit__(self, *exc):
    if self._client:
      await self._client.aclose()

  @staticmethod
  def _norm_region(region: str) -> str:
    r = (region or "").lower()
    if r not in REGIONAL:
      raise ValueError("region must be one of: americas, europe, asia, sea")
    return r

  @staticmethod
  def _norm_platform(tag_or_code: str) -> str:
    s = (tag_or_code or "").strip()
    if not s:
      return "na1"
    low = s.lower()
    if low in PLATFORM.values():
      return low
    up = PLATFORM_ALIASES.get(s.upper(), s.upper())
    return PLATFORM.get(up, "na1")

  @property
  def regional_host(self) -> str:
    return f"https://{REGIONAL[self.region]}"

  @property
  def platform_host(self) -> str:
    return f"https://{self.platform}.api.riotgames.com"

  async def _send(self, url: str, params: dict | None) -> httpx.Response:
    headers = {"X-Riot-Token": self.api_key}
    try:
      return await self.retry.run(lambda: self._client.get(url, headers=headers, params=params))
    except httpx.TransportError as e:
      log.warning("transport failure on %s: %s", url, e)
      raise UpstreamUnavailable("Could not reach the Riot API", details=str(e)) from e

  async def _get(self, url: str, shape: Any, *, params: dict | None = None, not_found: str = "Not found") -> Any:
    """
    GET with:
      - linear backoff for 429 (RetryPolicy),
      - status -> typed error mapping,
      - parse-or-fail validation of the body into `shape`.
    """
    r = await self._send(url, params)
    if r.status_code == RATE_LIMITED:
      raise RateLimited(details=_details(r))
    if r.status_code == 404:
      raise NotFound(not_found, details=_details(r))
    if not r.is_success:
      raise UpstreamUnavailable(f"Riot API error {r.status_code}", details=_details(r),
                                upstream_status=r.status_code)
    try:
      return TypeAdapter(shape).validate_python(r.json())
    except (ValueError, ValidationError) as e:
      log.warning("unexpected payload from %s: %s", url, e)
      raise UpstreamUnavailable("Unexpected response from the Riot API", details=str(e)[:500]) from e

  # -------- Account / PUUID via REGIONAL --------
  async def account_by_riot_id(self, game_name: str, tag_line: str) -> AccountDto:
    url = f"{self.regional_host}/riot/account/v1/accounts/by-riot-id/{_seg(game_name)}/{_seg(tag_line)}"
    return await self._get(url, AccountDto, not_found="Account not found")

  # -------- Match IDs via REGIONAL --------
  async def match_ids(self, puuid: str, *, start: int = 0, count: int = 20, queue: int | None = None) -> list[str]:
    url = f"{self.regional_host}/lol/match/v5/matches/by-puuid/{_seg(puuid)}/ids"
    params: dict = {"start": start, "count": count}
    if queue is not None:
      params["queue"] = queue
    return await self._get(url, List[str], params=params, not_found="Could not fetch match IDs")

  # -------- Match detail / timeline via REGIONAL --------
  async def match(self, match_id: str) -> MatchDto:
    url = f"{self.regional_host}/lol/match/v5/matches/{_seg(match_id)}"
    return await self._get(url, MatchDto, not_found="Match not found")

  async def match_timeline(self, match_id: str) -> TimelineDto:
    url = f"{self.regional_host}/lol/match/v5/matches/{_seg(match_id)}/timeline"
    return await self._get(url, TimelineDto, not_found="Timeline not found")

  async def matches(self, match_ids: list[str]) -> list[MatchDto]:
    """Fetch match details concurrently; failed fetches are logged and dropped, order is kept."""
    sem = asyncio.Semaphore(MATCH_FETCH_CONCURRENCY)

    async def _one(mid: str) -> Optional[MatchDto]:
      async with sem:
        try:
          return await self.match(mid)
        except ServiceError as e:
          log.warning("dropping match %s: %s (%s)", mid, e.message, e.status_code)
          return None

    fetched = await asyncio.gather(*[_one(mid) for mid in match_ids])
    return [m for m in fetched if m is not None]

  # --- Summoner, Mastery & League (platform-scoped) ---
  async def summoner_by_puuid(self, puuid: str) -> SummonerDto:
    url = f"{self.platform_host}/lol/summoner/v4/summoners/by-puuid/{_seg(puuid)}"
    return await self._get(url, SummonerDto, not_found="Summoner not found")

  async def top_masteries(self, puuid: str, count: int = MASTERY_TOP_COUNT) -> list[MasteryDto]:
    url = f"{self.platform_host}/lol/champion-mastery/v4/champion-masteries/by-puuid/{_seg(puuid)}/top"
    return await self._get(url, List[MasteryDto], params={"count": count}, not_found="Mastery not found")

  async def ranked_entries_by_puuid(self, puuid: str) -> list[LeagueEntryDto]:
    url = f"{self.platform_host}/lol/league/v4/entries/by-puuid/{_seg(puuid)}"
    return await self._get(url, List[LeagueEntryDto], not_found="Ranked entries not found")
