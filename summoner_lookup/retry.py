# summoner_lookup/retry.py
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable

import httpx

from summoner_lookup.config import RIOT_MAX_ATTEMPTS, RIOT_BACKOFF_SECONDS

log = logging.getLogger("riot_client.retry")

RATE_LIMITED = 429


def linear(step: float) -> Callable[[int], float]:
  """attempt 1 -> step, attempt 2 -> 2*step, ..."""
  return lambda attempt: attempt * step


@dataclass
class RetryPolicy:
  """
  Re-sends a request while the upstream answers 429.
    - returns the first non-429 response as-is (success or any other error),
    - waits backoff(attempt) after every rate-limited attempt,
    - after max_attempts rate-limited answers, returns the last one.
  """
  max_attempts: int = RIOT_MAX_ATTEMPTS
  backoff: Callable[[int], float] = field(default_factory=lambda: linear(RIOT_BACKOFF_SECONDS))
  sleep: Callable[[float], Awaitable[None]] = asyncio.sleep

  async def run(self, send: Callable[[], Awaitable[httpx.Response]]) -> httpx.Response:
    attempts = max(1, self.max_attempts)
    r = None
    for attempt in range(1, attempts + 1):
      r = await send()
      if r.status_code != RATE_LIMITED:
        return r
      wait = self.backoff(attempt)
      log.warning("attempt %d/%d rate limited, sleeping %.1fs", attempt, attempts, wait)
      await self.sleep(wait)
    return r
