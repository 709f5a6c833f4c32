# summoner_lookup/util/champion_catalog.py
import logging
from typing import Dict, List, Optional

import httpx
from pydantic import ValidationError

from summoner_lookup.config import DDRAGON_BASE, DDRAGON_VERSION, DDRAGON_LOCALE
from summoner_lookup.riot_models import ChampionInfo, ChampionListDto

log = logging.getLogger("champion_catalog")
if not log.handlers:
  h = logging.StreamHandler()
  h.setFormatter(logging.Formatter("[DD] %(levelname)s: %(message)s"))
  log.addHandler(h)
  log.setLevel(logging.INFO)


class ChampionCatalog:
  """
  Read-through cache of the Data Dragon champion list, keyed by numeric champion key.
  Loaded on first use and kept for the life of the owner. A failed load is not
  cached; concurrent first readers may each fetch, the last write wins.
  """

  def __init__(
      self,
      version: str = DDRAGON_VERSION,
      locale: str = DDRAGON_LOCALE,
      transport: Optional[httpx.AsyncBaseTransport] = None,
  ):
    self.version = version
    self.locale = locale
    self._transport = transport
    self._by_key: Optional[Dict[str, ChampionInfo]] = None

  @property
  def url(self) -> str:
    return f"{DDRAGON_BASE}/{self.version}/data/{self.locale}/champion.json"

  @property
  def loaded(self) -> bool:
    return self._by_key is not None

  async def _fetch(self) -> Dict[str, ChampionInfo]:
    async with httpx.AsyncClient(timeout=httpx.Timeout(15.0, connect=5.0), transport=self._transport) as c:
      r = await c.get(self.url)
      r.raise_for_status()
      data = ChampionListDto.model_validate(r.json())
    return {champ.key: champ for champ in data.data.values()}

  async def load(self) -> Dict[str, ChampionInfo]:
    if self._by_key is not None:
      return self._by_key
    try:
      mapping = await self._fetch()
    except (httpx.HTTPError, ValueError, ValidationError) as e:
      log.warning("champion data unavailable: %s", e)
      return {}
    self._by_key = mapping
    return mapping

  async def name_for(self, champion_id: int | str) -> str:
    champ = (await self.load()).get(str(champion_id))
    return champ.name if champ else f"Champion {champion_id}"

  async def names_for(self, champion_ids: List[int | str]) -> Dict[int | str, str]:
    # one load per call, even when the dataset is unavailable
    by_key = await self.load()
    out = {}
    for cid in champion_ids:
      champ = by_key.get(str(cid))
      out[cid] = champ.name if champ else f"Champion {cid}"
    return out

  async def champions(self) -> List[ChampionInfo]:
    return sorted((await self.load()).values(), key=lambda c: c.name)

  def image_url(self, champ: ChampionInfo) -> str:
    return f"{DDRAGON_BASE}/{self.version}/img/champion/{champ.image.full}"
