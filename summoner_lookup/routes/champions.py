# summoner_lookup/routes/champions.py
from fastapi import APIRouter, Depends

from summoner_lookup.deps import get_catalog
from summoner_lookup.models import ChampionView
from summoner_lookup.util.champion_catalog import ChampionCatalog

router = APIRouter(prefix="/api", tags=["champions"])


@router.get("/champions", response_model=list[ChampionView])
async def champions(catalog: ChampionCatalog = Depends(get_catalog)):
  return [
    ChampionView(key=c.key, id=c.id, name=c.name, title=c.title, imageUrl=catalog.image_url(c))
    for c in await catalog.champions()
  ]
