# summoner_lookup/services/champion_agg.py
import math
from collections import defaultdict
from typing import Iterable, List

from summoner_lookup.models import ChampionAggregate
from summoner_lookup.riot_models import MatchDto


def _round_half_up(x: float) -> int:
  return int(math.floor(x + 0.5))


def aggregate_winrates(matches: Iterable[MatchDto], puuid: str) -> List[ChampionAggregate]:
  """
  Per-champion wins/losses and average damage/gold over the player's matches,
  best winrate first. Matches without the player are skipped.
  """
  per = defaultdict(lambda: {"wins": 0, "losses": 0, "dmg": 0, "gold": 0})

  for m in matches:
    you = m.participant(puuid)
    if you is None:
      continue
    s = per[you.championName]
    if you.win:
      s["wins"] += 1
    else:
      s["losses"] += 1
    s["dmg"] += you.totalDamageDealtToChampions
    s["gold"] += you.goldEarned

  rows = []
  for champ, s in per.items():
    games = s["wins"] + s["losses"]
    rows.append(ChampionAggregate(
        champion=champ,
        wins=s["wins"],
        losses=s["losses"],
        winrate=f"{s['wins'] / games * 100:.1f}" if games else "0.0",
        totalGames=games,
        avgDamage=_round_half_up(s["dmg"] / games) if games else 0,
        avgGold=_round_half_up(s["gold"] / games) if games else 0,
    ))

  return sorted(rows, key=lambda r: float(r.winrate), reverse=True)
