import os
from dotenv import load_dotenv

load_dotenv()

RIOT_API_KEY = os.getenv("RIOT_API_KEY", "")

REGIONAL = {
  "americas": "americas.api.riotgames.com",
  "europe":   "europe.api.riotgames.com",
  "asia":     "asia.api.riotgames.com",
  "sea":      "sea.api.riotgames.com",
}

PLATFORM = {
  # Americas cluster
  "NA1": "na1", "BR1": "br1", "LA1": "la1", "LA2": "la2", "OC1": "oc1",
  # Europe
  "EUW1": "euw1", "EUN1": "eun1", "TR1": "tr1", "RU": "ru",
  # Asia
  "KR": "kr", "JP1": "jp1",
  # SEA
  "PH2": "ph2", "SG2": "sg2", "TH2": "th2", "TW2": "tw2", "VN2": "vn2",
}

PLATFORM_ALIASES = {"NA": "NA1", "EUW": "EUW1", "EUNE": "EUN1", "TR": "TR1", "JP": "JP1"}

RIOT_REGION = os.getenv("RIOT_REGION", "americas")
RIOT_PLATFORM = os.getenv("RIOT_PLATFORM", "na1")

#rate-limit retry policy (linear backoff)
RIOT_MAX_ATTEMPTS = int(os.getenv("RIOT_MAX_ATTEMPTS", "3"))
RIOT_BACKOFF_SECONDS = float(os.getenv("RIOT_BACKOFF_SECONDS", "2"))

#static champion dataset
DDRAGON_BASE = "https://ddragon.leagueoflegends.com/cdn"
DDRAGON_VERSION = os.getenv("DDRAGON_VERSION", "14.15.1")
DDRAGON_LOCALE = os.getenv("DDRAGON_LOCALE", "en_US")

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if o.strip()]

#request shaping
HISTORY_MATCH_COUNT = 20
STATS_MATCH_ID_COUNT = 50
STATS_MATCH_DETAIL_COUNT = 10
MASTERY_TOP_COUNT = 10
RANKED_SOLO_QUEUE = 420
REMAKE_MAX_SECONDS = 180
MATCH_FETCH_CONCURRENCY = 10

#UI-game mode labels
QUEUE_NAMES = {
  400: "Normal Draft",
  420: "Ranked Solo/Duo",
  430: "Normal Blind",
  440: "Ranked Flex",
  450: "ARAM",
  700: "Clash",
  900: "URF",
  1020: "One for All",
  1300: "Nexus Blitz",
  1400: "Ultimate Spellbook",
  1700: "Arena",
  1900: "URF",
  2000: "Tutorial 1",
  2010: "Tutorial 2",
  2020: "Tutorial 3",
}
