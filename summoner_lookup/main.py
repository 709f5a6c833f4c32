import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from summoner_lookup.config import CORS_ORIGINS
from summoner_lookup.errors import InternalError, InvalidRequest, ServiceError
from summoner_lookup.routes.champions import router as champions_router
from summoner_lookup.routes.history import router as history_router
from summoner_lookup.routes.match_details import router as match_details_router
from summoner_lookup.routes.player_stats import router as player_stats_router
from summoner_lookup.util.champion_catalog import ChampionCatalog

log = logging.getLogger("summoner_lookup")
if not log.handlers:
  h = logging.StreamHandler()
  h.setFormatter(logging.Formatter("[APP] %(levelname)s: %(message)s"))
  log.addHandler(h)
  log.setLevel(logging.INFO)

app = FastAPI(title = "Summoner Lookup")

#process-lifetime champion catalog, handed to routes via deps.get_catalog
app.state.catalog = ChampionCatalog()

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

#error payloads: {"error": ..., "details": ...}
@app.exception_handler(ServiceError)
async def service_error(request: Request, exc: ServiceError):
  return JSONResponse(exc.payload(), status_code=exc.status_code)

@app.exception_handler(RequestValidationError)
async def bad_body(request: Request, exc: RequestValidationError):
  err = InvalidRequest("Invalid request body", details=str(exc.errors())[:500])
  return JSONResponse(err.payload(), status_code=err.status_code)

@app.exception_handler(Exception)
async def unexpected(request: Request, exc: Exception):
  log.exception("unhandled error on %s", request.url.path)
  err = InternalError("Internal server error", details=str(exc))
  return JSONResponse(err.payload(), status_code=err.status_code)

#health check
@app.get("/api/health", response_class = PlainTextResponse)
async def health():
  return "ok"

#register API routes
app.include_router(history_router)
app.include_router(player_stats_router)
app.include_router(match_details_router)
app.include_router(champions_router)
