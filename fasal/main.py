import asyncio
import logging
import random
from datetime import datetime, timezone
from typing import Awaitable, Optional, TypeVar
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fasal.config import settings
from fasal.errors import FasalError, InvalidPincodeError, PincodeNotFoundError
from fasal.schema import (
    ChatRequest, ChatResponse, Crop, LocationInfo, PincodeBody, RecommendRequest,
    RecommendResponse, SoilBody, SoilProfile, WeatherInfo,
)
from fasal.engine import ranker
from fasal.engine.assistant import ask
from fasal.engine.crops import CROPS
from fasal.engine.inputs import build_environment
from fasal.services.location import fallback_location, lookup_location, validate_pincode
from fasal.services.soil import soil_profile
from fasal.services.weather import IST, fetch_weather

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

T = TypeVar("T")

app = FastAPI(title="FASAL - Crop Recommendation Engine", version="0.1.0")
app.state.settings = settings

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins, allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"]
)

def _now() -> str:
    return datetime.now(timezone.utc).isoformat()

def _http_error(e: FasalError) -> HTTPException:
    if isinstance(e, InvalidPincodeError):
        return HTTPException(400, detail=str(e))
    if isinstance(e, PincodeNotFoundError):
        return HTTPException(404, detail=str(e))
    return HTTPException(502, detail=str(e))

async def _settle(call: Awaitable[T], what: str, pincode: str) -> Optional[T]:
    """Await a collaborator with the configured timeout; any failure degrades to None."""
    try:
        return await asyncio.wait_for(call, timeout=settings.fetch_timeout_s)
    except asyncio.TimeoutError:
        logger.warning("%s lookup timed out for pincode %s", what, pincode)
    except FasalError as e:
        logger.warning("%s lookup failed for pincode %s: %s", what, pincode, e)
    except Exception:
        logger.exception("Unexpected %s lookup failure for pincode %s", what, pincode)
    return None

@app.get("/health")
def health():
    return {"ok": True}

@app.get("/crops", response_model=list[Crop])
def list_crops():
    return CROPS

@app.post("/recommend", response_model=RecommendResponse)
async def recommend(body: RecommendRequest):
    try:
        pincode = validate_pincode(body.pincode)
    except InvalidPincodeError as e:
        raise _http_error(e)

    season = body.season or ranker.season_for_month(datetime.now(IST).month)

    location, weather = await asyncio.gather(
        _settle(lookup_location(pincode), "location", pincode),
        _settle(fetch_weather(pincode), "weather", pincode),
    )
    location = location or fallback_location(pincode)
    state = location.state if location.state != "Unknown" else body.region
    soil = soil_profile(pincode, location.district, state)

    env = build_environment(
        body.environment, season,
        weather=weather, soil=soil, location=location,
        rainfall=body.rainfall, region=body.region,
    )
    rng = random.Random(settings.jitter_seed) if settings.score_jitter > 0 else None
    items = ranker.recommend(
        CROPS, env, body.farm(),
        season=season, jitter=settings.score_jitter, rng=rng, limit=settings.top_n,
    )
    logger.info("Recommended %d crops for pincode %s (season=%s)", len(items), pincode, season)

    return RecommendResponse(
        season=season, location=location, weather=weather, soil=soil,
        environment=env, recommendations=items, timestamp=_now(),
    )

@app.post("/location", response_model=LocationInfo)
async def location(body: PincodeBody):
    try:
        return await lookup_location(body.pincode)
    except FasalError as e:
        raise _http_error(e)

@app.post("/weather", response_model=WeatherInfo)
async def weather(body: PincodeBody):
    try:
        return await fetch_weather(body.pincode)
    except FasalError as e:
        raise _http_error(e)

@app.post("/soil", response_model=SoilProfile)
def soil(body: SoilBody):
    try:
        return soil_profile(body.pincode, body.district, body.state)
    except InvalidPincodeError as e:
        raise _http_error(e)

@app.post("/chat", response_model=ChatResponse)
def chat(body: ChatRequest):
    text = ask(body.message, body.language, body.userContext)
    return ChatResponse(response=text, language=body.language, timestamp=_now())
