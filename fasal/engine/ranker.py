import logging
import random
from typing import List, Optional, Sequence, Tuple
from fasal.schema import Crop, EnvironmentalInput, FarmParameters, ScoredCrop, Season
from .finance import area_in_acres, with_financials
from .normalizer import normalize_input
from .scorer import suitability_score

logger = logging.getLogger(__name__)

IN_SEASON_FACTOR = 1.1
OFF_SEASON_FACTOR = 0.9
TOP_N = 5

def season_for_month(month: int) -> Season:
    """April-September sow kharif, October-March sow rabi."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1-12, got {month}")
    return "kharif" if 4 <= month <= 9 else "rabi"

def season_factor(crop: Crop, season: Optional[Season]) -> float:
    if season is None:
        return 1.0
    return IN_SEASON_FACTOR if crop.season == season else OFF_SEASON_FACTOR

def rotation_filter(crops: Sequence[Crop], previous_crops: Sequence[str]) -> List[Crop]:
    grown = {p.strip().lower() for p in previous_crops if p and p.strip()}
    return [c for c in crops if c.name_en.strip().lower() not in grown]

def score(
    crops: Sequence[Crop],
    env: EnvironmentalInput,
    season: Optional[Season] = None,
    jitter: float = 0.0,
    rng: Optional[random.Random] = None,
) -> List[Tuple[Crop, float]]:
    """Score and rank crops; input order is kept for equal scores."""
    normalized = normalize_input(env)
    if jitter > 0 and rng is None:
        rng = random.Random()

    out: List[Tuple[Crop, float]] = []
    for c in crops:
        s = suitability_score(c, normalized)
        s *= season_factor(c, season)
        if jitter > 0:
            s *= 1 + rng.uniform(-jitter, jitter)
        s = max(0.0, min(1.0, s))
        if s > 0:
            out.append((c, s))

    out.sort(key=lambda x: x[1], reverse=True)
    return out

def recommend(
    crops: Sequence[Crop],
    env: EnvironmentalInput,
    farm: FarmParameters,
    season: Optional[Season] = None,
    jitter: float = 0.0,
    rng: Optional[random.Random] = None,
    limit: int = TOP_N,
) -> List[ScoredCrop]:
    candidates = rotation_filter(crops, farm.previous_crops)
    if not candidates:
        logger.info("All %d crops excluded by rotation filter", len(crops))
        return []

    ranked = score(candidates, env, season=season, jitter=jitter, rng=rng)
    acres = area_in_acres(farm.area, farm.area_unit)
    return [with_financials(c, s, acres, season_factor(c, season)) for c, s in ranked[:limit]]
