from typing import Dict, Optional, Tuple
from pydantic import BaseModel
from fasal.schema import EnvironmentalInput

# Fixed physical domain per parameter. Not configurable per crop.
DOMAIN_RANGES: Dict[str, Tuple[float, float]] = {
    "nitrogen":    (0.0, 140.0),
    "phosphorus":  (5.0, 145.0),
    "potassium":   (5.0, 205.0),
    "temperature": (10.0, 44.0),
    "humidity":    (15.0, 99.0),
    "ph":          (3.5, 9.9),
    "rainfall":    (20.0, 298.0),
}

# Physical values are snapped to this many decimals so a normalize/denormalize
# round trip returns the value that went in.
DENORMALIZE_DIGITS = 9

class NormalizedInput(BaseModel):
    """Same fields as EnvironmentalInput, each in [0,1] or None (unknown)."""
    nitrogen: Optional[float] = None
    phosphorus: Optional[float] = None
    potassium: Optional[float] = None
    temperature: Optional[float] = None
    humidity: Optional[float] = None
    ph: Optional[float] = None
    rainfall: Optional[float] = None

def normalize(value: float, lo: float, hi: float) -> float:
    return max(0.0, min(1.0, (value - lo) / (hi - lo)))

def denormalize(value: float, lo: float, hi: float) -> float:
    return round(value * (hi - lo) + lo, DENORMALIZE_DIGITS)

def normalize_param(name: str, value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    lo, hi = DOMAIN_RANGES[name]
    return normalize(value, lo, hi)

def denormalize_param(name: str, value: float) -> float:
    lo, hi = DOMAIN_RANGES[name]
    return denormalize(value, lo, hi)

def normalize_input(env: EnvironmentalInput) -> NormalizedInput:
    raw = env.model_dump()
    return NormalizedInput(**{k: normalize_param(k, raw.get(k)) for k in DOMAIN_RANGES})
