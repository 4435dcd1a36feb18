import logging
from typing import Any, Dict, List, Optional
from fasal.schema import SoilProfile
from .location import validate_pincode

logger = logging.getLogger(__name__)

# Representative topsoil by state; N/P/K on the same kg/ha scale the scorer uses.
SOIL_BY_STATE: Dict[str, Dict[str, Any]] = {
    "Punjab":         {"type": "Alluvial",       "ph": 7.2, "n": 65, "p": 45, "k": 70, "om": 1.8, "moisture": "Medium", "salinity": "Low"},
    "Haryana":        {"type": "Alluvial",       "ph": 7.5, "n": 60, "p": 40, "k": 65, "om": 1.6, "moisture": "Medium", "salinity": "Medium"},
    "Uttar Pradesh":  {"type": "Alluvial",       "ph": 7.0, "n": 70, "p": 50, "k": 75, "om": 2.0, "moisture": "High",   "salinity": "Low"},
    "Karnataka":      {"type": "Red Soil",       "ph": 6.5, "n": 55, "p": 35, "k": 60, "om": 1.4, "moisture": "Medium", "salinity": "Low"},
    "Tamil Nadu":     {"type": "Black/Red Soil", "ph": 6.8, "n": 50, "p": 30, "k": 55, "om": 1.2, "moisture": "Low",    "salinity": "Medium"},
    "Andhra Pradesh": {"type": "Black Soil",     "ph": 7.2, "n": 60, "p": 40, "k": 65, "om": 1.5, "moisture": "Medium", "salinity": "Low"},
    "Maharashtra":    {"type": "Black Soil",     "ph": 7.8, "n": 65, "p": 45, "k": 70, "om": 1.7, "moisture": "Medium", "salinity": "Low"},
    "Gujarat":        {"type": "Black/Alluvial", "ph": 7.5, "n": 55, "p": 35, "k": 60, "om": 1.3, "moisture": "Low",    "salinity": "High"},
    "West Bengal":    {"type": "Alluvial",       "ph": 6.5, "n": 75, "p": 55, "k": 80, "om": 2.2, "moisture": "High",   "salinity": "Medium"},
}
DEFAULT_SOIL = {"type": "Mixed", "ph": 6.8, "n": 60, "p": 40, "k": 65, "om": 1.5, "moisture": "Medium", "salinity": "Low"}

MOISTURE_PERCENT = {"Low": 35.0, "Medium": 55.0, "High": 70.0}

def _clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))

def soil_recommendations(ph: float, n: float, p: float, k: float, om: float, salinity: str) -> List[str]:
    tips: List[str] = []
    if ph < 6.0:
        tips.append("Apply lime (200-300 kg/acre) to reduce soil acidity")
    elif ph > 8.0:
        tips.append("Apply gypsum (100-200 kg/acre) to reduce alkalinity")
    if n < 50:
        tips.append("Apply organic manure (5-8 tons/acre) to improve nitrogen content")
    if p < 40:
        tips.append("Apply superphosphate (100-150 kg/acre) for phosphorus deficiency")
    if k < 60:
        tips.append("Apply muriate of potash (50-75 kg/acre) to boost potassium levels")
    if om < 1.5:
        tips.append("Increase organic matter with compost and crop residues")
    if salinity == "High":
        tips.append("Improve drainage and consider salt-tolerant crops")
    return tips or ["Soil conditions are good for most crops"]

def soil_profile(pincode: str, district: Optional[str] = None, state: Optional[str] = None) -> SoilProfile:
    """Regional soil estimate; the last two pincode digits shift pH by up to ±1 and nutrients by ±20."""
    pincode = validate_pincode(pincode)
    district = district or "Unknown"
    state = state or "Unknown"
    base = SOIL_BY_STATE.get(state, DEFAULT_SOIL)

    offset = int(pincode) % 100 - 50
    ph = round(_clamp(base["ph"] + offset * 0.02, 4.0, 9.0), 2)
    n = _clamp(base["n"] + offset * 0.4, 0, 100)
    p = _clamp(base["p"] + offset * 0.4, 0, 100)
    k = _clamp(base["k"] + offset * 0.4, 0, 100)

    logger.info("Soil profile generated for pincode %s (%s)", pincode, state)
    return SoilProfile(
        location=f"{district}, {state}",
        soil_type=base["type"],
        ph=ph, nitrogen=n, phosphorus=p, potassium=k,
        organic_matter=base["om"],
        moisture=MOISTURE_PERCENT[base["moisture"]],
        moisture_level=base["moisture"],
        salinity=base["salinity"],
        recommendations=soil_recommendations(ph, n, p, k, base["om"], base["salinity"]),
        testing_center=f"{district} Agricultural Extension Office",
    )
