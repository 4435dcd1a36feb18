"""Assemble one EnvironmentalInput per request.

Precedence per field: explicit user value, then fetched weather/soil/location
data, then None (scored as neutral).
"""
from typing import Dict, Optional
from fasal.schema import EnvironmentalInput, LocationInfo, Season, SoilProfile, WeatherInfo

OPTIMAL_MOISTURE = 60.0  # %

# Seasonal rainfall by state (mm), on the same seasonal scale as crop rainfall ranges.
# Tamil Nadu gets its rain from the north-east monsoon.
SEASONAL_RAINFALL: Dict[str, Dict[Season, float]] = {
    "punjab":         {"kharif": 90,  "rabi": 60,  "zaid": 30},
    "haryana":        {"kharif": 80,  "rabi": 55,  "zaid": 25},
    "uttar pradesh":  {"kharif": 130, "rabi": 65,  "zaid": 35},
    "bihar":          {"kharif": 160, "rabi": 70,  "zaid": 40},
    "west bengal":    {"kharif": 185, "rabi": 80,  "zaid": 50},
    "odisha":         {"kharif": 175, "rabi": 75,  "zaid": 45},
    "madhya pradesh": {"kharif": 140, "rabi": 65,  "zaid": 35},
    "gujarat":        {"kharif": 105, "rabi": 45,  "zaid": 25},
    "maharashtra":    {"kharif": 165, "rabi": 60,  "zaid": 35},
    "karnataka":      {"kharif": 150, "rabi": 70,  "zaid": 45},
    "tamil nadu":     {"kharif": 95,  "rabi": 120, "zaid": 60},
    "andhra pradesh": {"kharif": 120, "rabi": 70,  "zaid": 40},
    "telangana":      {"kharif": 115, "rabi": 60,  "zaid": 35},
    "kerala":         {"kharif": 200, "rabi": 110, "zaid": 70},
    "rajasthan":      {"kharif": 55,  "rabi": 35,  "zaid": 20},
}

def seasonal_rainfall_estimate(state: Optional[str], season: Season) -> Optional[float]:
    if not state:
        return None
    s = state.strip().lower()
    if not s or s == "unknown":
        return None
    for name, by_season in SEASONAL_RAINFALL.items():
        if name in s or s in name:
            return by_season[season]
    return None

def forecast_rainfall(weather: Optional[WeatherInfo]) -> Optional[float]:
    if weather is None or not weather.forecast:
        return None
    total = sum(day.rainfall for day in weather.forecast)
    return total if total > 0 else None

def moisture_factor(moisture: Optional[float]) -> float:
    """Too dry or too wet soil reduces nutrient availability, never below 70%."""
    if moisture is None:
        return 1.0
    return max(0.7, 1 - abs(moisture - OPTIMAL_MOISTURE) / 100)

def _first(*values: Optional[float]) -> Optional[float]:
    for v in values:
        if v is not None:
            return v
    return None

def build_environment(
    user: Optional[EnvironmentalInput],
    season: Season,
    weather: Optional[WeatherInfo] = None,
    soil: Optional[SoilProfile] = None,
    location: Optional[LocationInfo] = None,
    rainfall: Optional[float] = None,
    region: Optional[str] = None,
) -> EnvironmentalInput:
    u = user or EnvironmentalInput()
    current = weather.current if weather else None
    factor = moisture_factor(soil.moisture if soil else None)
    state = location.state if location and location.state != "Unknown" else region

    return EnvironmentalInput(
        nitrogen=_first(u.nitrogen, soil.nitrogen * factor if soil else None),
        phosphorus=_first(u.phosphorus, soil.phosphorus * factor if soil else None),
        potassium=_first(u.potassium, soil.potassium * factor if soil else None),
        ph=_first(u.ph, soil.ph if soil else None),
        temperature=_first(u.temperature, current.temperature if current else None),
        humidity=_first(u.humidity, current.humidity if current else None),
        rainfall=_first(u.rainfall, rainfall, forecast_rainfall(weather),
                        seasonal_rainfall_estimate(state, season)),
    )
