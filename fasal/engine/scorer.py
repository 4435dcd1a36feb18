import re
from typing import Dict, Literal, Optional, Tuple
from fasal.schema import Crop
from .normalizer import DENORMALIZE_DIGITS, NormalizedInput, denormalize_param

Category = Literal["cereals","pulses","fruits","cash_crops","default"]
HumidityClass = Literal["tropical","arid","temperate","default"]
Range = Tuple[float, float]

_ALIASES = {
    "paddy": "rice", "corn": "maize", "pearlmillet": "bajra", "sorghum": "jowar",
    "fingermillet": "ragi", "pigeonpea": "pigeonpeas", "arhar": "pigeonpeas", "tur": "pigeonpeas",
    "gram": "chickpea", "mung": "mungbean", "moong": "mungbean", "greengram": "mungbean",
    "urad": "blackgram", "soyabean": "soybean", "kidneybean": "kidneybeans", "mothbean": "mothbeans",
}

_CATEGORY_MEMBERS: Dict[Category, set] = {
    "cereals":    {"rice","wheat","maize","bajra","jowar","barley","ragi"},
    "pulses":     {"lentil","chickpea","pigeonpeas","blackgram","mungbean","mothbeans","kidneybeans","peas"},
    "fruits":     {"apple","banana","mango","grapes","orange","papaya","coconut","watermelon","muskmelon","pomegranate"},
    "cash_crops": {"cotton","jute","coffee","sugarcane","tobacco"},
}

# Humidity weight is applied only when humidity is supplied; the other six are then scaled by (1 - w).
WEIGHTS: Dict[Category, Dict[str, float]] = {
    "default":    {"ph":0.15, "temperature":0.20, "rainfall":0.20, "nitrogen":0.15, "phosphorus":0.15, "potassium":0.15, "humidity":0.10},
    "cereals":    {"ph":0.10, "temperature":0.20, "rainfall":0.20, "nitrogen":0.20, "phosphorus":0.15, "potassium":0.15, "humidity":0.10},
    "pulses":     {"ph":0.15, "temperature":0.20, "rainfall":0.20, "nitrogen":0.05, "phosphorus":0.20, "potassium":0.20, "humidity":0.10},
    "fruits":     {"ph":0.10, "temperature":0.25, "rainfall":0.20, "nitrogen":0.15, "phosphorus":0.10, "potassium":0.20, "humidity":0.15},
    "cash_crops": {"ph":0.10, "temperature":0.25, "rainfall":0.20, "nitrogen":0.15, "phosphorus":0.15, "potassium":0.15, "humidity":0.10},
}

# Optimal soil N/P/K (kg/ha scale of the normalizer domain).
NPK_OPTIMAL: Dict[str, Tuple[Range, Range, Range]] = {
    "rice":        ((60, 99),   (35, 60),   (35, 45)),
    "maize":       ((60, 100),  (35, 60),   (15, 25)),
    "wheat":       ((80, 140),  (40, 80),   (30, 60)),
    "bajra":       ((40, 80),   (20, 50),   (15, 40)),
    "jowar":       ((50, 90),   (25, 55),   (20, 50)),
    "barley":      ((50, 85),   (30, 55),   (30, 55)),
    "chickpea":    ((20, 60),   (55, 80),   (75, 85)),
    "kidneybeans": ((0, 40),    (55, 80),   (15, 25)),
    "pigeonpeas":  ((0, 40),    (55, 80),   (15, 25)),
    "mothbeans":   ((0, 40),    (35, 60),   (15, 25)),
    "mungbean":    ((0, 40),    (35, 60),   (15, 25)),
    "blackgram":   ((20, 60),   (55, 80),   (15, 25)),
    "lentil":      ((0, 40),    (55, 80),   (15, 25)),
    "peas":        ((10, 30),   (40, 80),   (30, 60)),
    "pomegranate": ((0, 40),    (5, 30),    (35, 45)),
    "banana":      ((80, 120),  (70, 95),   (45, 55)),
    "mango":       ((0, 40),    (15, 40),   (25, 35)),
    "grapes":      ((0, 40),    (120, 145), (195, 205)),
    "watermelon":  ((80, 120),  (5, 30),    (45, 55)),
    "muskmelon":   ((80, 120),  (5, 30),    (45, 55)),
    "apple":       ((0, 40),    (120, 145), (195, 205)),
    "orange":      ((0, 40),    (5, 30),    (5, 15)),
    "papaya":      ((31, 70),   (46, 70),   (45, 55)),
    "coconut":     ((0, 40),    (5, 30),    (25, 35)),
    "cotton":      ((100, 140), (35, 60),   (15, 25)),
    "jute":        ((60, 100),  (35, 60),   (35, 45)),
    "coffee":      ((80, 120),  (15, 40),   (25, 35)),
    "sugarcane":   ((100, 160), (30, 65),   (50, 100)),
    "soybean":     ((5, 25),    (40, 80),   (30, 60)),
    "groundnut":   ((20, 45),   (30, 70),   (30, 60)),
    "mustard":     ((70, 110),  (25, 55),   (15, 35)),
    "potato":      ((80, 140),  (50, 90),   (80, 140)),
}
DEFAULT_NPK: Tuple[Range, Range, Range] = ((60, 100), (40, 60), (40, 60))

_HUMIDITY_MEMBERS: Dict[HumidityClass, set] = {
    "tropical":  {"rice","jute","coconut","banana","papaya","sugarcane","coffee","ragi"},
    "arid":      {"bajra","jowar","mothbeans","chickpea","kidneybeans","pigeonpeas","mango","barley"},
    "temperate": {"wheat","mustard","lentil","peas","potato"},
}
HUMIDITY_BANDS: Dict[HumidityClass, Range] = {
    "tropical":  (70, 90),
    "arid":      (30, 60),
    "temperate": (40, 70),
    "default":   (50, 80),
}

NEUTRAL = 0.5
LIMITING_THRESHOLD = 0.3

def crop_key(name: str) -> str:
    key = re.sub(r"[^a-z]", "", name.lower())
    return _ALIASES.get(key, key)

def crop_category(name: str) -> Category:
    key = crop_key(name)
    for cat, members in _CATEGORY_MEMBERS.items():
        if key in members:
            return cat
    return "default"

def humidity_class(name: str) -> HumidityClass:
    key = crop_key(name)
    for cls, members in _HUMIDITY_MEMBERS.items():
        if key in members:
            return cls
    return "default"

def effective_weights(category: Category, has_humidity: bool) -> Dict[str, float]:
    table = WEIGHTS[category]
    if not has_humidity:
        return {**table, "humidity": 0.0}
    w_h = table["humidity"]
    return {k: (w if k == "humidity" else w * (1 - w_h)) for k, w in table.items()}

def npk_optimal(name: str) -> Tuple[Range, Range, Range]:
    return NPK_OPTIMAL.get(crop_key(name), DEFAULT_NPK)

def range_score(value: float, lo: float, hi: float, k: float, c: float) -> float:
    """Tent peaking at the range midpoint; decays below `c` outside the range."""
    if hi == lo:
        return 1.0 if value == lo else 0.0
    width = hi - lo
    if lo <= value <= hi:
        mid = round((lo + hi) / 2, DENORMALIZE_DIGITS)
        return 1 - k * abs(value - mid) / (width / 2)
    dist = lo - value if value < lo else value - hi
    return max(0.0, c - dist / width)

def nutrient_score(value: float, lo: float, hi: float) -> float:
    if hi == lo:
        return 1.0 if value == lo else 0.0
    if lo <= value <= hi:
        return 1.0
    dist = lo - value if value < lo else value - hi
    return max(0.0, 1 - dist / (hi - lo))

def ph_score(crop: Crop, env: NormalizedInput) -> float:
    if env.ph is None:
        return NEUTRAL
    return range_score(denormalize_param("ph", env.ph), crop.soil_ph_min, crop.soil_ph_max, k=0.5, c=0.5)

def temperature_score(crop: Crop, env: NormalizedInput) -> float:
    if env.temperature is None:
        return NEUTRAL
    return range_score(denormalize_param("temperature", env.temperature),
                       crop.temperature_min, crop.temperature_max, k=0.5, c=0.5)

def rainfall_score(crop: Crop, env: NormalizedInput) -> float:
    if env.rainfall is None:
        return NEUTRAL
    return range_score(denormalize_param("rainfall", env.rainfall),
                       crop.rainfall_min, crop.rainfall_max, k=0.3, c=0.7)

def humidity_score(crop: Crop, env: NormalizedInput) -> Optional[float]:
    if env.humidity is None:
        return None
    lo, hi = HUMIDITY_BANDS[humidity_class(crop.name_en)]
    return range_score(denormalize_param("humidity", env.humidity), lo, hi, k=0.5, c=0.5)

def npk_scores(crop: Crop, env: NormalizedInput) -> Dict[str, float]:
    out: Dict[str, float] = {}
    for nutrient, (lo, hi) in zip(("nitrogen", "phosphorus", "potassium"), npk_optimal(crop.name_en)):
        value = getattr(env, nutrient)
        out[nutrient] = NEUTRAL if value is None else nutrient_score(denormalize_param(nutrient, value), lo, hi)
    return out

def suitability_score(crop: Crop, env: NormalizedInput) -> float:
    """Weighted suitability of `crop` for `env`, in [0,1]. Pure; raises nothing."""
    hum = humidity_score(crop, env)
    w = effective_weights(crop_category(crop.name_en), hum is not None)

    s = (w["ph"] * ph_score(crop, env)
         + w["temperature"] * temperature_score(crop, env)
         + w["rainfall"] * rainfall_score(crop, env))

    nutrients = npk_scores(crop, env)
    weakest = min(nutrients.values())
    if weakest < LIMITING_THRESHOLD:
        # one severely deficient nutrient caps the total
        s = 0.7 * s + 0.3 * weakest
    else:
        s += sum(w[n] * v for n, v in nutrients.items())

    if hum is not None:
        s += w["humidity"] * hum

    return max(0.0, min(1.0, s))
