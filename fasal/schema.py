from pydantic import BaseModel, Field, computed_field, model_validator
from typing import Literal, Optional, List

Season = Literal["kharif","rabi","zaid"]
AreaUnit = Literal["acres","hectares"]
Language = Literal["en","hi"]

SeasonalSuitability = Literal["excellent","good","moderate","poor","unsuitable"]

def seasonal_label(factor: float) -> SeasonalSuitability:
    if factor >= 1.2:
        return "excellent"
    if factor >= 1.1:
        return "good"
    if factor >= 0.9:
        return "moderate"
    if factor >= 0.8:
        return "poor"
    return "unsuitable"

# ---------- reference data ----------
class Crop(BaseModel):
    id: int
    name_en: str
    name_hi: str
    season: Season
    soil_ph_min: float
    soil_ph_max: float
    temperature_min: float
    temperature_max: float
    rainfall_min: float
    rainfall_max: float
    investment_per_acre: float = Field(gt=0)       # INR
    expected_yield_per_acre: float = Field(ge=0)   # kg
    roi_percentage: float
    current_price_per_kg: float = Field(ge=0)      # INR
    growing_states: List[str] = []
    image: str = "🌱"
    description_en: str = ""
    description_hi: str = ""

    @model_validator(mode="after")
    def _ranges_ordered(self):
        for dim in ("soil_ph", "temperature", "rainfall"):
            if getattr(self, f"{dim}_min") > getattr(self, f"{dim}_max"):
                raise ValueError(f"{dim}_min must not exceed {dim}_max")
        return self

# ---------- scoring inputs ----------
class EnvironmentalInput(BaseModel):
    nitrogen: Optional[float] = Field(default=None, ge=0)
    phosphorus: Optional[float] = Field(default=None, ge=0)
    potassium: Optional[float] = Field(default=None, ge=0)
    temperature: Optional[float] = Field(default=None, ge=-50, le=60)   # °C
    humidity: Optional[float] = Field(default=None, ge=0, le=100)       # %
    ph: Optional[float] = Field(default=None, ge=0, le=14)
    rainfall: Optional[float] = Field(default=None, ge=0)               # mm

class FarmParameters(BaseModel):
    area: float = Field(gt=0)
    area_unit: AreaUnit = "acres"
    previous_crops: List[str] = Field(default_factory=list, max_length=3)

# ---------- scoring output ----------
class ScoredCrop(Crop):
    suitability_score: float = Field(ge=0, le=1)
    total_investment: float
    expected_return: float
    season_factor: float = 1.0

    @computed_field
    @property
    def profit_amount(self) -> float:
        return self.expected_return - self.total_investment

    @computed_field
    @property
    def actual_roi(self) -> float:
        return self.profit_amount / self.total_investment * 100

    @computed_field
    @property
    def suitability_percent(self) -> int:
        return round(self.suitability_score * 100)

    @computed_field
    @property
    def seasonal_suitability(self) -> SeasonalSuitability:
        return seasonal_label(self.season_factor)

# ---------- collaborators ----------
class LocationInfo(BaseModel):
    pincode: str
    name: str = "Unknown"
    district: str = "Unknown"
    state: str = "Unknown"
    country: str = "IN"
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    region: str = "India"

class CurrentWeather(BaseModel):
    temperature: float
    humidity: float
    description: str = ""
    wind_speed: Optional[float] = None
    pressure: Optional[float] = None
    icon: str = "🌤️"

class DailyForecast(BaseModel):
    date: str
    high: float
    low: float
    avg: float
    description: str = ""
    rainfall: float = 0.0
    icon: str = "🌤️"

class WeatherInfo(BaseModel):
    location: str
    current: CurrentWeather
    forecast: List[DailyForecast] = []

class SoilProfile(BaseModel):
    location: str
    soil_type: str
    ph: float
    nitrogen: float
    phosphorus: float
    potassium: float
    organic_matter: float
    moisture: float              # %
    moisture_level: Literal["Low","Medium","High"]
    salinity: Literal["Low","Medium","High"]
    recommendations: List[str]
    testing_center: str

# ---------- HTTP DTOs ----------
class PincodeBody(BaseModel):
    pincode: str

class SoilBody(BaseModel):
    pincode: str
    district: Optional[str] = None
    state: Optional[str] = None

class RecommendRequest(BaseModel):
    pincode: str
    farmArea: float = Field(gt=0)
    areaUnit: AreaUnit = "acres"
    previousCrops: List[str] = Field(default_factory=list, max_length=3)
    season: Optional[Season] = None
    region: Optional[str] = None
    rainfall: Optional[float] = Field(default=None, ge=0)
    environment: Optional[EnvironmentalInput] = None

    def farm(self) -> FarmParameters:
        return FarmParameters(area=self.farmArea, area_unit=self.areaUnit,
                              previous_crops=self.previousCrops)

class RecommendResponse(BaseModel):
    season: Season
    location: LocationInfo
    weather: Optional[WeatherInfo] = None
    soil: Optional[SoilProfile] = None
    environment: EnvironmentalInput
    recommendations: List[ScoredCrop]
    timestamp: str

class ChatContext(BaseModel):
    location: Optional[str] = None
    previousCrops: Optional[str] = None
    farmArea: Optional[str] = None
    season: Optional[str] = None

class ChatRequest(BaseModel):
    message: str = Field(min_length=1)
    language: Language = "en"
    userContext: Optional[ChatContext] = None

class ChatResponse(BaseModel):
    response: str
    language: Language
    timestamp: str
