import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional
import httpx
from fasal.config import settings
from fasal.errors import ExternalServiceError
from fasal.schema import CurrentWeather, DailyForecast, WeatherInfo
from .location import geocode_pincode, validate_pincode

logger = logging.getLogger(__name__)

BASE_URL = "https://api.openweathermap.org/data/2.5"
IST = timezone(timedelta(hours=5, minutes=30))
MAX_FORECAST_DAYS = 7

WEATHER_ICONS = {
    "Clear": "☀️", "Clouds": "☁️", "Rain": "🌧️", "Drizzle": "🌦️", "Thunderstorm": "⛈️",
    "Snow": "❄️", "Mist": "🌫️", "Fog": "🌫️", "Haze": "🌫️",
}

def weather_icon(condition: Optional[str]) -> str:
    return WEATHER_ICONS.get(condition or "", "🌤️")

def daily_forecasts(rows: List[Dict[str, Any]], max_days: int = MAX_FORECAST_DAYS) -> List[DailyForecast]:
    """Collapse OpenWeather 3-hourly rows into per-day (IST) summaries.

    Rainfall is the day's summed `rain.3h`; description and icon come from the
    day's first row.
    """
    days: Dict[str, List[Dict[str, Any]]] = {}
    for row in rows:
        day = datetime.fromtimestamp(row["dt"], tz=IST).date().isoformat()
        if day not in days and len(days) >= max_days:
            continue
        days.setdefault(day, []).append(row)

    out: List[DailyForecast] = []
    for day, items in days.items():
        temps = [i["main"]["temp"] for i in items]
        first = (items[0].get("weather") or [{}])[0]
        out.append(DailyForecast(
            date=day,
            high=round(max(i["main"].get("temp_max", i["main"]["temp"]) for i in items)),
            low=round(min(i["main"].get("temp_min", i["main"]["temp"]) for i in items)),
            avg=round(sum(temps) / len(temps), 1),
            description=first.get("description", ""),
            rainfall=round(sum((i.get("rain") or {}).get("3h", 0) for i in items), 1),
            icon=weather_icon(first.get("main")),
        ))
    return out

async def _get(client: httpx.AsyncClient, path: str, lat: float, lon: float) -> Dict[str, Any]:
    params = {"lat": lat, "lon": lon, "appid": settings.openweather_api_key, "units": "metric"}
    try:
        r = await client.get(f"{BASE_URL}/{path}", params=params)
    except httpx.HTTPError as e:
        raise ExternalServiceError(f"Failed to fetch weather data: {e}") from e
    if r.status_code != 200:
        raise ExternalServiceError(f"Failed to fetch weather data (status {r.status_code})")
    return r.json()

async def fetch_weather(pincode: str, client: Optional[httpx.AsyncClient] = None) -> WeatherInfo:
    pincode = validate_pincode(pincode)
    if client is None:
        async with httpx.AsyncClient(timeout=settings.fetch_timeout_s) as c:
            return await fetch_weather(pincode, c)

    geo = await geocode_pincode(client, pincode)
    lat, lon = geo["lat"], geo["lon"]
    current = await _get(client, "weather", lat, lon)
    forecast = await _get(client, "forecast", lat, lon)

    cond = (current.get("weather") or [{}])[0]
    try:
        info = WeatherInfo(
            location=f"{geo.get('name', 'Unknown')}, {current.get('sys', {}).get('country', 'IN')}",
            current=CurrentWeather(
                temperature=round(current["main"]["temp"]),
                humidity=current["main"]["humidity"],
                description=cond.get("description", ""),
                wind_speed=(current.get("wind") or {}).get("speed"),
                pressure=current["main"].get("pressure"),
                icon=weather_icon(cond.get("main")),
            ),
            forecast=daily_forecasts(forecast.get("list") or []),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ExternalServiceError(f"Unexpected weather data format: {e!r}") from e
    logger.info("Weather fetched for pincode %s", pincode)
    return info
