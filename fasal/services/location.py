import logging
import re
from typing import Any, Dict, Optional
import httpx
from fasal.config import settings
from fasal.errors import ExternalServiceError, InvalidPincodeError, PincodeNotFoundError
from fasal.schema import LocationInfo

logger = logging.getLogger(__name__)

GEO_BASE_URL = "https://api.openweathermap.org/geo/1.0"
PINCODE_RE = re.compile(r"^[1-9][0-9]{5}$")

REGION_BY_STATE = {
    "Punjab": "North India", "Haryana": "North India", "Uttar Pradesh": "North India",
    "Uttarakhand": "North India", "Himachal Pradesh": "North India", "Jammu and Kashmir": "North India",
    "Delhi": "North India", "Rajasthan": "North India",
    "Maharashtra": "West India", "Gujarat": "West India", "Goa": "West India",
    "Dadra and Nagar Haveli": "West India", "Daman and Diu": "West India",
    "Karnataka": "South India", "Tamil Nadu": "South India", "Kerala": "South India",
    "Andhra Pradesh": "South India", "Telangana": "South India", "Pondicherry": "South India",
    "West Bengal": "East India", "Bihar": "East India", "Jharkhand": "East India",
    "Odisha": "East India", "Sikkim": "East India",
    "Madhya Pradesh": "Central India", "Chhattisgarh": "Central India",
    "Assam": "Northeast India", "Arunachal Pradesh": "Northeast India", "Manipur": "Northeast India",
    "Meghalaya": "Northeast India", "Mizoram": "Northeast India", "Nagaland": "Northeast India",
    "Tripura": "Northeast India",
}

# Used when the geocoder is unreachable.
KNOWN_PINCODES: Dict[str, Dict[str, Any]] = {
    "110001": {"district": "New Delhi", "state": "Delhi", "lat": 28.6139, "lon": 77.2090},
    "400001": {"district": "Mumbai", "state": "Maharashtra", "lat": 19.0760, "lon": 72.8777},
    "500001": {"district": "Hyderabad", "state": "Telangana", "lat": 17.3850, "lon": 78.4867},
    "700001": {"district": "Kolkata", "state": "West Bengal", "lat": 22.5726, "lon": 88.3639},
    "600001": {"district": "Chennai", "state": "Tamil Nadu", "lat": 13.0827, "lon": 80.2707},
    "560001": {"district": "Bangalore", "state": "Karnataka", "lat": 12.9716, "lon": 77.5946},
    "141001": {"district": "Ludhiana", "state": "Punjab", "lat": 30.9010, "lon": 75.8573},
    "302001": {"district": "Jaipur", "state": "Rajasthan", "lat": 26.9124, "lon": 75.7873},
    "380001": {"district": "Ahmedabad", "state": "Gujarat", "lat": 23.0225, "lon": 72.5714},
    "411001": {"district": "Pune", "state": "Maharashtra", "lat": 18.5204, "lon": 73.8567},
}

def validate_pincode(pincode: str) -> str:
    p = (pincode or "").strip()
    if not p:
        raise InvalidPincodeError("Pincode is required")
    if not PINCODE_RE.match(p):
        raise InvalidPincodeError("Invalid Indian pincode format. Enter a 6-digit pincode.")
    return p

def region_for_state(state: str) -> str:
    return REGION_BY_STATE.get(state, "India")

def fallback_location(pincode: str) -> LocationInfo:
    known = KNOWN_PINCODES.get(pincode)
    if not known:
        return LocationInfo(pincode=pincode)
    return LocationInfo(
        pincode=pincode, name=known["district"], district=known["district"], state=known["state"],
        latitude=known["lat"], longitude=known["lon"], region=region_for_state(known["state"]),
    )

def _api_key() -> str:
    if not settings.openweather_api_key:
        raise ExternalServiceError("OpenWeather API key not configured")
    return settings.openweather_api_key

async def geocode_pincode(client: httpx.AsyncClient, pincode: str) -> Dict[str, Any]:
    """Resolve a pincode to OpenWeather's {name, lat, lon, country}."""
    try:
        r = await client.get(f"{GEO_BASE_URL}/zip", params={"zip": f"{pincode},IN", "appid": _api_key()})
    except httpx.HTTPError as e:
        raise ExternalServiceError(f"Failed to fetch location data: {e}") from e
    if r.status_code == 404:
        raise PincodeNotFoundError("Pincode not found. Please check and try again.")
    if r.status_code != 200:
        raise ExternalServiceError(f"Failed to fetch location data (status {r.status_code})")
    return r.json()

async def _reverse_state(client: httpx.AsyncClient, lat: float, lon: float) -> str:
    try:
        r = await client.get(f"{GEO_BASE_URL}/reverse",
                             params={"lat": lat, "lon": lon, "limit": 1, "appid": _api_key()})
    except httpx.HTTPError:
        logger.warning("Reverse geocoding failed for %s,%s", lat, lon)
        return "Unknown"
    if r.status_code != 200:
        return "Unknown"
    data = r.json()
    return (data[0].get("state") or "Unknown") if data else "Unknown"

async def lookup_location(pincode: str, client: Optional[httpx.AsyncClient] = None) -> LocationInfo:
    pincode = validate_pincode(pincode)
    if client is None:
        async with httpx.AsyncClient(timeout=settings.fetch_timeout_s) as c:
            return await lookup_location(pincode, c)

    geo = await geocode_pincode(client, pincode)
    state = await _reverse_state(client, geo["lat"], geo["lon"])
    logger.info("Location resolved for pincode %s: %s, %s", pincode, geo.get("name"), state)
    return LocationInfo(
        pincode=pincode,
        name=geo.get("name") or "Unknown",
        district=geo.get("name") or "Unknown",
        state=state,
        country=geo.get("country") or "IN",
        latitude=geo["lat"],
        longitude=geo["lon"],
        region=region_for_state(state),
    )
