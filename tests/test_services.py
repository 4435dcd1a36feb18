import asyncio
from datetime import datetime
import httpx
import pytest
from fasal.config import settings
from fasal.errors import ExternalServiceError, InvalidPincodeError, PincodeNotFoundError
from fasal.services.location import fallback_location, lookup_location, region_for_state, validate_pincode
from fasal.services.soil import soil_profile
from fasal.services.weather import IST, daily_forecasts, fetch_weather


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def _ts(day: int, hour: int) -> int:
    return int(datetime(2026, 10, day, hour, tzinfo=IST).timestamp())


def _geo_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path.endswith("/geo/1.0/zip"):
        return httpx.Response(200, json={"zip": "141001", "name": "Ludhiana", "lat": 30.9, "lon": 75.85, "country": "IN"})
    if request.url.path.endswith("/geo/1.0/reverse"):
        return httpx.Response(200, json=[{"name": "Ludhiana", "state": "Punjab"}])
    return httpx.Response(404)


@pytest.mark.parametrize("bad", ["", "12345", "012345", "1234567", "abcdef", "11 001"])
def test_malformed_pincode_is_rejected(bad):
    with pytest.raises(InvalidPincodeError):
        validate_pincode(bad)


def test_valid_pincode_is_trimmed():
    assert validate_pincode(" 110001 ") == "110001"


def test_region_for_state():
    assert region_for_state("Punjab") == "North India"
    assert region_for_state("Assam") == "Northeast India"
    assert region_for_state("Unknown") == "India"


def test_fallback_location():
    known = fallback_location("400001")
    assert known.state == "Maharashtra"
    assert known.region == "West India"
    unknown = fallback_location("999999")
    assert unknown.name == "Unknown"
    assert unknown.region == "India"


def test_lookup_location_uses_geocoder():
    async def run():
        async with _client(_geo_handler) as c:
            return await lookup_location("141001", client=c)

    loc = asyncio.run(run())
    assert loc.name == "Ludhiana"
    assert loc.state == "Punjab"
    assert loc.region == "North India"
    assert loc.latitude == 30.9


def test_lookup_location_not_found():
    async def run():
        async with _client(lambda r: httpx.Response(404, json={"cod": "404"})) as c:
            await lookup_location("999999", client=c)

    with pytest.raises(PincodeNotFoundError):
        asyncio.run(run())


def test_lookup_location_without_api_key(monkeypatch):
    monkeypatch.setattr(settings, "openweather_api_key", "")

    async def run():
        async with _client(_geo_handler) as c:
            await lookup_location("141001", client=c)

    with pytest.raises(ExternalServiceError):
        asyncio.run(run())


def test_lookup_location_upstream_error():
    async def run():
        async with _client(lambda r: httpx.Response(500)) as c:
            await lookup_location("141001", client=c)

    with pytest.raises(ExternalServiceError):
        asyncio.run(run())


def test_daily_forecasts_groups_by_ist_day():
    rows = [
        {"dt": _ts(19, 9), "main": {"temp": 30, "temp_max": 31, "temp_min": 29},
         "weather": [{"main": "Rain", "description": "light rain"}], "rain": {"3h": 2.5}},
        {"dt": _ts(19, 15), "main": {"temp": 34, "temp_max": 35, "temp_min": 33},
         "weather": [{"main": "Clouds", "description": "few clouds"}], "rain": {"3h": 1.0}},
        {"dt": _ts(20, 9), "main": {"temp": 28, "temp_max": 29, "temp_min": 27},
         "weather": [{"main": "Clear", "description": "clear sky"}]},
    ]
    days = daily_forecasts(rows)
    assert [d.date for d in days] == ["2026-10-19", "2026-10-20"]
    assert days[0].rainfall == 3.5
    assert days[0].high == 35
    assert days[0].low == 29
    assert days[0].avg == 32
    assert days[0].icon == "🌧️"
    assert days[1].rainfall == 0


def test_daily_forecasts_caps_days():
    rows = [{"dt": _ts(d, 12), "main": {"temp": 25}, "weather": [{"main": "Clear"}]} for d in range(1, 11)]
    assert len(daily_forecasts(rows)) == 7
    assert len(daily_forecasts(rows, max_days=3)) == 3


def test_fetch_weather():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/data/2.5/weather"):
            return httpx.Response(200, json={
                "main": {"temp": 27.6, "humidity": 62, "pressure": 1009},
                "weather": [{"main": "Haze", "description": "haze"}],
                "wind": {"speed": 2.1}, "sys": {"country": "IN"},
            })
        if request.url.path.endswith("/data/2.5/forecast"):
            return httpx.Response(200, json={"list": [
                {"dt": _ts(19, 12), "main": {"temp": 30}, "weather": [{"main": "Rain"}], "rain": {"3h": 4}},
            ]})
        return _geo_handler(request)

    async def run():
        async with _client(handler) as c:
            return await fetch_weather("141001", client=c)

    w = asyncio.run(run())
    assert w.location == "Ludhiana, IN"
    assert w.current.temperature == 28
    assert w.current.humidity == 62
    assert w.current.icon == "🌫️"
    assert w.forecast[0].rainfall == 4


def test_soil_profile_is_deterministic_per_pincode():
    a = soil_profile("141001", "Ludhiana", "Punjab")
    b = soil_profile("141001", "Ludhiana", "Punjab")
    assert a == b
    # 141001 % 100 = 1 -> offset -49
    assert a.ph == pytest.approx(7.2 - 0.98)
    assert a.nitrogen == pytest.approx(65 - 19.6)
    assert a.soil_type == "Alluvial"
    assert a.testing_center == "Ludhiana Agricultural Extension Office"


def test_soil_profile_unknown_state_uses_default():
    p = soil_profile("999950")
    assert p.soil_type == "Mixed"
    assert p.ph == 6.8
    assert p.location == "Unknown, Unknown"


def test_soil_recommendations_flag_problems():
    p = soil_profile("380001", "Ahmedabad", "Gujarat")
    assert any("salt-tolerant" in r for r in p.recommendations)
    assert any("organic matter" in r for r in p.recommendations)


def test_soil_profile_rejects_bad_pincode():
    with pytest.raises(InvalidPincodeError):
        soil_profile("abc")


def _broken_forecast_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path.endswith("/data/2.5/weather"):
        return httpx.Response(200, json={"main": {"temp": 27, "humidity": 60}, "weather": [{"main": "Clear"}]})
    if request.url.path.endswith("/data/2.5/forecast"):
        return httpx.Response(200, json={"list": [{"dt": _ts(19, 12), "weather": [{"main": "Rain"}]}]})
    return _geo_handler(request)


def test_fetch_weather_rejects_malformed_payload():
    async def run():
        async with _client(_broken_forecast_handler) as c:
            await fetch_weather("141001", client=c)

    with pytest.raises(ExternalServiceError):
        asyncio.run(run())
