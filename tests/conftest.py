import pytest
from fasal.config import settings
from fasal.schema import Crop


def _crop(**overrides) -> Crop:
    row = {
        "id": 1, "name_en": "Testcrop", "name_hi": "परीक्षण", "season": "kharif",
        "soil_ph_min": 6.0, "soil_ph_max": 7.0,
        "temperature_min": 20, "temperature_max": 30,
        "rainfall_min": 100, "rainfall_max": 200,
        "investment_per_acre": 25000, "expected_yield_per_acre": 1000,
        "roi_percentage": 40, "current_price_per_kg": 30,
    }
    row.update(overrides)
    return Crop(**row)


@pytest.fixture
def make_crop():
    return _crop


@pytest.fixture(autouse=True)
def _deterministic_settings(monkeypatch):
    monkeypatch.setattr(settings, "score_jitter", 0.0)
    monkeypatch.setattr(settings, "top_n", 5)
    monkeypatch.setattr(settings, "openweather_api_key", "test-key")
