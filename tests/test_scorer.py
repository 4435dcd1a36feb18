import pytest
from fasal.engine import scorer
from fasal.engine.normalizer import NormalizedInput, normalize_input
from fasal.schema import EnvironmentalInput


def _env(**raw) -> NormalizedInput:
    return normalize_input(EnvironmentalInput(**raw))


def test_midpoint_scores_one_for_ph_temperature_rainfall(make_crop):
    crop = make_crop(soil_ph_min=6.2, soil_ph_max=7.2, temperature_min=21.3, temperature_max=27.9,
                     rainfall_min=107, rainfall_max=124)
    env = _env(ph=6.7, temperature=24.6, rainfall=115.5)
    assert scorer.ph_score(crop, env) == 1.0
    assert scorer.temperature_score(crop, env) == 1.0
    assert scorer.rainfall_score(crop, env) == 1.0


@pytest.mark.parametrize("lo", range(20, 282))
def test_rainfall_midpoint_is_exact_across_domain(make_crop, lo):
    crop = make_crop(rainfall_min=lo, rainfall_max=lo + 17)
    assert scorer.rainfall_score(crop, _env(rainfall=lo + 8.5)) == 1.0


def test_range_edges_hit_in_range_minimum():
    assert scorer.range_score(6.0, 6.0, 7.0, k=0.5, c=0.5) == pytest.approx(0.5)
    assert scorer.range_score(200, 100, 200, k=0.3, c=0.7) == pytest.approx(0.7)


def test_outside_range_is_below_in_range_minimum_and_never_negative():
    assert scorer.range_score(7.2, 6.0, 7.0, k=0.5, c=0.5) == pytest.approx(0.3)
    assert scorer.range_score(4.0, 6.0, 7.0, k=0.5, c=0.5) == 0.0
    rain = scorer.range_score(210, 100, 200, k=0.3, c=0.7)
    assert 0 <= rain < 0.7
    assert scorer.range_score(900, 100, 200, k=0.3, c=0.7) == 0.0


def test_zero_width_range_scores_point_only():
    assert scorer.range_score(5.0, 5.0, 5.0, k=0.5, c=0.5) == 1.0
    assert scorer.range_score(5.1, 5.0, 5.0, k=0.5, c=0.5) == 0.0
    assert scorer.nutrient_score(40, 40, 40) == 1.0
    assert scorer.nutrient_score(41, 40, 40) == 0.0


@pytest.mark.parametrize("rain", range(20, 299))
def test_zero_width_rainfall_matches_its_own_point(make_crop, rain):
    crop = make_crop(rainfall_min=rain, rainfall_max=rain)
    assert scorer.rainfall_score(crop, _env(rainfall=rain)) == 1.0


@pytest.mark.parametrize("ph", [round(4.0 + i / 10, 1) for i in range(55)])
def test_zero_width_ph_matches_its_own_point(make_crop, ph):
    crop = make_crop(soil_ph_min=ph, soil_ph_max=ph)
    assert scorer.ph_score(crop, _env(ph=ph)) == 1.0


def test_zero_width_point_through_suitability_score(make_crop):
    exact = make_crop(rainfall_min=113, rainfall_max=113)
    off = make_crop(rainfall_min=114, rainfall_max=114)
    env = _env(rainfall=113)
    assert scorer.suitability_score(exact, env) > scorer.suitability_score(off, env)


def test_zero_width_crop_does_not_divide_by_zero(make_crop):
    crop = make_crop(soil_ph_min=6.5, soil_ph_max=6.5, temperature_min=25, temperature_max=25,
                     rainfall_min=150, rainfall_max=150)
    s = scorer.suitability_score(crop, _env(ph=7.0, temperature=30, rainfall=100, humidity=60))
    assert 0.0 <= s <= 1.0


def test_nutrient_score_inside_and_outside_optimal_range():
    assert scorer.nutrient_score(80, 60, 100) == 1.0
    assert scorer.nutrient_score(50, 60, 100) == pytest.approx(0.75)
    assert scorer.nutrient_score(0, 60, 100) == 0.0


def test_no_data_gives_neutral_score(make_crop):
    assert scorer.suitability_score(make_crop(), NormalizedInput()) == pytest.approx(0.5)


def test_severely_deficient_nutrient_caps_score(make_crop):
    rice = make_crop(name_en="Rice")
    # N=0 is far below rice's 60-99 optimum; everything else unknown.
    s = scorer.suitability_score(rice, _env(nitrogen=0))
    climate_part = (0.10 + 0.20 + 0.20) * 0.5
    assert s == pytest.approx(0.7 * climate_part + 0.3 * 0.0)


def test_healthy_nutrients_add_weighted_scores(make_crop):
    rice = make_crop(name_en="Rice")
    s = scorer.suitability_score(rice, _env(nitrogen=80, phosphorus=50, potassium=40))
    # climate unknown -> 0.5 each; all three nutrients inside rice's optimum
    assert s == pytest.approx((0.10 + 0.20 + 0.20) * 0.5 + 0.20 + 0.15 + 0.15)


def test_humidity_is_weighted_only_when_supplied(make_crop):
    rice = make_crop(name_en="Rice")
    without = scorer.suitability_score(rice, NormalizedInput())
    with_band_mid = scorer.suitability_score(rice, _env(humidity=80))
    assert without == pytest.approx(0.5)
    assert with_band_mid == pytest.approx(0.9 * 0.5 + 0.1 * 1.0)


@pytest.mark.parametrize("category", list(scorer.WEIGHTS))
def test_effective_weights_sum_to_one(category):
    assert sum(scorer.effective_weights(category, False).values()) == pytest.approx(1.0)
    assert sum(scorer.effective_weights(category, True).values()) == pytest.approx(1.0)
    assert scorer.effective_weights(category, False)["humidity"] == 0.0


def test_category_lookup_by_name():
    assert scorer.crop_category("Rice") == "cereals"
    assert scorer.crop_category("Paddy") == "cereals"
    assert scorer.crop_category("Pigeon Peas") == "pulses"
    assert scorer.crop_category("Mango") == "fruits"
    assert scorer.crop_category("Cotton") == "cash_crops"
    assert scorer.crop_category("Soybean") == "default"


def test_unknown_crop_gets_default_npk_range():
    assert scorer.npk_optimal("Dragonfruit") == scorer.DEFAULT_NPK
    assert scorer.npk_optimal("Chickpea") == ((20, 60), (55, 80), (75, 85))


def test_humidity_bands_by_class():
    assert scorer.humidity_class("Rice") == "tropical"
    assert scorer.humidity_class("Bajra") == "arid"
    assert scorer.humidity_class("Wheat") == "temperate"
    assert scorer.humidity_class("Groundnut") == "default"


def test_score_is_bounded_for_extreme_inputs(make_crop):
    env = _env(nitrogen=500, phosphorus=500, potassium=500, temperature=60, humidity=100, ph=14, rainfall=5000)
    s = scorer.suitability_score(make_crop(name_en="Banana"), env)
    assert 0.0 <= s <= 1.0
