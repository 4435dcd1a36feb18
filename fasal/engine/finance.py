from fasal.schema import AreaUnit, Crop, ScoredCrop

ACRES_PER_HECTARE = 2.47

def area_in_acres(area: float, unit: AreaUnit) -> float:
    return area * ACRES_PER_HECTARE if unit == "hectares" else area

def with_financials(crop: Crop, score: float, acres: float, season_factor: float = 1.0) -> ScoredCrop:
    """Attach investment/return for `acres`.

    Return is yield (kg/acre) x acres x price (INR/kg). Profit and ROI are
    computed fields on ScoredCrop, derived from these two.
    """
    return ScoredCrop(
        **crop.model_dump(),
        suitability_score=score,
        season_factor=season_factor,
        total_investment=crop.investment_per_acre * acres,
        expected_return=crop.expected_yield_per_acre * acres * crop.current_price_per_kg,
    )
