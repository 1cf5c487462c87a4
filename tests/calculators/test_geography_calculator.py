"""Tests for the geography calculator."""

from tea_lens.calculators import GeographyCalculator
from tea_lens.calculators.geography import NO_DATA, adjusted_month, hemisphere
from tea_lens.schema import Geography, Tea

UJI = Geography(latitude=34.9, longitude=135.8, altitude=150, harvest_month=5)


def test_no_geography_or_origin():
    result = GeographyCalculator().analyze(Tea(type="Green"))

    assert result.description == NO_DATA
    assert result.location.region == "Unknown"


def test_region_resolved_from_coordinates():
    result = GeographyCalculator().analyze(Tea(type="Green", geography=UJI))

    assert result.location.region == "Uji"
    assert result.location.country == "Japan"
    assert result.climate.altitude_category == "Very Low"
    assert result.climate.latitude_zone == "Temperate"
    assert result.season.harvest_season == "Late Spring"
    assert result.description.startswith("This Green originates from Uji, Japan.")


def test_region_resolved_from_origin_text():
    result = GeographyCalculator().analyze(Tea(type="Oolong", origin="Wuyishan, Fujian"))

    assert result.location.region == "Wuyi Mountains"
    assert result.climate.altitude_category == "Unknown"


def test_origin_matching_uses_whole_words():
    """'uji' inside 'fujian' is not a match."""
    calculator = GeographyCalculator()

    assert calculator.resolve_region(None, None, "Fujian province") is None
    assert calculator.resolve_region(None, None, "Uji, Kyoto").name == "Uji"


def test_southern_hemisphere_month_is_shifted():
    calculator = GeographyCalculator()

    season = calculator.harvest_season(1, -33)

    assert season.hemisphere == "Southern"
    assert season.harvest_season == "Summer"
    assert season.quality_indicator == "Standard / Second Flush"


def test_harvest_season_unknown_without_latitude():
    season = GeographyCalculator().harvest_season(4, None)

    assert season.harvest_season == "Unknown"
    assert season.hemisphere == "Unknown"
    assert season.harvest_month == 4


def test_invalid_harvest_month():
    season = GeographyCalculator().harvest_season(13, 30)

    assert season.harvest_season == "Unknown"
    assert season.harvest_month is None


def test_negative_latitude_uses_absolute_zone():
    geo = Geography(latitude=-33, longitude=19, temperature=-5)

    result = GeographyCalculator().analyze(Tea(geography=geo))

    assert result.climate.latitude_zone == "Temperate"
    assert result.climate.temperature_category == "Outside Defined Ranges"


def test_influences_are_deduplicated():
    geo = Geography(latitude=27.8, longitude=117.8, altitude=650, humidity=80, solar_radiation=190)

    result = GeographyCalculator().analyze(Tea(type="Oolong", geography=geo))

    assert result.location.region == "Wuyi Mountains"
    assert result.climate.humidity_category == "High"
    for values in (result.flavor_influences, result.mouthfeel_influences, result.compound_tendencies):
        assert len(values) == len(set(values))
    assert "smoother texture" in result.mouthfeel_influences


def test_hemisphere_and_month_helpers():
    assert hemisphere(0) == "Northern"
    assert hemisphere(-0.1) == "Southern"
    assert hemisphere(None) == "Unknown"
    assert adjusted_month(7, southern=True) == 1
    assert adjusted_month(12, southern=False) == 12
