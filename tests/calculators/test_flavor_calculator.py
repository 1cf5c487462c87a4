"""Tests for the flavor calculator."""

from tea_lens.calculators import FlavorCalculator
from tea_lens.calculators.flavor import NO_DATA, intensity
from tea_lens.schema import Tea


def _analyze(notes):
    return FlavorCalculator().analyze(Tea(flavor_profile=notes))


def test_empty_profile():
    result = _analyze([])

    assert result.description == NO_DATA
    assert result.intensity == "N/A"


def test_notes_are_normalized_and_deduplicated():
    result = _analyze(["Jasmine", " jasmine ", "Marine"])

    assert result.identified_flavors == ["jasmine", "marine"]
    assert result.intensity == "Subtle"
    assert result.dominant_categories == ["Floral", "Umami/Marine"]
    assert result.food_pairing_hints[:2] == ["Light Desserts", "Steamed Vegetables"]
    assert "Seafood" in result.food_pairing_hints
    assert len(result.food_pairing_hints) == len(set(result.food_pairing_hints))


def test_associated_flavor_resolves_to_parent_note():
    calculator = FlavorCalculator()

    record = calculator.lookup("perfumed")

    assert record.key == "jasmine"
    assert record.category == "Floral"


def test_category_name_uses_defaults():
    record = FlavorCalculator().lookup("floral")

    assert record.category == "Floral"
    assert "Light Desserts" in record.food


def test_unknown_note_is_reported():
    result = _analyze(["moon dust", "jasmine"])

    assert result.unmatched_flavors == ["moon dust"]
    assert result.dominant_categories == ["Floral"]


def test_dominant_notes_and_intensity():
    result = _analyze(["jasmine", "rose", "orchid", "lilac", "marine"])

    assert result.intensity == "Pronounced"
    assert result.dominant_flavors == ["jasmine", "rose", "orchid"]
    assert result.description.startswith("The flavor profile is perceived as 'pronounced'.")
    assert result.description.endswith("Contains 5 distinct flavor notes provided.")


def test_intensity_bands():
    assert intensity(0) == "N/A"
    assert intensity(2) == "Subtle"
    assert intensity(4) == "Moderate"
    assert intensity(5) == "Pronounced"
