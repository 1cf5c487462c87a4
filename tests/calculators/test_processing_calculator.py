"""Tests for the processing calculator."""

from tea_lens.calculators import ProcessingCalculator
from tea_lens.calculators.processing import NO_DATA, roast_level
from tea_lens.schema import Processing, Tea


def _analyze(methods, oxidation=None, tea_type="Oolong"):
    tea = Tea(type=tea_type, processing=Processing(methods=methods, oxidation_level=oxidation))
    return ProcessingCalculator().analyze(tea)


def test_no_processing_data():
    result = ProcessingCalculator().analyze(Tea(type="Green"))

    assert result.description == NO_DATA
    assert result.roast_level == "Unknown"


def test_flavor_impacts_are_unioned_in_order():
    result = _analyze(["steamed", "rolled"])

    assert result.applied_methods == ["steamed", "rolled"]
    assert result.flavor_impact[0] == "enhances vegetal/marine notes"
    assert "concentrates flavor compounds" in result.flavor_impact
    assert len(result.flavor_impact) == len(set(result.flavor_impact))


def test_last_matched_method_sets_body_and_alertness():
    assert _analyze(["steamed", "rolled"]).body_impact == "Fuller"

    reordered = _analyze(["rolled", "steamed"])

    assert reordered.body_impact == "Lighter"
    assert reordered.alertness_modifier == "clean focus"


def test_charcoal_marker_wins_roast_level():
    result = _analyze(["charcoal-heavy-roast"])

    assert result.roast_level == "Charcoal"
    assert result.unmatched_methods == []


def test_roast_level_markers():
    assert roast_level(["medium-roast"]) == "Medium"
    assert roast_level(["post-processing-roasted"]) == "Unknown Roast"
    assert roast_level(["steamed"]) == "None"


def test_high_oxidation_overrides_tendency():
    result = _analyze(["steamed"], oxidation=85)

    assert result.energetic_tendency == "warming"


def test_low_oxidation_is_cooling():
    result = _analyze(["withered"], oxidation=5)

    assert result.energetic_tendency == "cooling"


def test_method_tendencies_average():
    assert _analyze(["light-roast", "medium-roast"]).energetic_tendency == "warming"
    assert _analyze(["withered", "rolled"]).energetic_tendency == "neutral"


def test_oxidation_only_record():
    result = _analyze([], oxidation=40)

    assert result.description.startswith("This Oolong has no recorded processing methods.")
    assert result.oxidation_level == 40
    assert result.body_impact == "Unchanged"


def test_unknown_method_is_reported():
    result = _analyze(["moonlight dance", "steamed"])

    assert result.unmatched_methods == ["moonlight dance"]
    assert result.body_impact == "Lighter"


def test_lookup_matches_by_containment():
    calculator = ProcessingCalculator()

    assert calculator.lookup("Light-Roast").key == "light-roast"
    assert calculator.lookup("traditional charcoal-roasted").key == "charcoal-roasted"
    assert calculator.lookup("lavender") is None
