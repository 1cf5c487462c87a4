"""Tests for the caffeine / L-theanine calculator."""

from tea_lens.calculators import CompoundCalculator
from tea_lens.calculators.compound import NO_DATA, level_label, ratio_category, stimulation_label
from tea_lens.schema import Tea


def _analyze(caffeine, theanine, tea_type="Black"):
    tea = Tea(type=tea_type, caffeine_level=caffeine, l_theanine_level=theanine)
    return CompoundCalculator().analyze(tea)


def test_caffeine_dominant_profile():
    result = _analyze(8, 2)

    assert result.levels.ratio == 0.25
    assert result.ratio_category.startswith("Caffeine Dominant")
    assert result.stimulation_level == "Very High"
    assert result.relaxation_level == "Low"
    assert result.compound_profile == "Intense & Sharp"


def test_no_compound_data():
    """Both levels zero yields the no-data analysis."""
    result = _analyze(0, 0)

    assert result.description == NO_DATA
    assert result.ratio_category == "N/A"
    assert result.compound_profile == "N/A"


def test_missing_levels_treated_as_zero():
    result = CompoundCalculator().analyze(Tea(name="Mystery"))

    assert result.description == NO_DATA


def test_theanine_leaning_smoothed_stimulation():
    result = _analyze(6, 9, "Green")

    assert result.ratio_category.startswith("Theanine Leaning")
    assert result.stimulation_level == "High (Smooth)"
    assert result.relaxation_level == "Very High"
    assert result.compound_profile == "Smooth & Alert"
    assert result.description.startswith("This Green has a high (smooth) stimulation level")


def test_theanine_dominant_low_stimulation_is_deeply_calm():
    result = _analyze(1, 4)

    assert result.ratio_category.startswith("Theanine Dominant")
    assert result.compound_profile == "Deeply Calm"


def test_caffeine_leaning_with_low_relaxation():
    result = _analyze(2, 1.2)

    assert result.ratio_category.startswith("Caffeine Leaning")
    assert result.compound_profile == "Sharp & Driven"


def test_zero_caffeine_falls_back_to_dominant_compound():
    result = _analyze(0, 5)

    assert result.levels.ratio == 0
    assert result.ratio_category == "N/A"
    assert result.stimulation_level == "None"
    assert result.compound_profile == "Primarily Relaxing"


def test_level_label_cutoffs_are_inclusive():
    assert level_label(0) == "None"
    assert level_label(1.5) == "Very Low"
    assert level_label(3.5) == "Low"
    assert level_label(5.5) == "Moderate"
    assert level_label(7.5) == "High"
    assert level_label(7.6) == "Very High"


def test_ratio_category_boundaries():
    assert ratio_category(2.0).startswith("Theanine Dominant")
    assert ratio_category(1.5).startswith("Theanine Leaning")
    assert ratio_category(0.8).startswith("Balanced")
    assert ratio_category(0.5).startswith("Caffeine Leaning")
    assert ratio_category(0.49).startswith("Caffeine Dominant")


def test_stimulation_label_smoothing():
    assert stimulation_label(8, 7.5) == "Very High (Smooth)"
    assert stimulation_label(8, 7.4) == "Very High"
    assert stimulation_label(4, 9) == "Moderate"
