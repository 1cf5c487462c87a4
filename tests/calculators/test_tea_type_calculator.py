"""Tests for the tea-type calculator."""

from tea_lens.calculators import TeaTypeCalculator
from tea_lens.calculators.tea_type import NO_DATA
from tea_lens.schema import Tea


def _analyze(tea_type, sub_type=None):
    return TeaTypeCalculator().analyze(Tea(type=tea_type, sub_type=sub_type))


def test_sub_type_overrides_base():
    result = _analyze("Green", "Gyokuro")

    assert result.primary_type == "green"
    assert result.sub_type == "gyokuro"
    assert result.typical_theanine == "Very High"
    assert result.seasonal_tendency == "cooling"
    assert result.base_time_of_day == ["Afternoon"]


def test_primary_type_only():
    result = _analyze("Black")

    assert result.primary_type == "black"
    assert result.sub_type is None
    assert result.typical_caffeine == "High"


def test_aliases_are_canonicalized():
    result = _analyze("Pu-erh", "Ripe")

    assert result.primary_type == "puerh"
    assert result.sub_type == "shou"


def test_keyword_scan_finds_sub_type_in_type_text():
    result = _analyze("Japanese Matcha Green Tea")

    assert result.primary_type == "green"
    assert result.sub_type == "matcha"


def test_sub_type_found_without_primary():
    result = _analyze(None, "Silver Needle")

    assert result.primary_type == "white"
    assert result.sub_type == "silver needle"


def test_unknown_type():
    result = _analyze("Rooibos Blend")

    assert result.description == NO_DATA
    assert result.primary_type == "rooibos blend"
    assert result.base_activity_hints == []


def test_missing_type():
    result = _analyze(None)

    assert result.description == NO_DATA
    assert result.primary_type == ""
