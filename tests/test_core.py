"""Tests for core analysis functions."""

import json

import pytest

from tea_lens import EngineConfig, Geography, MatcherConfig, Processing, Tea, analyze_tea, load_tea
from tea_lens.calculators.compound import NO_DATA
from tea_lens.exceptions import TeaInputError
from tea_lens.matchers.food import VERSATILE

GYOKURO = Tea(
    name="Gyokuro",
    type="Green",
    sub_type="Gyokuro",
    caffeine_level=6,
    l_theanine_level=9,
    flavor_profile=["umami", "marine", "sweet"],
    processing=Processing(methods=["shade-grown", "steamed"], oxidation_level=0),
    geography=Geography(latitude=34.9, longitude=135.8, altitude=150, harvest_month=5),
)


def test_analyze_tea_runs_every_stage():
    """analyze_tea() should fill all analyses and recommendations."""
    result = analyze_tea(GYOKURO)

    assert result.name == "Gyokuro"
    assert result.compounds.compound_profile == "Smooth & Alert"
    assert result.processing.energetic_tendency == "cooling"
    assert result.geography.location.region == "Uji"
    assert result.tea_type.sub_type == "gyokuro"
    assert result.season.recommended
    assert result.time_of_day.recommended
    assert result.activity.recommended
    assert result.food.recommended
    assert result.time_of_day.description.startswith("Gyokuro ")
    assert result.brewing.gongfu.water_temperature == "50-60°C"
    assert result.brewing.western is not None


def test_analyze_tea_scores_are_normalized():
    result = analyze_tea(GYOKURO)

    for match in (result.season, result.time_of_day, result.activity, result.food):
        assert all(0 <= score <= 100 for score in match.scores.values())
        assert len(match.recommended) >= 1


def test_analyze_tea_is_deterministic():
    assert analyze_tea(GYOKURO) == analyze_tea(GYOKURO)


def test_analyze_empty_tea():
    """A record with no attributes still yields sentinel recommendations."""
    result = analyze_tea(Tea())

    assert result.compounds.description == NO_DATA
    assert result.food.recommended[0].name == VERSATILE
    assert result.activity.recommended


def test_analyze_tea_respects_config():
    config = EngineConfig(activity=MatcherConfig(absolute_threshold=0, relative_threshold=100, max_recommendations=1))

    result = analyze_tea(GYOKURO, config)

    assert len(result.activity.recommended) == 1


def test_analyze_tea_uses_given_reference(mocker):
    """analyze_tea() should not load packaged tables when given a reference."""
    from tea_lens.reference import load_reference_data

    reference = load_reference_data()
    loader = mocker.patch("tea_lens.core.load_reference_data")

    analyze_tea(GYOKURO, reference=reference)

    loader.assert_not_called()


def test_load_tea_reads_camel_case(tmp_path):
    path = tmp_path / "tea.json"
    path.write_text(
        json.dumps(
            {
                "name": "Da Hong Pao",
                "type": "Oolong",
                "caffeineLevel": 5,
                "lTheanineLevel": 4,
                "processing": {"methods": ["charcoal-roasted"], "oxidationLevel": 60},
            }
        ),
        encoding="utf-8",
    )

    tea = load_tea(path)

    assert tea.name == "Da Hong Pao"
    assert tea.l_theanine_level == 4
    assert tea.processing.oxidation_level == 60


def test_load_tea_missing_file(tmp_path):
    with pytest.raises(TeaInputError, match="File not found"):
        load_tea(tmp_path / "missing.json")


def test_load_tea_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(TeaInputError, match="Invalid JSON"):
        load_tea(path)


def test_load_tea_rejects_non_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(TeaInputError, match="Expected a JSON object"):
        load_tea(path)


def test_load_tea_rejects_invalid_record(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"caffeineLevel": "lots"}), encoding="utf-8")

    with pytest.raises(TeaInputError, match="Invalid tea record"):
        load_tea(path)


def test_analyze_tea_brewing_follows_declared_type():
    """A declared dark tea is brewed from the dark table, not as puerh."""
    tea = Tea(type="Dark", processing=Processing(methods=["pile-fermented", "basket-aged"]))

    result = analyze_tea(tea)

    assert result.tea_type.primary_type == "puerh"
    assert result.brewing.gongfu.tea_type == "dark"
    assert result.brewing.gongfu.example_teas[0] == "Liu Bao"
