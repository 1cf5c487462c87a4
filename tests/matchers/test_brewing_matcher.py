"""Tests for the brewing matcher."""

import dataclasses
import logging

from tea_lens.matchers import BrewingMatcher
from tea_lens.matchers.brewing import format_steep, oxidation_keyword, summarize
from tea_lens.reference import load_reference_data
from tea_lens.schema import Tea
from tea_lens.types import GeographyAnalysis, HarvestSeason, ProcessingAnalysis, TeaTypeAnalysis


def _processing(methods=(), oxidation=None, roast="None"):
    return ProcessingAnalysis(
        description="",
        applied_methods=list(methods),
        oxidation_level=oxidation,
        roast_level=roast,
    )


def _type(primary="", sub=None):
    return TeaTypeAnalysis(description="", primary_type=primary, sub_type=sub)


def test_shade_grown_green_uses_low_temperature():
    tea = Tea(name="Gyokuro", type="Green")

    result = BrewingMatcher().match(tea, _processing(["shade-grown", "steamed"], 0), _type("green"), tea_name="Gyokuro")

    assert result.gongfu.rule_index == 0
    assert result.gongfu.water_temperature == "50-60°C"
    assert result.gongfu.matched_conditions == ["shade-grown", "steamed", "unwithered"]
    assert result.western.water_temperature == "50-60°C"
    assert result.western.steeping_times == [150]
    assert "unwithered" in result.keywords
    assert result.description == (
        "Gyokuro brews gongfu 4-5g per 100ml at 50-60°C, steeps 1 min, 1.5 min, 2 min, 2.5 min; "
        "western 5-7g per 500ml at 50-60°C, steeps 2.5 min."
    )


def test_first_matching_rule_wins():
    """A later rule that also matches is never consulted."""
    tea = Tea(type="Green")

    result = BrewingMatcher().match(tea, _processing(["steamed", "pan-fired"]), _type("green"))

    assert result.gongfu.rule_index == 1
    assert result.gongfu.example_teas[0] == "Long Jing"


def test_unmatched_processing_falls_back_to_default_rule():
    tea = Tea(type="Green")

    result = BrewingMatcher().match(tea, _processing(["sun-dried"]), _type("green"))

    rules = load_reference_data().brewing["gongfu"]["green"]
    assert result.gongfu.rule_index == len(rules) - 1
    assert result.gongfu.matched_conditions == []
    assert result.gongfu.water_temperature == "70-80°C"


def test_young_sheng_gets_two_rinses():
    tea = Tea(type="Puerh", sub_type="Raw")

    result = BrewingMatcher().match(tea, _processing(["sun-dried", "compressed"]), _type("puerh", "sheng"))

    assert "young" in result.keywords
    assert result.gongfu.rule_index == 2
    assert result.gongfu.rinses == 2
    assert summarize(result.gongfu) == "5-6g per 100ml at 85-90°C, steeps 10s, 15s, 20s, 30s, 2 rinses"
    assert result.western.matched_conditions == ["sub-type sheng"]


def test_aged_sheng_is_not_young():
    tea = Tea(type="Puerh", sub_type="Sheng")

    result = BrewingMatcher().match(tea, _processing(["Aged Tea", "compressed", "sun-dried"]), _type("puerh", "sheng"))

    assert "young" not in result.keywords
    assert result.gongfu.rule_index == 1
    assert result.gongfu.water_temperature == "95-100°C"


def test_dark_tea_uses_its_own_table():
    """Declared dark teas are not brewed as puerh."""
    tea = Tea(type="Hei Cha")

    result = BrewingMatcher().match(
        tea,
        _processing(["pile-fermented", "compressed", "golden flowers"]),
        _type("puerh"),
    )

    assert result.gongfu.tea_type == "dark"
    assert result.gongfu.rule_index == 1
    assert result.gongfu.example_teas[0] == "Fu Zhuan"


def test_roast_level_adds_roast_keywords():
    tea = Tea(type="Oolong")

    result = BrewingMatcher().match(
        tea,
        _processing(["strip-rolled", "charcoal-roasted"], 50, roast="Charcoal"),
        _type("oolong"),
    )

    assert {"roasted", "heavy-roasted", "medium-oxidized", "withered"} <= set(result.keywords)
    assert result.gongfu.rule_index == 0
    assert result.gongfu.example_teas[0] == "Wuyi Rock"


def test_spring_harvest_picks_first_flush_rule():
    tea = Tea(type="Black")
    processing = _processing(["withered", "orthodox"], 80)
    spring = GeographyAnalysis(description="", season=HarvestSeason(harvest_season="Early Spring"))

    with_spring = BrewingMatcher().match(tea, processing, _type("black"), spring)
    without = BrewingMatcher().match(tea, processing, _type("black"))

    assert with_spring.gongfu.rule_index == 0
    assert with_spring.gongfu.water_temperature == "80-85°C"
    assert without.gongfu.rule_index == len(load_reference_data().brewing["gongfu"]["black"]) - 1


def test_unknown_type_has_no_recommendation():
    result = BrewingMatcher().match(Tea(type="Herbal"), _processing(), _type("herbal"))

    assert result.gongfu is None
    assert result.western is None
    assert result.description == "No brewing guidance available for herbal."


def test_table_without_default_logs_warning(caplog):
    ref = load_reference_data()
    no_default = {"green": ref.brewing["gongfu"]["green"][:1]}
    reference = dataclasses.replace(ref, brewing={"gongfu": no_default, "western": ref.brewing["western"]})

    with caplog.at_level(logging.WARNING, logger="tea_lens.matchers.brewing"):
        result = BrewingMatcher(reference).match(Tea(type="Green"), _processing(["steamed"]), _type("green"))

    assert result.gongfu is None
    assert result.western is not None
    assert "no gongfu brewing rule matched" in caplog.text


def test_oxidation_keyword_bounds():
    assert oxidation_keyword(0) == "light-oxidized"
    assert oxidation_keyword(20) == "medium-oxidized"
    assert oxidation_keyword(84.9) == "heavy-oxidized"
    assert oxidation_keyword(85) == "fully-oxidized"


def test_format_steep():
    assert format_steep(45) == "45s"
    assert format_steep(60) == "1 min"
    assert format_steep(150) == "2.5 min"
    assert format_steep(100) == "100s"
