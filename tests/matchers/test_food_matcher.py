"""Tests for the food matcher."""

from tea_lens.matchers import FoodMatcher
from tea_lens.matchers.food import VERSATILE
from tea_lens.types import FlavorAnalysis, ProcessingAnalysis, TeaTypeAnalysis

NO_PROCESSING = ProcessingAnalysis(description="")
NO_TYPE = TeaTypeAnalysis(description="")


def test_no_signals_is_versatile():
    result = FoodMatcher().match(FlavorAnalysis(description=""), NO_PROCESSING, NO_TYPE, tea_name="Mystery")

    assert [(item.name, item.score) for item in result.recommended] == [(VERSATILE, 50)]
    assert result.clusters == []
    assert result.description == "Mystery is versatile and pairs well with a wide variety of foods."


def test_marine_flavor_pairs_with_seafood():
    flavor = FlavorAnalysis(
        description="",
        food_pairing_hints=["Seafood", "Sushi"],
        dominant_categories=["Umami/Marine"],
        intensity="Subtle",
    )

    result = FoodMatcher().match(flavor, NO_PROCESSING, NO_TYPE)

    assert {(item.name, item.score) for item in result.recommended} == {("Seafood", 100), ("Sushi", 100)}
    assert result.scores["Miso Soup"] == 25
    assert result.scores["Delicate Foods"] == 13
    assert [cluster.label for cluster in result.clusters] == ["Seafood"]
    assert result.description.endswith('It\'s an excellent choice for "Seafood" (100% match).')


def test_unknown_food_hint_is_ignored():
    flavor = FlavorAnalysis(description="", food_pairing_hints=["Moon Rocks"])

    result = FoodMatcher().match(flavor, NO_PROCESSING, NO_TYPE)

    assert result.recommended[0].name == VERSATILE


def test_dark_roast_rules():
    processing = ProcessingAnalysis(description="", roast_level="Heavy")

    result = FoodMatcher().match(FlavorAnalysis(description=""), processing, NO_TYPE)

    assert [(item.name, item.score) for item in result.recommended] == [("Roasted Nuts", 100)]
    assert result.scores["Dark Chocolate"] == 80


def test_body_and_processing_impacts():
    processing = ProcessingAnalysis(
        description="",
        body_impact="Much Fuller",
        flavor_impact=["adds subtle mineral/smoky hint"],
    )

    result = FoodMatcher().match(FlavorAnalysis(description=""), processing, NO_TYPE)

    steps = {(entry.step, entry.candidate) for entry in result.trace}
    assert ("body impact", "Hearty Dishes") in steps
    assert ("processing flavor impact", "BBQ") in steps


def test_tea_type_categories_are_used():
    tea_type = TeaTypeAnalysis(description="", dominant_flavor_categories=["Spicy"])

    result = FoodMatcher().match(FlavorAnalysis(description=""), NO_PROCESSING, tea_type)

    assert {item.name for item in result.recommended} == {"Spiced Cakes", "Rich Stews", "Curries", "Grilled Meats"}
