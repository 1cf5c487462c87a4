"""Tests for the time-of-day matcher."""

from tea_lens.calculators import CompoundCalculator
from tea_lens.matchers import TimeMatcher
from tea_lens.matchers.time_of_day import GREEN_RULES, HERBAL_RULES, PROFILE_RULES, RIPE_PUERH_RULES, type_rules
from tea_lens.schema import Tea
from tea_lens.types import CompoundAnalysis, TeaTypeAnalysis


def _compounds(profile, stimulation, relaxation):
    return CompoundAnalysis(
        description="",
        compound_profile=profile,
        stimulation_level=stimulation,
        relaxation_level=relaxation,
    )


def test_intense_black_tea_prefers_morning():
    compounds = _compounds("Intense & Sharp", "Very High", "Low")
    tea_type = TeaTypeAnalysis(description="", primary_type="black", typical_caffeine="High")

    result = TimeMatcher().match(compounds, tea_type, tea_name="Assam")

    assert result.scores == {
        "Early Morning": 89,
        "Morning": 100,
        "Midday": 71,
        "Afternoon": 55,
        "Evening": 16,
        "Night": 0,
    }
    assert [item.name for item in result.recommended] == ["Morning", "Early Morning"]
    (window,) = result.ideal_ranges
    assert (window.start, window.end, window.score) == ("Early Morning", "Midday", 87)
    assert result.description == "Assam is best enjoyed in the Early Morning to Midday (87%)."


def test_calm_herbal_tea_prefers_evening():
    compounds = _compounds("Deeply Calm", "Very Low", "Moderate")
    tea_type = TeaTypeAnalysis(description="", primary_type="herbal", typical_caffeine="None")

    result = TimeMatcher().match(compounds, tea_type)

    assert result.scores["Morning"] == 0
    assert result.scores["Evening"] == 100
    assert [item.name for item in result.recommended] == ["Evening", "Night"]
    (window,) = result.ideal_ranges
    assert (window.start, window.end, window.score) == ("Evening", "Night", 96)


def test_unknown_profile_uses_default_rules():
    compounds = _compounds("N/A", "None", "None")
    tea_type = TeaTypeAnalysis(description="")

    result = TimeMatcher().match(compounds, tea_type)

    profile_steps = [(entry.candidate, entry.delta) for entry in result.trace if entry.step == "compound profile"]
    assert profile_steps == [("Afternoon", 5), ("Morning", 5)]
    assert result.recommended[0].name == "Afternoon"


def test_type_rules_by_word():
    hojicha = TeaTypeAnalysis(description="", primary_type="green", sub_type="hojicha")
    ripe = TeaTypeAnalysis(description="", primary_type="puerh", sub_type="shou")
    sencha = TeaTypeAnalysis(description="", primary_type="green")

    assert [rules for rules, _ in type_rules(hojicha)] == [HERBAL_RULES]
    assert [rules for rules, _ in type_rules(ripe)] == [RIPE_PUERH_RULES]
    assert [rules for rules, _ in type_rules(sencha)] == [GREEN_RULES]


def test_smoothed_stimulation_counts_as_moderate():
    """A smoothed label applies no stimulation-level rule."""
    compounds = _compounds("Smooth & Alert", "Very High (Smooth)", "High")
    tea_type = TeaTypeAnalysis(description="")

    result = TimeMatcher().match(compounds, tea_type)

    assert [entry for entry in result.trace if entry.step == "stimulation level"] == []


def test_profile_rules_cover_only_emitted_profiles():
    emitted = set()
    for caffeine in range(0, 21):
        for theanine in range(0, 21):
            tea = Tea(caffeine_level=caffeine / 2, l_theanine_level=theanine / 2)
            emitted.add(CompoundCalculator().analyze(tea).compound_profile)

    assert set(PROFILE_RULES) <= emitted
