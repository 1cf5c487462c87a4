"""Tests for contiguous and wraparound range building."""

import random

from tea_lens.data import SEASONS, TIME_PERIODS
from tea_lens.scoring import WrapRule, build_cyclic_ranges, format_range, format_ranges
from tea_lens.types import CyclicRange

SEASON_WRAP = WrapRule(
    start_labels=frozenset({"Early Spring", "Spring"}),
    end_labels=frozenset({"Late Autumn", "Winter", "Late Winter"}),
)


def _seasons(**high):
    scores = {name: 20 for name in SEASONS}
    scores.update({name.replace("_", " "): value for name, value in high.items()})
    return scores


def test_single_contiguous_run():
    normalized = {name: 10 for name in TIME_PERIODS}
    normalized.update({"Morning": 90, "Midday": 80})

    ranges = build_cyclic_ranges(normalized, TIME_PERIODS, threshold=70)

    assert len(ranges) == 1
    assert (ranges[0].start, ranges[0].end, ranges[0].score) == ("Morning", "Midday", 85)
    assert not ranges[0].wraparound


def test_separate_runs_stay_separate():
    normalized = {name: 10 for name in TIME_PERIODS}
    normalized.update({"Morning": 90, "Evening": 75})

    ranges = build_cyclic_ranges(normalized, TIME_PERIODS, threshold=70)

    assert [(item.start, item.end) for item in ranges] == [("Morning", "Morning"), ("Evening", "Evening")]


def test_runs_touching_both_ends_merge():
    """Night and Early Morning are adjacent on the cycle."""
    normalized = {name: 10 for name in TIME_PERIODS}
    normalized.update({"Early Morning": 80, "Evening": 90, "Night": 100})

    ranges = build_cyclic_ranges(normalized, TIME_PERIODS, threshold=70)

    assert len(ranges) == 1
    merged = ranges[0]
    assert merged.wraparound
    assert (merged.start, merged.end) == ("Evening", "Early Morning")
    assert merged.members == ["Evening", "Night", "Early Morning"]
    assert merged.score == 90


def test_season_wrap_rule_merges_winter_and_spring():
    normalized = _seasons(Late_Autumn=80, Early_Winter=75, Winter=100, Early_Spring=90)

    ranges = build_cyclic_ranges(normalized, SEASONS, threshold=70, wrap_rule=SEASON_WRAP)

    assert len(ranges) == 1
    merged = ranges[0]
    assert merged.wraparound
    assert (merged.start, merged.end) == ("Late Autumn", "Early Spring")
    assert merged.members[0] == "Late Autumn"
    assert merged.members[-1] == "Early Spring"


def test_season_without_wrap_rule_keeps_runs_apart():
    normalized = _seasons(Late_Autumn=80, Early_Winter=75, Winter=100, Early_Spring=90)

    ranges = build_cyclic_ranges(normalized, SEASONS, threshold=70)

    assert len(ranges) == 2
    assert not any(item.wraparound for item in ranges)


def test_merged_range_goes_after_middle_runs():
    normalized = _seasons(Early_Spring=90, Summer=80, Winter=100)

    ranges = build_cyclic_ranges(normalized, SEASONS, threshold=70, wrap_rule=SEASON_WRAP)

    assert [item.start for item in ranges] == ["Summer", "Winter"]
    assert ranges[-1].wraparound


def test_missing_labels_never_raise():
    ordering = ["A", "B", "C"]
    normalized = {"A": 100, "C": 100, "X": 100}

    ranges = build_cyclic_ranges(normalized, ordering, threshold=70)

    assert len(ranges) == 1
    assert ranges[0].members == ["C", "A"]


def test_terminates_for_random_maps():
    rng = random.Random(7)
    labels = [f"L{i}" for i in range(9)]
    for _ in range(200):
        ordering = rng.sample(labels, rng.randint(0, len(labels)))
        normalized = {label: rng.randint(0, 100) for label in rng.sample(labels, rng.randint(0, len(labels)))}
        wrap = WrapRule(frozenset(rng.sample(labels, 2)), frozenset(rng.sample(labels, 2)))

        ranges = build_cyclic_ranges(normalized, ordering, threshold=50, wrap_rule=wrap)

        assert all(0 <= item.score <= 100 for item in ranges)


def test_format_range():
    assert format_range(CyclicRange(start="Spring", end="Spring", score=90, members=["Spring"])) == "Spring (90%)"
    assert (
        format_range(CyclicRange(start="Winter", end="Spring", score=85, members=["Winter", "Spring"]))
        == "Winter to Spring (85%)"
    )


def test_format_ranges_empty():
    assert format_ranges([]) == "No specific range recommended"


def test_format_range_wraparound_uses_through():
    item = CyclicRange(start="Winter", end="Spring", score=95, members=["Winter", "Spring"], wraparound=True)

    assert format_range(item) == "Winter through Spring (95%)"


def test_format_ranges_orders_by_score():
    """Higher scoring ranges come first regardless of build order."""
    ranges = [
        CyclicRange(start="Summer", end="Summer", score=75, members=["Summer"]),
        CyclicRange(start="Winter", end="Spring", score=95, members=["Winter", "Spring"], wraparound=True),
        CyclicRange(start="Early Autumn", end="Autumn", score=80, members=["Early Autumn", "Autumn"]),
    ]

    assert format_ranges(ranges) == "Winter through Spring (95%), Early Autumn to Autumn (80%), Summer (75%)"
