"""Tests for the score map, normalizer and selector."""

from tea_lens.scoring import ScoreMap, normalize, round_half_up, select
from tea_lens.scoring.score_map import NO_PREFERENCE


def test_adjust_known_candidate_records_trace():
    scores = ScoreMap(["A", "B"], baseline=50)

    assert scores.adjust("A", 10, step="rule", reason="why")

    assert scores["A"] == 60
    assert scores["B"] == 50
    assert len(scores.trace) == 1
    entry = scores.trace[0]
    assert (entry.step, entry.candidate, entry.delta, entry.value, entry.reason) == ("rule", "A", 10, 60, "why")


def test_adjust_unknown_candidate_is_noop():
    scores = ScoreMap(["A"], baseline=50)

    assert not scores.adjust("Z", 10)

    assert "Z" not in scores
    assert len(scores) == 1
    assert not scores.adjusted


def test_normalize_rescales_to_min_max():
    result = normalize({"A": 10, "B": 20, "C": 15})

    assert result == {"A": 0, "B": 100, "C": 50}


def test_normalize_keeps_key_set_and_bounds():
    raw = {"A": -40, "B": 3.3, "C": 77, "D": 77}

    result = normalize(raw)

    assert set(result) == set(raw)
    assert all(0 <= value <= 100 for value in result.values())
    assert result["C"] == 100


def test_normalize_flat_positive_maps_to_100():
    assert normalize({"A": 50, "B": 50}) == {"A": 100, "B": 100}


def test_normalize_flat_non_positive_maps_to_0():
    assert normalize({"A": 0, "B": 0}) == {"A": 0, "B": 0}
    assert normalize({"A": -5}) == {"A": 0}


def test_normalize_empty_returns_sentinel():
    assert normalize({}, sentinel="Anytime") == {"Anytime": 50}


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.49) == 2


def test_select_applies_both_thresholds():
    normalized = {"A": 100, "B": 85, "C": 70, "D": 60}

    result = select(normalized, absolute_threshold=65, relative_threshold=20)

    assert [item.name for item in result] == ["A", "B"]


def test_select_falls_back_to_top_candidate():
    normalized = {"A": 40, "B": 30}

    result = select(normalized, absolute_threshold=65, relative_threshold=20)

    assert [(item.name, item.score) for item in result] == [("A", 40)]


def test_select_ties_keep_insertion_order_and_truncate():
    normalized = {"A": 90, "B": 100, "C": 100, "D": 100}

    result = select(normalized, absolute_threshold=0, relative_threshold=10, max_count=2)

    assert [item.name for item in result] == ["B", "C"]


def test_select_empty_returns_sentinel():
    result = select({}, 65, 20)

    assert [(item.name, item.score) for item in result] == [(NO_PREFERENCE, 50)]
