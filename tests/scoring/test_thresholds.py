"""Tests for the threshold categorizer."""

import math

from tea_lens.scoring import Bucket, buckets_are_contiguous, categorize

BUCKETS = [
    Bucket("Low", 0, 10),
    Bucket("Medium", 10, 20),
    Bucket("High", 20),
]


def test_lower_bound_inclusive_upper_exclusive():
    assert categorize(0, BUCKETS) == "Low"
    assert categorize(9.99, BUCKETS) == "Low"
    assert categorize(10, BUCKETS) == "Medium"


def test_unbounded_bucket_accepts_everything_above():
    assert categorize(20, BUCKETS) == "High"
    assert categorize(1e9, BUCKETS) == "High"


def test_value_below_table_is_outside_ranges():
    assert categorize(-1, BUCKETS) == "Outside Defined Ranges"


def test_invalid_values_are_unknown():
    """None, bool, NaN and strings are not measurements."""
    assert categorize(None, BUCKETS) == "Unknown"
    assert categorize(True, BUCKETS) == "Unknown"
    assert categorize(math.nan, BUCKETS) == "Unknown"
    assert categorize("12", BUCKETS) == "Unknown"


def test_categorize_is_monotonic():
    order = [bucket.label for bucket in BUCKETS]
    values = [x / 2 for x in range(0, 60)]
    positions = [order.index(categorize(value, BUCKETS)) for value in values]
    assert positions == sorted(positions)


def test_buckets_are_contiguous():
    assert buckets_are_contiguous(BUCKETS)
    assert not buckets_are_contiguous([Bucket("A", 0, 10), Bucket("B", 11, 20)])
    assert not buckets_are_contiguous([Bucket("A", 0, 10), Bucket("B", 5, 20)])
    assert not buckets_are_contiguous([])
