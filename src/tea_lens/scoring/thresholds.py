"""Threshold categorizer for numeric measurements."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

UNKNOWN = "Unknown"
OUTSIDE_RANGES = "Outside Defined Ranges"


@dataclass(frozen=True)
class Bucket:
    """Half-open ``[min, max)`` range; ``max=math.inf`` means "and above"."""

    label: str
    min: float
    max: float = math.inf

    def contains(self, value: float) -> bool:
        if math.isinf(self.max):
            return value >= self.min
        return self.min <= value < self.max


def is_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def categorize(value: object, buckets: Sequence[Bucket]) -> str:
    """Return the label of the first bucket containing ``value``."""
    if not is_number(value):
        return UNKNOWN
    for bucket in buckets:
        if bucket.contains(value):  # type: ignore[arg-type]
            return bucket.label
    return OUTSIDE_RANGES


def buckets_are_contiguous(buckets: Sequence[Bucket]) -> bool:
    """True when each bucket starts where the previous one ended."""
    if not buckets:
        return False
    for previous, current in zip(buckets, buckets[1:]):
        if previous.max != current.min:
            return False
    return all(bucket.min < bucket.max for bucket in buckets)
