"""Shared mapping from level labels to small integers."""

from __future__ import annotations

DEFAULT_LEVEL = 3

# Labels missing here, smoothed ones included, map to the default.
LEVEL_SCALE: dict[str, int] = {
    "none": 0,
    "very low": 1,
    "low": 2,
    "moderate": 3,
    "medium": 3,
    "medium-high": 4,
    "moderate-high": 4,
    "high": 4,
    "very high": 5,
}


def level_to_int(label: str | None, default: int = DEFAULT_LEVEL) -> int:
    if not label:
        return default
    return LEVEL_SCALE.get(label.strip().lower(), default)


def is_smoothed(label: str | None) -> bool:
    return bool(label) and label.strip().lower().endswith("(smooth)")
