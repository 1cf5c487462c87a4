"""Matcher thresholds with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

ENV_PREFIX = "TEA_LENS"


def _safe_int(value: str | None, default: int | None) -> int | None:
    if value is None or not value.strip():
        return default
    if value.strip().lower() in {"none", "off"}:
        return None
    try:
        return int(value)
    except ValueError:
        return default


def _safe_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class MatcherConfig:
    absolute_threshold: float = 0.0
    relative_threshold: float = 10.0
    group_threshold: float = 70.0
    min_group_members: int = 1
    max_recommendations: int | None = None
    baseline: float = 50.0

    @classmethod
    def from_env(cls, name: str, default: "MatcherConfig | None" = None) -> "MatcherConfig":
        """Read ``TEA_LENS_<NAME>_<FIELD>`` overrides on top of ``default``."""
        base = default or cls()
        prefix = f"{ENV_PREFIX}_{name.upper()}_"
        min_members = _safe_int(os.getenv(prefix + "MIN_GROUP_MEMBERS"), base.min_group_members)
        return cls(
            absolute_threshold=_safe_float(os.getenv(prefix + "ABSOLUTE_THRESHOLD"), base.absolute_threshold),
            relative_threshold=_safe_float(os.getenv(prefix + "RELATIVE_THRESHOLD"), base.relative_threshold),
            group_threshold=_safe_float(os.getenv(prefix + "GROUP_THRESHOLD"), base.group_threshold),
            min_group_members=base.min_group_members if min_members is None else min_members,
            max_recommendations=_safe_int(os.getenv(prefix + "MAX_RECOMMENDATIONS"), base.max_recommendations),
            baseline=_safe_float(os.getenv(prefix + "BASELINE"), base.baseline),
        )


SEASON_DEFAULTS = MatcherConfig(absolute_threshold=0, relative_threshold=10, group_threshold=70)
TIME_DEFAULTS = MatcherConfig(absolute_threshold=65, relative_threshold=20, group_threshold=70)
ACTIVITY_DEFAULTS = MatcherConfig(
    absolute_threshold=65,
    relative_threshold=20,
    group_threshold=80,
    min_group_members=1,
    max_recommendations=3,
)
FOOD_DEFAULTS = MatcherConfig(
    absolute_threshold=0,
    relative_threshold=10,
    group_threshold=70,
    min_group_members=2,
    max_recommendations=5,
    baseline=0,
)


@dataclass(frozen=True)
class EngineConfig:
    season: MatcherConfig = field(default_factory=lambda: SEASON_DEFAULTS)
    time_of_day: MatcherConfig = field(default_factory=lambda: TIME_DEFAULTS)
    activity: MatcherConfig = field(default_factory=lambda: ACTIVITY_DEFAULTS)
    food: MatcherConfig = field(default_factory=lambda: FOOD_DEFAULTS)

    @classmethod
    def from_env(cls) -> "EngineConfig":
        return cls(
            season=MatcherConfig.from_env("season", SEASON_DEFAULTS),
            time_of_day=MatcherConfig.from_env("time", TIME_DEFAULTS),
            activity=MatcherConfig.from_env("activity", ACTIVITY_DEFAULTS),
            food=MatcherConfig.from_env("food", FOOD_DEFAULTS),
        )
