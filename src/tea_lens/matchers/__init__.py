"""Recommendation matchers for tea-lens."""

from tea_lens.matchers.activity import ActivityMatcher
from tea_lens.matchers.base import BaseMatcher
from tea_lens.matchers.brewing import BrewingMatcher
from tea_lens.matchers.food import FoodMatcher
from tea_lens.matchers.season import SeasonMatcher
from tea_lens.matchers.time_of_day import TimeMatcher

__all__ = [
    "ActivityMatcher",
    "BaseMatcher",
    "BrewingMatcher",
    "FoodMatcher",
    "SeasonMatcher",
    "TimeMatcher",
]
