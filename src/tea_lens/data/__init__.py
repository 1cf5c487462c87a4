"""Packaged reference tables for tea-lens."""

from tea_lens.data.brewing import BREWING_RULES, BREWING_STYLES, BREWING_TYPE_ALIASES, PROCESSING_KEYWORD_ALIASES
from tea_lens.data.candidates import (
    ACTIVITY_CLUSTERS,
    ACTIVITY_EXTRAS,
    ACTIVITY_HINT_ALIASES,
    FOOD_CLUSTERS,
    FOOD_EXTRAS,
    SEASON_WRAP_END,
    SEASON_WRAP_START,
    SEASONS,
    SIMPLIFIED_SEASONS,
    TIME_PERIODS,
)
from tea_lens.data.climate import (
    ELEVATION_LEVELS,
    HUMIDITY_LEVELS,
    LATITUDE_ZONES,
    SOLAR_RADIATION_LEVELS,
    TEMPERATURE_LEVELS,
)
from tea_lens.data.flavors import FLAVOR_CATEGORIES
from tea_lens.data.processing import PROCESSING_METHODS
from tea_lens.data.regions import REGIONS
from tea_lens.data.seasons import HARVEST_MONTHS, SEASONAL_PROFILES
from tea_lens.data.tea_types import TEA_TYPES, TYPE_ALIASES

__all__ = [
    "ACTIVITY_CLUSTERS",
    "ACTIVITY_EXTRAS",
    "ACTIVITY_HINT_ALIASES",
    "BREWING_RULES",
    "BREWING_STYLES",
    "BREWING_TYPE_ALIASES",
    "ELEVATION_LEVELS",
    "FLAVOR_CATEGORIES",
    "FOOD_CLUSTERS",
    "FOOD_EXTRAS",
    "HARVEST_MONTHS",
    "HUMIDITY_LEVELS",
    "LATITUDE_ZONES",
    "PROCESSING_KEYWORD_ALIASES",
    "PROCESSING_METHODS",
    "REGIONS",
    "SEASONAL_PROFILES",
    "SEASON_WRAP_END",
    "SEASON_WRAP_START",
    "SEASONS",
    "SIMPLIFIED_SEASONS",
    "SOLAR_RADIATION_LEVELS",
    "TEA_TYPES",
    "TEMPERATURE_LEVELS",
    "TIME_PERIODS",
    "TYPE_ALIASES",
]
