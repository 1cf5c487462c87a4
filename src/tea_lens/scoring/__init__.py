"""Shared scoring utilities: categorizer, score map, selection, clusters, ranges."""

from tea_lens.scoring.clusters import Group, build_clusters
from tea_lens.scoring.cyclic import WrapRule, build_cyclic_ranges, format_range, format_ranges
from tea_lens.scoring.levels import level_to_int
from tea_lens.scoring.ordered import OrderedSet, round_half_up, unique
from tea_lens.scoring.score_map import ScoreMap, normalize, rank, select
from tea_lens.scoring.thresholds import Bucket, buckets_are_contiguous, categorize

__all__ = [
    "Bucket",
    "Group",
    "OrderedSet",
    "ScoreMap",
    "WrapRule",
    "build_clusters",
    "build_cyclic_ranges",
    "buckets_are_contiguous",
    "categorize",
    "format_range",
    "format_ranges",
    "level_to_int",
    "normalize",
    "rank",
    "round_half_up",
    "select",
    "unique",
]
