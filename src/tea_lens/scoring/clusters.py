"""Cluster builder over static grouping tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from tea_lens.scoring.ordered import round_half_up
from tea_lens.types import Cluster, ScoredCandidate


@dataclass(frozen=True)
class Group:
    label: str
    members: tuple[str, ...]


def build_clusters(
    normalized: Mapping[str, int],
    groups: Sequence[Group],
    threshold: float,
    min_members: int = 1,
) -> list[Cluster]:
    """Emit one cluster per group with enough members at or above ``threshold``."""
    clusters: list[Cluster] = []
    for group in groups:
        matching = [
            ScoredCandidate(name=name, score=normalized[name])
            for name in group.members
            if name in normalized and normalized[name] >= threshold
        ]
        if not matching or len(matching) < min_members:
            continue
        matching.sort(key=lambda item: item.score, reverse=True)
        score = round_half_up(sum(item.score for item in matching) / len(matching))
        clusters.append(Cluster(label=group.label, members=matching, score=score))

    clusters.sort(key=lambda cluster: cluster.score, reverse=True)
    return clusters
