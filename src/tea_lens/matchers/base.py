"""Shared matcher plumbing: score seeding, rule application, selection."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Sequence

from tea_lens.config import MatcherConfig
from tea_lens.reference import CandidateRegistry, ReferenceData, load_reference_data
from tea_lens.scoring.score_map import ScoreMap, select
from tea_lens.types import ScoredCandidate

Rule = tuple[str, float]


class BaseMatcher(ABC):
    """Seeds a score map over one registry and applies rule tables to it."""

    default_config = MatcherConfig()

    def __init__(self, config: MatcherConfig | None = None, reference: ReferenceData | None = None):
        self.config = config or self.default_config
        self.reference = reference or load_reference_data()

    @property
    @abstractmethod
    def registry(self) -> CandidateRegistry:
        """Canonical candidates this matcher scores."""

    def new_scores(self) -> ScoreMap:
        return ScoreMap(self.registry, baseline=self.config.baseline)

    def apply(self, scores: ScoreMap, rules: Iterable[Rule], *, step: str, reason: str | None = None) -> None:
        for name, delta in rules:
            scores.adjust(name, delta, step=step, reason=reason)

    def recommend(self, normalized: dict[str, int], sentinel: str) -> list[ScoredCandidate]:
        return select(
            normalized,
            self.config.absolute_threshold,
            self.config.relative_threshold,
            self.config.max_recommendations,
            sentinel=sentinel,
        )


def join_scored(items: Sequence[ScoredCandidate]) -> str:
    """"a (90% match)", "a (90%) and b (80%)" or "a (90%), b (80%), and c (70%)"."""
    if len(items) == 1:
        return f"{items[0].name.lower()} ({items[0].score}% match)"
    parts = [f"{item.name.lower()} ({item.score}%)" for item in items]
    if len(parts) == 2:
        return f"{parts[0]} and {parts[1]}"
    return f"{', '.join(parts[:-1])}, and {parts[-1]}"
