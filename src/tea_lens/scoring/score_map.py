"""Additive score map, min/max normalizer and threshold selector."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Mapping

from tea_lens.scoring.ordered import round_half_up
from tea_lens.types import ScoreAdjustment, ScoredCandidate

logger = logging.getLogger(__name__)

NO_PREFERENCE = "No Strong Preference"
SENTINEL_SCORE = 50


class ScoreMap:
    """Name -> score mapping over a fixed candidate universe.

    Entries are seeded once at construction. ``adjust`` only ever adds to
    existing entries, and every applied adjustment is appended to ``trace``.
    """

    def __init__(self, candidates: Iterable[str], baseline: float = 0.0):
        self._scores: dict[str, float] = {}
        for name in candidates:
            self._scores.setdefault(name, float(baseline))
        self.baseline = float(baseline)
        self.trace: list[ScoreAdjustment] = []

    def adjust(
        self,
        name: str,
        delta: float,
        *,
        step: str = "adjustment",
        reason: str | None = None,
    ) -> bool:
        """Add ``delta`` to ``name``. Unknown names are ignored."""
        if name not in self._scores:
            logger.debug("ignoring adjustment for unknown candidate %r (%s)", name, step)
            return False
        self._scores[name] += delta
        self.trace.append(
            ScoreAdjustment(
                step=step,
                candidate=name,
                delta=delta,
                value=self._scores[name],
                reason=reason,
            )
        )
        return True

    @property
    def adjusted(self) -> bool:
        return bool(self.trace)

    def as_dict(self) -> dict[str, float]:
        return dict(self._scores)

    def __getitem__(self, name: str) -> float:
        return self._scores[name]

    def __contains__(self, name: object) -> bool:
        return name in self._scores

    def __iter__(self) -> Iterator[str]:
        return iter(self._scores)

    def __len__(self) -> int:
        return len(self._scores)


def normalize(
    scores: ScoreMap | Mapping[str, float],
    *,
    sentinel: str = NO_PREFERENCE,
) -> dict[str, int]:
    """Rescale scores to 0-100 using the observed min and max."""
    raw = scores.as_dict() if isinstance(scores, ScoreMap) else dict(scores)
    if not raw:
        return {sentinel: SENTINEL_SCORE}

    high = max(raw.values())
    low = min(raw.values())
    result: dict[str, int] = {}
    for name, score in raw.items():
        if high > low:
            value = round_half_up((score - low) / (high - low) * 100)
        elif high > 0:
            value = 100
        else:
            value = 0
        result[name] = max(0, min(100, value))
    return result


def rank(normalized: Mapping[str, int]) -> list[ScoredCandidate]:
    """Candidates by score descending; ties keep insertion order."""
    ordered = sorted(normalized.items(), key=lambda item: item[1], reverse=True)
    return [ScoredCandidate(name=name, score=score) for name, score in ordered]


def select(
    normalized: Mapping[str, int],
    absolute_threshold: float,
    relative_threshold: float,
    max_count: int | None = None,
    *,
    sentinel: str = NO_PREFERENCE,
) -> list[ScoredCandidate]:
    """Pick candidates clearing both the absolute and the relative threshold."""
    ranked = rank(normalized)
    if not ranked:
        return [ScoredCandidate(name=sentinel, score=SENTINEL_SCORE)]

    top = ranked[0].score
    chosen = [
        item
        for item in ranked
        if item.score >= absolute_threshold and item.score >= top - relative_threshold
    ]
    if not chosen:
        chosen = [ranked[0]]
    if max_count is not None and max_count > 0:
        chosen = chosen[:max_count]
    return chosen
