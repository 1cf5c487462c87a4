"""Contiguous high-scoring runs over cyclic orderings (seasons, times of day)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Sequence

from tea_lens.scoring.ordered import round_half_up
from tea_lens.types import CyclicRange

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WrapRule:
    """Labels that let a leading and a trailing run merge across the boundary.

    A first run starting at one of ``start_labels`` is joined to a last run
    ending at one of ``end_labels`` even when the two are not adjacent.
    """

    start_labels: frozenset[str]
    end_labels: frozenset[str]


class _MergeAborted(Exception):
    pass


def build_cyclic_ranges(
    normalized: Mapping[str, int],
    ordering: Sequence[str],
    threshold: float,
    wrap_rule: WrapRule | None = None,
) -> list[CyclicRange]:
    """Partition the ordering's qualifying labels into contiguous runs.

    A run touching the end of the ordering and a run touching its start are
    merged into one wraparound run. ``wrap_rule`` widens that merge to the
    label sets it names.
    """
    runs = _linear_runs(normalized, ordering, threshold)
    ranges = [_to_range(normalized, [ordering[p] for p in run]) for run in runs]
    if len(runs) < 2:
        return ranges

    first, last = runs[0], runs[-1]
    length = len(ordering)
    first_label, last_label = ordering[first[0]], ordering[last[-1]]
    joins_boundary = first[0] == 0 and last[-1] == length - 1
    matches_rule = (
        wrap_rule is not None
        and first_label in wrap_rule.start_labels
        and last_label in wrap_rule.end_labels
    )
    if not (joins_boundary or matches_rule):
        return ranges

    try:
        members = _walk(ordering, ordering[last[0]], ordering[last[-1]])
        for label in _walk(ordering, ordering[first[0]], ordering[first[-1]]):
            if label not in members:
                members.append(label)
    except _MergeAborted as exc:
        logger.debug("wraparound merge skipped: %s", exc)
        return ranges

    merged = _to_range(
        normalized,
        members,
        start=ordering[last[0]],
        end=ordering[first[-1]],
        wraparound=True,
    )
    return ranges[1:-1] + [merged]


def format_range(item: CyclicRange) -> str:
    if item.start == item.end and not item.wraparound:
        return f"{item.start} ({item.score}%)"
    joiner = "through" if item.wraparound else "to"
    return f"{item.start} {joiner} {item.end} ({item.score}%)"


def format_ranges(ranges: Sequence[CyclicRange], empty: str = "No specific range recommended") -> str:
    """Join ranges into one phrase, highest scoring first."""
    if not ranges:
        return empty
    ordered = sorted(ranges, key=lambda item: item.score, reverse=True)
    return ", ".join(format_range(item) for item in ordered)


def _linear_runs(
    normalized: Mapping[str, int],
    ordering: Sequence[str],
    threshold: float,
) -> list[list[int]]:
    runs: list[list[int]] = []
    current: list[int] = []
    for position, label in enumerate(ordering):
        score = normalized.get(label)
        if score is None or score < threshold:
            continue
        if current and current[-1] == position - 1:
            current.append(position)
            continue
        if current:
            runs.append(current)
        current = [position]
    if current:
        runs.append(current)
    return runs


def _walk(ordering: Sequence[str], start: str, end: str) -> list[str]:
    """Labels from ``start`` to ``end`` inclusive, stepping cyclically."""
    try:
        index = list(ordering).index(start)
        end_index = list(ordering).index(end)
    except ValueError as exc:
        raise _MergeAborted(f"label missing from ordering: {exc}") from exc

    length = len(ordering)
    cap = 2 * length
    labels: list[str] = []
    steps = 0
    while True:
        label = ordering[index]
        if label not in labels:
            labels.append(label)
        if index == end_index:
            return labels
        index = (index + 1) % length
        steps += 1
        if steps >= cap:
            raise _MergeAborted(f"iteration cap {cap} reached walking {start!r} -> {end!r}")


def _to_range(
    normalized: Mapping[str, int],
    labels: list[str],
    *,
    start: str | None = None,
    end: str | None = None,
    wraparound: bool = False,
) -> CyclicRange:
    total = sum(normalized.get(label, 0) for label in labels)
    return CyclicRange(
        start=start or labels[0],
        end=end or labels[-1],
        score=round_half_up(total / len(labels)),
        members=labels,
        wraparound=wraparound,
    )
