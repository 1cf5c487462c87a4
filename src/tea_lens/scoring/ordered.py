"""Order-preserving helpers shared by calculators and matchers."""

from __future__ import annotations

import math
from typing import Iterable, Iterator


class OrderedSet:
    """Insertion-ordered set of strings; first-seen order wins."""

    def __init__(self, values: Iterable[str] = ()):
        self._items: dict[str, None] = {}
        self.update(values)

    def add(self, value: str) -> None:
        if value:
            self._items.setdefault(value, None)

    def update(self, values: Iterable[str]) -> None:
        for value in values:
            self.add(value)

    def to_list(self) -> list[str]:
        return list(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


def unique(values: Iterable[str]) -> list[str]:
    return OrderedSet(values).to_list()


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up."""
    return int(math.floor(value + 0.5))
