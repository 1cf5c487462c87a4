"""Flavor-note interpretation."""

from __future__ import annotations

import logging
import re

from tea_lens.calculators.base import BaseCalculator
from tea_lens.reference import FlavorRecord
from tea_lens.schema import Tea
from tea_lens.scoring.ordered import OrderedSet, unique
from tea_lens.types import FlavorAnalysis

logger = logging.getLogger(__name__)

NO_DATA = "No flavor profile available."
DOMINANT_COUNT = 3


def normalize_note(note: str) -> str:
    return (note or "").strip().lower()


def intensity(count: int) -> str:
    if count <= 0:
        return "N/A"
    if count <= 2:
        return "Subtle"
    if count <= 4:
        return "Moderate"
    return "Pronounced"


class FlavorCalculator(BaseCalculator):
    """Maps flavor notes onto categories and pairing hints."""

    def analyze(self, tea: Tea) -> FlavorAnalysis:
        notes = unique(normalize_note(note) for note in tea.flavor_profile)
        if not notes:
            return FlavorAnalysis(description=NO_DATA)

        categories = OrderedSet()
        food = OrderedSet()
        seasons = OrderedSet()
        activities = OrderedSet()
        unmatched: list[str] = []

        for note in notes:
            record = self.lookup(note)
            if record is None:
                logger.debug("no flavor reference for note %r", note)
                unmatched.append(note)
            else:
                categories.add(record.category)
                food.update(record.food)
                seasons.update(record.seasons)
                activities.update(record.activities)
            categories.update(self.categories_for(note))

        level = intensity(len(notes))
        dominant = notes[:DOMINANT_COUNT]
        category_list = categories.to_list()
        return FlavorAnalysis(
            description=_describe(level, dominant, category_list, len(notes)),
            identified_flavors=notes,
            dominant_flavors=dominant,
            dominant_categories=category_list,
            intensity=level,
            food_pairing_hints=food.to_list(),
            seasonal_affinity_hints=seasons.to_list(),
            activity_hints=activities.to_list(),
            unmatched_flavors=unmatched,
        )

    def lookup(self, note: str) -> FlavorRecord | None:
        """Sub-category key, then associated flavors, then category defaults."""
        key = normalize_note(note)
        categories = self.reference.flavor_categories
        for category in categories:
            for record in category.notes:
                if record.key == key:
                    return record
        for category in categories:
            for record in category.notes:
                if key in record.associated:
                    return record
        for category in categories:
            if key in {category.key, category.label.lower()}:
                if category.defaults is None:
                    return FlavorRecord(key=category.key, category=category.label)
                return category.defaults
        return None

    def categories_for(self, note: str) -> list[str]:
        key = normalize_note(note)
        return [
            category.label
            for category in self.reference.flavor_categories
            if any(re.search(rf"\b{re.escape(keyword)}\b", key) for keyword in category.keywords)
        ]


def _describe(level: str, dominant: list[str], categories: list[str], count: int) -> str:
    parts = [f"The flavor profile is perceived as '{level.lower()}'."]
    parts.append(f"Dominant notes include {', '.join(dominant)}.")
    if categories:
        parts.append(f"Overall, it falls into the following flavor categories: {', '.join(categories)}.")
    parts.append(f"Contains {count} distinct flavor notes provided.")
    return " ".join(parts)
