"""Processing-method interpretation."""

from __future__ import annotations

import logging

from tea_lens.calculators.base import BaseCalculator
from tea_lens.reference import MethodImpact
from tea_lens.schema import Tea
from tea_lens.scoring.ordered import OrderedSet
from tea_lens.scoring.thresholds import is_number
from tea_lens.types import ProcessingAnalysis

logger = logging.getLogger(__name__)

NO_DATA = "No processing data available."

# Checked in order against the joined, lowercased method list.
ROAST_MARKERS = [
    ("charcoal", "Charcoal"),
    ("heavy-roast", "Heavy"),
    ("medium-roast", "Medium"),
    ("light-roast", "Light"),
    ("minimal-roast", "Minimal"),
    ("roast", "Unknown Roast"),
]

TENDENCY_VALUES = {"cooling": -1, "neutral": 0, "warming": 1}


def roast_level(methods: list[str]) -> str:
    joined = " ".join(methods).lower()
    for marker, label in ROAST_MARKERS:
        if marker in joined:
            return label
    return "None"


class ProcessingCalculator(BaseCalculator):
    """Aggregates flavor, body and energetic impact of processing methods."""

    def analyze(self, tea: Tea) -> ProcessingAnalysis:
        processing = tea.processing
        methods = [m.strip() for m in (processing.methods if processing else []) if m and m.strip()]
        oxidation = processing.oxidation_level if processing else None
        if not is_number(oxidation):
            oxidation = None
        if not methods and oxidation is None:
            return ProcessingAnalysis(description=NO_DATA)

        flavor = OrderedSet()
        compound = OrderedSet()
        body = "Unchanged"
        alertness = "neutral"
        tendencies: list[int] = []
        unmatched: list[str] = []

        # Body and alertness: the last matched method wins, in input order.
        for method in methods:
            impact = self.lookup(method)
            if impact is None:
                logger.debug("no processing reference for method %r", method)
                unmatched.append(method)
                continue
            flavor.update(impact.flavor)
            compound.update(impact.compound)
            if impact.body:
                body = impact.body
            if impact.alertness:
                alertness = impact.alertness
            if impact.tendency in TENDENCY_VALUES:
                tendencies.append(TENDENCY_VALUES[impact.tendency])

        tendency = _tendency(tendencies, oxidation)
        roast = roast_level(methods)
        return ProcessingAnalysis(
            description=_describe(tea.type, methods, oxidation, roast, body, tendency),
            applied_methods=methods,
            oxidation_level=oxidation,
            roast_level=roast,
            flavor_impact=flavor.to_list(),
            body_impact=body,
            energetic_tendency=tendency,
            alertness_modifier=alertness,
            compound_notes=compound.to_list(),
            unmatched_methods=unmatched,
        )

    def lookup(self, method: str) -> MethodImpact | None:
        """Exact key first, then containment in either direction."""
        key = method.strip().lower()
        table = self.reference.processing_methods
        if key in table:
            return table[key]
        for name, impact in table.items():
            if name in key or key in name:
                return impact
        return None


def _tendency(values: list[int], oxidation: float | None) -> str:
    result = "neutral"
    if values:
        average = sum(values) / len(values)
        if average > 0.5:
            result = "warming"
        elif average < -0.5:
            result = "cooling"
    if oxidation is not None:
        if oxidation >= 70:
            result = "warming"
        elif 0 <= oxidation < 15:
            result = "cooling"
    return result


def _describe(
    tea_type: str | None,
    methods: list[str],
    oxidation: float | None,
    roast: str,
    body: str,
    tendency: str,
) -> str:
    subject = tea_type or "tea"
    parts = []
    if methods:
        parts.append(f"This {subject} was processed using {', '.join(methods)}.")
    else:
        parts.append(f"This {subject} has no recorded processing methods.")
    if oxidation is not None:
        parts.append(f"Oxidation level is {oxidation:g}%.")
    if roast not in {"None", "Unknown"}:
        parts.append(f"Roast level: {roast}.")
    parts.append(f"Body impact is {body.lower()} with a {tendency} energetic tendency.")
    return " ".join(parts)
