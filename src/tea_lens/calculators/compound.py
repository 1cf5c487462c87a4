"""Caffeine / L-theanine interpretation."""

from __future__ import annotations

from tea_lens.calculators.base import BaseCalculator
from tea_lens.schema import Tea
from tea_lens.scoring.levels import is_smoothed
from tea_lens.scoring.thresholds import is_number
from tea_lens.types import CompoundAnalysis, CompoundLevels

NO_DATA = "No significant caffeine or L-theanine data available."

THEANINE_DOMINANT = "Theanine Dominant (>=2.0)"
THEANINE_LEANING = "Theanine Leaning (1.5 to <2.0)"
BALANCED = "Balanced (0.8-1.5)"
CAFFEINE_LEANING = "Caffeine Leaning (0.5-0.8)"
CAFFEINE_DOMINANT = "Caffeine Dominant (<0.5)"

# (upper bound inclusive, label); anything above the last bound is "Very High".
LEVEL_CUTOFFS = [
    (0.0, "None"),
    (1.5, "Very Low"),
    (3.5, "Low"),
    (5.5, "Moderate"),
    (7.5, "High"),
]

# Stimulation label -> theanine level at which it counts as smoothed.
SMOOTHING_THRESHOLDS = {
    "High": 5.5,
    "Very High": 7.5,
}

_LOW_LEVELS = {"None", "Very Low"}


def level_label(value: float) -> str:
    for upper, label in LEVEL_CUTOFFS:
        if value <= upper:
            return label
    return "Very High"


def ratio_category(ratio: float) -> str:
    if ratio <= 0:
        return "N/A"
    if ratio >= 2.0:
        return THEANINE_DOMINANT
    if ratio >= 1.5:
        return THEANINE_LEANING
    if ratio >= 0.8:
        return BALANCED
    if ratio >= 0.5:
        return CAFFEINE_LEANING
    return CAFFEINE_DOMINANT


def stimulation_label(caffeine: float, theanine: float) -> str:
    label = level_label(caffeine)
    threshold = SMOOTHING_THRESHOLDS.get(label)
    if threshold is not None and theanine >= threshold:
        return f"{label} (Smooth)"
    return label


def compound_profile(category: str, stimulation: str, relaxation: str, caffeine: float, theanine: float) -> str:
    if category == THEANINE_DOMINANT:
        return "Deeply Calm" if stimulation in _LOW_LEVELS else "Calm & Clear"
    if category == THEANINE_LEANING:
        return "Smooth & Alert" if is_smoothed(stimulation) else "Smooth & Sustained"
    if category == BALANCED:
        return "Balanced & Focused"
    if category == CAFFEINE_LEANING:
        return "Sharp & Driven" if relaxation in _LOW_LEVELS else "Focused & Energized"
    if category == CAFFEINE_DOMINANT:
        return "Intense & Sharp"
    if caffeine > theanine:
        return "Primarily Stimulating"
    if theanine > caffeine:
        return "Primarily Relaxing"
    return "Variable"


class CompoundCalculator(BaseCalculator):
    """Interprets caffeine and L-theanine levels (0-10 scale)."""

    def analyze(self, tea: Tea) -> CompoundAnalysis:
        caffeine = _level(tea.caffeine_level)
        theanine = _level(tea.l_theanine_level)
        if caffeine == 0 and theanine == 0:
            return CompoundAnalysis(description=NO_DATA)

        ratio = theanine / caffeine if caffeine > 0 else 0.0
        category = ratio_category(ratio)
        stimulation = stimulation_label(caffeine, theanine)
        relaxation = level_label(theanine)
        profile = compound_profile(category, stimulation, relaxation, caffeine, theanine)

        return CompoundAnalysis(
            description=_describe(tea.type, category, stimulation, relaxation, profile),
            levels=CompoundLevels(
                caffeine_level=caffeine,
                l_theanine_level=theanine,
                ratio=round(ratio, 2),
            ),
            ratio_category=category,
            stimulation_level=stimulation,
            relaxation_level=relaxation,
            compound_profile=profile,
        )


def _level(value: float | None) -> float:
    if not is_number(value):
        return 0.0
    return max(0.0, float(value))


def _describe(tea_type: str | None, category: str, stimulation: str, relaxation: str, profile: str) -> str:
    subject = tea_type or "tea"
    parts = [f"This {subject} has a {stimulation.lower()} stimulation level and a {relaxation.lower()} relaxation level."]
    if category != "N/A":
        parts.append(f"Its L-theanine to caffeine ratio is {category}.")
    parts.append(f"Overall the compound profile is '{profile}'.")
    return " ".join(parts)
