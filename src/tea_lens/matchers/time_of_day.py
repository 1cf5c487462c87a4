"""Time-of-day recommendations."""

from __future__ import annotations

import re

from tea_lens.config import TIME_DEFAULTS
from tea_lens.matchers.base import BaseMatcher, Rule
from tea_lens.reference import CandidateRegistry
from tea_lens.scoring.cyclic import build_cyclic_ranges, format_ranges
from tea_lens.scoring.levels import level_to_int
from tea_lens.scoring.score_map import normalize
from tea_lens.types import CompoundAnalysis, TeaTypeAnalysis, TimeMatch

ANYTIME = "Anytime"

_BALANCED: list[Rule] = [("Morning", 10), ("Midday", 15), ("Afternoon", 15), ("Evening", 5)]
_CALM: list[Rule] = [("Morning", -10), ("Midday", 10), ("Afternoon", 25), ("Evening", 30), ("Night", 10)]

PROFILE_RULES: dict[str, list[Rule]] = {
    "Intense & Sharp": [
        ("Early Morning", 25),
        ("Morning", 35),
        ("Midday", 15),
        ("Evening", -20),
        ("Night", -30),
    ],
    "Focused & Energized": [
        ("Morning", 30),
        ("Midday", 25),
        ("Afternoon", 15),
        ("Evening", -15),
        ("Night", -25),
    ],
    "Balanced & Focused": _BALANCED,
    "Calm & Clear": _CALM,
    "Smooth & Sustained": _CALM,
    "Deeply Calm": [
        ("Morning", -30),
        ("Midday", -10),
        ("Afternoon", 15),
        ("Evening", 35),
        ("Night", 30),
    ],
}
DEFAULT_PROFILE_RULES: list[Rule] = [("Afternoon", 5), ("Morning", 5)]

HIGH_STIMULATION_RULES: list[Rule] = [
    ("Early Morning", 15),
    ("Morning", 20),
    ("Midday", 10),
    ("Evening", -25),
    ("Night", -35),
]
LOW_STIMULATION_RULES: list[Rule] = [("Morning", -15), ("Afternoon", 10), ("Evening", 15), ("Night", 10)]

HIGH_RELAXATION_RULES: list[Rule] = [
    ("Afternoon", 10),
    ("Evening", 25),
    ("Night", 20),
    ("Early Morning", -20),
    ("Morning", -15),
]
LOW_RELAXATION_RULES: list[Rule] = [("Evening", -15), ("Night", -20)]

HIGH_CAFFEINE_RULES: list[Rule] = [
    ("Early Morning", 10),
    ("Morning", 15),
    ("Midday", 5),
    ("Evening", -30),
    ("Night", -40),
]
LOW_CAFFEINE_RULES: list[Rule] = [("Afternoon", 10), ("Evening", 15), ("Night", 15)]

BREAKFAST_RULES: list[Rule] = [("Early Morning", 15), ("Morning", 15)]
GREEN_RULES: list[Rule] = [("Morning", 10), ("Midday", 5), ("Afternoon", 5), ("Evening", -5)]
WHITE_RULES: list[Rule] = [("Afternoon", 10), ("Evening", 5)]
HERBAL_RULES: list[Rule] = [("Evening", 15), ("Night", 15)]
SHADE_GROWN_RULES: list[Rule] = [("Evening", -20), ("Night", -25), ("Afternoon", 10)]
RIPE_PUERH_RULES: list[Rule] = [("Afternoon", 10)]


class TimeMatcher(BaseMatcher):
    """Scores the six periods of the day from compounds and tea type."""

    default_config = TIME_DEFAULTS

    @property
    def registry(self) -> CandidateRegistry:
        return self.reference.times

    def match(
        self,
        compounds: CompoundAnalysis,
        tea_type: TeaTypeAnalysis,
        *,
        tea_name: str | None = None,
    ) -> TimeMatch:
        scores = self.new_scores()

        profile = compounds.compound_profile
        self.apply(scores, PROFILE_RULES.get(profile, DEFAULT_PROFILE_RULES), step="compound profile", reason=profile)

        stimulation = level_to_int(compounds.stimulation_level)
        if stimulation >= 4:
            self.apply(scores, HIGH_STIMULATION_RULES, step="stimulation level", reason=compounds.stimulation_level)
        elif stimulation <= 1:
            self.apply(scores, LOW_STIMULATION_RULES, step="stimulation level", reason=compounds.stimulation_level)

        relaxation = level_to_int(compounds.relaxation_level)
        if relaxation >= 4:
            self.apply(scores, HIGH_RELAXATION_RULES, step="relaxation level", reason=compounds.relaxation_level)
        elif relaxation <= 1:
            self.apply(scores, LOW_RELAXATION_RULES, step="relaxation level", reason=compounds.relaxation_level)

        caffeine = tea_type.typical_caffeine.lower()
        if "high" in caffeine:
            self.apply(scores, HIGH_CAFFEINE_RULES, step="typical caffeine", reason=tea_type.typical_caffeine)
        elif "low" in caffeine or "none" in caffeine:
            self.apply(scores, LOW_CAFFEINE_RULES, step="typical caffeine", reason=tea_type.typical_caffeine)

        for rules, reason in type_rules(tea_type):
            self.apply(scores, rules, step="tea type", reason=reason)

        normalized = normalize(scores, sentinel=ANYTIME)
        recommended = self.recommend(normalized, ANYTIME)
        ranges = build_cyclic_ranges(normalized, self.registry.names, self.config.group_threshold)

        subject = tea_name or "This tea"
        if ranges:
            description = f"{subject} is best enjoyed in the {format_ranges(ranges)}."
        else:
            description = f"{subject} can be enjoyed {', '.join(item.name.lower() for item in recommended)}."

        return TimeMatch(
            scores=normalized,
            recommended=recommended,
            ideal_ranges=ranges,
            description=description,
            trace=scores.trace,
        )


def type_rules(tea_type: TeaTypeAnalysis) -> list[tuple[list[Rule], str]]:
    """Keyword rules triggered by the primary type and sub-type."""
    label = f"{tea_type.primary_type} {tea_type.sub_type or ''}".lower()
    words = set(re.findall(r"[a-z]+", label))
    matched: list[tuple[list[Rule], str]] = []
    if words & {"black", "breakfast", "assam"}:
        matched.append((BREAKFAST_RULES, "black / breakfast tea"))
    if "green" in words and "hojicha" not in words:
        matched.append((GREEN_RULES, "green tea"))
    if "white" in words:
        matched.append((WHITE_RULES, "white tea"))
    if words & {"herbal", "tisane", "hojicha", "chamomile", "lavender"}:
        matched.append((HERBAL_RULES, "herbal / low caffeine"))
    if words & {"gyokuro", "matcha"}:
        matched.append((SHADE_GROWN_RULES, "shade-grown green tea"))
    if "puerh" in words and words & {"shou", "ripe"}:
        matched.append((RIPE_PUERH_RULES, "ripe puerh"))
    return matched
