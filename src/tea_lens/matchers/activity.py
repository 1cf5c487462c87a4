"""Activity recommendations grouped into themed clusters."""

from __future__ import annotations

import logging

from tea_lens.config import ACTIVITY_DEFAULTS
from tea_lens.matchers.base import BaseMatcher, Rule, join_scored
from tea_lens.reference import CandidateRegistry
from tea_lens.scoring.clusters import build_clusters
from tea_lens.scoring.levels import level_to_int
from tea_lens.scoring.score_map import ScoreMap, normalize
from tea_lens.types import ActivityMatch, CompoundAnalysis, FlavorAnalysis, TeaTypeAnalysis

logger = logging.getLogger(__name__)

GENERAL_ENJOYMENT = "General Enjoyment"
BASE_HINT_BONUS = 15
FLAVOR_HINT_BONUS = 25

_BALANCED: list[Rule] = [
    ("Social Gatherings", 15),
    ("Reading", 15),
    ("Light Exercise", 15),
    ("Everyday Activities", 15),
    ("Work", 5),
    ("High-Focus Work", -10),
]
_CALM: list[Rule] = [
    ("High-Focus Work", 25),
    ("Work", 20),
    ("Study", 20),
    ("Creative Projects", 15),
    ("Yoga", 20),
    ("Reading", 15),
    ("Gentle Stretching", 15),
    ("Contemplation", 20),
    ("Exercise", -15),
]
_RELAXING: list[Rule] = [
    ("Evening Wind-Down", 25),
    ("Reading Before Bed", 25),
    ("Relaxation", 25),
    ("Meditation", 20),
    ("Deep Breathing", 15),
    ("Exercise", -20),
    ("Active Outdoor Activities", -20),
    ("High-Focus Work", -15),
]

PROFILE_RULES: dict[str, list[Rule]] = {
    "Intense & Sharp": [
        ("Exercise", 25),
        ("Morning Routines", 25),
        ("Productivity Sessions", 15),
        ("Active Outdoor Activities", 15),
        ("High-Focus Work", 20),
        ("Meditation", -20),
        ("Relaxation", -20),
    ],
    "Focused & Energized": [
        ("Work", 25),
        ("Study", 25),
        ("Creative Projects", 20),
        ("Brainstorming", 15),
        ("Problem Solving", 15),
        ("Evening Wind-Down", -15),
        ("Sleep Preparation", -15),
    ],
    "Balanced & Focused": _BALANCED,
    "Calm & Clear": _CALM,
    "Smooth & Sustained": _CALM,
    "Deeply Calm": _RELAXING,
    "Primarily Relaxing": _RELAXING,
}
DEFAULT_PROFILE_RULES: list[Rule] = [("General Enjoyment", 5), ("Casual Sipping", 5)]

# Extra boosts for puerh under a balanced profile.
PUERH_BALANCED_RULES: list[Rule] = [
    ("Relaxation", 20),
    ("Contemplation", 20),
    ("Social Gatherings", 20),
    ("After-Meal Digestion", 25),
    ("Evening Wind-Down", 15),
]

# Meditation bonus under a calm profile, reduced when stimulation is noticeable.
CALM_MEDITATION_BONUS = 25
CALM_MEDITATION_STIMULATED_BONUS = 15

HIGH_STIMULATION_RULES: list[Rule] = [
    ("High-Focus Work", 15),
    ("Active Outdoor Activities", 15),
    ("Morning Routines", 10),
    ("Exercise", 10),
    ("Evening Wind-Down", -25),
    ("Sleep Preparation", -25),
    ("Relaxation", -15),
    ("Meditation", -15),
]
LOW_STIMULATION_RULES: list[Rule] = [
    ("Exercise", -15),
    ("Active Outdoor Activities", -15),
    ("Morning Routines", -10),
]
HIGH_RELAXATION_RULES: list[Rule] = [
    ("Meditation", 20),
    ("Yoga", 15),
    ("Deep Breathing", 15),
    ("Exercise", -10),
]
LOW_RELAXATION_RULES: list[Rule] = [("Meditation", -10), ("Deep Breathing", -10), ("Yoga", -5)]


class ActivityMatcher(BaseMatcher):
    """Scores activities from compounds, tea-type hints and flavor hints."""

    default_config = ACTIVITY_DEFAULTS

    @property
    def registry(self) -> CandidateRegistry:
        return self.reference.activities

    def match(
        self,
        compounds: CompoundAnalysis,
        tea_type: TeaTypeAnalysis,
        flavor: FlavorAnalysis,
        *,
        tea_name: str | None = None,
    ) -> ActivityMatch:
        scores = self.new_scores()
        stimulation = level_to_int(compounds.stimulation_level)
        relaxation = level_to_int(compounds.relaxation_level)

        profile = compounds.compound_profile
        self.apply(scores, PROFILE_RULES.get(profile, DEFAULT_PROFILE_RULES), step="compound profile", reason=profile)
        if profile == "Balanced & Focused" and tea_type.primary_type == "puerh":
            self.apply(scores, PUERH_BALANCED_RULES, step="compound profile", reason=f"{profile} puerh")
        if profile in {"Calm & Clear", "Smooth & Sustained"}:
            bonus = CALM_MEDITATION_STIMULATED_BONUS if stimulation >= 3 else CALM_MEDITATION_BONUS
            scores.adjust("Meditation", bonus, step="compound profile", reason=profile)

        if stimulation >= 4:
            self.apply(scores, HIGH_STIMULATION_RULES, step="stimulation level", reason=compounds.stimulation_level)
        elif stimulation <= 1:
            self.apply(scores, LOW_STIMULATION_RULES, step="stimulation level", reason=compounds.stimulation_level)

        if relaxation >= 4:
            self.apply(scores, HIGH_RELAXATION_RULES, step="relaxation level", reason=compounds.relaxation_level)
        elif relaxation <= 1:
            self.apply(scores, LOW_RELAXATION_RULES, step="relaxation level", reason=compounds.relaxation_level)

        self._hints(scores, tea_type.base_activity_hints, BASE_HINT_BONUS, "tea type hint")
        self._hints(scores, flavor.activity_hints, FLAVOR_HINT_BONUS, "flavor hint")

        normalized = normalize(scores, sentinel=GENERAL_ENJOYMENT)
        recommended = self.recommend(normalized, GENERAL_ENJOYMENT)
        clusters = build_clusters(
            normalized,
            self.registry.groups,
            self.config.group_threshold,
            self.config.min_group_members,
        )

        subject = tea_name or "This tea"
        description = f"{subject} pairs especially well with {join_scored(recommended)}."
        if clusters:
            top = clusters[0]
            description += f' It\'s especially suited for "{top.label}" activities ({top.score}% match).'

        return ActivityMatch(
            scores=normalized,
            recommended=recommended,
            clusters=clusters,
            description=description,
            trace=scores.trace,
        )

    def _hints(self, scores: ScoreMap, hints: list[str], bonus: float, step: str) -> None:
        for hint in hints:
            targets = self.registry.resolve(hint)
            if not targets:
                logger.debug("activity hint %r resolves to no activity", hint)
            for name in targets:
                scores.adjust(name, bonus, step=step, reason=hint)
