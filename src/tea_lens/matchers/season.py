"""Season recommendations with contiguous and wraparound ranges."""

from __future__ import annotations

import logging

from tea_lens.config import SEASON_DEFAULTS
from tea_lens.matchers.base import BaseMatcher, Rule
from tea_lens.reference import CandidateRegistry
from tea_lens.scoring.cyclic import build_cyclic_ranges, format_ranges
from tea_lens.scoring.ordered import round_half_up
from tea_lens.scoring.score_map import SENTINEL_SCORE, ScoreMap, normalize
from tea_lens.types import (
    FlavorAnalysis,
    GeographyAnalysis,
    ProcessingAnalysis,
    SeasonMatch,
    TeaTypeAnalysis,
)

logger = logging.getLogger(__name__)

ANY_SEASON = "Any Season"
FLAVOR_HINT_BONUS = 15
HARVEST_BONUS = 20
HARVEST_NEIGHBOUR_BONUS = 10
SIMPLIFIED_WINDOW = 15

TYPE_TENDENCY_RULES: dict[str, list[Rule]] = {
    "warming": [
        ("Late Autumn", 20),
        ("Winter", 30),
        ("Early Winter", 25),
        ("Late Winter", 20),
        ("Spring", -10),
        ("Summer", -15),
    ],
    "cooling": [
        ("Spring", 20),
        ("Early Summer", 25),
        ("Summer", 30),
        ("Late Summer", 20),
        ("Winter", -15),
    ],
    "neutral-warming": [("Autumn", 15), ("Early Winter", 10)],
    "neutral-cooling": [("Late Spring", 15), ("Early Summer", 10)],
}

PROCESSING_TENDENCY_RULES: dict[str, list[Rule]] = {
    "warming": [("Autumn", 15), ("Winter", 25), ("Late Winter", 15), ("Summer", -10)],
    "cooling": [("Spring", 15), ("Summer", 25), ("Early Autumn", 10), ("Winter", -10)],
}

DARK_ROAST_RULES: list[Rule] = [
    ("Autumn", 25),
    ("Late Autumn", 20),
    ("Winter", 25),
    ("Early Winter", 20),
    ("Spring", -15),
    ("Summer", -20),
]

LIGHT_FLORAL_RULES: list[Rule] = [
    ("Spring", 25),
    ("Early Spring", 20),
    ("Summer", 20),
    ("Early Summer", 25),
    ("Winter", -10),
]

WEATHER_HINT_RULES: dict[str, list[Rule]] = {
    "warm weather": [("Summer", 15), ("Late Spring", 10), ("Early Autumn", 10)],
    "cool weather": [("Autumn", 15), ("Winter", 15), ("Early Spring", 10)],
}

# Keywords looked up in the harvest season's typical flavor notes.
PROFILE_KEYWORD_RULES: list[tuple[tuple[str, ...], list[Rule]]] = [
    (("robust", "malty", "deep"), [("Autumn", 10), ("Winter", 10)]),
    (("fresh", "delicate", "floral"), [("Spring", 10), ("Early Summer", 10)]),
    (("bright", "fruity", "sweet"), [("Late Spring", 8), ("Summer", 12)]),
]

DARK_ROASTS = {"Heavy", "Medium"}
LIGHT_ROASTS = {"Minimal", "Light", "None"}


class SeasonMatcher(BaseMatcher):
    """Scores the twelve seasons and finds the best contiguous windows."""

    default_config = SEASON_DEFAULTS

    @property
    def registry(self) -> CandidateRegistry:
        return self.reference.seasons

    def match(
        self,
        geography: GeographyAnalysis,
        processing: ProcessingAnalysis,
        tea_type: TeaTypeAnalysis,
        flavor: FlavorAnalysis,
        *,
        tea_name: str | None = None,
    ) -> SeasonMatch:
        scores = self.new_scores()

        tendency = tea_type.seasonal_tendency
        self.apply(scores, TYPE_TENDENCY_RULES.get(tendency, []), step="tea type tendency", reason=tendency)

        energetic = processing.energetic_tendency
        self.apply(
            scores,
            PROCESSING_TENDENCY_RULES.get(energetic, []),
            step="processing tendency",
            reason=energetic,
        )

        roast = processing.roast_level
        if roast in DARK_ROASTS:
            self.apply(scores, DARK_ROAST_RULES, step="roast level", reason=roast)
        elif roast in LIGHT_ROASTS and "Floral" in flavor.dominant_categories:
            self.apply(scores, LIGHT_FLORAL_RULES, step="roast level", reason=f"{roast} roast with floral notes")

        self._flavor_hints(scores, flavor.seasonal_affinity_hints)
        self._harvest(scores, geography.season.harvest_season)
        self._profile_keywords(scores, geography.season.seasonal_flavor_profile)

        normalized = normalize(scores, sentinel=ANY_SEASON)
        recommended = self.recommend(normalized, ANY_SEASON)
        ranges = build_cyclic_ranges(
            normalized,
            self.registry.names,
            self.config.group_threshold,
            wrap_rule=self.reference.season_wrap,
        )
        simplified = self.simplified_scores(normalized)
        top = max(simplified.values())
        simplified_recommended = [name for name, score in simplified.items() if score >= top - SIMPLIFIED_WINDOW]

        subject = tea_name or "This tea"
        if ranges:
            description = f"{subject} is best enjoyed during {format_ranges(ranges)}."
        else:
            description = f"{subject} is best enjoyed during {', '.join(item.name for item in recommended)}."

        return SeasonMatch(
            scores=normalized,
            recommended=recommended,
            ideal_ranges=ranges,
            simplified_scores=simplified,
            simplified_recommended=simplified_recommended,
            description=description,
            trace=scores.trace,
        )

    def simplified_scores(self, normalized: dict[str, int]) -> dict[str, int]:
        """Mean normalized score per legacy four-season bucket."""
        result: dict[str, int] = {}
        for bucket, members in self.reference.simplified_seasons.items():
            values = [normalized[name] for name in members if name in normalized]
            result[bucket] = round_half_up(sum(values) / len(values)) if values else SENTINEL_SCORE
        return result

    def _flavor_hints(self, scores: ScoreMap, hints: list[str]) -> None:
        for hint in hints:
            text = hint.strip().lower()
            if text in WEATHER_HINT_RULES:
                self.apply(scores, WEATHER_HINT_RULES[text], step="flavor seasonal hint", reason=hint)
                continue
            matched = [name for name in scores if text and text in name.lower()]
            if not matched:
                logger.debug("seasonal hint %r matched no season", hint)
            for name in matched:
                scores.adjust(name, FLAVOR_HINT_BONUS, step="flavor seasonal hint", reason=hint)

    def _harvest(self, scores: ScoreMap, season: str) -> None:
        if not season or season == "Unknown":
            return
        for name in scores:
            if season.lower() in name.lower():
                scores.adjust(name, HARVEST_BONUS, step="harvest season", reason=season)

        ordering = self.registry.names
        if season not in ordering:
            return
        index = ordering.index(season)
        for neighbour in (ordering[index - 1], ordering[(index + 1) % len(ordering)]):
            scores.adjust(neighbour, HARVEST_NEIGHBOUR_BONUS, step="harvest season neighbour", reason=season)

    def _profile_keywords(self, scores: ScoreMap, notes: list[str]) -> None:
        text = " ".join(notes).lower()
        for keywords, rules in PROFILE_KEYWORD_RULES:
            hit = next((word for word in keywords if word in text), None)
            if hit is not None:
                self.apply(scores, rules, step="seasonal flavor profile", reason=hit)
