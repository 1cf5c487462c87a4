"""Gongfu and western brewing parameters from first-match rule tables."""

from __future__ import annotations

import logging
import re

from tea_lens.reference import BrewingRule, ReferenceData, load_reference_data, processing_keyword
from tea_lens.schema import Tea
from tea_lens.types import (
    BrewingMatch,
    BrewingRecommendation,
    GeographyAnalysis,
    ProcessingAnalysis,
    TeaTypeAnalysis,
)

logger = logging.getLogger(__name__)

# (exclusive upper bound, keyword); anything at or above the last bound is fully oxidized.
OXIDATION_KEYWORDS = [
    (20, "light-oxidized"),
    (60, "medium-oxidized"),
    (85, "heavy-oxidized"),
]
FULL_OXIDATION = "fully-oxidized"

ROAST_KEYWORDS = {
    "Light": ["light-roasted"],
    "Medium": ["roasted"],
    "Heavy": ["roasted", "heavy-roasted"],
    "Charcoal": ["roasted", "heavy-roasted"],
    "Unknown Roast": ["roasted"],
}

AGED_KEYWORDS = {"aged", "well-aged"}


class BrewingMatcher:
    """Picks brewing parameters for every style in the brewing tables."""

    def __init__(self, reference: ReferenceData | None = None):
        self.reference = reference or load_reference_data()

    def match(
        self,
        tea: Tea,
        processing: ProcessingAnalysis,
        tea_type: TeaTypeAnalysis,
        geography: GeographyAnalysis | None = None,
        *,
        tea_name: str | None = None,
    ) -> BrewingMatch:
        table = self.table_key(tea, tea_type)
        sub_types = self.sub_types(tea, tea_type)
        keywords = self.keywords(table, processing, geography)

        found = {style: self.recommend(style, table, sub_types, keywords) for style in self.reference.brewing}
        gongfu, western = found.get("gongfu"), found.get("western")
        return BrewingMatch(
            gongfu=gongfu,
            western=western,
            keywords=sorted(keywords),
            description=_describe(tea_name or "This tea", table, gongfu, western),
        )

    def table_key(self, tea: Tea, tea_type: TeaTypeAnalysis) -> str:
        """Declared type through the brewing aliases, then the resolved primary type."""
        text = " ".join((tea.type or "").strip().lower().split())
        key = self.reference.brewing_type_aliases.get(text, text)
        if self._has_table(key):
            return key
        return tea_type.primary_type

    def sub_types(self, tea: Tea, tea_type: TeaTypeAnalysis) -> frozenset[str]:
        text = f"{tea.type or ''} {tea.sub_type or ''} {tea_type.sub_type or ''}".lower()
        aliases = self.reference.type_aliases
        return frozenset(aliases.get(word, word) for word in re.findall(r"[a-z]+", text))

    def keywords(
        self,
        table: str,
        processing: ProcessingAnalysis,
        geography: GeographyAnalysis | None = None,
    ) -> frozenset[str]:
        """Processing keywords the brewing conditions are checked against."""
        aliases = self.reference.processing_keyword_aliases
        found = {processing_keyword(method, aliases) for method in processing.applied_methods}

        oxidation = processing.oxidation_level
        if oxidation is not None:
            found.add(oxidation_keyword(oxidation))
        found.update(ROAST_KEYWORDS.get(processing.roast_level, []))

        if geography is not None and "Spring" in geography.season.harvest_season:
            found.add("spring-harvest")

        if self._has_table(table):
            found.add("unwithered" if table == "green" else "withered")
            if table == "white":
                found.add("unrolled")
            if table == "puerh" and not found & AGED_KEYWORDS:
                found.add("young")
        return frozenset(found)

    def recommend(
        self,
        style: str,
        table: str,
        sub_types: frozenset[str],
        keywords: frozenset[str],
    ) -> BrewingRecommendation | None:
        rules = self.reference.brewing.get(style, {}).get(table)
        if not rules:
            logger.debug("no %s brewing table for tea type %r", style, table)
            return None

        for rule in rules:
            if rule.matches(sub_types, keywords):
                logger.debug("%s brewing for %r: rule %d", style, table, rule.index)
                return _recommendation(rule)

        logger.warning("no %s brewing rule matched tea type %r", style, table)
        return None

    def _has_table(self, key: str) -> bool:
        return any(key in tables for tables in self.reference.brewing.values())


def oxidation_keyword(level: float) -> str:
    for upper, keyword in OXIDATION_KEYWORDS:
        if level < upper:
            return keyword
    return FULL_OXIDATION


def format_steep(seconds: int) -> str:
    if seconds >= 60 and seconds % 30 == 0:
        return f"{seconds / 60:g} min"
    return f"{seconds}s"


def _conditions(rule: BrewingRule) -> list[str]:
    parts = [f"sub-type {rule.sub_type}"] if rule.sub_type else []
    parts += sorted(rule.processing)
    if rule.any_processing:
        parts.append(f"any of {', '.join(sorted(rule.any_processing))}")
    parts += [f"not {keyword}" for keyword in sorted(rule.not_processing)]
    return parts


def _recommendation(rule: BrewingRule) -> BrewingRecommendation:
    return BrewingRecommendation(
        style=rule.style,
        tea_type=rule.tea_type,
        leaf_amount=rule.leaf_amount,
        water_temperature=rule.water_temperature,
        steeping_times=list(rule.steeping_times),
        rinses=rule.rinses,
        vessels=list(rule.vessels),
        notes=rule.notes,
        example_teas=list(rule.examples),
        matched_conditions=_conditions(rule),
        rule_index=rule.index,
    )


def summarize(item: BrewingRecommendation) -> str:
    """"5-6g per 100ml at 90-95°C, steeps 15s, 25s" plus any rinses."""
    steeps = ", ".join(format_steep(seconds) for seconds in item.steeping_times)
    text = f"{item.leaf_amount} at {item.water_temperature}, steeps {steeps}"
    if item.rinses:
        text += f", {item.rinses} rinse{'s' if item.rinses > 1 else ''}"
    return text


def _describe(
    subject: str,
    table: str,
    gongfu: BrewingRecommendation | None,
    western: BrewingRecommendation | None,
) -> str:
    parts = [f"{style} {summarize(item)}" for style, item in (("gongfu", gongfu), ("western", western)) if item]
    if not parts:
        return f"No brewing guidance available for {table or 'this tea type'}."
    return f"{subject} brews {'; '.join(parts)}."
