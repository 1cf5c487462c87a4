"""Tea-type baselines resolved from the packaged type table."""

from __future__ import annotations

import logging
import re

from tea_lens.calculators.base import BaseCalculator
from tea_lens.reference import TeaTypeProfile
from tea_lens.schema import Tea
from tea_lens.types import TeaTypeAnalysis

logger = logging.getLogger(__name__)

NO_DATA = "No baseline data available for this tea type."


class TeaTypeCalculator(BaseCalculator):
    """Looks up typical caffeine, flavor and activity baselines for a type."""

    def analyze(self, tea: Tea) -> TeaTypeAnalysis:
        primary_text = self._canonical(tea.type)
        sub_text = self._canonical(tea.sub_type)
        primary, sub, profile = self.resolve(primary_text, sub_text)

        if profile is None:
            logger.debug("no tea type baseline for %r / %r", tea.type, tea.sub_type)
            return TeaTypeAnalysis(
                description=NO_DATA,
                primary_type=primary_text,
                sub_type=sub_text or None,
            )

        return TeaTypeAnalysis(
            description=profile.description or NO_DATA,
            primary_type=primary,
            sub_type=sub or sub_text or None,
            typical_caffeine=profile.caffeine,
            typical_theanine=profile.theanine,
            dominant_flavor_categories=list(profile.flavor_categories),
            seasonal_tendency=profile.seasonal_tendency,
            base_time_of_day=list(profile.time_of_day),
            base_activity_hints=list(profile.activities),
            common_processing=list(profile.processing),
        )

    def resolve(self, primary_text: str, sub_text: str) -> tuple[str, str | None, TeaTypeProfile | None]:
        """Sub-type first, then primary type, then a keyword scan of the type."""
        types = self.reference.tea_types

        if sub_text:
            candidates = [primary_text] if primary_text in types else list(types)
            for key in candidates:
                profile = types[key].sub_types.get(sub_text)
                if profile is not None:
                    return key, sub_text, profile

        if primary_text in types:
            return primary_text, None, types[primary_text]

        for key, base in types.items():
            if not _mentions(primary_text, key):
                continue
            for name, profile in base.sub_types.items():
                if _mentions(primary_text, name) or _mentions(sub_text, name):
                    return key, name, profile
            return key, None, base

        for key, base in types.items():
            for name, profile in base.sub_types.items():
                if _mentions(primary_text, name):
                    return key, name, profile

        return primary_text, None, None

    def _canonical(self, value: str | None) -> str:
        text = re.sub(r"\s+", " ", (value or "").strip().lower())
        return self.reference.type_aliases.get(text, text)


def _mentions(text: str, term: str) -> bool:
    if not text:
        return False
    return re.search(rf"\b{re.escape(term)}\b", text) is not None
