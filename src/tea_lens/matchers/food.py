"""Food pairing recommendations grouped by meal occasion."""

from __future__ import annotations

import logging

from tea_lens.config import FOOD_DEFAULTS
from tea_lens.matchers.base import BaseMatcher, Rule, join_scored
from tea_lens.reference import CandidateRegistry
from tea_lens.scoring.clusters import build_clusters
from tea_lens.scoring.ordered import unique
from tea_lens.scoring.score_map import SENTINEL_SCORE, normalize
from tea_lens.types import FlavorAnalysis, FoodMatch, ProcessingAnalysis, ScoredCandidate, TeaTypeAnalysis

logger = logging.getLogger(__name__)

VERSATILE = "Versatile - pairs with many foods"
FLAVOR_HINT_BONUS = 6
CATEGORY_BONUS = 2
MINOR_BONUS = 1

# Flavor category label -> foods it suggests.
CATEGORY_RULES: dict[str, list[str]] = {
    "Floral": ["Light Desserts", "Pastries", "Fruit Salad"],
    "Fruity": ["Salads", "Chicken", "Seafood", "Light Cheese"],
    "Vegetal": ["Steamed Vegetables", "Sushi", "Rice Dishes", "Salads"],
    "Nutty/Toasty": ["Baked Goods", "Roasted Vegetables", "Cheese", "Light Meats"],
    "Roasted": ["Baked Goods", "Roasted Vegetables", "Cheese", "Light Meats"],
    "Spicy": ["Spiced Cakes", "Rich Stews", "Curries", "Grilled Meats"],
    "Sweet": ["Desserts", "Pastries", "Breakfast Foods", "Fruits"],
    "Earthy/Mineral": ["Mushrooms", "Root Vegetables", "Dark Meats", "Rich Stews"],
    "Aged/Earthy": ["Mushrooms", "Root Vegetables", "Dark Meats", "Rich Stews"],
    "Woody": ["Smoked Foods", "Grilled Meats", "Hard Cheese"],
    "Umami/Marine": ["Seafood", "Sushi", "Savory Dishes", "Miso Soup"],
}

_LIGHT_BODY = ["Delicate Foods", "Light Desserts", "Steamed Vegetables"]
_FULL_BODY = ["Rich Foods", "Hearty Dishes", "Dark Meats"]

# Lowercase body impact -> foods it suggests.
BODY_RULES: dict[str, list[str]] = {
    "lighter": _LIGHT_BODY,
    "delicate": _LIGHT_BODY,
    "smooth": _LIGHT_BODY,
    "silky": _LIGHT_BODY,
    "refined": _LIGHT_BODY,
    "fuller": _FULL_BODY,
    "slightly fuller": _FULL_BODY,
    "much fuller": _FULL_BODY,
    "robust": _FULL_BODY,
    "strong": _FULL_BODY,
    "thick": _FULL_BODY,
    "thicker": _FULL_BODY,
    "astringent": ["Fatty Foods", "Strong Cheese"],
    "creamy": ["Pastries", "Light Desserts"],
}

INTENSITY_RULES: dict[str, list[str]] = {
    "Subtle": ["Delicate Foods", "Light Cheese"],
    "Pronounced": ["Bold Flavored Foods", "Strong Cheese"],
}

# Keyword found in a processing flavor impact -> foods it suggests.
PROCESSING_FLAVOR_RULES: list[tuple[str, list[str]]] = [
    ("nutty", ["Baked Goods", "Cheese"]),
    ("caramel", ["Desserts"]),
    ("smoky", ["Smoked Foods", "BBQ"]),
]

DARK_ROAST_RULES: list[Rule] = [
    ("Roasted Nuts", 5),
    ("Dark Chocolate", 4),
    ("Grilled Meats", 4),
    ("Spiced Foods", 3),
    ("Hard Cheese", 3),
    ("Baked Goods", 3),
    ("Root Vegetables", 2),
]
DARK_ROASTS = {"Heavy", "Medium"}


class FoodMatcher(BaseMatcher):
    """Scores foods from flavor hints, categories, body and roast."""

    default_config = FOOD_DEFAULTS

    @property
    def registry(self) -> CandidateRegistry:
        return self.reference.foods

    def match(
        self,
        flavor: FlavorAnalysis,
        processing: ProcessingAnalysis,
        tea_type: TeaTypeAnalysis,
        *,
        tea_name: str | None = None,
    ) -> FoodMatch:
        scores = self.new_scores()

        for hint in flavor.food_pairing_hints:
            targets = self.registry.resolve(hint)
            if not targets:
                logger.debug("food hint %r is not a known food", hint)
            for name in targets:
                scores.adjust(name, FLAVOR_HINT_BONUS, step="flavor pairing hint", reason=hint)

        for category in unique(flavor.dominant_categories + tea_type.dominant_flavor_categories):
            for name in CATEGORY_RULES.get(category, []):
                scores.adjust(name, CATEGORY_BONUS, step="flavor category", reason=category)

        body = processing.body_impact.strip().lower()
        for name in BODY_RULES.get(body, []):
            scores.adjust(name, MINOR_BONUS, step="body impact", reason=processing.body_impact)

        for name in INTENSITY_RULES.get(flavor.intensity, []):
            scores.adjust(name, MINOR_BONUS, step="flavor intensity", reason=flavor.intensity)

        impacts = " ".join(processing.flavor_impact).lower()
        for keyword, foods in PROCESSING_FLAVOR_RULES:
            if keyword in impacts:
                for name in foods:
                    scores.adjust(name, MINOR_BONUS, step="processing flavor impact", reason=keyword)

        if processing.roast_level in DARK_ROASTS:
            self.apply(scores, DARK_ROAST_RULES, step="roast level", reason=processing.roast_level)

        normalized = normalize(scores, sentinel=VERSATILE)
        subject = tea_name or "This tea"
        if not scores.adjusted:
            return FoodMatch(
                scores=normalized,
                recommended=[ScoredCandidate(name=VERSATILE, score=SENTINEL_SCORE)],
                description=f"{subject} is versatile and pairs well with a wide variety of foods.",
                trace=scores.trace,
            )

        recommended = self.recommend(normalized, VERSATILE)
        clusters = build_clusters(
            normalized,
            self.registry.groups,
            self.config.group_threshold,
            self.config.min_group_members,
        )
        description = f"{subject} pairs especially well with {join_scored(recommended)}."
        if clusters:
            top = clusters[0]
            description += f' It\'s an excellent choice for "{top.label}" ({top.score}% match).'

        return FoodMatch(
            scores=normalized,
            recommended=recommended,
            clusters=clusters,
            description=description,
            trace=scores.trace,
        )
