"""Consistency checks between rule tables and the candidate registries."""

from __future__ import annotations

from typing import Iterable

from tea_lens.matchers import activity, food, season, time_of_day
from tea_lens.reference import CandidateRegistry, ReferenceData
from tea_lens.scoring.thresholds import buckets_are_contiguous


def _names(rules: Iterable[tuple[str, float]]) -> list[str]:
    return [name for name, _ in rules]


def _missing(registry: CandidateRegistry, names: Iterable[str], source: str) -> list[str]:
    return [f"{source}: unknown {registry.domain} {name!r}" for name in names if name not in registry]


def rule_problems(ref: ReferenceData) -> list[str]:
    """Names used by matcher rule tables that no registry knows about."""
    problems: list[str] = []

    season_tables = [
        *season.TYPE_TENDENCY_RULES.values(),
        *season.PROCESSING_TENDENCY_RULES.values(),
        season.DARK_ROAST_RULES,
        season.LIGHT_FLORAL_RULES,
        *season.WEATHER_HINT_RULES.values(),
        *(rules for _, rules in season.PROFILE_KEYWORD_RULES),
    ]
    for rules in season_tables:
        problems += _missing(ref.seasons, _names(rules), "season rules")

    time_tables = [
        *time_of_day.PROFILE_RULES.values(),
        time_of_day.DEFAULT_PROFILE_RULES,
        time_of_day.HIGH_STIMULATION_RULES,
        time_of_day.LOW_STIMULATION_RULES,
        time_of_day.HIGH_RELAXATION_RULES,
        time_of_day.LOW_RELAXATION_RULES,
        time_of_day.HIGH_CAFFEINE_RULES,
        time_of_day.LOW_CAFFEINE_RULES,
        time_of_day.BREAKFAST_RULES,
        time_of_day.GREEN_RULES,
        time_of_day.WHITE_RULES,
        time_of_day.HERBAL_RULES,
        time_of_day.SHADE_GROWN_RULES,
        time_of_day.RIPE_PUERH_RULES,
    ]
    for rules in time_tables:
        problems += _missing(ref.times, _names(rules), "time rules")

    activity_tables = [
        *activity.PROFILE_RULES.values(),
        activity.DEFAULT_PROFILE_RULES,
        activity.PUERH_BALANCED_RULES,
        activity.HIGH_STIMULATION_RULES,
        activity.LOW_STIMULATION_RULES,
        activity.HIGH_RELAXATION_RULES,
        activity.LOW_RELAXATION_RULES,
    ]
    for rules in activity_tables:
        problems += _missing(ref.activities, _names(rules), "activity rules")
    problems += _missing(ref.activities, ["Meditation"], "activity rules")
    for hint, targets in ref.activities.aliases.items():
        problems += _missing(ref.activities, targets, f"activity alias {hint!r}")

    food_lists = [
        *food.CATEGORY_RULES.values(),
        *food.BODY_RULES.values(),
        *food.INTENSITY_RULES.values(),
        *(foods for _, foods in food.PROCESSING_FLAVOR_RULES),
        _names(food.DARK_ROAST_RULES),
    ]
    for names in food_lists:
        problems += _missing(ref.foods, names, "food rules")

    return problems


def hint_problems(ref: ReferenceData) -> list[str]:
    """Hints in the flavor and tea-type tables that resolve to nothing."""
    problems: list[str] = []
    weather = set(season.WEATHER_HINT_RULES)
    labels = {category.label for category in ref.flavor_categories}

    for category in ref.flavor_categories:
        records = list(category.notes) + ([category.defaults] if category.defaults else [])
        for record in records:
            source = f"flavor {category.key}/{record.key}"
            problems += _missing(ref.foods, record.food, source)
            for hint in record.activities:
                if not ref.activities.resolve(hint):
                    problems.append(f"{source}: activity hint {hint!r} resolves to nothing")
            for hint in record.seasons:
                text = hint.lower()
                if text not in weather and not any(text in name.lower() for name in ref.seasons):
                    problems.append(f"{source}: seasonal hint {hint!r} matches no season")

    for key, base in ref.tea_types.items():
        for profile in [base, *base.sub_types.values()]:
            source = f"tea type {key}/{profile.key}"
            for hint in profile.activities:
                if not ref.activities.resolve(hint):
                    problems.append(f"{source}: activity hint {hint!r} resolves to nothing")
            for label in profile.flavor_categories:
                if label not in labels:
                    problems.append(f"{source}: unknown flavor category {label!r}")
            problems += _missing(ref.times, profile.time_of_day, source)

    return problems


def table_problems(ref: ReferenceData) -> list[str]:
    """Bucket coverage and season table cross-references."""
    problems: list[str] = []
    tables = {
        "elevation": ref.elevation,
        "latitude": ref.latitude_zones,
        "humidity": ref.humidity,
        "temperature": ref.temperature,
        "solar radiation": ref.solar_radiation,
    }
    for name, buckets in tables.items():
        if not buckets_are_contiguous(buckets):
            problems.append(f"{name} buckets have gaps or overlaps")

    for month, season_name in ref.harvest_months.items():
        if season_name not in ref.seasonal_profiles:
            problems.append(f"harvest month {month}: no seasonal profile for {season_name!r}")
    for bucket, members in ref.simplified_seasons.items():
        problems += _missing(ref.seasons, members, f"simplified season {bucket!r}")
    wrap_labels = ref.season_wrap.start_labels | ref.season_wrap.end_labels
    problems += _missing(ref.seasons, sorted(wrap_labels), "season wrap rule")
    return problems


def brewing_problems(ref: ReferenceData) -> list[str]:
    """Brewing tables must share tea types and end with exactly one default rule."""
    problems: list[str] = []
    type_sets = {style: set(tables) for style, tables in ref.brewing.items()}
    all_types = set().union(*type_sets.values()) if type_sets else set()
    for style, types in type_sets.items():
        for missing in sorted(all_types - types):
            problems.append(f"brewing {style}: no rules for tea type {missing!r}")

    for style, tables in ref.brewing.items():
        for tea_type, rules in tables.items():
            source = f"brewing {style}/{tea_type}"
            if not rules or not rules[-1].is_default:
                problems.append(f"{source}: last rule must have no conditions")
            for rule in rules[:-1]:
                if rule.is_default:
                    problems.append(f"{source}: default rule {rule.index} hides the rules after it")
    return problems


def find_problems(ref: ReferenceData) -> list[str]:
    return table_problems(ref) + rule_problems(ref) + hint_problems(ref) + brewing_problems(ref)
