"""Immutable reference data loaded from the packaged tables."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping

from tea_lens import data
from tea_lens.exceptions import ReferenceDataError
from tea_lens.scoring.clusters import Group
from tea_lens.scoring.cyclic import WrapRule
from tea_lens.scoring.ordered import unique
from tea_lens.scoring.thresholds import Bucket


@dataclass(frozen=True)
class ClimateBucket(Bucket):
    description: str = ""
    flavor: tuple[str, ...] = ()
    mouthfeel: tuple[str, ...] = ()
    compound: tuple[str, ...] = ()


@dataclass(frozen=True)
class MethodImpact:
    key: str
    flavor: tuple[str, ...]
    body: str | None
    tendency: str | None
    alertness: str | None
    compound: tuple[str, ...]


@dataclass(frozen=True)
class FlavorRecord:
    key: str
    category: str
    food: tuple[str, ...] = ()
    seasons: tuple[str, ...] = ()
    activities: tuple[str, ...] = ()
    associated: tuple[str, ...] = ()


@dataclass(frozen=True)
class FlavorCategory:
    key: str
    label: str
    keywords: tuple[str, ...]
    defaults: FlavorRecord | None
    notes: tuple[FlavorRecord, ...]


@dataclass(frozen=True)
class RegionProfile:
    name: str
    country: str
    subregion: str | None
    latitude: tuple[float, float]
    longitude: tuple[float, float]
    aliases: tuple[str, ...]
    description: str
    notes: tuple[str, ...]

    def contains(self, latitude: float, longitude: float) -> bool:
        lat_lo, lat_hi = self.latitude
        lon_lo, lon_hi = self.longitude
        return lat_lo <= latitude <= lat_hi and lon_lo <= longitude <= lon_hi


@dataclass(frozen=True)
class SeasonProfile:
    season: str
    quality: str
    notes: tuple[str, ...]
    description: str


@dataclass(frozen=True)
class TeaTypeProfile:
    key: str
    description: str
    caffeine: str
    theanine: str
    flavor_categories: tuple[str, ...]
    seasonal_tendency: str
    time_of_day: tuple[str, ...]
    activities: tuple[str, ...]
    processing: tuple[str, ...]
    sub_types: Mapping[str, "TeaTypeProfile"] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class BrewingRule:
    """One row of a brewing table; conditions are normalized keywords."""

    style: str
    tea_type: str
    index: int
    sub_type: str | None
    processing: frozenset[str]
    any_processing: frozenset[str]
    not_processing: frozenset[str]
    leaf_amount: str
    water_temperature: str
    steeping_times: tuple[int, ...]
    rinses: int
    vessels: tuple[str, ...]
    notes: str | None
    examples: tuple[str, ...]

    @property
    def is_default(self) -> bool:
        return not (self.sub_type or self.processing or self.any_processing or self.not_processing)

    def matches(self, sub_types: frozenset[str], keywords: frozenset[str]) -> bool:
        if self.sub_type and self.sub_type not in sub_types:
            return False
        if not self.processing <= keywords:
            return False
        if self.any_processing and not self.any_processing & keywords:
            return False
        return not self.not_processing & keywords


class CandidateRegistry:
    """Canonical candidate names for one matcher domain.

    ``groups`` holds the hand-authored grouping table and ``aliases`` maps
    lowercase hint tags to the canonical names they stand for.
    """

    def __init__(
        self,
        domain: str,
        names: Iterable[str],
        *,
        groups: Iterable[Group] = (),
        aliases: Mapping[str, Iterable[str]] | None = None,
    ):
        names = tuple(names)
        seen: set[str] = set()
        for name in names:
            if name in seen:
                raise ReferenceDataError(f"Duplicate {domain} candidate: {name!r}")
            seen.add(name)

        self.domain = domain
        self.names = names
        self.groups = tuple(groups)
        self.aliases = MappingProxyType(
            {key.lower(): tuple(targets) for key, targets in (aliases or {}).items()}
        )
        self._lookup = {name.lower(): name for name in names}

    def resolve(self, hint: str) -> tuple[str, ...]:
        """Canonical names a hint refers to; empty when it matches nothing."""
        text = (hint or "").strip().lower()
        if not text:
            return ()
        if text in self._lookup:
            return (self._lookup[text],)
        return self.aliases.get(text, ())

    def __contains__(self, name: object) -> bool:
        return name in self._lookup.values()

    def __iter__(self):
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)


@dataclass(frozen=True)
class ReferenceData:
    elevation: tuple[ClimateBucket, ...]
    latitude_zones: tuple[ClimateBucket, ...]
    humidity: tuple[ClimateBucket, ...]
    temperature: tuple[ClimateBucket, ...]
    solar_radiation: tuple[ClimateBucket, ...]
    processing_methods: Mapping[str, MethodImpact]
    flavor_categories: tuple[FlavorCategory, ...]
    regions: tuple[RegionProfile, ...]
    harvest_months: Mapping[int, str]
    seasonal_profiles: Mapping[str, SeasonProfile]
    tea_types: Mapping[str, TeaTypeProfile]
    type_aliases: Mapping[str, str]
    seasons: CandidateRegistry
    simplified_seasons: Mapping[str, tuple[str, ...]]
    season_wrap: WrapRule
    times: CandidateRegistry
    activities: CandidateRegistry
    foods: CandidateRegistry
    brewing: Mapping[str, Mapping[str, tuple[BrewingRule, ...]]]
    brewing_type_aliases: Mapping[str, str]
    processing_keyword_aliases: Mapping[str, str]


@lru_cache(maxsize=None)
def load_reference_data() -> ReferenceData:
    """Build the packaged reference data once per process."""
    return ReferenceData(
        elevation=_climate(data.ELEVATION_LEVELS),
        latitude_zones=_climate(data.LATITUDE_ZONES),
        humidity=_climate(data.HUMIDITY_LEVELS),
        temperature=_climate(data.TEMPERATURE_LEVELS),
        solar_radiation=_climate(data.SOLAR_RADIATION_LEVELS),
        processing_methods=MappingProxyType(
            {key.lower(): _method(key, item) for key, item in data.PROCESSING_METHODS.items()}
        ),
        flavor_categories=tuple(_flavor_category(key, item) for key, item in data.FLAVOR_CATEGORIES.items()),
        regions=tuple(_region(item) for item in data.REGIONS),
        harvest_months=MappingProxyType(dict(data.HARVEST_MONTHS)),
        seasonal_profiles=MappingProxyType(
            {
                season: SeasonProfile(
                    season=season,
                    quality=item["quality"],
                    notes=tuple(item["notes"]),
                    description=item["description"],
                )
                for season, item in data.SEASONAL_PROFILES.items()
            }
        ),
        tea_types=MappingProxyType({key: _tea_type(key, item) for key, item in data.TEA_TYPES.items()}),
        type_aliases=MappingProxyType(dict(data.TYPE_ALIASES)),
        seasons=CandidateRegistry("season", data.SEASONS),
        simplified_seasons=MappingProxyType(
            {bucket: tuple(members) for bucket, members in data.SIMPLIFIED_SEASONS.items()}
        ),
        season_wrap=WrapRule(
            start_labels=frozenset(data.SEASON_WRAP_START),
            end_labels=frozenset(data.SEASON_WRAP_END),
        ),
        times=CandidateRegistry("time", data.TIME_PERIODS),
        activities=_grouped_registry(
            "activity",
            data.ACTIVITY_CLUSTERS,
            data.ACTIVITY_EXTRAS,
            aliases=data.ACTIVITY_HINT_ALIASES,
        ),
        foods=_grouped_registry("food", data.FOOD_CLUSTERS, data.FOOD_EXTRAS),
        brewing=MappingProxyType(
            {
                style: MappingProxyType(
                    {
                        tea_type: tuple(_brewing_rule(style, tea_type, index, row) for index, row in enumerate(rows))
                        for tea_type, rows in data.BREWING_RULES[style].items()
                    }
                )
                for style in data.BREWING_STYLES
            }
        ),
        brewing_type_aliases=MappingProxyType(dict(data.BREWING_TYPE_ALIASES)),
        processing_keyword_aliases=MappingProxyType(dict(data.PROCESSING_KEYWORD_ALIASES)),
    )


def _climate(rows: list[dict]) -> tuple[ClimateBucket, ...]:
    return tuple(
        ClimateBucket(
            label=row["label"],
            min=row["min"],
            max=row["max"],
            description=row.get("description", ""),
            flavor=tuple(row.get("flavor", [])),
            mouthfeel=tuple(row.get("mouthfeel", [])),
            compound=tuple(row.get("compound", [])),
        )
        for row in rows
    )


def _method(key: str, item: dict) -> MethodImpact:
    return MethodImpact(
        key=key.lower(),
        flavor=tuple(item.get("flavor", [])),
        body=item.get("body"),
        tendency=item.get("tendency"),
        alertness=item.get("alertness"),
        compound=tuple(item.get("compound", [])),
    )


def _flavor_record(key: str, category: str, item: dict) -> FlavorRecord:
    return FlavorRecord(
        key=key,
        category=category,
        food=tuple(item.get("food", [])),
        seasons=tuple(item.get("seasons", [])),
        activities=tuple(item.get("activities", [])),
        associated=tuple(value.lower() for value in item.get("associated", [])),
    )


def _flavor_category(key: str, item: dict) -> FlavorCategory:
    label = item["label"]
    defaults = item.get("defaults")
    return FlavorCategory(
        key=key,
        label=label,
        keywords=tuple(value.lower() for value in item.get("keywords", [])),
        defaults=_flavor_record(key, label, defaults) if defaults else None,
        notes=tuple(_flavor_record(note, label, note_item) for note, note_item in item.get("notes", {}).items()),
    )


def _region(item: dict) -> RegionProfile:
    return RegionProfile(
        name=item["name"],
        country=item["country"],
        subregion=item.get("subregion"),
        latitude=tuple(item["bounds"]["lat"]),
        longitude=tuple(item["bounds"]["lon"]),
        aliases=tuple(value.lower() for value in item.get("aliases", [])),
        description=item.get("description", ""),
        notes=tuple(item.get("notes", [])),
    )


def _tea_type(key: str, item: dict) -> TeaTypeProfile:
    base = item["base"]
    profile = _tea_type_profile(key, base)
    sub_types = {
        name: _tea_type_profile(name, {**base, **overrides})
        for name, overrides in item.get("sub_types", {}).items()
    }
    return replace(profile, sub_types=MappingProxyType(sub_types))


def _tea_type_profile(key: str, item: dict) -> TeaTypeProfile:
    return TeaTypeProfile(
        key=key,
        description=item.get("description", ""),
        caffeine=item.get("caffeine", "Unknown"),
        theanine=item.get("theanine", "Unknown"),
        flavor_categories=tuple(item.get("flavor_categories", [])),
        seasonal_tendency=item.get("seasonal_tendency", "neutral"),
        time_of_day=tuple(item.get("time_of_day", [])),
        activities=tuple(item.get("activities", [])),
        processing=tuple(item.get("processing", [])),
    )


def _grouped_registry(
    domain: str,
    clusters: list[dict],
    extras: list[str],
    *,
    aliases: Mapping[str, Iterable[str]] | None = None,
) -> CandidateRegistry:
    groups = [Group(label=item["label"], members=tuple(item["members"])) for item in clusters]
    names = unique([name for group in groups for name in group.members] + list(extras))
    return CandidateRegistry(domain, names, groups=groups, aliases=aliases)


def processing_keyword(text: str, aliases: Mapping[str, str] | None = None) -> str:
    """Lowercase a processing term and map it onto its rule keyword."""
    key = " ".join((text or "").strip().lower().split())
    aliases = data.PROCESSING_KEYWORD_ALIASES if aliases is None else aliases
    return aliases.get(key, key)


def _keywords(values: Iterable[str]) -> frozenset[str]:
    return frozenset(processing_keyword(value) for value in values)


def _brewing_rule(style: str, tea_type: str, index: int, row: dict) -> BrewingRule:
    conditions = row.get("conditions", {})
    sub_type = conditions.get("sub_type")
    return BrewingRule(
        style=style,
        tea_type=tea_type,
        index=index,
        sub_type=sub_type.lower() if sub_type else None,
        processing=_keywords(conditions.get("processing", [])),
        any_processing=_keywords(conditions.get("any_processing", [])),
        not_processing=_keywords(conditions.get("not_processing", [])),
        leaf_amount=row["leaf_amount"],
        water_temperature=row["water_temperature"],
        steeping_times=tuple(row["steeping_times"]),
        rinses=row.get("rinses", 0),
        vessels=tuple(row.get("vessels", [])),
        notes=row.get("notes"),
        examples=tuple(row.get("examples", [])),
    )
