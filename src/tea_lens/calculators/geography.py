"""Growing-region, climate and harvest-season interpretation."""

from __future__ import annotations

import logging
import re
from typing import Sequence

from tea_lens.calculators.base import BaseCalculator
from tea_lens.reference import ClimateBucket, RegionProfile
from tea_lens.schema import Geography, Tea
from tea_lens.scoring.ordered import OrderedSet
from tea_lens.scoring.thresholds import UNKNOWN, categorize, is_number
from tea_lens.types import ClimateAnalysis, GeographyAnalysis, HarvestSeason, RegionInfo

logger = logging.getLogger(__name__)

NO_DATA = "No geographical data available."


def hemisphere(latitude: float | None) -> str:
    if not is_number(latitude):
        return "Unknown"
    return "Northern" if latitude >= 0 else "Southern"


def adjusted_month(month: int, southern: bool) -> int:
    """Shift a southern-hemisphere month onto the northern calendar."""
    shifted = month + 6 if southern else month
    return (shifted - 1) % 12 + 1


class GeographyCalculator(BaseCalculator):
    """Buckets climate measurements and resolves region and harvest season."""

    def analyze(self, tea: Tea) -> GeographyAnalysis:
        geo = tea.geography
        if geo is None and not tea.origin:
            return GeographyAnalysis(description=NO_DATA)
        geo = geo or Geography()

        region = self.resolve_region(geo.latitude, geo.longitude, tea.origin)
        climate, buckets = self._climate(geo)
        season = self.harvest_season(geo.harvest_month, geo.latitude)

        flavor = OrderedSet()
        mouthfeel = OrderedSet()
        compound = OrderedSet()
        for bucket in buckets:
            flavor.update(bucket.flavor)
            mouthfeel.update(bucket.mouthfeel)
            compound.update(bucket.compound)
        if region is not None:
            flavor.update(region.notes)

        location = RegionInfo()
        if region is not None:
            location = RegionInfo(
                region=region.name,
                country=region.country,
                subregion=region.subregion,
                description=region.description,
            )

        return GeographyAnalysis(
            description=_describe(tea.type, location, climate, season),
            location=location,
            climate=climate,
            season=season,
            flavor_influences=flavor.to_list(),
            mouthfeel_influences=mouthfeel.to_list(),
            compound_tendencies=compound.to_list(),
        )

    def resolve_region(
        self,
        latitude: float | None,
        longitude: float | None,
        origin: str | None = None,
    ) -> RegionProfile | None:
        """Coordinates first, then the free-text origin."""
        if is_number(latitude) and is_number(longitude):
            for region in self.reference.regions:
                if region.contains(latitude, longitude):
                    return region
        if origin:
            text = origin.strip().lower()
            for region in self.reference.regions:
                if _mentions(text, region.name.lower()) or any(_mentions(text, alias) for alias in region.aliases):
                    return region
            logger.debug("no region matched origin %r", origin)
        return None

    def harvest_season(self, month: int | None, latitude: float | None) -> HarvestSeason:
        side = hemisphere(latitude)
        valid = isinstance(month, int) and not isinstance(month, bool) and 1 <= month <= 12
        if not valid or side == "Unknown":
            profile = self.reference.seasonal_profiles.get(UNKNOWN)
            return HarvestSeason(
                harvest_month=month if valid else None,
                hemisphere=side,
                seasonal_description=profile.description if profile else None,
            )

        season = self.reference.harvest_months.get(adjusted_month(month, side == "Southern"), UNKNOWN)
        profile = self.reference.seasonal_profiles.get(season) or self.reference.seasonal_profiles.get(UNKNOWN)
        return HarvestSeason(
            harvest_month=month,
            harvest_season=season,
            hemisphere=side,
            quality_indicator=profile.quality if profile else UNKNOWN,
            seasonal_flavor_profile=list(profile.notes) if profile else [],
            seasonal_description=profile.description if profile else None,
        )

    def _climate(self, geo: Geography) -> tuple[ClimateAnalysis, list[ClimateBucket]]:
        ref = self.reference
        latitude = abs(geo.latitude) if is_number(geo.latitude) else None
        measurements = [
            ("altitude", geo.altitude, ref.elevation),
            ("humidity", geo.humidity, ref.humidity),
            ("temperature", geo.temperature, ref.temperature),
            ("solar_radiation", geo.solar_radiation, ref.solar_radiation),
            ("latitude", latitude, ref.latitude_zones),
        ]
        labels: dict[str, str] = {}
        matched: list[ClimateBucket] = []
        for name, value, table in measurements:
            label = categorize(value, table)
            labels[name] = label
            bucket = _find(table, label)
            if bucket is not None:
                matched.append(bucket)

        climate = ClimateAnalysis(
            altitude=geo.altitude,
            altitude_category=labels["altitude"],
            humidity=geo.humidity,
            humidity_category=labels["humidity"],
            temperature=geo.temperature,
            temperature_category=labels["temperature"],
            solar_radiation=geo.solar_radiation,
            solar_radiation_category=labels["solar_radiation"],
            latitude_zone=labels["latitude"],
        )
        return climate, matched


def _mentions(text: str, term: str) -> bool:
    return re.search(rf"\b{re.escape(term)}\b", text) is not None


def _find(table: Sequence[ClimateBucket], label: str) -> ClimateBucket | None:
    for bucket in table:
        if bucket.label == label:
            return bucket
    return None


def _describe(
    tea_type: str | None,
    location: RegionInfo,
    climate: ClimateAnalysis,
    season: HarvestSeason,
) -> str:
    subject = tea_type or "tea"
    if location.region != UNKNOWN:
        place = location.region if not location.country else f"{location.region}, {location.country}"
        parts = [f"This {subject} originates from {place}."]
    else:
        parts = [f"The growing region of this {subject} could not be identified."]
    if climate.altitude_category != UNKNOWN:
        parts.append(f"It is grown at {climate.altitude_category.lower()} elevation")
        if climate.latitude_zone != UNKNOWN:
            parts[-1] += f" in a {climate.latitude_zone.lower()} latitude zone"
        parts[-1] += "."
    if season.harvest_season != UNKNOWN:
        parts.append(f"Harvested in {season.harvest_season} ({season.quality_indicator}).")
    return " ".join(parts)
