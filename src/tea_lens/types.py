"""Data models for analysis and recommendation output."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Tendency = Literal["cooling", "neutral", "warming"]
Hemisphere = Literal["Northern", "Southern", "Unknown"]


class _Result(BaseModel):
    model_config = ConfigDict(frozen=True)


class ScoreAdjustment(_Result):
    """Single additive adjustment applied to a candidate score."""

    step: str
    candidate: str
    delta: float
    value: float
    reason: str | None = None


class ScoredCandidate(_Result):
    name: str
    score: int


class Cluster(_Result):
    """Group of related candidates that cleared the cluster threshold."""

    label: str
    members: list[ScoredCandidate] = Field(default_factory=list)
    score: int = 0


class CyclicRange(_Result):
    """Contiguous run of candidates in a cyclic ordering."""

    start: str
    end: str
    score: int
    members: list[str] = Field(default_factory=list)
    wraparound: bool = False


class CompoundLevels(_Result):
    caffeine_level: float = 0.0
    l_theanine_level: float = 0.0
    ratio: float = 0.0


class CompoundAnalysis(_Result):
    """Caffeine / L-theanine interpretation."""

    description: str
    levels: CompoundLevels = Field(default_factory=CompoundLevels)
    ratio_category: str = "N/A"
    stimulation_level: str = "None"
    relaxation_level: str = "None"
    compound_profile: str = "N/A"


class ProcessingAnalysis(_Result):
    """Aggregated impact of the processing methods."""

    description: str
    applied_methods: list[str] = Field(default_factory=list)
    oxidation_level: float | None = None
    roast_level: str = "Unknown"
    flavor_impact: list[str] = Field(default_factory=list)
    body_impact: str = "Unchanged"
    energetic_tendency: Tendency = "neutral"
    alertness_modifier: str = "neutral"
    compound_notes: list[str] = Field(default_factory=list)
    unmatched_methods: list[str] = Field(default_factory=list)


class RegionInfo(_Result):
    region: str = "Unknown"
    country: str | None = None
    subregion: str | None = None
    description: str | None = None


class ClimateAnalysis(_Result):
    altitude: float | None = None
    altitude_category: str = "Unknown"
    humidity: float | None = None
    humidity_category: str = "Unknown"
    temperature: float | None = None
    temperature_category: str = "Unknown"
    solar_radiation: float | None = None
    solar_radiation_category: str = "Unknown"
    latitude_zone: str = "Unknown"


class HarvestSeason(_Result):
    harvest_month: int | None = None
    harvest_season: str = "Unknown"
    hemisphere: Hemisphere = "Unknown"
    quality_indicator: str = "Unknown"
    seasonal_flavor_profile: list[str] = Field(default_factory=list)
    seasonal_description: str | None = None


class GeographyAnalysis(_Result):
    """Growing-region, climate and harvest-season interpretation."""

    description: str
    location: RegionInfo = Field(default_factory=RegionInfo)
    climate: ClimateAnalysis = Field(default_factory=ClimateAnalysis)
    season: HarvestSeason = Field(default_factory=HarvestSeason)
    flavor_influences: list[str] = Field(default_factory=list)
    mouthfeel_influences: list[str] = Field(default_factory=list)
    compound_tendencies: list[str] = Field(default_factory=list)


class FlavorAnalysis(_Result):
    """Flavor-note interpretation with aggregated pairing hints."""

    description: str
    identified_flavors: list[str] = Field(default_factory=list)
    dominant_flavors: list[str] = Field(default_factory=list)
    dominant_categories: list[str] = Field(default_factory=list)
    intensity: str = "N/A"
    food_pairing_hints: list[str] = Field(default_factory=list)
    seasonal_affinity_hints: list[str] = Field(default_factory=list)
    activity_hints: list[str] = Field(default_factory=list)
    unmatched_flavors: list[str] = Field(default_factory=list)


class TeaTypeAnalysis(_Result):
    """Baseline characteristics of the tea's category."""

    description: str
    primary_type: str = ""
    sub_type: str | None = None
    typical_caffeine: str = "Unknown"
    typical_theanine: str = "Unknown"
    dominant_flavor_categories: list[str] = Field(default_factory=list)
    seasonal_tendency: str = "neutral"
    base_time_of_day: list[str] = Field(default_factory=list)
    base_activity_hints: list[str] = Field(default_factory=list)
    common_processing: list[str] = Field(default_factory=list)


class SeasonMatch(_Result):
    scores: dict[str, int] = Field(default_factory=dict)
    recommended: list[ScoredCandidate] = Field(default_factory=list)
    ideal_ranges: list[CyclicRange] = Field(default_factory=list)
    simplified_scores: dict[str, int] = Field(default_factory=dict)
    simplified_recommended: list[str] = Field(default_factory=list)
    description: str = ""
    trace: list[ScoreAdjustment] = Field(default_factory=list)


class TimeMatch(_Result):
    scores: dict[str, int] = Field(default_factory=dict)
    recommended: list[ScoredCandidate] = Field(default_factory=list)
    ideal_ranges: list[CyclicRange] = Field(default_factory=list)
    description: str = ""
    trace: list[ScoreAdjustment] = Field(default_factory=list)


class ActivityMatch(_Result):
    scores: dict[str, int] = Field(default_factory=dict)
    recommended: list[ScoredCandidate] = Field(default_factory=list)
    clusters: list[Cluster] = Field(default_factory=list)
    description: str = ""
    trace: list[ScoreAdjustment] = Field(default_factory=list)


class FoodMatch(_Result):
    scores: dict[str, int] = Field(default_factory=dict)
    recommended: list[ScoredCandidate] = Field(default_factory=list)
    clusters: list[Cluster] = Field(default_factory=list)
    description: str = ""
    trace: list[ScoreAdjustment] = Field(default_factory=list)


class BrewingRecommendation(_Result):
    """Parameters from the first brewing rule that matched."""

    style: str
    tea_type: str
    leaf_amount: str
    water_temperature: str
    steeping_times: list[int] = Field(default_factory=list)
    rinses: int = 0
    vessels: list[str] = Field(default_factory=list)
    notes: str | None = None
    example_teas: list[str] = Field(default_factory=list)
    matched_conditions: list[str] = Field(default_factory=list)
    rule_index: int = 0


class BrewingMatch(_Result):
    gongfu: BrewingRecommendation | None = None
    western: BrewingRecommendation | None = None
    keywords: list[str] = Field(default_factory=list)
    description: str = ""


class TeaInsights(_Result):
    """Every analysis and recommendation derived for a single tea."""

    name: str | None = None
    type: str | None = None
    compounds: CompoundAnalysis
    processing: ProcessingAnalysis
    geography: GeographyAnalysis
    flavor: FlavorAnalysis
    tea_type: TeaTypeAnalysis
    season: SeasonMatch
    time_of_day: TimeMatch
    activity: ActivityMatch
    food: FoodMatch
    brewing: BrewingMatch = Field(default_factory=BrewingMatch)
