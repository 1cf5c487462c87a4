"""Core analysis entry points."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from tea_lens.calculators import (
    CompoundCalculator,
    FlavorCalculator,
    GeographyCalculator,
    ProcessingCalculator,
    TeaTypeCalculator,
)
from tea_lens.config import EngineConfig
from tea_lens.exceptions import TeaInputError
from tea_lens.matchers import ActivityMatcher, BrewingMatcher, FoodMatcher, SeasonMatcher, TimeMatcher
from tea_lens.reference import ReferenceData, load_reference_data
from tea_lens.schema import Tea
from tea_lens.types import TeaInsights

logger = logging.getLogger(__name__)


def analyze_tea(
    tea: Tea,
    config: EngineConfig | None = None,
    *,
    reference: ReferenceData | None = None,
) -> TeaInsights:
    """Run every calculator and matcher over a single tea.

    Args:
        tea: Tea record to analyze.
        config: Matcher thresholds. Defaults to `EngineConfig()`.
        reference: Reference tables. Defaults to the packaged tables.

    Returns:
        TeaInsights with the five analyses, the four recommendation sets
        and the brewing parameters.
    """
    config = config or EngineConfig()
    reference = reference or load_reference_data()

    compounds = CompoundCalculator(reference).analyze(tea)
    processing = ProcessingCalculator(reference).analyze(tea)
    geography = GeographyCalculator(reference).analyze(tea)
    flavor = FlavorCalculator(reference).analyze(tea)
    tea_type = TeaTypeCalculator(reference).analyze(tea)

    name = tea.name
    season = SeasonMatcher(config.season, reference).match(geography, processing, tea_type, flavor, tea_name=name)
    time_of_day = TimeMatcher(config.time_of_day, reference).match(compounds, tea_type, tea_name=name)
    activity = ActivityMatcher(config.activity, reference).match(compounds, tea_type, flavor, tea_name=name)
    food = FoodMatcher(config.food, reference).match(flavor, processing, tea_type, tea_name=name)
    brewing = BrewingMatcher(reference).match(tea, processing, tea_type, geography, tea_name=name)
    logger.debug("analyzed tea %r", name)

    return TeaInsights(
        name=tea.name,
        type=tea.type,
        compounds=compounds,
        processing=processing,
        geography=geography,
        flavor=flavor,
        tea_type=tea_type,
        season=season,
        time_of_day=time_of_day,
        activity=activity,
        food=food,
        brewing=brewing,
    )


def load_tea(path: str | Path) -> Tea:
    """Read one tea record from a JSON file.

    Raises:
        TeaInputError: The file is missing, not JSON, or not a valid tea record.
    """
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise TeaInputError(f"File not found: {path}") from e
    except OSError as e:
        raise TeaInputError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise TeaInputError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(payload, dict):
        raise TeaInputError(f"Expected a JSON object in {path}")
    try:
        return Tea.model_validate(payload)
    except ValidationError as e:
        raise TeaInputError(f"Invalid tea record in {path}: {e}") from e
