"""tea-lens: Score tea attributes and derive season, time, activity, food and brewing recommendations."""

from tea_lens.config import EngineConfig, MatcherConfig
from tea_lens.core import analyze_tea, load_tea
from tea_lens.schema import Geography, Processing, Tea
from tea_lens.types import TeaInsights

__version__ = "0.1.0"

__all__ = [
    "analyze_tea",
    "load_tea",
    "EngineConfig",
    "Geography",
    "MatcherConfig",
    "Processing",
    "Tea",
    "TeaInsights",
    "__version__",
]
