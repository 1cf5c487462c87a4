"""Tests for matcher configuration."""

from tea_lens.config import ACTIVITY_DEFAULTS, FOOD_DEFAULTS, EngineConfig, MatcherConfig


def test_defaults_without_env(monkeypatch):
    for name in ("TEA_LENS_FOOD_BASELINE", "TEA_LENS_FOOD_MAX_RECOMMENDATIONS"):
        monkeypatch.delenv(name, raising=False)

    config = MatcherConfig.from_env("food", FOOD_DEFAULTS)

    assert config == FOOD_DEFAULTS


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TEA_LENS_ACTIVITY_ABSOLUTE_THRESHOLD", "50")
    monkeypatch.setenv("TEA_LENS_ACTIVITY_MAX_RECOMMENDATIONS", "5")
    monkeypatch.setenv("TEA_LENS_ACTIVITY_MIN_GROUP_MEMBERS", "2")

    config = MatcherConfig.from_env("activity", ACTIVITY_DEFAULTS)

    assert config.absolute_threshold == 50
    assert config.max_recommendations == 5
    assert config.min_group_members == 2
    assert config.relative_threshold == ACTIVITY_DEFAULTS.relative_threshold


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("TEA_LENS_ACTIVITY_ABSOLUTE_THRESHOLD", "high")
    monkeypatch.setenv("TEA_LENS_ACTIVITY_MAX_RECOMMENDATIONS", "three")

    config = MatcherConfig.from_env("activity", ACTIVITY_DEFAULTS)

    assert config.absolute_threshold == ACTIVITY_DEFAULTS.absolute_threshold
    assert config.max_recommendations == ACTIVITY_DEFAULTS.max_recommendations


def test_max_recommendations_can_be_disabled(monkeypatch):
    monkeypatch.setenv("TEA_LENS_ACTIVITY_MAX_RECOMMENDATIONS", "none")

    config = MatcherConfig.from_env("activity", ACTIVITY_DEFAULTS)

    assert config.max_recommendations is None


def test_engine_config_reads_each_matcher(monkeypatch):
    monkeypatch.setenv("TEA_LENS_TIME_GROUP_THRESHOLD", "60")
    monkeypatch.setenv("TEA_LENS_SEASON_RELATIVE_THRESHOLD", "5")

    config = EngineConfig.from_env()

    assert config.time_of_day.group_threshold == 60
    assert config.season.relative_threshold == 5
    assert config.food.baseline == 0
