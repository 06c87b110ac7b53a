"""Tests for configuration defaults, validation and environment overrides."""

from pathlib import Path

import pytest

from src.config import (
    DEFAULT_CONFIG,
    AdvisoryConfig,
    AssistantConfig,
    DataConfig,
    MockReportConfig,
    WaterQualityConfig,
)


def test_defaults_validate():
    DEFAULT_CONFIG.validate()
    assert DEFAULT_CONFIG.water.ph_min == 6.5
    assert DEFAULT_CONFIG.water.ph_max == 8.5
    assert DEFAULT_CONFIG.water.turbidity_max_ntu == 5.0
    assert DEFAULT_CONFIG.report.safe_score_threshold == 75


def test_default_data_files_exist():
    assert DEFAULT_CONFIG.data.states_path.is_file()
    assert DEFAULT_CONFIG.data.water_reports_path.is_file()


@pytest.mark.parametrize(
    "section",
    [
        WaterQualityConfig(ph_min=9.0, ph_max=8.0),
        WaterQualityConfig(ph_max=15.0),
        WaterQualityConfig(turbidity_max_ntu=0),
        MockReportConfig(score_span=0),
        MockReportConfig(fallback_lat=120.0),
        AssistantConfig(log_level="LOUD"),
        DataConfig(states_csv=""),
    ],
)
def test_invalid_sections_raise(section):
    with pytest.raises(ValueError):
        section.validate()


def test_master_validate_checks_sections():
    config = AdvisoryConfig(water=WaterQualityConfig(turbidity_max_ntu=-1))
    with pytest.raises(ValueError, match="turbidity_max_ntu"):
        config.validate()


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("JAL_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("JAL_STATES_CSV", "states.csv")
    monkeypatch.setenv("JAL_LANGUAGE", "as")
    monkeypatch.setenv("JAL_LOG_LEVEL", "debug")

    config = AdvisoryConfig.from_env()
    config.validate()

    assert config.data.states_path == Path(tmp_path) / "states.csv"
    assert config.data.water_reports_csv == "water_quality_reports.csv"
    assert config.assistant.default_language == "as"
    assert config.assistant.log_level == "debug"


def test_to_dict_lists_thresholds():
    as_dict = AdvisoryConfig().to_dict()
    assert as_dict["water"] == {"ph_min": 6.5, "ph_max": 8.5, "turbidity_max_ntu": 5.0}
    assert as_dict["assistant"]["name"] == "Jal Assistant"
