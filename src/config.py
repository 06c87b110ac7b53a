"""
Jal Assistant - Centralized Configuration Module

This module provides a single source of truth for the thresholds, data paths
and constants used by the offline advisory service. Having centralized
configuration enables:
- Easy tuning without code changes
- Clear documentation of all thresholds
- Consistent behavior between the CLI, the dashboard and the tests

Author: Jal Surveillance Team
Version: 0.3.0
"""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, Any
import os


# =============================================================================
# Environment Detection
# =============================================================================
def _get_project_root() -> Path:
    """Detect project root by looking for known markers."""
    current = Path(__file__).resolve().parent.parent
    markers = ["run_assistant.py", "data"]

    for _ in range(5):  # Max 5 levels up
        if all((current / marker).exists() for marker in markers[:1]):
            return current
        current = current.parent

    # Fallback to parent of src/
    return Path(__file__).resolve().parent.parent


PROJECT_ROOT = _get_project_root()


# =============================================================================
# Data Configuration
# =============================================================================
@dataclass
class DataConfig:
    """Configuration for the state and water-quality input files."""

    data_dir: Path = field(default_factory=lambda: PROJECT_ROOT / "data" / "sample")
    states_csv: str = "state_disease_cases.csv"
    water_reports_csv: str = "water_quality_reports.csv"

    @property
    def states_path(self) -> Path:
        """Full path to the state/disease CSV."""
        return Path(self.data_dir) / self.states_csv

    @property
    def water_reports_path(self) -> Path:
        """Full path to the water-quality CSV."""
        return Path(self.data_dir) / self.water_reports_csv

    @classmethod
    def from_env(cls) -> "DataConfig":
        defaults = cls()
        return cls(
            data_dir=Path(os.getenv("JAL_DATA_DIR", str(defaults.data_dir))),
            states_csv=os.getenv("JAL_STATES_CSV", defaults.states_csv),
            water_reports_csv=os.getenv("JAL_WATER_REPORTS_CSV", defaults.water_reports_csv),
        )

    def validate(self) -> None:
        """Validate configuration values."""
        if not self.states_csv:
            raise ValueError("states_csv cannot be empty")
        if not self.water_reports_csv:
            raise ValueError("water_reports_csv cannot be empty")


# =============================================================================
# Water Quality Thresholds
# =============================================================================
@dataclass
class WaterQualityConfig:
    """Drinking-water thresholds used for the latest-site verdict."""

    ph_min: float = 6.5  # inclusive
    ph_max: float = 8.5  # inclusive
    turbidity_max_ntu: float = 5.0  # exclusive

    def validate(self) -> None:
        """Validate configuration values."""
        if not 0 <= self.ph_min <= self.ph_max <= 14:
            raise ValueError(
                f"pH bounds must satisfy 0 <= ph_min <= ph_max <= 14, "
                f"got ({self.ph_min}, {self.ph_max})"
            )
        if self.turbidity_max_ntu <= 0:
            raise ValueError(f"turbidity_max_ntu must be > 0, got {self.turbidity_max_ntu}")


# =============================================================================
# Simulated Report Configuration
# =============================================================================
@dataclass
class MockReportConfig:
    """Configuration for the simulated advanced report."""

    # score = score_min + floor(random() * score_span)
    score_min: int = 50
    score_span: int = 40
    safe_score_threshold: int = 75  # strictly greater is "Safe"

    # Default fallback location (Guwahati)
    fallback_lat: float = 26.1445
    fallback_lng: float = 91.7362

    def validate(self) -> None:
        """Validate configuration values."""
        if self.score_span < 1:
            raise ValueError(f"score_span must be >= 1, got {self.score_span}")
        if not -90 <= self.fallback_lat <= 90:
            raise ValueError(f"fallback_lat must be in [-90, 90], got {self.fallback_lat}")
        if not -180 <= self.fallback_lng <= 180:
            raise ValueError(f"fallback_lng must be in [-180, 180], got {self.fallback_lng}")


# =============================================================================
# Assistant Configuration
# =============================================================================
@dataclass
class AssistantConfig:
    """Identity and runtime settings of the assistant."""

    assistant_name: str = "Jal Assistant"
    default_language: str = "en"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AssistantConfig":
        defaults = cls()
        return cls(
            assistant_name=defaults.assistant_name,
            default_language=os.getenv("JAL_LANGUAGE", defaults.default_language),
            log_level=os.getenv("JAL_LOG_LEVEL", defaults.log_level),
        )

    def validate(self) -> None:
        """Validate configuration values."""
        if self.log_level.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log_level: {self.log_level}")
        if not self.default_language:
            raise ValueError("default_language cannot be empty")


# =============================================================================
# Master Configuration
# =============================================================================
@dataclass
class AdvisoryConfig:
    """
    Master configuration for the offline advisory service.

    Usage:
        config = AdvisoryConfig()  # Use defaults
        config.validate()  # Check all values

        # Or customize:
        config = AdvisoryConfig(
            water=WaterQualityConfig(turbidity_max_ntu=4.0),
        )
    """

    data: DataConfig = field(default_factory=DataConfig)
    water: WaterQualityConfig = field(default_factory=WaterQualityConfig)
    report: MockReportConfig = field(default_factory=MockReportConfig)
    assistant: AssistantConfig = field(default_factory=AssistantConfig)

    @classmethod
    def from_env(cls) -> "AdvisoryConfig":
        return cls(data=DataConfig.from_env(), assistant=AssistantConfig.from_env())

    def validate(self) -> None:
        """Validate all configuration sections."""
        self.data.validate()
        self.water.validate()
        self.report.validate()
        self.assistant.validate()

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for logging/serialization."""
        return {
            "project_root": str(PROJECT_ROOT),
            "data": {
                "states_path": str(self.data.states_path),
                "water_reports_path": str(self.data.water_reports_path),
            },
            "water": {
                "ph_min": self.water.ph_min,
                "ph_max": self.water.ph_max,
                "turbidity_max_ntu": self.water.turbidity_max_ntu,
            },
            "report": {
                "score_min": self.report.score_min,
                "score_span": self.report.score_span,
                "safe_score_threshold": self.report.safe_score_threshold,
            },
            "assistant": {
                "name": self.assistant.assistant_name,
                "default_language": self.assistant.default_language,
            },
        }


# =============================================================================
# Default Instance
# =============================================================================
DEFAULT_CONFIG = AdvisoryConfig()


if __name__ == "__main__":
    config = AdvisoryConfig.from_env()
    config.validate()
    print("✓ Configuration validated successfully")
    print(f"\nProject root: {PROJECT_ROOT}")
    for section, values in config.to_dict().items():
        print(f"  {section}: {values}")
