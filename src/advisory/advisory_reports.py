# src/advisory/advisory_reports.py
"""
Simulated Advanced Reports
==========================

Mock analytics report returned while the AI analytics service is
unavailable.

This module provides:
    - ReportLocation: City/state/date the report was requested for
    - classify_report_type(): Map a free-text label to a report bucket
    - get_mock_advanced_report(): Build the simulated report
    - get_advanced_report(): Async entry point used by the dashboard

╔════════════════════════════════════════════════════════════════════════════╗
║  The score is the only random value. Metric values are fixed literals     ║
║  and are NOT derived from the score. Every report has is_simulated=True.  ║
╚════════════════════════════════════════════════════════════════════════════╝
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Any, Dict, Literal, Mapping, Optional, Protocol, Union

from ..config import DEFAULT_CONFIG, AdvisoryConfig
from .advisory_messages import (
    SIMULATED_REPORT_ALERTS,
    SIMULATED_REPORT_RECOMMENDATIONS,
)

logger = logging.getLogger(__name__)


# =============================================================================
# TYPE DEFINITIONS
# =============================================================================

ReportBucket = Literal["water", "disease", "other"]


class RandomSource(Protocol):
    def random(self) -> float: ...


@dataclass(frozen=True)
class ReportLocation:
    """Where a report was requested for. Only the city is required."""
    city: str
    state: str = ""
    date: str = ""
    time: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ReportLocation":
        return cls(
            city=str(data.get("city", "")),
            state=str(data.get("state", "")),
            date=str(data.get("date", "")),
            time=data.get("time"),
        )


LocationLike = Union[ReportLocation, Mapping[str, Any]]


# =============================================================================
# LOOKUP TABLES
# =============================================================================

# (bucket, is_safe) -> verdict
VERDICTS: Dict[tuple, str] = {
    ("water", True): "Safe for Consumption",
    ("water", False): "Requires Filtration",
    ("disease", True): "Low Health Risk",
    ("disease", False): "Elevated Viral Risk",
    ("other", True): "Stable Conditions",
    ("other", False): "Caution Advised",
}

# (bucket, is_safe) -> closing clause of the summary
SUMMARY_DETAILS: Dict[tuple, str] = {
    ("water", True): "water parameters are within acceptable limits.",
    ("water", False): "turbidity levels are slightly high, boiling advised.",
    ("disease", True): "seasonal variations in local health data.",
    ("disease", False): "seasonal variations in local health data.",
    ("other", True): "nominal environmental parameters.",
    ("other", False): "nominal environmental parameters.",
}

# bucket -> four (name, value, unit, status) rows
KEY_METRICS: Dict[str, tuple] = {
    "water": (
        ("pH Level", "7.4", "", "Neutral"),
        ("Turbidity", "12", "NTU", "Bad"),
        ("Dissolved Oxygen", "6.2", "mg/L", "Good"),
        ("E. Coli", "4", "CFU", "Good"),
    ),
    "disease": (
        ("Daily OPD", "145", "patients", "Neutral"),
        ("Viral Fever", "45", "cases", "Neutral"),
        ("Bed Occupancy", "68", "%", "Good"),
        ("Critical Cases", "2", "cases", "Good"),
    ),
    "other": (
        ("Larval Density", "12", "per dip", "Neutral"),
        ("Fogging Coverage", "85", "%", "Neutral"),
        ("Stagnant Water", "Low", "risk", "Good"),
        ("Vector Index", "0.4", "", "Good"),
    ),
}


# =============================================================================
# HELPERS
# =============================================================================

def classify_report_type(report_type: str) -> ReportBucket:
    """Bucket a free-text report label (case-insensitive containment)."""
    label = report_type.lower()
    if "water" in label or "groundwater" in label:
        return "water"
    if "disease" in label or "hospital" in label:
        return "disease"
    return "other"


def draw_score(
    rng: Optional[RandomSource] = None,
    config: Optional[AdvisoryConfig] = None,
) -> int:
    """Draw score_min + floor(random() * score_span)."""
    settings = (config or DEFAULT_CONFIG).report
    source = rng if rng is not None else random
    return settings.score_min + math.floor(source.random() * settings.score_span)


def _as_location(location: LocationLike) -> ReportLocation:
    if isinstance(location, ReportLocation):
        return location
    return ReportLocation.from_mapping(location)


# =============================================================================
# REPORT BUILDERS
# =============================================================================

def get_mock_advanced_report(
    report_type: str,
    location: LocationLike,
    rng: Optional[RandomSource] = None,
    config: Optional[AdvisoryConfig] = None,
) -> Dict[str, Any]:
    """
    Build a simulated report for a report type and location.

    Args:
        report_type: Free-text label, e.g. "Groundwater Test".
        location: ReportLocation or mapping with at least "city".
        rng: Object with a random() method returning [0, 1). Defaults to
            the module-level random generator; pass random.Random(seed)
            for reproducible scores.
        config: Optional score/coordinate override.

    Returns:
        Report dictionary with is_simulated=True.
    """
    settings = (config or DEFAULT_CONFIG).report
    loc = _as_location(location)
    bucket = classify_report_type(report_type)

    score = draw_score(rng, config)
    is_safe = score > settings.safe_score_threshold

    summary = (
        f"This is a simulated report for {loc.city} because the AI service is "
        f"currently unreachable (likely Free Tier rate limit). "
        f"Data suggests {SUMMARY_DETAILS[(bucket, is_safe)]}"
    )

    return {
        "title": f"{report_type} - Simulated Analysis",
        "overall_status": "Safe" if is_safe else "Caution",
        "score": score,
        "verdict": VERDICTS[(bucket, is_safe)],
        "summary": summary,
        "key_metrics": [
            {"name": name, "value": value, "unit": unit, "status": status}
            for name, value, unit, status in KEY_METRICS[bucket]
        ],
        "alerts": list(SIMULATED_REPORT_ALERTS),
        "recommendations": list(SIMULATED_REPORT_RECOMMENDATIONS),
        "coordinates": {
            "lat": settings.fallback_lat,
            "lng": settings.fallback_lng,
        },
        "is_simulated": True,
    }


async def get_advanced_report(
    report_type: str,
    location: LocationLike,
    rng: Optional[RandomSource] = None,
    config: Optional[AdvisoryConfig] = None,
) -> Dict[str, Any]:
    """Log the offline notice and return the simulated report unchanged."""
    loc = _as_location(location)
    logger.info(
        f"Offline mode active. Returning simulated {report_type} report "
        f"for {loc.city}, {loc.state}."
    )
    return get_mock_advanced_report(report_type, loc, rng=rng, config=config)
