# src/advisory/advisory_tools.py
"""
Advisory Tools
==============

Record types and text builders for the Jal Assistant.

This module provides:
    - StateRecord / WaterQualityRecord: read-only inputs from the data layer
    - get_top_state_summary(): Sentence about the highest-burden state
    - get_recent_water_summary(): Sentence about the latest water reading
    - classify_water_reading(): pH/turbidity verdict
    - generate_health_report(): Two-paragraph state report
    - suggest_preventive_measures(): Three precautions per disease

╔════════════════════════════════════════════════════════════════════════════╗
║  All builders are total: empty inputs fall back to fixed sentences,       ║
║  out-of-range readings are reported, never rejected.                      ║
╚════════════════════════════════════════════════════════════════════════════╝
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from ..config import DEFAULT_CONFIG, AdvisoryConfig
from .advisory_messages import (
    CHOLERA_PREVENTIVE_MEASURES,
    DEFAULT_PREVENTIVE_MEASURES,
    DEFAULT_TOP_CONCERN,
    HEALTH_REPORT_RECOMMENDATION,
    NO_STATE_DATA_RESPONSE,
    NO_WATER_DATA_RESPONSE,
    TYPHOID_PREVENTIVE_MEASURES,
    VERDICT_ATTENTION,
    VERDICT_SAFE,
)

logger = logging.getLogger(__name__)


# =============================================================================
# DATA CLASSES
# =============================================================================

@dataclass(frozen=True)
class DiseaseEntry:
    """One disease reported for a state."""
    name: str
    affected: int


@dataclass(frozen=True)
class StateRecord:
    """State-level disease burden. The first disease is the top concern."""
    name: str
    total_affected: int
    diseases: Tuple[DiseaseEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class WaterQualityRecord:
    """Single water-quality reading (pH, turbidity in NTU)."""
    site_name: str
    site_type: str
    ph: float
    turbidity: float


@dataclass(frozen=True)
class AssistantContext:
    """Dashboard data the assistant answers from. Reports are oldest first."""
    states: Sequence[StateRecord] = field(default_factory=tuple)
    reports: Sequence[WaterQualityRecord] = field(default_factory=tuple)


# =============================================================================
# FORMATTING HELPERS
# =============================================================================

def format_number(value: Union[int, float]) -> str:
    """Render a reading the way the dashboard does (7.0 -> "7", 7.4 -> "7.4")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# =============================================================================
# SUMMARIES
# =============================================================================

def get_top_state_summary(states: Sequence[StateRecord]) -> str:
    """
    Name the state with the highest total affected count.

    Args:
        states: State records in any order.

    Returns:
        One sentence, or the fixed "no data" sentence for an empty sequence.
        Equal totals resolve to the earliest record.
    """
    if not states:
        return NO_STATE_DATA_RESPONSE
    top = max(states, key=lambda s: s.total_affected)
    return (
        f"{top.name} currently has the highest reported disease burden "
        f"with {top.total_affected} affected cases."
    )


def classify_water_reading(
    ph: float,
    turbidity: float,
    config: Optional[AdvisoryConfig] = None,
) -> str:
    """
    Return "within safe range" or "needs attention" for a reading.

    pH must lie in [ph_min, ph_max] and turbidity must be strictly below
    turbidity_max_ntu.
    """
    thresholds = (config or DEFAULT_CONFIG).water
    safe_ph = thresholds.ph_min <= ph <= thresholds.ph_max
    safe_turbidity = turbidity < thresholds.turbidity_max_ntu
    return VERDICT_SAFE if safe_ph and safe_turbidity else VERDICT_ATTENTION


def get_recent_water_summary(
    reports: Sequence[WaterQualityRecord],
    config: Optional[AdvisoryConfig] = None,
) -> str:
    """
    Describe the latest (last) water-quality report with a verdict.

    Args:
        reports: Reports in recency order, the last one being the latest.
        config: Optional thresholds override.

    Returns:
        One sentence, or the fixed "no data" sentence for an empty sequence.
    """
    if not reports:
        return NO_WATER_DATA_RESPONSE
    latest = reports[-1]
    verdict = classify_water_reading(latest.ph, latest.turbidity, config)
    return (
        f"Latest site {latest.site_name} ({latest.site_type}) shows "
        f"pH {format_number(latest.ph)} and turbidity {format_number(latest.turbidity)} NTU, "
        f"which {verdict}."
    )


# =============================================================================
# HEALTH REPORT / PREVENTIVE MEASURES
# =============================================================================

async def generate_health_report(state: StateRecord) -> str:
    """
    Build the offline analysis paragraph plus the fixed recommendation.

    The first disease entry is reported as the top concern; a state without
    diseases reports the generic concern with 0 cases.
    """
    top_disease = state.diseases[0] if state.diseases else None
    concern = (top_disease.name if top_disease else "") or DEFAULT_TOP_CONCERN
    cases = (top_disease.affected if top_disease else 0) or 0
    logger.debug(f"Health report for {state.name}: top concern {concern}")
    return (
        f"Offline analysis for {state.name}: total affected {state.total_affected}. "
        f"Top concern is {concern} with {cases} reported cases."
        f"\n\n{HEALTH_REPORT_RECOMMENDATION}"
    )


async def suggest_preventive_measures(disease_name: str) -> List[str]:
    """Return three precautions for cholera, typhoid, or any other disease."""
    disease = disease_name.lower()
    if "cholera" in disease:
        return list(CHOLERA_PREVENTIVE_MEASURES)
    if "typhoid" in disease:
        return list(TYPHOID_PREVENTIVE_MEASURES)
    return list(DEFAULT_PREVENTIVE_MEASURES)
