# src/advisory/__init__.py
"""
Jal Assistant Advisory Module
=============================

Offline fallback assistant for the water-borne disease surveillance
dashboard. Every answer is built locally from the dashboard data.

Components:
    - advisory_messages: Fixed texts and precaution lists
    - advisory_tools: Record types, summaries, health report, precautions
    - advisory_router: Intent detection and assistant entry points
    - advisory_reports: Simulated advanced reports
    - advisory_tab: Streamlit UI component (import it directly)
"""

from .advisory_messages import (
    JAL_ASSISTANT_NAME,
    JAL_ASSISTANT_DESCRIPTION,
    PH_RANGE_FACT,
)
from .advisory_tools import (
    AssistantContext,
    DiseaseEntry,
    StateRecord,
    WaterQualityRecord,
    classify_water_reading,
    generate_health_report,
    get_recent_water_summary,
    get_top_state_summary,
    suggest_preventive_measures,
)
from .advisory_router import (
    JalAssistantResponse,
    ask_jal_assistant,
    ask_jal_assistant_with_voice,
    detect_intent,
    get_offline_assistant_reply,
)
from .advisory_reports import (
    ReportLocation,
    classify_report_type,
    get_advanced_report,
    get_mock_advanced_report,
)

__all__ = [
    # Messages
    "JAL_ASSISTANT_NAME",
    "JAL_ASSISTANT_DESCRIPTION",
    "PH_RANGE_FACT",
    # Tools
    "AssistantContext",
    "DiseaseEntry",
    "StateRecord",
    "WaterQualityRecord",
    "classify_water_reading",
    "generate_health_report",
    "get_recent_water_summary",
    "get_top_state_summary",
    "suggest_preventive_measures",
    # Router
    "JalAssistantResponse",
    "ask_jal_assistant",
    "ask_jal_assistant_with_voice",
    "detect_intent",
    "get_offline_assistant_reply",
    # Reports
    "ReportLocation",
    "classify_report_type",
    "get_advanced_report",
    "get_mock_advanced_report",
]
