# Jal Assistant - Offline Advisory Service
# Water-borne disease surveillance dashboard helpers

"""
Jal Assistant - Offline Advisory Service

This package provides the offline assistant layer of the water-borne
disease surveillance dashboard.

Modules:
    config: Centralized configuration (thresholds, paths, report settings)
    data_pipeline: CSV loading, validation, record conversion
    advisory: Summaries, assistant replies, precautions, simulated reports

Usage:
    from src.data_pipeline import load_assistant_context
    from src.advisory import ask_jal_assistant

    context = load_assistant_context()
    reply = asyncio.run(ask_jal_assistant("Which state has most cases?", context, "en"))

Version: 0.3.0
Author: Jal Surveillance Team
"""

__version__ = "0.3.0"
__author__ = "Jal Surveillance Team"

# Expose key classes and functions at package level
from .config import AdvisoryConfig, DEFAULT_CONFIG
from .data_pipeline import (
    load_assistant_context,
    load_states_frame,
    load_water_reports_frame,
    states_from_frame,
    water_reports_from_frame,
)
