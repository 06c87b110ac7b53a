# src/advisory/advisory_router.py
"""
Advisory Router
===============

Intent detection and offline replies for the Jal Assistant.

This module provides:
    - detect_intent(): Classify a query by keyword containment
    - get_offline_assistant_reply(): Build the reply text for a query
    - ask_jal_assistant(): Text-only entry point
    - ask_jal_assistant_with_voice(): Response envelope with (absent) audio

Keyword groups are checked in a fixed priority order and the first match
wins. Matching is plain substring containment on the lower-cased query, so
"statement" matches "state".
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Literal, Optional

from ..config import AdvisoryConfig
from .advisory_messages import OFFLINE_MODE_NOTICE, PH_RANGE_FACT
from .advisory_tools import (
    AssistantContext,
    get_recent_water_summary,
    get_top_state_summary,
)

logger = logging.getLogger(__name__)


# =============================================================================
# TYPE DEFINITIONS
# =============================================================================

Intent = Literal[
    "ph_fact",
    "state_overview",
    "water_quality",
    "offline_fallback",
]


@dataclass
class JalAssistantResponse:
    """Assistant reply. Audio is never synthesized in offline mode."""
    text: str
    audio_base64: Optional[str] = None
    audio_mime_type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize, dropping absent audio fields."""
        return {k: v for k, v in asdict(self).items() if v is not None}


# =============================================================================
# KEYWORDS FOR INTENT DETECTION
# =============================================================================

PH_KEYWORDS = ["ph", "safe range"]

STATE_KEYWORDS = ["state", "disease", "cases"]

WATER_KEYWORDS = ["water", "quality", "turbidity"]


# =============================================================================
# INTENT DETECTION
# =============================================================================

def detect_intent(query: str) -> Intent:
    """
    Classify a user query into an intent category.

    Args:
        query: User's input message

    Returns:
        Intent literal string
    """
    text = query.lower()

    # 1) Fixed pH fact
    if any(kw in text for kw in PH_KEYWORDS):
        return "ph_fact"

    # 2) State burden + latest water reading
    if any(kw in text for kw in STATE_KEYWORDS):
        return "state_overview"

    # 3) Latest water reading only
    if any(kw in text for kw in WATER_KEYWORDS):
        return "water_quality"

    # 4) Fallback: disclaimer + both summaries
    return "offline_fallback"


# =============================================================================
# REPLY BUILDERS
# =============================================================================

def get_offline_assistant_reply(
    query: str,
    context: AssistantContext,
    config: Optional[AdvisoryConfig] = None,
) -> str:
    """
    Answer a query from the dashboard data without any external service.

    Args:
        query: User's input message
        context: States and water reports currently on the dashboard
        config: Optional thresholds override

    Returns:
        Reply text
    """
    intent = detect_intent(query)
    logger.debug(f"Offline reply intent={intent}")

    if intent == "ph_fact":
        return PH_RANGE_FACT

    if intent == "state_overview":
        return (
            f"{get_top_state_summary(context.states)} "
            f"{get_recent_water_summary(context.reports, config)}"
        )

    if intent == "water_quality":
        return get_recent_water_summary(context.reports, config)

    return (
        f"{OFFLINE_MODE_NOTICE} "
        f"{get_top_state_summary(context.states)} "
        f"{get_recent_water_summary(context.reports, config)}"
    )


# =============================================================================
# PUBLIC ENTRY POINTS
# =============================================================================

async def ask_jal_assistant(
    query: str,
    context: AssistantContext,
    language_code: str,
) -> str:
    """Return only the reply text of ask_jal_assistant_with_voice()."""
    result = await ask_jal_assistant_with_voice(query, context, language_code)
    return result.text


async def ask_jal_assistant_with_voice(
    query: str,
    context: AssistantContext,
    language_code: str,
) -> JalAssistantResponse:
    """
    Answer a query and wrap it in a response envelope.

    The language code is accepted for interface compatibility and does not
    change the reply. Audio fields are left empty.
    """
    logger.debug(f"Jal Assistant query (language={language_code!r}): {query[:50]!r}")
    return JalAssistantResponse(text=get_offline_assistant_reply(query, context))
