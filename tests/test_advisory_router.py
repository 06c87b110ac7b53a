"""Tests for intent detection and assistant replies."""

import asyncio

import pytest

from src.advisory.advisory_router import (
    JalAssistantResponse,
    ask_jal_assistant,
    ask_jal_assistant_with_voice,
    detect_intent,
    get_offline_assistant_reply,
)
from src.advisory.advisory_tools import get_recent_water_summary, get_top_state_summary

PH_FACT = "The safe pH range for drinking water is 6.5 to 8.5."


@pytest.mark.parametrize(
    "query, intent",
    [
        ("What is the safe pH range?", "ph_fact"),
        ("Is this within the SAFE RANGE", "ph_fact"),
        ("Which state has the most cases?", "state_overview"),
        ("disease trend", "state_overview"),
        ("print a statement", "state_overview"),
        ("How is the water quality?", "water_quality"),
        ("turbidity today", "water_quality"),
        ("hello there", "offline_fallback"),
        ("", "offline_fallback"),
    ],
)
def test_detect_intent(query, intent):
    assert detect_intent(query) == intent


def test_ph_keyword_wins_over_water():
    # "ph" beats "water" even when both appear
    assert detect_intent("water ph level") == "ph_fact"


def test_ph_reply_ignores_context(context, empty_context):
    assert get_offline_assistant_reply("What is the safe pH range?", context) == PH_FACT
    assert get_offline_assistant_reply("What is the safe pH range?", empty_context) == PH_FACT


def test_disease_reply_concatenates_summaries(context):
    expected = (
        f"{get_top_state_summary(context.states)} "
        f"{get_recent_water_summary(context.reports)}"
    )
    assert get_offline_assistant_reply("Any disease outbreaks?", context) == expected


def test_water_reply_is_water_summary_only(context):
    assert get_offline_assistant_reply("latest turbidity", context) == (
        get_recent_water_summary(context.reports)
    )


def test_fallback_reply_has_disclaimer(context):
    reply = get_offline_assistant_reply("hello", context)
    assert reply == (
        "I am running in offline mode without external AI APIs. "
        f"{get_top_state_summary(context.states)} "
        f"{get_recent_water_summary(context.reports)}"
    )


def test_fallback_reply_with_empty_context(empty_context):
    assert get_offline_assistant_reply("hello", empty_context) == (
        "I am running in offline mode without external AI APIs. "
        "No state disease data is available yet. "
        "No recent water quality reports are available."
    )


def test_ask_jal_assistant_returns_text(context):
    text = asyncio.run(ask_jal_assistant("How many cases?", context, "en"))
    assert text == get_offline_assistant_reply("How many cases?", context)


@pytest.mark.parametrize("language", ["en", "hi", "as", ""])
def test_language_code_does_not_change_reply(context, language):
    text = asyncio.run(ask_jal_assistant("hello", context, language))
    assert text == get_offline_assistant_reply("hello", context)


@pytest.mark.parametrize("query", ["What is the safe pH range?", "cases", "water", "hi", ""])
def test_voice_response_has_no_audio(context, query):
    response = asyncio.run(ask_jal_assistant_with_voice(query, context, "en"))
    assert isinstance(response, JalAssistantResponse)
    assert response.audio_base64 is None
    assert response.audio_mime_type is None
    assert response.to_dict() == {"text": response.text}
