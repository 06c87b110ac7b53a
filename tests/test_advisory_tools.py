"""Tests for the advisory summaries, health report and precautions."""

import asyncio

import pytest

from src.advisory.advisory_tools import (
    DiseaseEntry,
    StateRecord,
    WaterQualityRecord,
    classify_water_reading,
    format_number,
    generate_health_report,
    get_recent_water_summary,
    get_top_state_summary,
    suggest_preventive_measures,
)
from src.config import AdvisoryConfig, WaterQualityConfig


# =============================================================================
# get_top_state_summary
# =============================================================================

def test_top_state_names_highest_total(states):
    assert get_top_state_summary(states) == (
        "Assam currently has the highest reported disease burden with 1840 affected cases."
    )


def test_top_state_total_is_maximum(states):
    summary = get_top_state_summary(states)
    named = next(s for s in states if summary.startswith(s.name + " "))
    assert all(named.total_affected >= s.total_affected for s in states)


def test_top_state_empty():
    assert get_top_state_summary([]) == "No state disease data is available yet."


def test_top_state_tie_keeps_first():
    tied = [StateRecord("Tripura", 500), StateRecord("Manipur", 500)]
    assert get_top_state_summary(tied).startswith("Tripura ")


# =============================================================================
# get_recent_water_summary / classify_water_reading
# =============================================================================

@pytest.mark.parametrize(
    "ph, turbidity, expected",
    [
        (7.0, 2, "within safe range"),
        (9.0, 2, "needs attention"),
        (7.0, 6, "needs attention"),
        (6.5, 4.99, "within safe range"),
        (8.5, 0, "within safe range"),
        (7.0, 5, "needs attention"),
        (6.49, 1, "needs attention"),
    ],
)
def test_classify_water_reading(ph, turbidity, expected):
    assert classify_water_reading(ph, turbidity) == expected


def test_classify_water_reading_custom_thresholds():
    config = AdvisoryConfig(water=WaterQualityConfig(turbidity_max_ntu=2.0))
    assert classify_water_reading(7.0, 2.5, config) == "needs attention"


def test_recent_water_uses_last_report(reports):
    assert get_recent_water_summary(reports) == (
        "Latest site Guwahati Ward 12 Tap (Tap) shows pH 7 and turbidity 2 NTU, "
        "which within safe range."
    )


def test_recent_water_needs_attention():
    reports = [WaterQualityRecord("Loktak Village Well", "Well", 6.2, 7.5)]
    assert get_recent_water_summary(reports) == (
        "Latest site Loktak Village Well (Well) shows pH 6.2 and turbidity 7.5 NTU, "
        "which needs attention."
    )


def test_recent_water_empty():
    assert get_recent_water_summary([]) == "No recent water quality reports are available."


def test_format_number():
    assert format_number(7.0) == "7"
    assert format_number(7.4) == "7.4"
    assert format_number(3) == "3"


# =============================================================================
# generate_health_report
# =============================================================================

def test_health_report_uses_first_disease(states):
    meghalaya = states[0]
    report = asyncio.run(generate_health_report(meghalaya))
    assert report == (
        "Offline analysis for Meghalaya: total affected 930. "
        "Top concern is Typhoid with 410 reported cases.\n\n"
        "RECOMMENDATION: Prioritize chlorination checks and ORS stock "
        "in high-burden districts this week."
    )


def test_health_report_without_diseases():
    report = asyncio.run(generate_health_report(StateRecord("Mizoram", 0)))
    assert report.startswith(
        "Offline analysis for Mizoram: total affected 0. "
        "Top concern is water-borne disease with 0 reported cases."
    )
    assert report.count("\n\n") == 1


def test_health_report_blank_disease_name_falls_back():
    state = StateRecord("Nagaland", 12, (DiseaseEntry("", 12),))
    report = asyncio.run(generate_health_report(state))
    assert "Top concern is water-borne disease with 12 reported cases." in report


# =============================================================================
# suggest_preventive_measures
# =============================================================================

def test_measures_cholera():
    assert asyncio.run(suggest_preventive_measures("Cholera outbreak")) == [
        "Use chlorinated drinking water",
        "Wash fruits and utensils with clean water",
        "Use ORS and seek care immediately for severe diarrhea",
    ]


def test_measures_typhoid_case_insensitive():
    assert asyncio.run(suggest_preventive_measures("TYPHOID fever")) == [
        "Drink safe water only",
        "Avoid raw cut fruits from unknown vendors",
        "Complete prescribed antibiotics from a doctor",
    ]


@pytest.mark.parametrize("name", ["flu", ""])
def test_measures_default(name):
    assert asyncio.run(suggest_preventive_measures(name)) == [
        "Drink boiled or filtered water",
        "Wash hands with soap before meals",
        "Avoid uncovered street food",
    ]


def test_measures_returns_fresh_list():
    first = asyncio.run(suggest_preventive_measures("flu"))
    first.append("mutated")
    assert len(asyncio.run(suggest_preventive_measures("flu"))) == 3
