"""Shared fixtures for the Jal Assistant tests."""

import pytest

from src.advisory.advisory_tools import (
    AssistantContext,
    DiseaseEntry,
    StateRecord,
    WaterQualityRecord,
)


class FixedRandom:
    """Random source returning a fixed value from random()."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def states():
    return (
        StateRecord(
            name="Meghalaya",
            total_affected=930,
            diseases=(DiseaseEntry("Typhoid", 410), DiseaseEntry("Acute Diarrhoeal Disease", 520)),
        ),
        StateRecord(
            name="Assam",
            total_affected=1840,
            diseases=(DiseaseEntry("Cholera", 720), DiseaseEntry("Typhoid", 610)),
        ),
        StateRecord(name="Mizoram", total_affected=0),
    )


@pytest.fixture
def reports():
    return (
        WaterQualityRecord("Loktak Village Well", "Well", 6.2, 7.5),
        WaterQualityRecord("Guwahati Ward 12 Tap", "Tap", 7.0, 2.0),
    )


@pytest.fixture
def context(states, reports):
    return AssistantContext(states=states, reports=reports)


@pytest.fixture
def empty_context():
    return AssistantContext()


@pytest.fixture
def fixed_random():
    return FixedRandom
