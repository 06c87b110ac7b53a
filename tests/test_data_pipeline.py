"""Tests for CSV loading and record conversion."""

import pandas as pd
import pytest

from src.advisory.advisory_tools import DiseaseEntry, StateRecord, WaterQualityRecord
from src.config import AdvisoryConfig, DataConfig
from src.data_pipeline import (
    load_assistant_context,
    load_states_frame,
    load_water_reports_frame,
    states_from_frame,
    states_to_frame,
    water_reports_from_frame,
    water_reports_to_frame,
)

STATES_CSV = """state,total_affected,disease,affected
Tripura,1210,Acute Diarrhoeal Disease,800
Tripura,1210,Typhoid,410
Assam,1840,Cholera,720
Mizoram,0,,
"""

WATER_CSV = """site_name,site_type,ph,turbidity
Umiam Reservoir,Reservoir,6.9,2.1
Loktak Village Well,Well,6.2,7.5
"""


@pytest.fixture
def data_config(tmp_path):
    (tmp_path / "state_disease_cases.csv").write_text(STATES_CSV)
    (tmp_path / "water_quality_reports.csv").write_text(WATER_CSV)
    return DataConfig(data_dir=tmp_path)


def test_states_from_frame_keeps_order(data_config):
    states = states_from_frame(load_states_frame(data_config))
    assert states == [
        StateRecord(
            "Tripura",
            1210,
            (DiseaseEntry("Acute Diarrhoeal Disease", 800), DiseaseEntry("Typhoid", 410)),
        ),
        StateRecord("Assam", 1840, (DiseaseEntry("Cholera", 720),)),
        StateRecord("Mizoram", 0, ()),
    ]


def test_water_reports_from_frame(data_config):
    reports = water_reports_from_frame(load_water_reports_frame(data_config))
    assert reports == [
        WaterQualityRecord("Umiam Reservoir", "Reservoir", 6.9, 2.1),
        WaterQualityRecord("Loktak Village Well", "Well", 6.2, 7.5),
    ]


def test_load_assistant_context_accepts_master_config(data_config):
    context = load_assistant_context(AdvisoryConfig(data=data_config))
    assert [s.name for s in context.states] == ["Tripura", "Assam", "Mizoram"]
    assert context.reports[-1].site_name == "Loktak Village Well"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_states_frame(DataConfig(data_dir=tmp_path))


def test_missing_columns_raise(tmp_path):
    (tmp_path / "water_quality_reports.csv").write_text("site_name,ph\nA,7.0\n")
    with pytest.raises(ValueError, match="Missing required columns"):
        load_water_reports_frame(DataConfig(data_dir=tmp_path))


def test_bad_config_type_raises():
    with pytest.raises(TypeError):
        load_states_frame({"data_dir": "."})


def test_states_to_frame(data_config):
    df = states_to_frame(states_from_frame(load_states_frame(data_config)))
    assert list(df["state"]) == ["Tripura", "Assam", "Mizoram"]
    assert list(df["top_disease_affected"]) == [800, 720, 0]
    assert pd.isna(df.loc[2, "top_disease"])


def test_water_reports_to_frame_adds_verdict(data_config):
    df = water_reports_to_frame(water_reports_from_frame(load_water_reports_frame(data_config)))
    assert list(df["verdict"]) == ["within safe range", "needs attention"]


def test_empty_records_give_empty_frames():
    assert states_to_frame([]).empty
    assert list(water_reports_to_frame([]).columns) == [
        "site_name", "site_type", "ph", "turbidity", "verdict",
    ]


def test_sample_data_loads():
    context = load_assistant_context()
    assert len(context.states) > 0
    assert len(context.reports) > 0
    assert isinstance(states_to_frame(context.states), pd.DataFrame)
