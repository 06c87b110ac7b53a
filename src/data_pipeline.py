"""
Jal Assistant - Data Pipeline Module

This module provides the data layer feeding the offline advisory service:
- Loading the state/disease and water-quality CSVs with validation
- Converting frames into read-only advisory records
- Converting records back into frames for the dashboard charts

The advisory functions never read files themselves; they only receive the
records built here.

Author: Jal Surveillance Team
Version: 0.3.0
"""

import pandas as pd
from pathlib import Path
from typing import List, Optional, Sequence, Union
import logging

# Local imports
from .config import AdvisoryConfig, DataConfig, DEFAULT_CONFIG
from .advisory.advisory_tools import (
    AssistantContext,
    DiseaseEntry,
    StateRecord,
    WaterQualityRecord,
    classify_water_reading,
)


# =============================================================================
# Module Logger
# =============================================================================
logger = logging.getLogger(__name__)


STATE_COLUMNS = ["state", "total_affected", "disease", "affected"]
WATER_COLUMNS = ["site_name", "site_type", "ph", "turbidity"]


# =============================================================================
# Input Validation Helpers
# =============================================================================
def _validate_dataframe(
    df: pd.DataFrame,
    required_cols: List[str],
    context: str = "DataFrame",
) -> None:
    """
    Validate that a DataFrame has required columns and is not empty.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame to validate.
    required_cols : list of str
        Required column names.
    context : str
        Context string for error messages.

    Raises
    ------
    ValueError
        If validation fails.
    TypeError
        If df is not a DataFrame.
    """
    if df is None:
        raise ValueError(f"{context}: DataFrame is None")

    if not isinstance(df, pd.DataFrame):
        raise TypeError(f"{context}: Expected DataFrame, got {type(df).__name__}")

    if df.empty:
        raise ValueError(f"{context}: DataFrame is empty (0 rows)")

    missing = [c for c in required_cols if c not in df.columns]
    if missing:
        raise ValueError(f"{context}: Missing required columns: {missing}")


def _resolve_data_config(config: Union[AdvisoryConfig, DataConfig, None]) -> DataConfig:
    if config is None:
        return DEFAULT_CONFIG.data
    if isinstance(config, AdvisoryConfig):
        return config.data
    if isinstance(config, DataConfig):
        return config
    raise TypeError("config must be AdvisoryConfig, DataConfig, or None")


def _read_csv(csv_path: Path) -> pd.DataFrame:
    if not csv_path.exists():
        raise FileNotFoundError(f"Data file not found: {csv_path}")

    logger.info(f"Loading data from {csv_path}")
    df = pd.read_csv(csv_path)

    if df.empty:
        raise ValueError(f"Loaded file is empty: {csv_path}")

    n_rows, n_cols = df.shape
    logger.info(f"✓ Loaded {n_rows:,} rows × {n_cols} columns from {csv_path.name}")
    return df


# =============================================================================
# Data Loading
# =============================================================================
def load_states_frame(
    config: Union[AdvisoryConfig, DataConfig, None] = None,
) -> pd.DataFrame:
    """
    Load the long-format state/disease CSV.

    One row per (state, disease) in priority order. A state without diseases
    has a single row with an empty disease cell.

    Raises
    ------
    FileNotFoundError
        If the CSV file does not exist.
    ValueError
        If the file is empty or misses required columns.
    """
    data_config = _resolve_data_config(config)
    df = _read_csv(data_config.states_path)
    _validate_dataframe(df, STATE_COLUMNS, context="State disease data")
    return df


def load_water_reports_frame(
    config: Union[AdvisoryConfig, DataConfig, None] = None,
) -> pd.DataFrame:
    """
    Load the water-quality CSV. Row order is recency order (last = latest).

    Raises
    ------
    FileNotFoundError
        If the CSV file does not exist.
    ValueError
        If the file is empty or misses required columns.
    """
    data_config = _resolve_data_config(config)
    df = _read_csv(data_config.water_reports_path)
    _validate_dataframe(df, WATER_COLUMNS, context="Water quality data")
    return df


# =============================================================================
# Frame -> Records
# =============================================================================
def states_from_frame(df: pd.DataFrame) -> List[StateRecord]:
    """
    Group disease rows into StateRecord objects.

    States keep the order of their first appearance and diseases keep row
    order, so the first disease listed for a state is its top concern.
    """
    _validate_dataframe(df, STATE_COLUMNS, context="State disease data")

    records = []
    for state, group in df.groupby("state", sort=False):
        diseases = []
        for row in group.itertuples(index=False):
            if pd.isna(row.disease) or not str(row.disease).strip():
                continue
            affected = 0 if pd.isna(row.affected) else int(row.affected)
            diseases.append(DiseaseEntry(name=str(row.disease).strip(), affected=affected))

        total = group["total_affected"].iloc[0]
        records.append(
            StateRecord(
                name=str(state),
                total_affected=0 if pd.isna(total) else int(total),
                diseases=tuple(diseases),
            )
        )

    logger.info(f"✓ Built {len(records)} state records")
    return records


def water_reports_from_frame(df: pd.DataFrame) -> List[WaterQualityRecord]:
    """Convert water-quality rows into records, preserving row order."""
    _validate_dataframe(df, WATER_COLUMNS, context="Water quality data")

    records = [
        WaterQualityRecord(
            site_name=str(row.site_name),
            site_type=str(row.site_type),
            ph=float(row.ph),
            turbidity=float(row.turbidity),
        )
        for row in df.itertuples(index=False)
    ]
    logger.info(f"✓ Built {len(records)} water quality records")
    return records


# =============================================================================
# Records -> Frame (dashboard)
# =============================================================================
def states_to_frame(states: Sequence[StateRecord]) -> pd.DataFrame:
    """One row per state with its top concern, for charts and tables."""
    rows = []
    for s in states:
        top = s.diseases[0] if s.diseases else None
        rows.append({
            "state": s.name,
            "total_affected": s.total_affected,
            "top_disease": top.name if top else None,
            "top_disease_affected": top.affected if top else 0,
            "n_diseases": len(s.diseases),
        })
    return pd.DataFrame(
        rows,
        columns=["state", "total_affected", "top_disease", "top_disease_affected", "n_diseases"],
    )


def water_reports_to_frame(
    reports: Sequence[WaterQualityRecord],
    config: Optional[AdvisoryConfig] = None,
) -> pd.DataFrame:
    """Water reports as a frame with a verdict column."""
    rows = [
        {
            "site_name": r.site_name,
            "site_type": r.site_type,
            "ph": r.ph,
            "turbidity": r.turbidity,
            "verdict": classify_water_reading(r.ph, r.turbidity, config),
        }
        for r in reports
    ]
    return pd.DataFrame(rows, columns=WATER_COLUMNS + ["verdict"])


# =============================================================================
# Full Context
# =============================================================================
def load_assistant_context(
    config: Union[AdvisoryConfig, DataConfig, None] = None,
) -> AssistantContext:
    """
    Load both CSVs and build the context the assistant answers from.

    Raises
    ------
    FileNotFoundError
        If either CSV file does not exist.
    ValueError
        If either file fails validation.
    """
    states = states_from_frame(load_states_frame(config))
    reports = water_reports_from_frame(load_water_reports_frame(config))
    return AssistantContext(states=tuple(states), reports=tuple(reports))
