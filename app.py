#!/usr/bin/env python
"""
Water-Borne Disease Surveillance Dashboard
==========================================

Streamlit dashboard wrapping the offline Jal Assistant.

Features:
- Overview page with KPI cards and affected cases per state
- Water quality page with per-site verdicts
- Jal Assistant chat (offline mode)
- Simulated advanced reports while the AI analytics service is unavailable
- CSV upload for custom state and water data

Usage:
    streamlit run app.py

Author: Jal Surveillance Team
"""

import asyncio
import logging
import sys
from pathlib import Path

import pandas as pd
import plotly.express as px
import streamlit as st

# Add project root to path
PROJECT_ROOT = Path(__file__).parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Project modules
from src.advisory import AssistantContext, ReportLocation, get_advanced_report
from src.advisory.advisory_tab import advisory_tab
from src.config import AdvisoryConfig
from src.data_pipeline import (
    load_states_frame,
    load_water_reports_frame,
    states_from_frame,
    states_to_frame,
    water_reports_from_frame,
    water_reports_to_frame,
)

logger = logging.getLogger(__name__)

# =============================================================================
# PAGE CONFIG & STYLING
# =============================================================================

st.set_page_config(
    page_title="Water-Borne Disease Surveillance",
    page_icon="💧",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown(
    """
    <style>
    .main {
        background-color: #F3F7FB;
    }
    .jal-card {
        background-color: #ffffff;
        border-radius: 10px;
        border: 1px solid #e2e8f0;
        padding: 1rem 1.25rem;
        margin-bottom: 1rem;
    }
    .jal-kpi-label {
        font-size: 0.75rem;
        font-weight: 600;
        text-transform: uppercase;
        color: #64748b;
    }
    .jal-kpi-value {
        font-size: 1.8rem;
        font-weight: 700;
        color: #0f172a;
    }
    .jal-kpi-subtitle {
        font-size: 0.8rem;
        color: #94a3b8;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

COLORS = {
    "primary": "#0e7490",
    "grid": "rgba(148, 163, 184, 0.25)",
}

CONFIG = AdvisoryConfig.from_env()


# =============================================================================
# DATA LOADING
# =============================================================================

@st.cache_data
def load_base_data():
    """Load the configured state and water-quality frames."""
    return load_states_frame(CONFIG), load_water_reports_frame(CONFIG)


def build_context(df_states: pd.DataFrame, df_water: pd.DataFrame) -> AssistantContext:
    """Convert frames into the records the assistant answers from."""
    return AssistantContext(
        states=tuple(states_from_frame(df_states)),
        reports=tuple(water_reports_from_frame(df_water)),
    )


# =============================================================================
# UI HELPERS
# =============================================================================

def kpi_card(label: str, value: str, subtitle: str = ""):
    """Render a single KPI card."""
    st.markdown(
        f"""
        <div class="jal-card">
          <div class="jal-kpi-label">{label}</div>
          <div class="jal-kpi-value">{value}</div>
          <div class="jal-kpi-subtitle">{subtitle}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_affected_by_state_chart(df_states: pd.DataFrame):
    """Horizontal bar chart of affected cases per state, highest at top."""
    df_plot = df_states.sort_values("total_affected", ascending=True)

    fig = px.bar(
        df_plot,
        y="state",
        x="total_affected",
        orientation="h",
        hover_data=["top_disease", "top_disease_affected"],
        color_discrete_sequence=[COLORS["primary"]],
    )
    fig.update_layout(
        height=380,
        margin=dict(l=16, r=16, t=30, b=30),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="#ffffff",
        xaxis=dict(title="Affected cases", showgrid=True, gridcolor=COLORS["grid"]),
        yaxis=dict(title="", showgrid=False),
        showlegend=False,
    )
    return fig


# =============================================================================
# PAGES
# =============================================================================

def render_overview_page(context: AssistantContext):
    """KPI row and state burden chart."""
    st.markdown("## 📊 Overview")

    df_states = states_to_frame(context.states)
    df_water = water_reports_to_frame(context.reports, CONFIG)

    col1, col2, col3 = st.columns(3)
    with col1:
        kpi_card("States tracked", f"{len(df_states):,}")
    with col2:
        kpi_card("Total affected", f"{int(df_states['total_affected'].sum()):,}")
    with col3:
        if df_water.empty:
            kpi_card("Latest water verdict", "n/a", "No reports")
        else:
            latest = df_water.iloc[-1]
            kpi_card("Latest water verdict", latest["verdict"], latest["site_name"])

    if df_states.empty:
        st.info("No state disease data loaded.")
        return
    st.plotly_chart(render_affected_by_state_chart(df_states), use_container_width=True)
    st.dataframe(df_states, use_container_width=True, hide_index=True)


def render_water_page(context: AssistantContext):
    """Table of water-quality reports with verdicts."""
    st.markdown("## 🚰 Water Quality")
    st.caption(
        f"Safe when pH is between {CONFIG.water.ph_min} and {CONFIG.water.ph_max} "
        f"and turbidity is below {CONFIG.water.turbidity_max_ntu} NTU."
    )
    df_water = water_reports_to_frame(context.reports, CONFIG)
    if df_water.empty:
        st.info("No water quality reports loaded.")
        return
    st.dataframe(df_water, use_container_width=True, hide_index=True)


def render_advanced_report_page():
    """Form for a simulated advanced report."""
    st.markdown("## 🧪 Advanced Report")
    st.warning("AI analytics service unreachable: reports on this page are simulated.")

    with st.form("advanced_report"):
        report_type = st.text_input("Report type", value="Groundwater Test")
        city = st.text_input("City", value="Guwahati")
        state = st.text_input("State", value="Assam")
        submitted = st.form_submit_button("Generate")

    if not submitted:
        return

    report = asyncio.run(
        get_advanced_report(report_type, ReportLocation(city=city, state=state), config=CONFIG)
    )

    st.markdown(f"### {report['title']}")
    col1, col2, col3 = st.columns(3)
    with col1:
        kpi_card("Status", report["overall_status"])
    with col2:
        kpi_card("Score", str(report["score"]))
    with col3:
        kpi_card("Verdict", report["verdict"])

    st.write(report["summary"])
    st.dataframe(pd.DataFrame(report["key_metrics"]), use_container_width=True, hide_index=True)

    for alert in report["alerts"]:
        st.error(alert)
    st.markdown("**Recommendations**")
    for rec in report["recommendations"]:
        st.markdown(f"- {rec}")


# =============================================================================
# SIDEBAR
# =============================================================================

def render_sidebar():
    """Render the sidebar navigation and uploads."""
    st.sidebar.markdown("## 💧 Jal Surveillance")
    st.sidebar.markdown("---")

    page = st.sidebar.radio(
        "Navigation",
        ["📊 Overview", "🚰 Water Quality", "💬 Jal Assistant", "🧪 Advanced Report"],
        label_visibility="collapsed",
    )

    st.sidebar.markdown("---")
    st.sidebar.markdown("**📁 Data**")
    states_file = st.sidebar.file_uploader("State disease CSV", type=["csv"])
    water_file = st.sidebar.file_uploader("Water quality CSV", type=["csv"])

    return page, states_file, water_file


# =============================================================================
# MAIN
# =============================================================================

def main():
    """Main application entry point."""
    try:
        df_states, df_water = load_base_data()
    except (FileNotFoundError, ValueError) as e:
        st.error(f"❌ Failed to load data: {e}")
        return

    page, states_file, water_file = render_sidebar()

    try:
        if states_file is not None:
            df_states = pd.read_csv(states_file)
        if water_file is not None:
            df_water = pd.read_csv(water_file)
        context = build_context(df_states, df_water)
        if states_file is not None or water_file is not None:
            st.sidebar.success("✅ Custom data loaded!")
    except (ValueError, TypeError) as e:
        logger.warning(f"Custom upload rejected: {e}")
        st.sidebar.error(f"❌ Error: {e}")
        context = build_context(*load_base_data())

    if "Overview" in page:
        render_overview_page(context)
    elif "Water Quality" in page:
        render_water_page(context)
    elif "Jal Assistant" in page:
        advisory_tab(context)
    elif "Advanced Report" in page:
        render_advanced_report_page()


if __name__ == "__main__":
    main()
