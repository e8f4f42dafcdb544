"""Fleet Degradation Simulator — Streamlit dashboard.

Layout: sidebar inputs (original plan → re-forecast → growth rates) → main
area with the inflexion headline card, the cost chart and the yearly table.

Run with:
    streamlit run src/mro_simulator/dashboard/app.py
"""

from __future__ import annotations

import streamlit as st

from mro_simulator.config import ProjectionParameters
from mro_simulator.dashboard.charts import build_projection_figure
from mro_simulator.engine.projection import project
from mro_simulator.output.formatting import fmt_inflexion
from mro_simulator.output.frame import series_to_frame

# ---------------------------------------------------------------------------
# Default instance — single source of truth for sidebar defaults
# ---------------------------------------------------------------------------
_DEF = ProjectionParameters()

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Fleet Degradation Simulator", layout="wide")

st.title("Fleet Degradation Simulator")
st.caption("MRO Cost Projection & Re-forecasting")

# ---------------------------------------------------------------------------
# SIDEBAR — Inputs
# ---------------------------------------------------------------------------
st.sidebar.header("Simulation Parameters")

# --- Original plan ---
initial_cost = st.sidebar.number_input("Initial Annual Cost ($)", 1.0, 1e12, _DEF.initial_cost, 100_000.0)
economic_limit = st.sidebar.number_input("Economic Limit ($)", 1.0, 1e12, _DEF.economic_limit, 100_000.0)

st.sidebar.divider()

# --- Re-forecast ---
with st.sidebar.expander("Re-forecast Data", expanded=True):
    intervention_enabled = st.checkbox("Enable re-forecast", value=_DEF.intervention_enabled)
    intervention_year = st.number_input(
        "At which Year?", 1, 24, _DEF.intervention_year, 1,
        disabled=not intervention_enabled,
    )
    intervention_cost = st.number_input(
        "New Actual Cost ($)", 1.0, 1e12, _DEF.intervention_cost, 100_000.0,
        disabled=not intervention_enabled,
    )
    if intervention_enabled:
        st.caption(f"This creates a new projection curve starting from Year {intervention_year}.")

# --- Growth rates ---
st.sidebar.subheader("Standard Growth (%)")
rate_p1 = st.sidebar.number_input("Phase 1 (Y 1-6)", -100.0, 1000.0, _DEF.growth_rates[0], 0.1)
rate_p2 = st.sidebar.number_input("Phase 2 (Y 7-12)", -100.0, 1000.0, _DEF.growth_rates[1], 0.1)
rate_p3 = st.sidebar.number_input("Phase 3 (Y 13+)", -100.0, 1000.0, _DEF.growth_rates[2], 0.1)

params = ProjectionParameters(
    initial_cost=initial_cost,
    economic_limit=economic_limit,
    growth_rates=(rate_p1, rate_p2, rate_p3),
    intervention_enabled=intervention_enabled,
    intervention_year=int(intervention_year),
    intervention_cost=intervention_cost,
)
result = project(params)

# ---------------------------------------------------------------------------
# Headline: economic inflexion analysis
# ---------------------------------------------------------------------------
st.subheader("Economic Inflexion Analysis")
c1, c2 = st.columns(2)
c1.metric(
    "Original Forecast Limit",
    fmt_inflexion(result.baseline_inflexion_year),
    help="First year the original plan's annual cost exceeds the economic limit",
)
if intervention_enabled:
    c2.metric(
        "Adjusted Forecast Limit",
        fmt_inflexion(result.adjusted_inflexion_year),
        help=f"Based on new data from Year {params.intervention_year}",
    )

# ---------------------------------------------------------------------------
# Chart + table
# ---------------------------------------------------------------------------
st.plotly_chart(build_projection_figure(params, result), use_container_width=True)

with st.expander("Show yearly projection"):
    st.dataframe(series_to_frame(result), use_container_width=True, hide_index=True)
