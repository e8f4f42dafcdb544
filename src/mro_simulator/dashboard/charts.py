"""Plotly figure for a projection — cost curves, limit line, splice marker."""

from __future__ import annotations

import plotly.graph_objects as go

from mro_simulator.config.parameters import ProjectionParameters
from mro_simulator.models.results import ProjectionResult
from mro_simulator.output.formatting import year_label

BASELINE_COLOR = "#c0392b"
BASELINE_MUTED_COLOR = "#bdc3c7"
ADJUSTED_COLOR = "#2980b9"
MARKER_COLOR = "#f1c40f"
LIMIT_COLOR = "red"


def build_projection_figure(params: ProjectionParameters, result: ProjectionResult) -> go.Figure:
    """Chart of both trajectories against the economic limit.

    With the re-forecast on, the original plan is drawn grey and dashed and
    the adjusted curve takes the foreground; years without adjusted data are
    left as gaps.
    """
    labels = [year_label(rec.year) for rec in result.series]
    intervention = params.intervention_enabled

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=labels,
        y=[rec.baseline_cost for rec in result.series],
        mode="lines" if intervention else "lines+markers",
        name="Original Plan",
        line=dict(
            color=BASELINE_MUTED_COLOR if intervention else BASELINE_COLOR,
            width=2 if intervention else 3,
            dash="dash" if intervention else "solid",
        ),
        customdata=[rec.formatted_baseline for rec in result.series],
        hovertemplate="%{x}: $%{y:,.0f} (%{customdata})<extra>Original Plan</extra>",
    ))

    if intervention:
        fig.add_trace(go.Scatter(
            x=labels,
            y=[rec.adjusted_cost for rec in result.series],
            mode="lines+markers",
            name="Re-forecasted (Actual)",
            line=dict(color=ADJUSTED_COLOR, width=4),
            connectgaps=False,
            customdata=[rec.formatted_adjusted for rec in result.series],
            hovertemplate="%{x}: $%{y:,.0f} (%{customdata})<extra>Re-forecasted</extra>",
        ))
        fig.add_trace(go.Scatter(
            x=[year_label(params.intervention_year)],
            y=[params.intervention_cost],
            mode="markers",
            name="Re-forecast point",
            marker=dict(color=MARKER_COLOR, size=12),
            showlegend=False,
        ))

    fig.add_hline(
        y=params.economic_limit,
        line_dash="dash",
        line_color=LIMIT_COLOR,
        annotation_text="Limit",
        annotation_position="top left",
    )
    fig.update_layout(
        xaxis_title="Year",
        yaxis_title="Annual cost ($)",
        height=500,
        margin=dict(l=20, r=30, t=40, b=20),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="left", x=0),
    )
    return fig
