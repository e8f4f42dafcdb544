"""Narrative generator — plain-English reading of a projection.

Turns the two inflexion years into the headline figures the simulator screen
shows ("Year 6" / "Safe") and explains what the re-forecast changes.
"""

from __future__ import annotations

from mro_simulator.config.parameters import ProjectionParameters
from mro_simulator.engine.phases import FINAL_YEAR
from mro_simulator.models.results import ProjectionResult
from mro_simulator.output.formatting import fmt_inflexion, fmt_millions


def headline_metrics(params: ProjectionParameters, result: ProjectionResult) -> dict[str, str | int | None]:
    """Headline figures for cards and API responses."""
    metrics: dict[str, str | int | None] = {
        "original_forecast_limit": fmt_inflexion(result.baseline_inflexion_year),
        "baseline_inflexion_year": result.baseline_inflexion_year,
        "baseline_cost_final_year": result.series[-1].baseline_cost,
    }
    if params.intervention_enabled:
        metrics["adjusted_forecast_limit"] = fmt_inflexion(result.adjusted_inflexion_year)
        metrics["adjusted_inflexion_year"] = result.adjusted_inflexion_year
        metrics["adjusted_cost_final_year"] = result.series[-1].adjusted_cost
    return metrics


def _shift_sentence(baseline: int | None, adjusted: int | None) -> str:
    if baseline is None and adjusted is None:
        return f"Neither plan reaches the economic limit by year {FINAL_YEAR}."
    if adjusted is None:
        return (
            f"The re-forecast keeps the fleet safe through year {FINAL_YEAR}; "
            f"the original plan crossed in year {baseline}."
        )
    if baseline is None:
        return (
            f"The re-forecast crosses the limit in year {adjusted}, "
            f"while the original plan stayed safe through year {FINAL_YEAR}."
        )
    shift = adjusted - baseline
    if shift > 0:
        return f"The re-forecast delays the limit by {shift} year{'s' if shift != 1 else ''}."
    if shift < 0:
        return f"The re-forecast brings the limit forward by {-shift} year{'s' if shift != -1 else ''}."
    return "The re-forecast crosses the limit in the same year as the original plan."


def generate_narrative(params: ProjectionParameters, result: ProjectionResult) -> str:
    """Generate a sectioned text report covering inputs and inflexion analysis."""
    p1, p2, p3 = params.growth_rates
    sections: list[str] = []

    # ── 1. Inputs ──
    sections.append("=" * 60)
    sections.append("SIMULATION PARAMETERS")
    sections.append("=" * 60)
    sections.append(
        f"Initial annual cost: ${params.initial_cost:,.0f}\n"
        f"Economic limit: ${params.economic_limit:,.0f}\n"
        f"Growth: phase 1 (Y1-6) {p1:.1f}% · phase 2 (Y7-12) {p2:.1f}% · phase 3 (Y13+) {p3:.1f}%"
    )
    if params.intervention_enabled:
        sections.append(
            f"Re-forecast: new actual cost ${params.intervention_cost:,.0f} "
            f"from year {params.intervention_year}"
        )

    # ── 2. Inflexion analysis ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("ECONOMIC INFLEXION ANALYSIS")
    sections.append("=" * 60)
    last = result.series[-1]
    sections.append(
        f"Original forecast limit: {fmt_inflexion(result.baseline_inflexion_year)}\n"
        f"Original cost in year {last.year}: {last.formatted_baseline}"
    )

    if params.intervention_enabled:
        adjusted_line = f"Adjusted forecast limit: {fmt_inflexion(result.adjusted_inflexion_year)}"
        if last.adjusted_cost is not None:
            adjusted_line += f"\nAdjusted cost in year {last.year}: {last.formatted_adjusted}"
        sections.append(adjusted_line)
        sections.append(f"Based on new data from year {params.intervention_year}.")
        sections.append(_shift_sentence(result.baseline_inflexion_year, result.adjusted_inflexion_year))
    elif result.baseline_inflexion_year is None:
        sections.append(
            f"Cost stays at or below {fmt_millions(params.economic_limit)} through year {FINAL_YEAR}."
        )

    return "\n".join(sections)
