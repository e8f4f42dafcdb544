"""Annual cost projection with optional re-forecast splice.

Two trajectories share the phased rate schedule:

  baseline   starts at initial_cost in year 0 and grows every year 1..25
  adjusted   absent before intervention_year, reset to intervention_cost at
             intervention_year, then grows with the same yearly multiplier

Each trajectory latches the first year its *unrounded* value is strictly
above the economic limit.  Rounding and the "M" display strings are derived
after the comparison and never feed back into it.
"""

from __future__ import annotations

import logging
import math
import sys
from dataclasses import dataclass

from mro_simulator.config.parameters import ProjectionParameters
from mro_simulator.engine.phases import FINAL_YEAR, growth_multiplier
from mro_simulator.models.results import ProjectionResult, YearRecord
from mro_simulator.output.formatting import fmt_millions

logger = logging.getLogger(__name__)

MAX_EMITTED_COST = 1e18
"""Emitted costs are clamped to ±1e18 so they fit int64 tables and JSON
readers.  Inflexion checks use the accumulator, not the clamped value."""

_FLOAT_MAX = sys.float_info.max


# ═══════════════════════════════════════════════════════════════════════════
# Internal accumulator (one per trajectory, scoped to a single call)
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class _Trajectory:
    """Mutable running cost plus its first-exceedance latch."""

    cost: float
    inflexion_year: int | None = None

    def grow(self, multiplier: float) -> None:
        """Apply one year of growth, saturating at the largest finite float.

        Keeps the cost finite, so a later -100% year brings it to 0 instead of NaN.
        """
        self.cost = min(max(self.cost * multiplier, -_FLOAT_MAX), _FLOAT_MAX)

    def check_limit(self, year: int, limit: float) -> None:
        """Latch ``year`` if this is the first time cost exceeds ``limit``."""
        if self.inflexion_year is None and self.cost > limit:
            self.inflexion_year = year


def round_currency(value: float) -> int:
    """Round half-up to whole currency units (2.5 → 3, -2.5 → -2).

    Values beyond ``MAX_EMITTED_COST`` (including infinities) are clamped to it.
    """
    return math.floor(clamp_emitted(value) + 0.5)


def clamp_emitted(value: float) -> float:
    return min(max(value, -MAX_EMITTED_COST), MAX_EMITTED_COST)


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def project(params: ProjectionParameters) -> ProjectionResult:
    """Project baseline and re-forecast costs over years 0..25.

    Pure function: no input validation, no clamping of the intervention year,
    no state kept between calls.  Total over finite inputs: a cost that would
    overflow saturates, and emitted values are capped at ``MAX_EMITTED_COST``.
    An intervention year below 0 makes every year "after" the splice (the
    adjusted curve starts from ``intervention_cost`` at year 0); one above 25
    leaves every adjusted value absent.
    """
    rates = params.growth_rates
    limit = params.economic_limit

    baseline = _Trajectory(cost=params.initial_cost)
    adjusted = _Trajectory(cost=params.intervention_cost)

    series: list[YearRecord] = []
    for year in range(FINAL_YEAR + 1):
        multiplier = growth_multiplier(year, rates)

        # ── Baseline: always runs ─────────────────────────────────────
        if year > 0:
            baseline.grow(multiplier)
        baseline.check_limit(year, limit)

        # ── Adjusted: only from the splice point on ───────────────────
        adjusted_value: float | None = None
        if params.intervention_enabled and year >= params.intervention_year:
            if year == params.intervention_year:
                adjusted.cost = params.intervention_cost
            else:
                adjusted.grow(multiplier)
            adjusted_value = adjusted.cost
            adjusted.check_limit(year, limit)

        series.append(YearRecord(
            year=year,
            baseline_cost=round_currency(baseline.cost),
            adjusted_cost=round_currency(adjusted_value) if adjusted_value is not None else None,
            formatted_baseline=fmt_millions(clamp_emitted(baseline.cost)),
            formatted_adjusted=fmt_millions(clamp_emitted(adjusted_value)) if adjusted_value is not None else "",
        ))

    logger.debug(
        "Projection: baseline inflexion=%s, adjusted inflexion=%s (intervention %s at year %d)",
        baseline.inflexion_year,
        adjusted.inflexion_year,
        "on" if params.intervention_enabled else "off",
        params.intervention_year,
    )

    return ProjectionResult(
        series=tuple(series),
        baseline_inflexion_year=baseline.inflexion_year,
        adjusted_inflexion_year=adjusted.inflexion_year,
    )
