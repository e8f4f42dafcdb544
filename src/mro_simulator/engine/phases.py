"""Growth phases — which rate applies in which year.

  Phase 1:  years 1-6     growth_rates[0]
  Phase 2:  years 7-12    growth_rates[1]
  Phase 3:  years 13+     growth_rates[2]

Year 0 is the initial condition and carries no growth step.  Rates are keyed
by absolute year, so a re-forecast restarted at year 3 still grows at the
phase 1 rate in year 4.
"""

from __future__ import annotations

FINAL_YEAR = 25
"""Last simulated year; the horizon is years 0..FINAL_YEAR inclusive."""

PHASE_1_END = 6
PHASE_2_END = 12


def growth_rate_for_year(year: int, growth_rates: tuple[float, float, float]) -> float:
    """Annual growth rate (%) applied when stepping into ``year``.

    Returns 0.0 for year 0 (and anything before it).
    """
    if year < 1:
        return 0.0
    if year <= PHASE_1_END:
        return growth_rates[0]
    if year <= PHASE_2_END:
        return growth_rates[1]
    return growth_rates[2]


def growth_multiplier(year: int, growth_rates: tuple[float, float, float]) -> float:
    """``1 + rate / 100`` for ``year``; exactly 1.0 at year 0."""
    return 1 + growth_rate_for_year(year, growth_rates) / 100
