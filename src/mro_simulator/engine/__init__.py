"""Engine — phased compound-growth projection and inflexion detection."""

from mro_simulator.engine.phases import FINAL_YEAR, growth_multiplier, growth_rate_for_year
from mro_simulator.engine.projection import MAX_EMITTED_COST, project, round_currency

__all__ = [
    "FINAL_YEAR",
    "MAX_EMITTED_COST",
    "growth_multiplier",
    "growth_rate_for_year",
    "project",
    "round_currency",
]
