"""Projection inputs — cost, limit, phased growth rates, re-forecast.

Two models live here:

  ProjectionParameters  what the engine consumes.  Types only, no ranges:
                        negative costs or an intervention at year 40 are
                        computed literally.
  ProjectionRequest     what hosts (HTTP service, CLI) accept.  Same fields
                        with the range checks the input screen enforces.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_GROWTH_RATES: tuple[float, float, float] = (17.6, 3.5, 0.7)


class ProjectionParameters(BaseModel):
    """Complete input bundle for one projection run."""

    model_config = ConfigDict(frozen=True)

    initial_cost: float = Field(default=2_500_000.0, description="Annual maintenance cost at year 0 ($)")
    economic_limit: float = Field(default=6_500_000.0, description="Annual cost ceiling tested against both trajectories ($)")
    growth_rates: tuple[float, float, float] = Field(
        default=DEFAULT_GROWTH_RATES,
        description="Annual growth (%) for phase 1 (years 1-6), phase 2 (years 7-12) "
                    "and phase 3 (years 13+). Negative = decline.",
    )

    # --- Re-forecast ---------------------------------------------------------
    intervention_enabled: bool = Field(default=False, description="Splice a re-forecast trajectory onto the timeline")
    intervention_year: int = Field(default=3, description="Year the adjusted trajectory restarts")
    intervention_cost: float = Field(default=4_000_000.0, description="New actual cost at the intervention year ($)")


class ProjectionRequest(BaseModel):
    """Host-boundary input. All fields optional — defaults used for missing.

    Example::

        {"initial_cost": 3000000, "growth_rates": [12.0, 4.0, 1.0],
         "intervention_enabled": true, "intervention_year": 5}
    """

    initial_cost: float = Field(default=2_500_000.0, gt=0, description="Initial annual cost ($)")
    economic_limit: float = Field(default=6_500_000.0, gt=0, description="Economic limit ($)")
    growth_rates: tuple[float, float, float] = Field(
        default=DEFAULT_GROWTH_RATES,
        description="Phase 1 / 2 / 3 growth (%)",
    )
    intervention_enabled: bool = Field(default=False, description="Enable the re-forecast curve")
    intervention_year: int = Field(default=3, ge=1, le=24, description="At which year (1-24)")
    intervention_cost: float = Field(default=4_000_000.0, gt=0, description="New actual cost ($)")

    def to_parameters(self) -> ProjectionParameters:
        """Convert a validated request into engine parameters."""
        return ProjectionParameters(**self.model_dump())
