"""Shared test fixtures — parameter sets matching the simulator screen defaults."""

from __future__ import annotations

import pytest

from mro_simulator.config import ProjectionParameters


@pytest.fixture
def default_params() -> ProjectionParameters:
    """Original plan only: 2.5M growing 17.6% / 3.5% / 0.7% against a 6.5M limit."""
    return ProjectionParameters(
        initial_cost=2_500_000,
        economic_limit=6_500_000,
        growth_rates=(17.6, 3.5, 0.7),
        intervention_enabled=False,
        intervention_year=3,
        intervention_cost=4_000_000,
    )


@pytest.fixture
def intervention_params(default_params: ProjectionParameters) -> ProjectionParameters:
    """Same plan with a re-forecast to 4.0M at year 3."""
    return default_params.model_copy(update={"intervention_enabled": True})


@pytest.fixture
def safe_reforecast_params(default_params: ProjectionParameters) -> ProjectionParameters:
    """Re-forecast to 1.0M at year 3 — never reaches the limit."""
    return default_params.model_copy(update={
        "intervention_enabled": True,
        "intervention_cost": 1_000_000,
    })


@pytest.fixture
def dip_params() -> ProjectionParameters:
    """Crosses in year 4 (1.2⁴ = 2.0736), then halves in year 7 back under the limit.

      year 4:  1,000,000 × 1.2⁴         = 2,073,600  > 2,000,000
      year 7:  1,000,000 × 1.2⁶ × 0.5   = 1,492,992  < 2,000,000
    """
    return ProjectionParameters(
        initial_cost=1_000_000,
        economic_limit=2_000_000,
        growth_rates=(20.0, -50.0, 0.0),
    )
