"""Tests for config/parameters.py — engine inputs vs host-boundary validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mro_simulator.config import ProjectionParameters, ProjectionRequest


class TestProjectionParameters:

    def test_defaults_match_screen(self):
        p = ProjectionParameters()
        assert p.initial_cost == 2_500_000
        assert p.economic_limit == 6_500_000
        assert p.growth_rates == (17.6, 3.5, 0.7)
        assert p.intervention_enabled is False
        assert p.intervention_year == 3
        assert p.intervention_cost == 4_000_000

    def test_frozen(self):
        p = ProjectionParameters()
        with pytest.raises(ValidationError):
            p.initial_cost = 1.0

    def test_no_range_checks(self):
        """Engine inputs are computed literally — negatives and odd years are accepted."""
        p = ProjectionParameters(initial_cost=-5.0, economic_limit=0.0, intervention_year=99)
        assert p.initial_cost == -5.0
        assert p.intervention_year == 99

    def test_rates_need_three_phases(self):
        with pytest.raises(ValidationError):
            ProjectionParameters(growth_rates=(1.0, 2.0))

    def test_rates_from_list(self):
        p = ProjectionParameters(growth_rates=[1, 2, 3])
        assert p.growth_rates == (1.0, 2.0, 3.0)

    def test_equality_by_value(self):
        assert ProjectionParameters() == ProjectionParameters()


class TestProjectionRequest:

    def test_empty_request_uses_defaults(self):
        assert ProjectionRequest().to_parameters() == ProjectionParameters()

    @pytest.mark.parametrize("field", ["initial_cost", "economic_limit", "intervention_cost"])
    def test_costs_must_be_positive(self, field: str):
        with pytest.raises(ValidationError):
            ProjectionRequest(**{field: 0})

    @pytest.mark.parametrize("year", [0, 25, -1])
    def test_intervention_year_range(self, year: int):
        with pytest.raises(ValidationError):
            ProjectionRequest(intervention_year=year)

    @pytest.mark.parametrize("year", [1, 24])
    def test_intervention_year_bounds_inclusive(self, year: int):
        assert ProjectionRequest(intervention_year=year).intervention_year == year

    def test_negative_rates_allowed(self):
        req = ProjectionRequest(growth_rates=(-5.0, 0.0, -1.0))
        assert req.to_parameters().growth_rates == (-5.0, 0.0, -1.0)

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            ProjectionRequest(initial_cost="lots")
