"""Result types — the contract between engine, service, CLI and dashboard.

Both models are frozen: a result is derived fresh from its parameters and
never patched afterwards.  ``adjusted_cost`` uses ``None`` for "no re-forecast
data for this year", so a legitimate zero cost stays distinguishable.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class YearRecord(BaseModel):
    """One row of the projected time series."""

    model_config = ConfigDict(frozen=True)

    year: int
    """0-indexed year on the horizon (0 = today)."""

    baseline_cost: int
    """Original-plan cost, rounded half-up to whole currency units."""

    adjusted_cost: int | None = None
    """Re-forecast cost, rounded.  None before the intervention year, or
    for every year when the re-forecast is disabled."""

    formatted_baseline: str
    """Baseline in millions, e.g. ``"6.61M"``."""

    formatted_adjusted: str = ""
    """Adjusted in millions, empty when ``adjusted_cost`` is None."""


class ProjectionResult(BaseModel):
    """Full output of one ``project()`` call."""

    model_config = ConfigDict(frozen=True)

    series: tuple[YearRecord, ...]
    """26 records, years 0..25, index == year.  A tuple, so the series cannot be edited in place."""

    baseline_inflexion_year: int | None = None
    """First year the baseline exceeds the economic limit.  None = never."""

    adjusted_inflexion_year: int | None = None
    """First year the re-forecast exceeds the limit.  None when disabled or never."""
