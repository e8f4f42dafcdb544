"""Display formatting for projected costs and inflexion headlines.

Public API
----------
fmt_millions  – Cost in millions with an "M" suffix, "" for None.
fmt_inflexion – "Year N" for a crossing year, "Safe" when there is none.
year_label    – Category label used on the chart x-axis.
"""

from __future__ import annotations

MILLIONS_PRECISION = 2
SAFE_LABEL = "Safe"


def fmt_millions(
    value: float | None,
    precision: int = MILLIONS_PRECISION,
) -> str:
    """Format a currency value in millions.

    Parameters
    ----------
    value:
        Raw (unrounded) cost. None is returned as an empty string.
    precision:
        Decimal places (default 2).

    Returns
    -------
    str
        Formatted string, e.g. ``"6.61M"``.
    """
    if value is None:
        return ""
    return f"{value / 1_000_000:.{precision}f}M"


def fmt_inflexion(year: int | None) -> str:
    """Headline for an inflexion year.  Year 0 is a real crossing, not "Safe"."""
    if year is None:
        return SAFE_LABEL
    return year_label(year)


def year_label(year: int) -> str:
    return f"Year {year}"
