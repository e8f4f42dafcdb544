"""Tabular view of a projection — pandas DataFrame and CSV export.

Columns (one row per year, 0..25):

    year | label | baseline_cost | adjusted_cost | formatted_baseline | formatted_adjusted

``adjusted_cost`` is a nullable ``Int64`` column: years without re-forecast
data hold ``<NA>`` and are written as empty CSV cells.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from mro_simulator.models.results import ProjectionResult
from mro_simulator.output.formatting import year_label

logger = logging.getLogger(__name__)

SERIES_COLUMNS = [
    "year",
    "label",
    "baseline_cost",
    "adjusted_cost",
    "formatted_baseline",
    "formatted_adjusted",
]


def series_to_frame(result: ProjectionResult) -> pd.DataFrame:
    """Build a DataFrame from ``result.series`` in year order."""
    rows = [
        {
            "year": rec.year,
            "label": year_label(rec.year),
            "baseline_cost": rec.baseline_cost,
            "adjusted_cost": rec.adjusted_cost,
            "formatted_baseline": rec.formatted_baseline,
            "formatted_adjusted": rec.formatted_adjusted,
        }
        for rec in result.series
    ]
    df = pd.DataFrame(rows, columns=SERIES_COLUMNS)
    df["adjusted_cost"] = pd.array([rec.adjusted_cost for rec in result.series], dtype="Int64")
    return df


def write_series_csv(result: ProjectionResult, path: str | Path) -> Path:
    """Write the projection series to ``path`` and return it.

    Parent directories are created as needed.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df = series_to_frame(result)
    df.to_csv(path, index=False)
    logger.info("Wrote projection CSV (%d rows): %s", len(df), path)
    return path
