"""Output helpers — display strings, tabular series, CSV export."""

from mro_simulator.output.formatting import fmt_inflexion, fmt_millions, year_label
from mro_simulator.output.frame import series_to_frame, write_series_csv

__all__ = [
    "fmt_inflexion",
    "fmt_millions",
    "series_to_frame",
    "write_series_csv",
    "year_label",
]
