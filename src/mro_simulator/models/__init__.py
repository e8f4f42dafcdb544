"""Result models — projection output contracts."""

from mro_simulator.models.results import ProjectionResult, YearRecord

__all__ = [
    "ProjectionResult",
    "YearRecord",
]
