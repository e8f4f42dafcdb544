"""Configuration models — projection inputs."""

from mro_simulator.config.parameters import ProjectionParameters, ProjectionRequest

__all__ = [
    "ProjectionParameters",
    "ProjectionRequest",
]
