# MIT License (see LICENSE)
"""
Tunable parameters of a GJK/EPA query.

A GjkConfig can be built directly, or loaded from JSON through
hull_collision.io.load_config().
"""
from __future__ import annotations
from dataclasses import dataclass

from .constants import MAX_ITERATIONS, EPA_TOLERANCE, EPA_MAX_ITERATIONS


@dataclass(frozen=True)
class GjkConfig:
    """
    Iteration bounds and tolerances for GjkAlgorithm.

    Attributes:
        max_iterations: GJK iteration cap. Default 50.
        epa_tolerance: EPA convergence distance. Default 1e-5.
        epa_max_iterations: EPA expansion cap. Default 128.
    """
    max_iterations: int = MAX_ITERATIONS
    epa_tolerance: float = EPA_TOLERANCE
    epa_max_iterations: int = EPA_MAX_ITERATIONS

    def __post_init__(self) -> None:
        if self.max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")
        if self.epa_tolerance <= 0:
            raise ValueError(f"epa_tolerance must be positive, got {self.epa_tolerance}")
        if self.epa_max_iterations <= 0:
            raise ValueError(f"epa_max_iterations must be positive, got {self.epa_max_iterations}")
