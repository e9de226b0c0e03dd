"""Sampler configuration: controls adaptive refinement and outline smoothing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SamplerConfig:
    """Thresholds for the adaptive sampler and the outline assembler."""

    # Max tangent-angle change between adjacent samples (radians)
    tangent_difference_max: float = 0.1
    # Max distance between adjacent offset points (path units)
    normal_point_distance_max: float = 50.0

    # Hard bound on evaluated lengths per run
    max_evaluations: int = 10_000

    # A tangent angle of exactly 0 counts as undefined, so an interval
    # starting horizontally is never refined. False makes 0 a real direction.
    zero_tangent_undefined: bool = True

    # Max fitting error when turning offset polylines into cubics
    simplify_tolerance: float = 2.5

    # Reject unsorted / out-of-range profiles instead of logging them
    strict_profile: bool = False

    def __post_init__(self) -> None:
        if self.max_evaluations < 2:
            raise ValueError("max_evaluations must be at least 2 (both path ends)")
        if self.tangent_difference_max <= 0 or self.normal_point_distance_max <= 0:
            raise ValueError("refinement thresholds must be positive")
