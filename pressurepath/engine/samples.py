"""Result types flowing from the sampler through the outline assembler.

Sample        → one evaluated length along the base path
SamplingResult → ordered samples + refinement metadata
OutlineResult → mirrored samples + the closed outline curve
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from pressurepath.engine.errors import RefinementLimitExceeded
from pressurepath.utils.geometry import Point


@dataclass(frozen=True)
class Sample:
    """Data for a single evaluated length along the base path."""

    # Fraction of total path length, 0..1
    position: float
    # Point on the base path
    point: Point
    # Direction of travel (radians)
    tangent_angle: float
    # Perpendicular to the tangent (radians)
    normal_angle: float
    # Displacement from point along the normal: (nx, ny)
    offset: Point
    # Absolute arc length of this sample
    length: float = 0.0
    # Interpolated width factor (0 when the profile has no value here)
    width: float = 0.0
    # False when the path derivative vanished at this length
    tangent_defined: bool = True

    @property
    def offset_point(self) -> Point:
        return (self.point[0] + self.offset[0], self.point[1] + self.offset[1])

    def mirrored(self) -> Sample:
        """Same sample on the opposite side of the path."""
        return replace(self, offset=(-self.offset[0], -self.offset[1]))

    def to_dict(self) -> dict[str, Any]:
        return {
            "position": self.position,
            "length": self.length,
            "x": self.point[0],
            "y": self.point[1],
            "nx": self.offset[0],
            "ny": self.offset[1],
            "tangent_angle": self.tangent_angle,
            "normal_angle": self.normal_angle,
            "width": self.width,
        }


@dataclass
class SamplingResult:
    samples: list[Sample] = field(default_factory=list)
    total_length: float = 0.0
    evaluations: int = 0
    warnings: list[RefinementLimitExceeded] = field(default_factory=list)

    @property
    def truncated(self) -> bool:
        return bool(self.warnings)


@dataclass
class OutlineResult:
    """Top + mirrored bottom samples and the closed outline curve."""

    top_samples: list[Sample]
    bottom_samples: list[Sample]
    # Engine-specific curve object (svgpathtools.Path for the default engine)
    closed_curve: Any
    d: str = ""

    @property
    def samples(self) -> list[Sample]:
        return [*self.top_samples, *self.bottom_samples]


@dataclass
class PressurePathResult:
    """What ``get_pressure_path`` hands back to callers."""

    outline_curve: Any
    outline_d: str
    samples: list[Sample]
    evaluations: int = 0
    warnings: list[RefinementLimitExceeded] = field(default_factory=list)

    @property
    def truncated(self) -> bool:
        return bool(self.warnings)
