"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PressurePathRequest(BaseModel):
    d: str = Field(..., description="Base path definition (SVG path data)")
    width_profile: list[tuple[float, float]] = Field(
        default_factory=lambda: [(0.0, 0.5), (1.0, 1.0)],
        description="(position, width factor) control points of the pressure curve",
    )
    base_stroke_width: float = Field(default=200.0, description="Stroke width at width factor 1")
    include_samples: bool = Field(default=True, description="Return the sample sequence")
    max_evaluations: int | None = Field(default=None, ge=2, description="Override the refinement cap")
    strict_profile: bool = Field(default=False, description="Reject unsorted or out-of-range profiles")
    zero_tangent_undefined: bool | None = Field(
        default=None, description="Override whether a 0-radian tangent stops refinement"
    )


class AppendPointRequest(BaseModel):
    d: str = Field(default="", description="Current path definition (M/C subset)")
    x: float
    y: float
    initial_control_point: tuple[float, float] | None = None


class ControlPointRequest(BaseModel):
    d: str = Field(..., description="Current path definition (M/C subset)")
    x: float
    y: float
    command_index: int = Field(..., ge=0)
    mirror: bool = False


class TranslateNodeRequest(BaseModel):
    d: str = Field(..., description="Current path definition (M/C subset)")
    node_index: int = Field(..., ge=0)
    dx: float
    dy: float
