"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class SampleModel(BaseModel):
    position: float
    length: float
    x: float
    y: float
    nx: float
    ny: float
    tangent_angle: float
    normal_angle: float
    width: float


class PressurePathResponse(BaseModel):
    d: str
    samples: list[SampleModel] = Field(default_factory=list)
    sample_count: int = 0
    evaluations: int = 0
    truncated: bool = False
    warnings: list[str] = Field(default_factory=list)
    processing_time_ms: float = 0.0


class PathResponse(BaseModel):
    d: str
    command_count: int = 0


class ErrorResponse(BaseModel):
    detail: str
    code: str
