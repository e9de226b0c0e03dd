"""Pressure-stroke engine: adaptive sampling and outline construction."""

from pressurepath.engine.config import SamplerConfig
from pressurepath.engine.errors import (
    InsufficientPathData,
    InsufficientSamples,
    InvalidWidthProfile,
    PathEditError,
    PathSyntaxError,
    PressurePathError,
    RefinementLimitExceeded,
)
from pressurepath.engine.outline import build_outline, outline_is_simple
from pressurepath.engine.path_math import PathMathEngine, SvgPathToolsEngine
from pressurepath.engine.pressure import get_pressure_path
from pressurepath.engine.sampler import sample_path
from pressurepath.engine.samples import OutlineResult, PressurePathResult, Sample, SamplingResult
from pressurepath.engine.width_profile import WidthProfile, validate_profile, width_at

__all__ = [
    "SamplerConfig",
    "PressurePathError",
    "InvalidWidthProfile",
    "InsufficientPathData",
    "InsufficientSamples",
    "PathSyntaxError",
    "PathEditError",
    "RefinementLimitExceeded",
    "build_outline",
    "outline_is_simple",
    "PathMathEngine",
    "SvgPathToolsEngine",
    "get_pressure_path",
    "sample_path",
    "Sample",
    "SamplingResult",
    "OutlineResult",
    "PressurePathResult",
    "WidthProfile",
    "validate_profile",
    "width_at",
]
