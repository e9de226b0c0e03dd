"""get_pressure_path: path text + width profile + base width → closed outline."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pressurepath.engine.config import SamplerConfig
from pressurepath.engine.errors import InsufficientPathData
from pressurepath.engine.outline import build_outline
from pressurepath.engine.path_math import PathMathEngine, SvgPathToolsEngine
from pressurepath.engine.samples import PressurePathResult
from pressurepath.engine.sampler import as_profile, sample_path
from pressurepath.engine.width_profile import WidthProfile

logger = logging.getLogger(__name__)


def get_pressure_path(
    path_definition: str,
    width_profile: WidthProfile | Sequence[Sequence[float]],
    base_stroke_width: float,
    engine: PathMathEngine | None = None,
    config: SamplerConfig | None = None,
) -> PressurePathResult:
    """Build the variable-width outline of ``path_definition``.

    ``samples`` in the result holds the top samples followed by the mirrored
    bottom samples, for drawing normals and sample points over the outline.
    """
    engine = engine or SvgPathToolsEngine()
    config = config or SamplerConfig()
    profile = as_profile(width_profile, strict=config.strict_profile)

    path = engine.build(path_definition)
    # A move plus at least one drawing command
    if engine.segment_count(path) < 1:
        raise InsufficientPathData("path needs a move and at least one drawing command")

    sampling = sample_path(path, profile, base_stroke_width, engine=engine, config=config)
    outline = build_outline(sampling.samples, engine=engine, config=config)

    logger.info(
        "Pressure path: %d samples (%d evaluations)%s",
        len(sampling.samples),
        sampling.evaluations,
        " [truncated]" if sampling.truncated else "",
    )
    return PressurePathResult(
        outline_curve=outline.closed_curve,
        outline_d=outline.d,
        samples=outline.samples,
        evaluations=sampling.evaluations,
        warnings=list(sampling.warnings),
    )
