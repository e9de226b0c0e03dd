"""Outline assembler: turns ordered samples into one closed stroke outline."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from shapely.geometry import LineString

from pressurepath.engine.config import SamplerConfig
from pressurepath.engine.errors import InsufficientSamples
from pressurepath.engine.path_math import PathMathEngine, SvgPathToolsEngine
from pressurepath.engine.samples import OutlineResult, Sample
from pressurepath.utils.geometry import polar

logger = logging.getLogger(__name__)


def mirror_samples(samples: Sequence[Sample]) -> list[Sample]:
    """Bottom side: offsets negated, order reversed."""
    return [s.mirrored() for s in reversed(samples)]


def build_outline(
    samples: Sequence[Sample],
    engine: PathMathEngine | None = None,
    config: SamplerConfig | None = None,
) -> OutlineResult:
    """Join the top and bottom offset curves with arc caps into a closed loop.

    Each side is simplified on its own before the caps are attached; smoothing
    across a cap would pull the arc out of shape.
    """
    if len(samples) < 2:
        raise InsufficientSamples(f"outline needs at least 2 samples, got {len(samples)}")

    engine = engine or SvgPathToolsEngine()
    config = config or SamplerConfig()

    top_samples = list(samples)
    bottom_samples = mirror_samples(top_samples)

    top_points = [s.offset_point for s in top_samples]
    bottom_points = [s.offset_point for s in bottom_samples]

    top = engine.simplify(top_points, config.simplify_tolerance)
    bottom = engine.simplify(bottom_points, config.simplify_tolerance)

    # End cap bulges forward along the path, start cap backward
    end_cap = engine.arc(top_points[-1], bottom_points[0], polar(top_samples[-1].tangent_angle, 1.0))
    start_cap = engine.arc(bottom_points[-1], top_points[0], polar(top_samples[0].tangent_angle, -1.0))

    closed = engine.concat(top, end_cap, bottom, start_cap)
    d = engine.to_d(closed)
    logger.debug(
        "Outline: %d samples per side, %d chars of path data",
        len(top_samples),
        len(d),
    )
    return OutlineResult(
        top_samples=top_samples,
        bottom_samples=bottom_samples,
        closed_curve=closed,
        d=d,
    )


def outline_is_simple(result: OutlineResult, engine: PathMathEngine | None = None) -> bool:
    """True when the closed outline does not cross itself."""
    engine = engine or SvgPathToolsEngine()
    points = engine.polyline(result.closed_curve)
    # Drop consecutive duplicates; shapely treats them as zero-length edges
    deduped = [p for i, p in enumerate(points) if i == 0 or p != points[i - 1]]
    if len(deduped) < 4:
        return True
    ring = deduped if deduped[0] == deduped[-1] else [*deduped, deduped[0]]
    return bool(LineString(ring).is_simple)
