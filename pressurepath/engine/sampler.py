"""Adaptive sampler: walks a path by arc length, refining where it bends.

Two criteria decide whether the interval between the last accepted sample and
the next candidate is too coarse: the change in tangent angle and the distance
between their offset points. A failing interval gets its midpoint evaluated
and refined first (depth-first), so the most recently failing interval is
always resolved before anything further along the path.

Refinement runs on an explicit stack. ``SamplerConfig.max_evaluations`` bounds
the number of evaluated lengths; hitting it yields a best-effort result with a
``RefinementLimitExceeded`` warning instead of an unbounded loop.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Any

from pressurepath.engine.config import SamplerConfig
from pressurepath.engine.errors import InsufficientPathData, PressurePathError, RefinementLimitExceeded
from pressurepath.engine.path_math import PathMathEngine, SvgPathToolsEngine
from pressurepath.engine.samples import Sample, SamplingResult
from pressurepath.engine.width_profile import WidthProfile, width_at
from pressurepath.utils.geometry import angle_difference, angle_of, distance, polar

logger = logging.getLogger(__name__)


def as_profile(width_profile: WidthProfile | Sequence[Sequence[float]], strict: bool = False) -> WidthProfile:
    if isinstance(width_profile, WidthProfile):
        return width_profile
    return WidthProfile.from_pairs(width_profile, strict=strict)


def evaluate_sample(
    path: Any,
    length: float,
    total_length: float,
    profile: WidthProfile,
    base_stroke_width: float,
    engine: PathMathEngine,
) -> Sample:
    """Evaluate point, tangent, normal and offset at one arc length."""
    point, tangent, normal = engine.frame_at(path, length)
    position = length / total_length
    width = width_at(profile, position) or 0.0
    normal_angle = angle_of(normal)

    return Sample(
        position=position,
        point=point,
        tangent_angle=angle_of(tangent),
        normal_angle=normal_angle,
        offset=polar(normal_angle, (width / 2) * base_stroke_width),
        length=length,
        width=width,
        tangent_defined=tangent != (0.0, 0.0),
    )


def needs_refinement(previous: Sample, current: Sample, config: SamplerConfig) -> bool:
    """True when the interval between two adjacent samples is too coarse."""
    if not previous.tangent_defined:
        return False
    if config.zero_tangent_undefined and previous.tangent_angle == 0:
        return False

    tangent_difference = angle_difference(previous.tangent_angle, current.tangent_angle)
    if tangent_difference > config.tangent_difference_max:
        return True
    return distance(previous.offset_point, current.offset_point) > config.normal_point_distance_max


def sample_path(
    path: Any,
    width_profile: WidthProfile | Sequence[Sequence[float]],
    base_stroke_width: float,
    engine: PathMathEngine | None = None,
    config: SamplerConfig | None = None,
) -> SamplingResult:
    """Adaptively sample ``path`` from length 0 to its full length."""
    engine = engine or SvgPathToolsEngine()
    config = config or SamplerConfig()
    profile = as_profile(width_profile, strict=config.strict_profile)

    if not math.isfinite(base_stroke_width):
        raise PressurePathError(f"base stroke width must be finite, got {base_stroke_width}")

    total = engine.length(path)
    if not (math.isfinite(total) and total > 0):
        raise InsufficientPathData(f"path has no measurable length ({total})")

    def evaluate(length: float) -> Sample:
        return evaluate_sample(path, length, total, profile, base_stroke_width, engine)

    accepted: list[Sample] = [evaluate(0.0)]
    # Pending samples, nearest (smallest length) on top
    stack: list[Sample] = [evaluate(total)]
    evaluations = 2
    result = SamplingResult(total_length=total)

    while stack:
        current = stack[-1]
        previous = accepted[-1]

        if needs_refinement(previous, current, config):
            mid = (previous.length + current.length) / 2
            if not previous.length < mid < current.length:
                # Interval exhausted in floating point; nothing left to split
                logger.debug("Interval at length %.6f cannot be split further", previous.length)
            elif evaluations >= config.max_evaluations:
                warning = RefinementLimitExceeded(evaluations, config.max_evaluations, len(stack))
                logger.warning("Sampler: %s", warning)
                result.warnings.append(warning)
                accepted.extend(reversed(stack))
                stack.clear()
                break
            else:
                stack.append(evaluate(mid))
                evaluations += 1
                continue

        accepted.append(stack.pop())

    result.samples = accepted
    result.evaluations = evaluations
    logger.debug(
        "Sampled path: %d samples from %d evaluations over length %.2f",
        len(accepted),
        evaluations,
        total,
    )
    return result
