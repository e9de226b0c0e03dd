"""Width-profile evaluator: piecewise-linear pressure curve.

A profile is a sparse set of ``(position, width_factor)`` control points. The
evaluator maps a normalized length fraction to a width multiplier by taking the
line through a matching segment. Lookup keeps the "last scanned match wins"
rule; scanning runs from the end of the profile so that a sorted profile
interpolates inside the segment that contains ``t``. Unsorted profiles are
not rejected by the evaluator itself; ``validate_profile`` reports them.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pressurepath.engine.errors import InvalidWidthProfile

logger = logging.getLogger(__name__)

ProfilePoint = tuple[float, float]


@dataclass(frozen=True)
class WidthProfile:
    """Immutable ordered control points of a pressure curve."""

    points: tuple[ProfilePoint, ...]

    @classmethod
    def from_pairs(cls, pairs: Iterable[Sequence[float]], strict: bool = False) -> WidthProfile:
        points = []
        for pair in pairs:
            if len(pair) != 2:
                raise InvalidWidthProfile(f"profile point must be a (position, width) pair, got {pair!r}")
            points.append((float(pair[0]), float(pair[1])))
        profile = cls(tuple(points))
        validate_profile(profile, strict=strict)
        return profile

    def __len__(self) -> int:
        return len(self.points)

    def __call__(self, t: float) -> float | None:
        return width_at(self, t)


def _points(profile: WidthProfile | Sequence[Sequence[float]]) -> Sequence[Sequence[float]]:
    if isinstance(profile, WidthProfile):
        return profile.points
    return profile


def width_at(profile: WidthProfile | Sequence[Sequence[float]], t: float) -> float | None:
    """Width factor at length fraction ``t``, or None when no segment applies."""
    points = _points(profile)
    result: float | None = None

    for i in range(len(points) - 1, 0, -1):
        x1, y1 = points[i - 1]
        x2, y2 = points[i]
        if t <= x2:
            if x2 == x1:
                # Vertical step: the line equation is undefined
                result = float(y2)
                continue
            m = (y2 - y1) / (x2 - x1)
            b = y2 - m * x2
            result = t * m + b

    return result


def validate_profile(profile: WidthProfile | Sequence[Sequence[float]], strict: bool = False) -> None:
    """Check a profile before sampling.

    An empty profile or a non-finite value always raises ``InvalidWidthProfile``.
    Unsorted positions and values outside [0, 1] are logged, or raised when
    ``strict`` is set.
    """
    points = _points(profile)
    if len(points) == 0:
        raise InvalidWidthProfile("width profile has no points")

    for position, factor in points:
        if not (math.isfinite(position) and math.isfinite(factor)):
            raise InvalidWidthProfile(f"non-finite profile point ({position}, {factor})")

    problems: list[str] = []
    positions = [p for p, _ in points]
    if any(b <= a for a, b in zip(positions, positions[1:])):
        problems.append("positions are not strictly increasing")
    if any(p < 0.0 or p > 1.0 for p in positions):
        problems.append("positions fall outside [0, 1]")
    if any(w < 0.0 or w > 1.0 for _, w in points):
        problems.append("width factors fall outside [0, 1]")

    if not problems:
        return
    message = "width profile " + "; ".join(problems)
    if strict:
        raise InvalidWidthProfile(message)
    logger.warning("%s: %r", message, list(points))
