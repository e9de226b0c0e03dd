"""Path-math engine: facade over svgpathtools.

The sampler and outline assembler never evaluate Béziers themselves. They ask
an engine for lengths, points, tangents and normals at an arc length, and for
curve construction (fit, arc, concatenate, serialize). ``SvgPathToolsEngine``
is the default; tests inject fakes through the same interface.
"""

from __future__ import annotations

import abc
import logging
import math
from collections.abc import Sequence
from typing import Any

import numpy as np
from svgpathtools import Arc, CubicBezier, Path, parse_path

from pressurepath.engine.errors import PathSyntaxError
from pressurepath.engine.fitting import fit_cubics
from pressurepath.utils.geometry import Point, from_complex, to_complex

logger = logging.getLogger(__name__)

# Step used for the finite-difference tangent fallback (curve parameter units)
_TANGENT_FALLBACK_STEP = 1e-6
# Below this an arc cap joins coincident points and is dropped
_MIN_ARC_CHORD = 1e-9


class PathMathEngine(abc.ABC):
    """Geometry queries and curve construction consumed by the core."""

    @abc.abstractmethod
    def build(self, d: str) -> Any:
        """Build an engine path from SVG path text."""

    @abc.abstractmethod
    def segment_count(self, path: Any) -> int:
        """Number of drawing segments (commands after the initial move)."""

    @abc.abstractmethod
    def length(self, path: Any) -> float: ...

    @abc.abstractmethod
    def point_at(self, path: Any, length: float) -> Point: ...

    @abc.abstractmethod
    def tangent_at(self, path: Any, length: float) -> Point:
        """Unit tangent, or (0, 0) when the derivative vanishes."""

    def normal_at(self, path: Any, length: float) -> Point:
        """Unit normal: the tangent rotated +90 degrees."""
        tx, ty = self.tangent_at(path, length)
        return (-ty, tx)

    def frame_at(self, path: Any, length: float) -> tuple[Point, Point, Point]:
        """(point, tangent, normal) at ``length``."""
        tangent = self.tangent_at(path, length)
        return self.point_at(path, length), tangent, (-tangent[1], tangent[0])

    @abc.abstractmethod
    def simplify(self, points: Sequence[Point], tolerance: float) -> Any:
        """Smooth a polyline into a curve passing through its end points."""

    @abc.abstractmethod
    def arc(self, start: Point, end: Point, bulge: Point) -> Any:
        """Half-circle from ``start`` to ``end`` bulging towards ``bulge``."""

    @abc.abstractmethod
    def concat(self, *curves: Any) -> Any: ...

    @abc.abstractmethod
    def to_d(self, curve: Any) -> str: ...

    @abc.abstractmethod
    def polyline(self, curve: Any, samples_per_segment: int = 16) -> list[Point]:
        """Flatten a curve for diagnostics."""


class SvgPathToolsEngine(PathMathEngine):
    """Default engine: svgpathtools paths, complex-number points."""

    def build(self, d: str) -> Path:
        try:
            return parse_path(d)
        except Exception as e:
            raise PathSyntaxError(f"cannot parse path definition: {e}") from e

    def segment_count(self, path: Path) -> int:
        return len(path)

    def length(self, path: Path) -> float:
        if len(path) == 0:
            return 0.0
        return float(path.length())

    def _param(self, path: Path, length: float) -> float:
        total = self.length(path)
        s = min(max(float(length), 0.0), total)
        return float(path.ilength(s))

    def point_at(self, path: Path, length: float) -> Point:
        return from_complex(path.point(self._param(path, length)))

    def tangent_at(self, path: Path, length: float) -> Point:
        return self._tangent(path, self._param(path, length))

    def frame_at(self, path: Path, length: float) -> tuple[Point, Point, Point]:
        # One arc-length inversion for all three queries
        t = self._param(path, length)
        tx, ty = self._tangent(path, t)
        return from_complex(path.point(t)), (tx, ty), (-ty, tx)

    def _tangent(self, path: Path, t: float) -> Point:
        try:
            z = complex(path.unit_tangent(t))
            if math.isfinite(z.real) and math.isfinite(z.imag):
                return from_complex(z)
        except (ValueError, ZeroDivisionError, FloatingPointError) as e:
            logger.debug("unit_tangent failed at T=%.6f (%s), using finite difference", t, e)

        # Degenerate derivative (coincident control points): chord direction
        a = max(0.0, t - _TANGENT_FALLBACK_STEP)
        b = min(1.0, t + _TANGENT_FALLBACK_STEP)
        chord = complex(path.point(b)) - complex(path.point(a))
        if abs(chord) == 0:
            return (0.0, 0.0)
        return from_complex(chord / abs(chord))

    def simplify(self, points: Sequence[Point], tolerance: float) -> Path:
        cubics = fit_cubics(points, tolerance)
        return Path(*[CubicBezier(*c) for c in cubics])

    def arc(self, start: Point, end: Point, bulge: Point) -> Path:
        s, e = to_complex(start), to_complex(end)
        chord = abs(e - s)
        if chord < _MIN_ARC_CHORD:
            return Path()
        r = chord / 2
        # sweep=1 bulges towards i*(start - end)
        side = 1j * (s - e)
        sweep = side.real * bulge[0] + side.imag * bulge[1] > 0
        return Path(Arc(s, complex(r, r), 0.0, False, sweep, e))

    def concat(self, *curves: Path) -> Path:
        segments = []
        for curve in curves:
            segments.extend(curve)
        return Path(*segments)

    def to_d(self, curve: Path) -> str:
        if len(curve) == 0:
            return ""
        return curve.d()

    def polyline(self, curve: Path, samples_per_segment: int = 16) -> list[Point]:
        points: list[Point] = []
        for seg in curve:
            for t in np.linspace(0.0, 1.0, samples_per_segment, endpoint=False):
                points.append(from_complex(complex(seg.point(float(t)))))
        if len(curve):
            points.append(from_complex(complex(curve[-1].end)))
        return points
