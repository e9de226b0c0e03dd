"""Cubic curve fitting for polylines.

Schneider's "An Algorithm for Automatically Fitting Digitized Curves"
(Graphics Gems, 1990) with the modifications used by vector editors'
``simplify``: least-squares control points along fixed end tangents, a few
Newton-Raphson reparameterization rounds, then a split at the worst point.

Points are complex numbers (x + yj), matching svgpathtools.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from pressurepath.utils.geometry import Point, arc_lengths

Cubic = tuple[complex, complex, complex, complex]

# Newton step is skipped when f'(u) is this small
_ROOT_TOLERANCE = 1e-5
# Singular-matrix / degenerate-alpha guard
_EPSILON = 1e-11
# Fit attempts before splitting
_MAX_ITERATIONS = 5


def _normalize(v: complex, length: float = 1.0) -> complex:
    size = abs(v)
    if size == 0:
        return 0j
    return v / size * length


def _dedupe(points: Sequence[Point]) -> list[complex]:
    result: list[complex] = []
    for x, y in points:
        z = complex(x, y)
        if not result or result[-1] != z:
            result.append(z)
    return result


def _evaluate(curve: Sequence[complex], t: float) -> complex:
    # de Casteljau on any degree
    tmp = list(curve)
    for i in range(1, len(tmp)):
        for j in range(len(tmp) - i):
            tmp[j] = tmp[j] * (1 - t) + tmp[j + 1] * t
    return tmp[0]


def _dot(a: complex, b: complex) -> float:
    return a.real * b.real + a.imag * b.imag


class CurveFitter:
    """Fit a chain of cubic Béziers through a polyline within ``error``."""

    def __init__(self, points: Sequence[Point], error: float = 2.5) -> None:
        self.points = _dedupe(points)
        self.error = error

    def fit(self) -> list[Cubic]:
        pts = self.points
        if len(pts) < 2:
            return []

        curves: list[Cubic] = []
        tan1 = _normalize(pts[1] - pts[0])
        tan2 = _normalize(pts[-2] - pts[-1])

        # Explicit stack keeps long polylines clear of the recursion limit
        stack: list[tuple[int, int, complex, complex]] = [(0, len(pts) - 1, tan1, tan2)]
        while stack:
            first, last, t1, t2 = stack.pop()
            curve, split = self._fit_cubic(first, last, t1, t2)
            if curve is not None:
                curves.append(curve)
                continue
            center = _normalize(pts[split - 1] - pts[split + 1])
            # Right half pushed first so the left half is emitted first
            stack.append((split, last, -center, t2))
            stack.append((first, split, t1, center))
        return curves

    def _fit_cubic(self, first: int, last: int, tan1: complex, tan2: complex) -> tuple[Cubic | None, int]:
        pts = self.points
        if last - first == 1:
            pt1, pt2 = pts[first], pts[last]
            dist = abs(pt2 - pt1) / 3
            return (pt1, pt1 + _normalize(tan1, dist), pt2 + _normalize(tan2, dist), pt2), -1

        u_prime = self._chord_length_parameterize(first, last)
        max_error = max(self.error, self.error * self.error)
        split = (first + last) // 2

        for _ in range(_MAX_ITERATIONS):
            curve = self._generate_bezier(first, last, u_prime, tan1, tan2)
            err, index = self._find_max_error(first, last, curve, u_prime)
            if err < self.error:
                return curve, -1
            split = index
            if err >= max_error:
                break
            self._reparameterize(first, last, u_prime, curve)
            max_error = err

        return None, split

    def _chord_length_parameterize(self, first: int, last: int) -> list[float]:
        segment = np.array([(z.real, z.imag) for z in self.points[first : last + 1]])
        lengths = arc_lengths(segment)
        total = lengths[-1]
        if total == 0:
            return [0.0] * len(lengths)
        return [float(v / total) for v in lengths]

    def _generate_bezier(
        self, first: int, last: int, u_prime: list[float], tan1: complex, tan2: complex
    ) -> Cubic:
        pts = self.points
        pt1, pt2 = pts[first], pts[last]
        c00 = c01 = c11 = 0.0
        x0 = x1 = 0.0

        for i in range(last - first + 1):
            u = u_prime[i]
            t = 1 - u
            b = 3 * u * t
            b0 = t * t * t
            b1 = b * t
            b2 = b * u
            b3 = u * u * u
            a1 = _normalize(tan1, b1)
            a2 = _normalize(tan2, b2)
            tmp = pts[first + i] - pt1 * (b0 + b1) - pt2 * (b2 + b3)
            c00 += _dot(a1, a1)
            c01 += _dot(a1, a2)
            c11 += _dot(a2, a2)
            x0 += _dot(a1, tmp)
            x1 += _dot(a2, tmp)

        det_c0_c1 = c00 * c11 - c01 * c01
        if abs(det_c0_c1) > _EPSILON:
            # Cramer's rule
            det_c0_x = c00 * x1 - c01 * x0
            det_x_c1 = x0 * c11 - x1 * c01
            alpha1 = det_x_c1 / det_c0_c1
            alpha2 = det_c0_x / det_c0_c1
        else:
            # Under-determined: assume alpha1 == alpha2
            c0 = c00 + c01
            c1 = c01 + c11
            if abs(c0) > _EPSILON:
                alpha1 = alpha2 = x0 / c0
            elif abs(c1) > _EPSILON:
                alpha1 = alpha2 = x1 / c1
            else:
                alpha1 = alpha2 = 0.0

        # Wu/Barsky heuristic for negative or vanishing alphas
        seg_length = abs(pt2 - pt1)
        eps = _EPSILON * seg_length
        if alpha1 < eps or alpha2 < eps:
            alpha1 = alpha2 = seg_length / 3

        return (pt1, pt1 + _normalize(tan1, alpha1), pt2 + _normalize(tan2, alpha2), pt2)

    def _reparameterize(self, first: int, last: int, u: list[float], curve: Cubic) -> None:
        for i in range(first, last + 1):
            u[i - first] = self._find_root(curve, self.points[i], u[i - first])

    def _find_root(self, curve: Cubic, point: complex, u: float) -> float:
        curve1 = [(curve[i + 1] - curve[i]) * 3 for i in range(3)]
        curve2 = [(curve1[i + 1] - curve1[i]) * 2 for i in range(2)]
        pt = _evaluate(curve, u)
        pt1 = _evaluate(curve1, u)
        pt2 = _evaluate(curve2, u)
        diff = pt - point
        df = _dot(pt1, pt1) + _dot(diff, pt2)
        if abs(df) < _ROOT_TOLERANCE:
            return u
        return u - _dot(diff, pt1) / df

    def _find_max_error(self, first: int, last: int, curve: Cubic, u: list[float]) -> tuple[float, int]:
        """Max squared distance of interior points to the curve, and where."""
        index = (first + last) // 2
        max_dist = 0.0
        for i in range(first + 1, last):
            v = _evaluate(curve, u[i - first]) - self.points[i]
            dist = v.real * v.real + v.imag * v.imag
            if dist >= max_dist:
                max_dist = dist
                index = i
        return max_dist, index


def fit_cubics(points: Sequence[Point], error: float = 2.5) -> list[Cubic]:
    """Fit cubic Béziers through ``points``; fewer than 2 distinct points fit nothing."""
    return CurveFitter(points, error).fit()
