"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

Point = tuple[float, float]


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def angle_of(vector: Point) -> float:
    """Direction of a vector in radians (atan2)."""
    return math.atan2(vector[1], vector[0])


def angle_difference(a: float, b: float) -> float:
    """Absolute difference between two angles, wrapped into [0, pi]."""
    diff = (b - a + math.pi) % (2 * math.pi) - math.pi  # wrap to [-pi, pi)
    return abs(diff)


def polar(angle: float, magnitude: float) -> Point:
    """Vector of the given magnitude pointing along ``angle``."""
    return (math.cos(angle) * magnitude, math.sin(angle) * magnitude)


def js_round(value: float) -> int:
    """Round half up, like JavaScript Math.round."""
    return int(math.floor(value + 0.5))


def round_point(p: Point) -> Point:
    return (js_round(p[0]), js_round(p[1]))


def mirror_point(p: Point, about: Point) -> Point:
    """Point reflection of ``p`` through ``about``, rounded to whole units."""
    return (js_round(2 * about[0] - p[0]), js_round(2 * about[1] - p[1]))


def to_complex(p: Point) -> complex:
    return complex(p[0], p[1])


def from_complex(z: complex) -> Point:
    return (float(z.real), float(z.imag))


def arc_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Cumulative arc-length along a point sequence."""
    diffs = np.diff(points, axis=0)
    segment_lengths = np.sqrt(np.sum(diffs**2, axis=1))
    return np.concatenate([[0.0], np.cumsum(segment_lengths)])


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )
