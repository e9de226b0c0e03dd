"""Shared test fixtures."""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from typing import Any

import pytest

from pressurepath.engine.path_math import PathMathEngine

# Sample paths

# The curve the tutorial opens with (relative cubics, compact numbers)
WAVE_D = (
    "M286.426 853.333c38.702-161.43 182.527-447.143 436.16-447.52 "
    "253.634-.377 240.348 201.911 460.054 202.141 181.32.189 288.27-174.592 299.93-309.486"
)

HORIZONTAL_200_D = "M0,100 L200,100"
DIAGONAL_160_D = "M0,0 L96,128"
DIAGONAL_500_D = "M0,0 L300,400"
SHORT_DIAGONAL_D = "M0,0 L24,32"
GENTLE_ARC_D = "M0,0 C100,-50 200,-50 300,0"
CUSP_D = "M0,0 C0,0 100,0 100,0"

CONSTANT_PROFILE = [(0.0, 1.0), (1.0, 1.0)]
RAMP_PROFILE = [(0.0, 0.0), (1.0, 1.0)]
TUTORIAL_PROFILE = [(0.0, 0.5), (1.0, 1.0)]


class FakeLineEngine(PathMathEngine):
    """Straight-line engine: a path is ``(start, end)``; curves are lists of tuples."""

    _NUM_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)")

    def __init__(self, degenerate_tangent: bool = False) -> None:
        self.degenerate_tangent = degenerate_tangent
        self.frame_calls = 0

    def build(self, d: str) -> Any:
        nums = [float(n) for n in self._NUM_RE.findall(d)]
        if len(nums) < 4:
            return ((nums[0], nums[1]), (nums[0], nums[1])) if nums else ((0.0, 0.0), (0.0, 0.0))
        return ((nums[0], nums[1]), (nums[-2], nums[-1]))

    def segment_count(self, path: Any) -> int:
        start, end = path
        return 0 if start == end else 1

    def length(self, path: Any) -> float:
        (x0, y0), (x1, y1) = path
        return math.hypot(x1 - x0, y1 - y0)

    def point_at(self, path: Any, length: float) -> tuple[float, float]:
        (x0, y0), (x1, y1) = path
        t = length / self.length(path)
        return (x0 + (x1 - x0) * t, y0 + (y1 - y0) * t)

    def tangent_at(self, path: Any, length: float) -> tuple[float, float]:
        self.frame_calls += 1
        if self.degenerate_tangent:
            return (0.0, 0.0)
        (x0, y0), (x1, y1) = path
        size = self.length(path)
        return ((x1 - x0) / size, (y1 - y0) / size)

    def simplify(self, points: Sequence[tuple[float, float]], tolerance: float) -> Any:
        return [("L", p) for p in points]

    def arc(self, start: Any, end: Any, bulge: Any) -> Any:
        return [("A", start, end, bulge)]

    def concat(self, *curves: Any) -> Any:
        return [item for curve in curves for item in curve]

    def to_d(self, curve: Any) -> str:
        return " ".join(item[0] for item in curve)

    def polyline(self, curve: Any, samples_per_segment: int = 16) -> list[tuple[float, float]]:
        return [item[1] if item[0] == "L" else item[2] for item in curve]


@pytest.fixture
def fake_engine() -> FakeLineEngine:
    return FakeLineEngine()


@pytest.fixture
def wave_d() -> str:
    return WAVE_D
