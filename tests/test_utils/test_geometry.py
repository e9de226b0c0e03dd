"""Tests for geometry helpers."""

from __future__ import annotations

import math

import numpy as np
import pytest

from pressurepath.utils.geometry import (
    angle_difference,
    angle_of,
    arc_lengths,
    bbox,
    distance,
    from_complex,
    js_round,
    mirror_point,
    polar,
    round_point,
    to_complex,
)


def test_distance():
    assert distance((0, 0), (3, 4)) == 5.0


def test_angle_of():
    assert angle_of((0, 1)) == pytest.approx(math.pi / 2)
    assert angle_of((-1, 0)) == pytest.approx(math.pi)


class TestAngleDifference:
    def test_plain(self):
        assert angle_difference(0.1, 0.3) == pytest.approx(0.2)

    def test_symmetric(self):
        assert angle_difference(0.3, 0.1) == pytest.approx(0.2)

    def test_wraps_across_pi(self):
        assert angle_difference(math.pi - 0.05, -math.pi + 0.05) == pytest.approx(0.1)

    def test_opposite_directions(self):
        assert angle_difference(0.0, math.pi) == pytest.approx(math.pi)


def test_polar():
    x, y = polar(math.pi / 2, 10)
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(10.0)


class TestRounding:
    def test_half_rounds_up(self):
        assert js_round(2.5) == 3
        assert js_round(-2.5) == -2
        assert js_round(-2.6) == -3

    def test_round_point(self):
        assert round_point((70.4, 39.6)) == (70, 40)

    def test_mirror_point(self):
        assert mirror_point((40, 10), (50, 50)) == (60, 90)
        assert mirror_point((40.2, 10.0), (50, 50)) == (60, 90)


def test_complex_round_trip():
    assert to_complex((1.5, -2.0)) == complex(1.5, -2.0)
    assert from_complex(3 + 4j) == (3.0, 4.0)


def test_arc_lengths():
    points = np.array([[0.0, 0.0], [3.0, 4.0], [3.0, 10.0]])
    assert arc_lengths(points).tolist() == [0.0, 5.0, 11.0]


class TestBBox:
    def test_points(self):
        points = np.array([[1.0, 5.0], [-2.0, 3.0], [4.0, -1.0]])
        assert bbox(points) == (-2.0, -1.0, 4.0, 5.0)

    def test_empty(self):
        assert bbox(np.zeros((0, 2))) == (0.0, 0.0, 0.0, 0.0)
