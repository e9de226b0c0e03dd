"""Tests for the move/cubic path parser."""

from __future__ import annotations

import pytest

from pressurepath.engine.errors import PathSyntaxError
from pressurepath.svg.commands import CubicTo, MoveTo
from pressurepath.svg.parser import parse_path_commands
from tests.conftest import WAVE_D


class TestParse:
    def test_empty(self):
        assert parse_path_commands("") == []
        assert parse_path_commands("   ") == []

    def test_absolute(self):
        commands = parse_path_commands("M10,20 C30,40 50,60 70,80")
        assert commands == [
            MoveTo(end=(10.0, 20.0)),
            CubicTo(cp1=(30.0, 40.0), cp2=(50.0, 60.0), end=(70.0, 80.0)),
        ]

    def test_relative_resolves_against_current_point(self):
        commands = parse_path_commands("m10,20 c10,0 20,0 30,0 c0,10 0,20 0,30")
        assert commands[1] == CubicTo(cp1=(20.0, 20.0), cp2=(30.0, 20.0), end=(40.0, 20.0))
        assert commands[2] == CubicTo(cp1=(40.0, 30.0), cp2=(40.0, 40.0), end=(40.0, 50.0))

    def test_repeated_coordinate_groups(self):
        commands = parse_path_commands("M0,0 C1,1 2,2 3,3 4,4 5,5 6,6")
        assert len(commands) == 3
        assert commands[2].end == (6.0, 6.0)

    def test_compact_numbers(self):
        commands = parse_path_commands(WAVE_D)
        assert len(commands) == 4
        assert commands[0] == MoveTo(end=(286.426, 853.333))
        # "-.377", "181.32.189" and "182.527-447.143" split without separators
        assert commands[1].cp1 == pytest.approx((286.426 + 38.702, 853.333 - 161.43))
        assert commands[2].cp1 == pytest.approx((commands[1].end[0] + 253.634, commands[1].end[1] - 0.377))

    def test_exponent(self):
        commands = parse_path_commands("M1e2,2.5E-1")
        assert commands[0].end == (100.0, 0.25)

    def test_command_codes(self):
        commands = parse_path_commands("M0,0 C1,1 2,2 3,3")
        assert [c.code for c in commands] == ["M", "C"]


class TestRejected:
    @pytest.mark.parametrize(
        "d",
        [
            "M0,0 L10,10",
            "M0,0 Q1,1 2,2",
            "M0,0 C1,1 2,2 3,3 Z",
        ],
    )
    def test_unsupported_commands(self, d):
        with pytest.raises(PathSyntaxError, match="unsupported"):
            parse_path_commands(d)

    def test_missing_numbers(self):
        with pytest.raises(PathSyntaxError):
            parse_path_commands("M0,0 C1,1 2,2")

    def test_leading_numbers(self):
        with pytest.raises(PathSyntaxError):
            parse_path_commands("10,10")

    def test_implicit_line_after_move(self):
        with pytest.raises(PathSyntaxError):
            parse_path_commands("M0,0 10,10")

    def test_cubic_before_move(self):
        with pytest.raises(PathSyntaxError):
            parse_path_commands("C1,1 2,2 3,3")

    def test_garbage_character(self):
        with pytest.raises(PathSyntaxError):
            parse_path_commands("M0,0 C1,1 2,2 3;3")
