"""Tests for path text and SVG markup output."""

from __future__ import annotations

from pressurepath.engine.samples import Sample
from pressurepath.svg.commands import CubicTo, MoveTo
from pressurepath.svg.parser import parse_path_commands
from pressurepath.svg.serializer import (
    cubic_command,
    line_command,
    move_command,
    offset_polyline_d,
    serialize_commands,
    serialize_svg,
)


class TestCommands:
    def test_move(self):
        assert move_command(10.4, 19.5) == "M10,20"

    def test_line(self):
        assert line_command(-2.5, 3) == "L-2,3"

    def test_cubic(self):
        assert cubic_command(1, 2, 3, 4, 5, 6) == "C1,2 3,4 5,6"


class TestSerializeCommands:
    def test_move_and_cubic(self):
        commands = [MoveTo(end=(0, 0)), CubicTo(cp1=(10, 0), cp2=(40, 10), end=(50, 50))]
        assert serialize_commands(commands) == "M0,0 C10,0 40,10 50,50"

    def test_empty(self):
        assert serialize_commands([]) == ""

    def test_parses_back(self):
        d = "M0,0 C10,0 40,10 50,50 C60,90 90,90 100,100"
        assert serialize_commands(parse_path_commands(d)) == d


def test_offset_polyline():
    samples = [
        Sample(position=0.0, point=(0.0, 0.0), tangent_angle=0.0, normal_angle=1.5, offset=(0.0, 5.0)),
        Sample(position=1.0, point=(10.0, 0.0), tangent_angle=0.0, normal_angle=1.5, offset=(0.0, 5.0)),
    ]
    assert offset_polyline_d(samples) == "M0,5 L10,5"
    assert offset_polyline_d([]) == ""


class TestSerializeSvg:
    def test_document(self):
        svg = serialize_svg(
            [{"tag": "circle", "cx": 5, "cy": 5, "r": 2}],
            viewbox=(0, 0, 10, 10),
            title="t",
            description="d",
        )
        assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">')
        assert "<title>t</title>" in svg
        assert "<desc>d</desc>" in svg
        assert '<circle cx="5" cy="5" r="2"/>' in svg
        assert svg.endswith("</svg>")

    def test_text_and_attributes_escaped(self):
        svg = serialize_svg([{"tag": "text", "class": 'a"b'}], viewbox=(0, 0, 1, 1), title="<x> & y")
        assert "<title>&lt;x&gt; &amp; y</title>" in svg
        assert 'class="a&quot;b"' in svg

    def test_no_title_or_desc_by_default(self):
        svg = serialize_svg([], viewbox=(0, 0, 1, 1))
        assert "<title>" not in svg
        assert "<desc>" not in svg
