"""Write path text and SVG markup."""

from __future__ import annotations

from collections.abc import Sequence
from html import escape
from typing import Any

from pressurepath.engine.samples import Sample
from pressurepath.svg.commands import CubicTo, MoveTo, PathCommand
from pressurepath.utils.geometry import js_round


def move_command(x: float, y: float) -> str:
    return f"M{js_round(x)},{js_round(y)}"


def line_command(ex: float, ey: float) -> str:
    return f"L{js_round(ex)},{js_round(ey)}"


def cubic_command(cpx1: float, cpy1: float, cpx2: float, cpy2: float, ex: float, ey: float) -> str:
    return (
        f"C{js_round(cpx1)},{js_round(cpy1)} "
        f"{js_round(cpx2)},{js_round(cpy2)} "
        f"{js_round(ex)},{js_round(ey)}"
    )


def serialize_commands(commands: Sequence[PathCommand]) -> str:
    """Commands → ``M x,y C x1,y1 x2,y2 x,y ...`` with whole-unit coordinates."""
    parts: list[str] = []
    for command in commands:
        if isinstance(command, CubicTo):
            parts.append(cubic_command(*command.cp1, *command.cp2, *command.end))
        elif isinstance(command, MoveTo):
            parts.append(move_command(*command.end))
    return " ".join(parts)


def offset_polyline_d(samples: Sequence[Sample]) -> str:
    """Straight polyline through the offset points of ``samples``."""
    if not samples:
        return ""
    first, *rest = samples
    parts = [move_command(*first.offset_point)]
    parts.extend(line_command(*s.offset_point) for s in rest)
    return " ".join(parts)


def _attributes(element: dict[str, Any]) -> str:
    return " ".join(f'{name}="{escape(str(value))}"' for name, value in element.items() if name != "tag")


def serialize_svg(
    elements: Sequence[dict[str, Any]],
    viewbox: tuple[float, float, float, float],
    title: str = "",
    description: str = "",
) -> str:
    """SVG document with one self-closing tag per element.

    Each element dict names its ``tag``; every other key becomes an attribute.
    """
    x, y, w, h = viewbox
    parts = [f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{x:g} {y:g} {w:g} {h:g}">']
    if title:
        parts.append(f"  <title>{escape(title)}</title>")
    if description:
        parts.append(f"  <desc>{escape(description)}</desc>")
    parts.extend(f"  <{element['tag']} {_attributes(element)}/>" for element in elements)
    parts.append("</svg>")
    return "\n".join(parts)
