"""Path command model: the move/cubic subset the pen tools produce."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from pressurepath.utils.geometry import Point


@dataclass(frozen=True)
class MoveTo:
    end: Point

    code: ClassVar[str] = "M"


@dataclass(frozen=True)
class CubicTo:
    cp1: Point
    cp2: Point
    end: Point

    code: ClassVar[str] = "C"


PathCommand = Union[MoveTo, CubicTo]
