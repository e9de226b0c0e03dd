"""Pen-tool edits on path commands: append a point, drag a control point, move a node.

Every operation returns a new command list; the input sequence and its
commands are never mutated. Adjacent commands that share a mirrored control
point are rebuilt together so the join stays smooth.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace

from pressurepath.engine.errors import PathEditError
from pressurepath.engine.path_math import PathMathEngine, SvgPathToolsEngine
from pressurepath.svg.commands import CubicTo, MoveTo, PathCommand
from pressurepath.svg.parser import parse_path_commands
from pressurepath.utils.geometry import Point, mirror_point, round_point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transform:
    """Maps screen coordinates onto path coordinates (translate, then scale)."""

    scale_x: float = 1.0
    scale_y: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0

    def scale(self, x: float, y: float) -> Point:
        # A zero scale means "unscaled"
        if self.scale_x:
            x /= self.scale_x
        if self.scale_y:
            y /= self.scale_y
        return (x, y)

    def apply(self, x: float, y: float) -> Point:
        return self.scale(x - self.translate_x, y - self.translate_y)


_IDENTITY = Transform()


def _check_index(index: int) -> None:
    # Negative indexes would silently address commands from the end
    if index < 0:
        raise PathEditError(f"command index must not be negative, got {index}")


def append_point(
    coords: Point,
    path: Sequence[PathCommand],
    initial_control_point: Point | None = None,
    transform: Transform | None = None,
) -> list[PathCommand]:
    """Append a cubic ending at ``coords``; an empty path gets a move instead."""
    x, y = (transform or _IDENTITY).apply(*coords)
    commands = list(path)

    if not commands:
        return [MoveTo(end=(x, y))]

    last = commands[-1]
    if isinstance(last, CubicTo):
        # Continue the previous curve's tangent through its end point
        cp1 = mirror_point(last.cp2, last.end)
    elif initial_control_point is not None:
        cp1 = initial_control_point
    else:
        # Start of the path: no handle yet
        cp1 = last.end

    commands.append(CubicTo(cp1=cp1, cp2=(x, y), end=(x, y)))
    return commands


def set_control_point(
    coords: Point,
    path: Sequence[PathCommand],
    command_index: int,
    mirror: bool = False,
    transform: Transform | None = None,
) -> list[PathCommand]:
    """Drag the second control point of ``command_index``.

    The next command's first control point is set to the reflection of the new
    point so the join stays smooth. With ``mirror`` the roles swap: the command
    gets the reflection and the next command the dragged point, which is how a
    pen tool behaves while the handle is being pulled out of a new node.
    """
    commands = list(path)
    _check_index(command_index)
    command = commands[command_index]
    if not isinstance(command, CubicTo):
        raise PathEditError(f"command {command_index} is a move and has no control points")

    new_cp2 = round_point((transform or _IDENTITY).apply(*coords))
    mirrored_cp2 = mirror_point(new_cp2, command.end)

    commands[command_index] = replace(command, cp2=mirrored_cp2 if mirror else new_cp2)

    if command_index + 1 < len(commands):
        next_command = commands[command_index + 1]
        if isinstance(next_command, CubicTo):
            commands[command_index + 1] = replace(next_command, cp1=new_cp2 if mirror else mirrored_cp2)

    return commands


def translate_node(
    path: Sequence[PathCommand],
    node_index: int,
    dx: float,
    dy: float,
    transform: Transform | None = None,
) -> list[PathCommand]:
    """Move a node together with the handles attached to it."""
    commands = list(path)
    _check_index(node_index)
    sdx, sdy = (transform or _IDENTITY).scale(dx, dy)

    def shift(p: Point) -> Point:
        return (p[0] + sdx, p[1] + sdy)

    node = commands[node_index]
    if isinstance(node, CubicTo):
        commands[node_index] = replace(node, end=shift(node.end), cp2=shift(node.cp2))
    else:
        commands[node_index] = replace(node, end=shift(node.end))

    if node_index + 1 < len(commands):
        next_command = commands[node_index + 1]
        if isinstance(next_command, CubicTo):
            commands[node_index + 1] = replace(next_command, cp1=shift(next_command.cp1))

    return commands


def simplify_commands(
    path: Sequence[PathCommand],
    tolerance: float = 200.0,
    engine: PathMathEngine | None = None,
) -> list[PathCommand]:
    """Refit a freehand (pencil) path through its nodes as a smooth cubic chain."""
    engine = engine or SvgPathToolsEngine()
    nodes = [command.end for command in path]
    if len(nodes) < 2:
        return list(path)

    curve = engine.simplify(nodes, tolerance)
    simplified = parse_path_commands(engine.to_d(curve))
    logger.debug("Simplified %d nodes into %d commands", len(nodes), len(simplified))
    return simplified or list(path)
