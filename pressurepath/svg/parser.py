"""Path-definition parser for the move/cubic subset.

Converts SVG path text → list of absolute MoveTo / CubicTo commands. Relative
``m``/``c`` are resolved against the current point; repeated coordinate groups
after a ``C`` continue the command. Anything outside the subset is rejected.
Full SVG geometry parsing (arcs, lines, shorthand) is left to svgpathtools in
the path-math engine.
"""

from __future__ import annotations

import logging
import re

from pressurepath.engine.errors import PathSyntaxError
from pressurepath.svg.commands import CubicTo, MoveTo, PathCommand
from pressurepath.utils.geometry import Point

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(
    r"(?P<sep>[\s,]+)"
    r"|(?P<cmd>[A-Za-z])"
    r"|(?P<num>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)"
    r"|(?P<bad>.)"
)

# Coordinates consumed per command group
_ARITY = {"M": 2, "C": 6}


def _tokenize(d: str) -> list[str | float]:
    tokens: list[str | float] = []
    for match in _TOKEN_RE.finditer(d):
        kind = match.lastgroup
        if kind == "sep":
            continue
        if kind == "bad":
            raise PathSyntaxError(f"unexpected character {match.group()!r} at offset {match.start()}")
        if kind == "cmd":
            tokens.append(match.group())
        else:
            tokens.append(float(match.group()))
    return tokens


def parse_path_commands(d: str) -> list[PathCommand]:
    """Parse path text into absolute commands. Empty text gives an empty list."""
    tokens = _tokenize(d)
    commands: list[PathCommand] = []
    current: Point = (0.0, 0.0)
    pos = 0
    code: str | None = None
    group = 0

    while pos < len(tokens):
        token = tokens[pos]
        if isinstance(token, str):
            if token.upper() not in _ARITY:
                raise PathSyntaxError(f"unsupported path command {token!r}")
            code = token
            group = 0
            pos += 1
            continue
        if code is None:
            raise PathSyntaxError("path data must start with a command")

        arity = _ARITY[code.upper()]
        values = tokens[pos : pos + arity]
        if len(values) < arity or any(isinstance(v, str) for v in values):
            raise PathSyntaxError(f"command {code!r} expects {arity} numbers")
        pos += arity

        dx, dy = current if code.islower() else (0.0, 0.0)
        pts = [(float(values[i]) + dx, float(values[i + 1]) + dy) for i in range(0, arity, 2)]

        if code.upper() == "M":
            if group > 0:
                raise PathSyntaxError("implicit line-to after a move is not supported")
            commands.append(MoveTo(end=pts[0]))
        else:
            if not commands:
                raise PathSyntaxError("cubic command before any move")
            commands.append(CubicTo(cp1=pts[0], cp2=pts[1], end=pts[2]))

        current = pts[-1]
        group += 1

    logger.debug("Parsed %d path commands", len(commands))
    return commands
