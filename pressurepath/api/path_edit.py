"""POST /api/path/* — pen-tool edits on M/C path data."""

from __future__ import annotations

from collections.abc import Callable

from fastapi import APIRouter

from pressurepath.engine.errors import PathEditError
from pressurepath.models.requests import AppendPointRequest, ControlPointRequest, TranslateNodeRequest
from pressurepath.models.responses import PathResponse
from pressurepath.svg.commands import PathCommand
from pressurepath.svg.editor import append_point, set_control_point, translate_node
from pressurepath.svg.parser import parse_path_commands
from pressurepath.svg.serializer import serialize_commands

router = APIRouter(prefix="/path")


def _edit(d: str, op: Callable[[list[PathCommand]], list[PathCommand]]) -> PathResponse:
    commands = parse_path_commands(d)
    try:
        edited = op(commands)
    except IndexError as e:
        raise PathEditError(f"no such command in a path of {len(commands)}") from e
    return PathResponse(d=serialize_commands(edited), command_count=len(edited))


@router.post("/append-point", response_model=PathResponse)
async def handle_append_point(req: AppendPointRequest) -> PathResponse:
    return _edit(req.d, lambda cmds: append_point((req.x, req.y), cmds, req.initial_control_point))


@router.post("/control-point", response_model=PathResponse)
async def handle_control_point(req: ControlPointRequest) -> PathResponse:
    return _edit(req.d, lambda cmds: set_control_point((req.x, req.y), cmds, req.command_index, mirror=req.mirror))


@router.post("/translate-node", response_model=PathResponse)
async def handle_translate_node(req: TranslateNodeRequest) -> PathResponse:
    return _edit(req.d, lambda cmds: translate_node(cmds, req.node_index, req.dx, req.dy))
