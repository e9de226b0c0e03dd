"""Diagnostic SVG: outline, base path, sample points and their normals."""

from __future__ import annotations

from typing import Any

import numpy as np

from pressurepath.engine.samples import PressurePathResult
from pressurepath.svg.serializer import offset_polyline_d, serialize_svg
from pressurepath.utils.geometry import bbox

_OUTLINE_FILL = "#8ecae6"
_ACCENT = "#fb8500"
_ACCENT_2 = "#ffb703"


def render_diagnostic_svg(
    result: PressurePathResult,
    base_d: str,
    padding: float = 20.0,
    show_polyline: bool = False,
) -> str:
    """SVG document showing how the outline was built from its samples."""
    elements: list[dict[str, Any]] = [
        {"tag": "path", "d": result.outline_d, "fill": _OUTLINE_FILL, "stroke": "none"},
        {"tag": "path", "d": base_d, "fill": "none", "stroke": _ACCENT, "stroke-width": 2},
    ]

    for s in result.samples:
        nx, ny = s.offset_point
        elements.append(
            {
                "tag": "line",
                "x1": f"{s.point[0]:.2f}",
                "y1": f"{s.point[1]:.2f}",
                "x2": f"{nx:.2f}",
                "y2": f"{ny:.2f}",
                "stroke": _ACCENT_2,
                "stroke-width": 1,
            }
        )
        elements.append({"tag": "circle", "cx": f"{s.point[0]:.2f}", "cy": f"{s.point[1]:.2f}", "r": 3, "fill": _ACCENT_2})

    if show_polyline and result.samples:
        top = result.samples[: len(result.samples) // 2]
        elements.append({"tag": "path", "d": offset_polyline_d(top), "fill": "none", "stroke": _ACCENT, "stroke-dasharray": "4 4"})

    points = np.array(
        [s.point for s in result.samples] + [s.offset_point for s in result.samples],
        dtype=float,
    ).reshape(-1, 2)
    xmin, ymin, xmax, ymax = bbox(points)
    viewbox = (
        xmin - padding,
        ymin - padding,
        (xmax - xmin) + 2 * padding,
        (ymax - ymin) + 2 * padding,
    )
    return serialize_svg(
        elements,
        viewbox=viewbox,
        title="Pressure path",
        description=f"{len(result.samples)} samples, {result.evaluations} evaluations",
    )
