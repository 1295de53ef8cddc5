"""
Editor configuration
====================
Central registry of the editing thresholds, canvas geometry and default
drawing style.

Exports:
    SNAP_RADIUS (float): Distance under which a new point snaps onto a committed vertex.
    CLOSE_RADIUS (float): Distance to the first vertex under which a commit closes the polygon.
    CLICK_SLOP (float): Maximum press-to-release travel still treated as a click.
    DEFAULT_STYLE (PolygonStyle): Fill, stroke and line width for committed polygons.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass


Color = str | tuple[int, ...]


@dataclass(frozen=True)
class PolygonStyle:
    """Opaque drawing style; the engine passes it through to renderers untouched."""

    fill_color: Color = (0, 150, 255, 102)
    stroke_color: Color = "blue"
    line_width: int = 2


# Editing thresholds
SNAP_RADIUS: float = 10.0
CLOSE_RADIUS: float = SNAP_RADIUS
CLICK_SLOP: float = 4.0

# Canvas and markers
CANVAS_SIZE: tuple[int, int] = (500, 500)
VERTEX_MARKER_RADIUS: float = 5.0
BACKGROUND_COLOR: Color = "white"
BORDER_COLOR: Color = "black"
ACTIVE_STROKE_COLOR: Color = "green"
ACTIVE_LINE_WIDTH: int = 2
COMMITTED_VERTEX_COLOR: Color = "red"
ACTIVE_VERTEX_COLOR: Color = "blue"
CURSOR_COLOR: Color = "black"

DEFAULT_STYLE = PolygonStyle()

# Environment overrides read at startup
LOG_LEVEL_ENV = "POLYEDIT_LOG_LEVEL"
LOG_FILE_ENV = "POLYEDIT_LOG_FILE"


def log_level_from_env(default: int = logging.INFO) -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def log_file_from_env() -> str | None:
    return os.environ.get(LOG_FILE_ENV) or None
