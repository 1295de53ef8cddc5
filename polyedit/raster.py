from __future__ import annotations

from typing import Sequence

from PIL import Image, ImageDraw

from . import config
from .config import PolygonStyle
from .geometry2d import Vec2
from .state import EditorStateSnapshot


def _marker(draw: ImageDraw.ImageDraw, p: Vec2, color: config.Color, radius: float = config.VERTEX_MARKER_RADIUS) -> None:
    x, y = p
    draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=color)


def _outline(draw: ImageDraw.ImageDraw, points: Sequence[Vec2], color: config.Color, width: int, closed: bool) -> None:
    if len(points) < 2:
        return
    path = list(points) + ([points[0]] if closed else [])
    draw.line(path, fill=color, width=width)


def render_image(
    snapshot: EditorStateSnapshot,
    style: PolygonStyle = config.DEFAULT_STYLE,
    size: tuple[int, int] = config.CANVAS_SIZE,
    cursor: Vec2 | None = None,
) -> Image.Image:
    """
    Draws a snapshot the same way the Qt canvas does.

    Layers, bottom to top: committed polygons (fill + closed outline), the
    active polyline, committed vertex markers, active vertex markers, cursor.
    """
    image = Image.new("RGB", size, config.BACKGROUND_COLOR)
    # RGBA mode blends translucent fills onto the RGB image
    draw = ImageDraw.Draw(image, "RGBA")

    for polygon in snapshot.committed_polygons:
        if len(polygon) >= 3:
            draw.polygon(list(polygon), fill=style.fill_color)
        _outline(draw, polygon, style.stroke_color, style.line_width, closed=True)

    _outline(draw, snapshot.active_polygon, config.ACTIVE_STROKE_COLOR, config.ACTIVE_LINE_WIDTH, closed=False)

    for polygon in snapshot.committed_polygons:
        for p in polygon:
            _marker(draw, p, config.COMMITTED_VERTEX_COLOR)
    for p in snapshot.active_polygon:
        _marker(draw, p, config.ACTIVE_VERTEX_COLOR)

    if cursor is not None:
        _marker(draw, cursor, config.CURSOR_COLOR)
    return image
