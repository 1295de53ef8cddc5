from __future__ import annotations

from typing import Sequence

from . import config
from .geometry2d import Polygon, Vec2, nearest_vertex


def resolve_snap(
    point: Vec2,
    committed_polygons: Sequence[Polygon],
    radius: float = config.SNAP_RADIUS,
) -> Vec2 | None:
    """
    Returns the vertex a new point should snap onto, or None.

    Only the first committed polygon with any vertex inside ``radius`` is
    searched for the nearest vertex; later polygons are never consulted, even
    when they hold a closer one.
    """
    for polygon in committed_polygons:
        index = nearest_vertex(point, polygon, radius)
        if index is not None:
            return polygon[index]
    return None
