from __future__ import annotations

from math import hypot
from typing import Sequence


Vec2 = tuple[float, float]
Polygon = tuple[Vec2, ...]


def distance(a: Vec2, b: Vec2) -> float:
    return hypot(a[0] - b[0], a[1] - b[1])


def is_within(p: Vec2, v: Vec2, radius: float) -> bool:
    """Strict test: a vertex exactly ``radius`` away is outside."""
    return distance(p, v) < radius


def first_vertex_within(p: Vec2, polygon: Sequence[Vec2], radius: float) -> int | None:
    for i, v in enumerate(polygon):
        if is_within(p, v, radius):
            return i
    return None


def nearest_vertex(p: Vec2, polygon: Sequence[Vec2], radius: float) -> int | None:
    """Index of the closest vertex inside ``radius``; ties go to the lower index."""
    best_i = None
    best_d = radius
    for i, v in enumerate(polygon):
        d = distance(p, v)
        if d < best_d:
            best_i = i
            best_d = d
    return best_i


def append_vertex(polygon: Polygon, p: Vec2) -> Polygon:
    return polygon + (p,)


def drop_last_vertex(polygon: Polygon) -> Polygon:
    return polygon[:-1]


def replace_vertex(polygon: Polygon, index: int, p: Vec2) -> Polygon:
    if not 0 <= index < len(polygon):
        raise IndexError(f"Vertex index {index} out of range for polygon of {len(polygon)} vertices")
    return polygon[:index] + (p,) + polygon[index + 1 :]
