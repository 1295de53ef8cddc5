from __future__ import annotations

from typing import Sequence

from polyedit.geometry2d import Polygon


def make_polygon(points: Sequence[Sequence[float]]) -> Polygon:
    return tuple((float(x), float(y)) for x, y in points)
