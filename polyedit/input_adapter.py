from __future__ import annotations

import math

from . import config
from .errors import InvalidPointerError
from .events import EditorEvent, PointerCommit, PointerMove, PointerPress, PointerRelease
from .geometry2d import Vec2, distance


def to_point(x: float, y: float) -> Vec2:
    px, py = float(x), float(y)
    if not (math.isfinite(px) and math.isfinite(py)):
        raise InvalidPointerError(f"Pointer position must be finite, got ({x!r}, {y!r})")
    return (px, py)


class PointerInputAdapter:
    """
    Turns raw button activity into canonical editor events.

    Mouse and synthesized touch input share this path. A press followed by a
    release within ``click_slop`` also counts as a click, i.e. a commit at the
    release position, delivered after the release.
    """

    def __init__(self, click_slop: float = config.CLICK_SLOP) -> None:
        self.click_slop = click_slop
        self._press_pos: Vec2 | None = None

    @property
    def button_down(self) -> bool:
        return self._press_pos is not None

    def press(self, x: float, y: float) -> list[EditorEvent]:
        pos = to_point(x, y)
        self._press_pos = pos
        return [PointerPress(pos)]

    def move(self, x: float, y: float, buttons_down: bool = True) -> list[EditorEvent]:
        pos = to_point(x, y)
        if not buttons_down or self._press_pos is None:
            return []
        return [PointerMove(pos)]

    def release(self, x: float, y: float) -> list[EditorEvent]:
        pos = to_point(x, y)
        start, self._press_pos = self._press_pos, None
        if start is None:
            return [PointerRelease()]
        if distance(start, pos) <= self.click_slop:
            return [PointerRelease(), PointerCommit(pos)]
        return [PointerRelease()]

    def cancel(self) -> list[EditorEvent]:
        """Pointer left the surface or the grab was lost; ends any drag without a click."""
        if self._press_pos is None:
            return []
        self._press_pos = None
        return [PointerRelease()]
