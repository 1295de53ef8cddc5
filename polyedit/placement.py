from __future__ import annotations

from enum import Enum

from . import config
from .geometry2d import Vec2, append_vertex, distance
from .snapping import resolve_snap
from .state import EditorState


class PlacementOutcome(Enum):
    IGNORED = "ignored"
    APPENDED = "appended"
    SNAPPED = "snapped"
    CLOSED = "closed"

    @property
    def changed(self) -> bool:
        return self is not PlacementOutcome.IGNORED


def should_close(state: EditorState, position: Vec2, radius: float = config.CLOSE_RADIUS) -> bool:
    return state.is_drawing and distance(position, state.active_polygon[0]) < radius


def place_point(state: EditorState, position: Vec2) -> tuple[EditorState, PlacementOutcome]:
    """
    Applies a commit event at ``position``.

    Closing moves the active polygon, as is, to the end of the committed list
    regardless of its length. Otherwise the point is appended, snapped onto a
    committed vertex when one is close enough. Suppressed during a drag.
    """
    if state.is_dragging:
        return state, PlacementOutcome.IGNORED

    if should_close(state, position):
        committed = state.committed_polygons + (state.active_polygon,)
        return EditorState(committed, (), state.drag_session), PlacementOutcome.CLOSED

    snapped = resolve_snap(position, state.committed_polygons)
    if snapped is not None:
        return state.with_active(append_vertex(state.active_polygon, snapped)), PlacementOutcome.SNAPPED
    return state.with_active(append_vertex(state.active_polygon, position)), PlacementOutcome.APPENDED
