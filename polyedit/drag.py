from __future__ import annotations

from . import config
from .geometry2d import Vec2, first_vertex_within, replace_vertex
from .state import DragSession, EditorState


def hit_test(state: EditorState, position: Vec2, radius: float = config.SNAP_RADIUS) -> DragSession | None:
    """First vertex within ``radius``: committed polygons in draw order, then the active polygon."""
    for polygon_index, polygon in enumerate(state.committed_polygons):
        vertex_index = first_vertex_within(position, polygon, radius)
        if vertex_index is not None:
            return DragSession(polygon_index, vertex_index)
    vertex_index = first_vertex_within(position, state.active_polygon, radius)
    if vertex_index is not None:
        return DragSession(None, vertex_index)
    return None


def start_drag(state: EditorState, position: Vec2) -> tuple[EditorState, bool]:
    if state.is_dragging:
        return state, False
    session = hit_test(state, position)
    if session is None:
        return state, False
    return state.with_drag(session), True


def move_drag(state: EditorState, position: Vec2) -> tuple[EditorState, bool]:
    session = state.drag_session
    if session is None or state.dragged_vertex() is None:
        return state, False

    if session.targets_active:
        active = replace_vertex(state.active_polygon, session.vertex_index, position)
        return state.with_active(active), True

    committed = list(state.committed_polygons)
    committed[session.polygon_index] = replace_vertex(
        committed[session.polygon_index], session.vertex_index, position
    )
    return state.with_committed(tuple(committed)), True


def end_drag(state: EditorState) -> tuple[EditorState, bool]:
    if state.drag_session is None:
        return state, False
    return state.with_drag(None), True
