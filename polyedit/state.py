from __future__ import annotations

from dataclasses import dataclass, replace

from .geometry2d import Polygon, Vec2


@dataclass(frozen=True)
class DragSession:
    """Vertex being relocated. ``polygon_index`` is None when it belongs to the active polygon."""

    polygon_index: int | None
    vertex_index: int

    @property
    def targets_active(self) -> bool:
        return self.polygon_index is None


@dataclass(frozen=True)
class EditorState:
    committed_polygons: tuple[Polygon, ...] = ()
    active_polygon: Polygon = ()
    drag_session: DragSession | None = None

    @property
    def is_drawing(self) -> bool:
        return len(self.active_polygon) > 0

    @property
    def is_dragging(self) -> bool:
        return self.drag_session is not None

    def with_committed(self, committed: tuple[Polygon, ...]) -> "EditorState":
        return replace(self, committed_polygons=committed)

    def with_active(self, active: Polygon) -> "EditorState":
        return replace(self, active_polygon=active)

    def with_drag(self, session: DragSession | None) -> "EditorState":
        return replace(self, drag_session=session)

    def dragged_vertex(self) -> Vec2 | None:
        """Current position of the dragged vertex, or None if the target is gone."""
        session = self.drag_session
        if session is None:
            return None
        if session.targets_active:
            polygon = self.active_polygon
        elif 0 <= session.polygon_index < len(self.committed_polygons):
            polygon = self.committed_polygons[session.polygon_index]
        else:
            return None
        if 0 <= session.vertex_index < len(polygon):
            return polygon[session.vertex_index]
        return None


@dataclass(frozen=True)
class HistorySnapshot:
    committed_polygons: tuple[Polygon, ...] = ()
    active_polygon: Polygon = ()

    @classmethod
    def of(cls, state: EditorState) -> "HistorySnapshot":
        return cls(state.committed_polygons, state.active_polygon)

    def matches(self, state: EditorState) -> bool:
        return self.committed_polygons == state.committed_polygons and self.active_polygon == state.active_polygon

    def restore_into(self, state: EditorState) -> EditorState:
        """Replaces the editable geometry wholesale; the drag session is kept as is."""
        return replace(state, committed_polygons=self.committed_polygons, active_polygon=self.active_polygon)


EMPTY_STATE = EditorState()


# Renderers receive the frozen state itself.
EditorStateSnapshot = EditorState
