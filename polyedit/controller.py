from __future__ import annotations

import logging
from typing import Callable

from . import config
from .config import PolygonStyle
from .drag import end_drag, move_drag, start_drag
from .errors import ReentrantDispatchError
from .events import Clear, EditorEvent, PointerCommit, PointerMove, PointerPress, PointerRelease, Redo, Undo
from .geometry2d import Vec2
from .history import HistoryStack
from .placement import PlacementOutcome, place_point
from .state import EMPTY_STATE, EditorState, EditorStateSnapshot

logger = logging.getLogger(__name__)

Listener = Callable[[EditorStateSnapshot, PolygonStyle], None]


class EditorController:
    """
    Owner of the single editor state and its history.

    Every event goes through :meth:`dispatch`, which returns whether the state
    changed. Listeners are called with the new snapshot and the style after
    each accepted event, never during processing.
    """

    def __init__(self, style: PolygonStyle = config.DEFAULT_STYLE) -> None:
        self.style = style
        self._state: EditorState = EMPTY_STATE
        self.history = HistoryStack()
        self._listeners: list[Listener] = []
        self._dispatching = False

    @property
    def state(self) -> EditorStateSnapshot:
        return self._state

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def dispatch(self, event: EditorEvent) -> bool:
        if self._dispatching:
            raise ReentrantDispatchError(f"Cannot dispatch {type(event).__name__} while another event is processed")
        self._dispatching = True
        try:
            changed = self._apply(event)
        finally:
            self._dispatching = False
        if changed:
            self._notify()
        return changed

    def dispatch_all(self, events: list[EditorEvent]) -> bool:
        changed = False
        for event in events:
            changed = self.dispatch(event) or changed
        return changed

    # Convenience wrappers
    def commit(self, position: Vec2) -> bool:
        return self.dispatch(PointerCommit(position))

    def press(self, position: Vec2) -> bool:
        return self.dispatch(PointerPress(position))

    def move(self, position: Vec2) -> bool:
        return self.dispatch(PointerMove(position))

    def release(self) -> bool:
        return self.dispatch(PointerRelease())

    def undo(self) -> bool:
        return self.dispatch(Undo())

    def redo(self) -> bool:
        return self.dispatch(Redo())

    def clear(self) -> bool:
        return self.dispatch(Clear())

    def _apply(self, event: EditorEvent) -> bool:
        if isinstance(event, PointerCommit):
            return self._on_commit(event.position)
        if isinstance(event, PointerPress):
            self._state, changed = start_drag(self._state, event.position)
            if changed:
                logger.debug("Drag started: %s", self._state.drag_session)
            return changed
        if isinstance(event, PointerMove):
            self._state, changed = move_drag(self._state, event.position)
            return changed
        if isinstance(event, PointerRelease):
            self._state, changed = end_drag(self._state)
            if changed:
                logger.debug("Drag ended")
            return changed
        if isinstance(event, Undo):
            return self._on_undo()
        if isinstance(event, Redo):
            return self._on_redo()
        if isinstance(event, Clear):
            return self._on_clear()
        raise TypeError(f"Unsupported editor event: {event!r}")

    def _on_commit(self, position: Vec2) -> bool:
        self._state, outcome = place_point(self._state, position)
        if outcome is PlacementOutcome.CLOSED:
            self.history.record(self._state)
            logger.info(
                "Polygon closed with %d vertices (%d committed)",
                len(self._state.committed_polygons[-1]),
                len(self._state.committed_polygons),
            )
        elif outcome.changed:
            logger.debug("Point %s: %s", outcome.value, self._state.active_polygon[-1])
        return outcome.changed

    def _on_undo(self) -> bool:
        undone = self.history.undo(self._state)
        if undone is None:
            logger.debug("Undo: nothing to undo")
            return False
        self._state = undone
        logger.info("Undo (history %d/%d)", self.history.index + 1, len(self.history))
        return True

    def _on_redo(self) -> bool:
        redone = self.history.redo(self._state)
        if redone is None:
            logger.debug("Redo: already at the newest entry")
            return False
        self._state = redone
        logger.info("Redo (history %d/%d)", self.history.index + 1, len(self.history))
        return True

    def _on_clear(self) -> bool:
        changed = self._state != EMPTY_STATE
        changed = self.history.clear() or changed
        self._state = EMPTY_STATE
        if changed:
            logger.info("Editor cleared")
        return changed

    def _notify(self) -> None:
        self._dispatching = True
        try:
            for listener in list(self._listeners):
                listener(self._state, self.style)
        finally:
            self._dispatching = False
