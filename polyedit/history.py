from __future__ import annotations

from .geometry2d import drop_last_vertex
from .state import EditorState, HistorySnapshot


def undo_step(state: EditorState) -> EditorState | None:
    """Removes the last placed point, or else the last committed polygon. None when there is nothing to undo."""
    if state.active_polygon:
        return state.with_active(drop_last_vertex(state.active_polygon))
    if state.committed_polygons:
        return state.with_committed(state.committed_polygons[:-1])
    return None


class HistoryStack:
    """
    Linear undo/redo history of editor snapshots.

    ``entries[index]`` is the snapshot currently displayed; entries after it
    form the redo future, dropped by every push.
    """

    def __init__(self) -> None:
        self.entries: list[HistorySnapshot] = []
        self.index = 0

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def current(self) -> HistorySnapshot | None:
        if not self.entries:
            return None
        return self.entries[self.index]

    def can_redo(self) -> bool:
        return self.index < len(self.entries) - 1

    def push(self, snapshot: HistorySnapshot) -> None:
        del self.entries[self.index + 1 :]
        self.entries.append(snapshot)
        self.index = len(self.entries) - 1

    def record(self, state: EditorState) -> None:
        self.push(HistorySnapshot.of(state))

    def undo(self, state: EditorState) -> EditorState | None:
        """
        Applies one undo step to ``state`` and records it.

        The live state is pushed first when it is not the current entry, so
        placements and drags made since the last history operation can be
        redone. The undone state then lands just before the pre-undo entry.
        """
        undone = undo_step(state)
        if undone is None:
            return None

        current = self.current
        if current is None or not current.matches(state):
            self.record(state)

        target = HistorySnapshot.of(undone)
        if self.index > 0 and self.entries[self.index - 1] == target:
            self.index -= 1
        else:
            # entries below index can no longer be stepped back to
            del self.entries[: self.index]
            self.index = 0
            self.entries.insert(0, target)
        return undone

    def redo(self, state: EditorState) -> EditorState | None:
        """Steps forward; unrecorded edits since the last history operation discard the redo future."""
        if not self.can_redo():
            return None
        if not self.entries[self.index].matches(state):
            del self.entries[self.index + 1 :]
            return None
        self.index += 1
        return self.entries[self.index].restore_into(state)

    def clear(self) -> bool:
        changed = bool(self.entries) or self.index != 0
        self.entries.clear()
        self.index = 0
        return changed
