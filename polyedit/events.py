from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .geometry2d import Vec2


@dataclass(frozen=True)
class PointerCommit:
    position: Vec2


@dataclass(frozen=True)
class PointerPress:
    position: Vec2


@dataclass(frozen=True)
class PointerMove:
    position: Vec2


@dataclass(frozen=True)
class PointerRelease:
    pass


@dataclass(frozen=True)
class Undo:
    pass


@dataclass(frozen=True)
class Redo:
    pass


@dataclass(frozen=True)
class Clear:
    pass


EditorEvent = Union[PointerCommit, PointerPress, PointerMove, PointerRelease, Undo, Redo, Clear]
