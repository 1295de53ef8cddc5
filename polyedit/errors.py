from __future__ import annotations


class PolyEditError(RuntimeError):
    pass


class InvalidPointerError(PolyEditError, ValueError):
    """Raised by the input adapter for positions the engine must never see."""


class ReentrantDispatchError(PolyEditError):
    """Raised when an event is dispatched while another one is being processed."""
