from __future__ import annotations

import math

import pytest

from polyedit.controller import EditorController
from polyedit.errors import InvalidPointerError
from polyedit.events import PointerCommit, PointerMove, PointerPress, PointerRelease
from polyedit.input_adapter import PointerInputAdapter, to_point


def test_to_point_normalizes_to_floats():
    assert to_point(3, 4) == (3.0, 4.0)


@pytest.mark.parametrize("x, y", [(math.nan, 0.0), (0.0, math.inf), (-math.inf, 1.0)])
def test_to_point_rejects_non_finite(x, y):
    with pytest.raises(InvalidPointerError):
        to_point(x, y)


def test_click_yields_release_then_commit():
    adapter = PointerInputAdapter()
    assert adapter.press(10, 10) == [PointerPress((10.0, 10.0))]
    assert adapter.release(12, 11) == [PointerRelease(), PointerCommit((12.0, 11.0))]
    assert not adapter.button_down


def test_drag_gesture_yields_no_commit():
    adapter = PointerInputAdapter()
    adapter.press(10, 10)
    assert adapter.move(40, 40) == [PointerMove((40.0, 40.0))]
    assert adapter.release(40, 40) == [PointerRelease()]


def test_hover_without_button_yields_nothing():
    adapter = PointerInputAdapter()
    assert adapter.move(5, 5) == []
    adapter.press(0, 0)
    assert adapter.move(5, 5, buttons_down=False) == []


def test_cancel_only_releases_held_button():
    adapter = PointerInputAdapter()
    assert adapter.cancel() == []
    adapter.press(0, 0)
    assert adapter.cancel() == [PointerRelease()]


def test_clicks_through_adapter_draw_and_close_polygon():
    controller = EditorController()
    adapter = PointerInputAdapter()
    for x, y in [(0, 0), (100, 0), (100, 100), (2, 1)]:
        controller.dispatch_all(adapter.press(x, y))
        controller.dispatch_all(adapter.release(x, y))

    assert controller.state.committed_polygons == (((0.0, 0.0), (100.0, 0.0), (100.0, 100.0)),)
    assert controller.state.drag_session is None


def test_vertex_drag_through_adapter_does_not_add_points():
    controller = EditorController()
    adapter = PointerInputAdapter()
    for x, y in [(0, 0), (100, 0), (100, 100), (0, 0)]:
        controller.dispatch_all(adapter.press(x, y) + adapter.release(x, y))

    controller.dispatch_all(adapter.press(100, 0))
    controller.dispatch_all(adapter.move(150, 20))
    controller.dispatch_all(adapter.release(150, 20))

    assert controller.state.committed_polygons[0][1] == (150.0, 20.0)
    assert controller.state.active_polygon == ()
