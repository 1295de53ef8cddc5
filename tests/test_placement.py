from __future__ import annotations

from polyedit.placement import PlacementOutcome, place_point
from polyedit.state import DragSession, EditorState
from shapes import make_polygon


def test_first_commit_starts_drawing():
    state, outcome = place_point(EditorState(), (10.0, 20.0))
    assert outcome is PlacementOutcome.APPENDED
    assert state.active_polygon == ((10.0, 20.0),)
    assert state.is_drawing


def test_commit_near_first_vertex_closes_polygon():
    state = EditorState(active_polygon=((0.0, 0.0),))
    state, _ = place_point(state, (100.0, 100.0))
    state, outcome = place_point(state, (4.0, 4.0))

    assert outcome is PlacementOutcome.CLOSED
    assert state.committed_polygons == (((0.0, 0.0), (100.0, 100.0)),)
    assert state.active_polygon == ()


def test_single_vertex_polygon_can_be_closed():
    state, outcome = place_point(EditorState(active_polygon=((0.0, 0.0),)), (1.0, 1.0))
    assert outcome is PlacementOutcome.CLOSED
    assert state.committed_polygons == (((0.0, 0.0),),)


def test_commit_snaps_onto_committed_vertex():
    committed = (make_polygon([(50, 50), (150, 50), (100, 150)]),)
    state, outcome = place_point(EditorState(committed_polygons=committed), (54.0, 53.0))
    assert outcome is PlacementOutcome.SNAPPED
    assert state.active_polygon == ((50.0, 50.0),)
    assert state.committed_polygons == committed


def test_snapping_ignores_active_polygon_vertices():
    state = EditorState(active_polygon=((0.0, 0.0), (100.0, 0.0)))
    state, outcome = place_point(state, (103.0, 2.0))
    assert outcome is PlacementOutcome.APPENDED
    assert state.active_polygon[-1] == (103.0, 2.0)


def test_commit_is_suppressed_while_dragging():
    state = EditorState(
        committed_polygons=(make_polygon([(0, 0), (10, 0), (10, 10)]),),
        drag_session=DragSession(0, 1),
    )
    new_state, outcome = place_point(state, (300.0, 300.0))
    assert outcome is PlacementOutcome.IGNORED
    assert not outcome.changed
    assert new_state is state
