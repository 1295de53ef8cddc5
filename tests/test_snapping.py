from __future__ import annotations

from polyedit.snapping import resolve_snap
from shapes import make_polygon


def test_snaps_to_exact_vertex_coordinates():
    committed = (make_polygon([(50, 50), (150, 50), (100, 150)]),)
    assert resolve_snap((54.0, 53.0), committed) == (50.0, 50.0)


def test_returns_none_outside_radius():
    committed = (make_polygon([(50, 50), (150, 50), (100, 150)]),)
    assert resolve_snap((60.0, 50.0), committed) is None
    assert resolve_snap((0.0, 0.0), ()) is None


def test_first_matching_polygon_wins_over_closer_vertex_later():
    first = make_polygon([(8, 0), (200, 200), (300, 300)])
    second = make_polygon([(1, 0), (400, 400), (500, 500)])
    assert resolve_snap((0.0, 0.0), (first, second)) == (8.0, 0.0)


def test_nearest_vertex_within_matching_polygon():
    poly = make_polygon([(9, 0), (3, 0), (0, 3)])
    # (3, 0) and (0, 3) tie; lower index wins
    assert resolve_snap((0.0, 0.0), (poly,)) == (3.0, 0.0)
