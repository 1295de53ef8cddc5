from __future__ import annotations

from polyedit.config import PolygonStyle
from polyedit.raster import render_image
from polyedit.state import EditorState
from shapes import make_polygon

WHITE = (255, 255, 255)


def test_empty_state_renders_blank_canvas():
    image = render_image(EditorState(), size=(50, 40))
    assert image.size == (50, 40)
    assert image.getcolors() == [(50 * 40, WHITE)]


def test_committed_polygon_is_filled_and_vertices_marked():
    state = EditorState(committed_polygons=(make_polygon([(20, 20), (180, 20), (180, 180), (20, 180)]),))
    style = PolygonStyle(fill_color=(0, 0, 255), stroke_color="black", line_width=1)
    image = render_image(state, style, size=(200, 200))

    assert image.getpixel((100, 100)) == (0, 0, 255)
    assert image.getpixel((20, 20)) == (255, 0, 0)
    assert image.getpixel((5, 5)) == WHITE


def test_translucent_fill_blends_with_background():
    state = EditorState(committed_polygons=(make_polygon([(0, 0), (99, 0), (99, 99), (0, 99)]),))
    image = render_image(state, size=(100, 100))
    r, g, b = image.getpixel((50, 50))
    assert r > 0 and g > 150 and b == 255


def test_active_polygon_drawn_open_with_blue_markers():
    state = EditorState(active_polygon=make_polygon([(20, 50), (180, 50), (180, 150)]))
    image = render_image(state, size=(200, 200))

    assert image.getpixel((100, 50)) == (0, 128, 0)
    assert image.getpixel((180, 150)) == (0, 0, 255)
    # no closing edge back to the first vertex
    assert image.getpixel((100, 100)) == WHITE


def test_cursor_marker():
    image = render_image(EditorState(), size=(40, 40), cursor=(20.0, 20.0))
    assert image.getpixel((20, 20)) == (0, 0, 0)
