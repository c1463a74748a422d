import pytest

from mandelbrot_explorer.explorer import MandelbrotExplorer
from mandelbrot_explorer.selection import PRIMARY, SECONDARY, OTHER


@pytest.fixture
def explorer(make_canvas):
    pointer = {'pos': (0, 0)}
    explorer = MandelbrotExplorer(make_canvas(600, 400), lambda: pointer['pos'])
    explorer.pointer = pointer
    return explorer


def test_drag_to_zoom(explorer):
    assert explorer.on_frame()
    assert not explorer.on_frame()

    explorer.on_pointer_down(100, 100)
    explorer.pointer['pos'] = (200, 150)
    assert explorer.on_frame()
    assert ('rect', (100, 100, 100, 50), (255, 0, 0)) in explorer.canvas.calls

    explorer.on_pointer_up(200, 150, PRIMARY)
    assert explorer.viewport.zoom == pytest.approx(max(100 / 600, 50 / 400))
    assert explorer.viewport.origin_x == pytest.approx(0.25)
    assert explorer.viewport.origin_y == pytest.approx(0.25)

    assert explorer.on_frame()
    assert not explorer.on_frame()


def test_click_in_place_keeps_view(explorer):
    explorer.on_frame()
    explorer.on_pointer_down(300, 200)
    explorer.on_pointer_up(300, 200, PRIMARY)
    assert explorer.viewport.snapshot() == (0.0, 0.0, 1.0, 64)
    assert explorer.on_frame()


def test_right_click_then_reset(explorer):
    explorer.on_pointer_down(10, 10)
    explorer.on_pointer_up(10, 10, SECONDARY)
    explorer.on_pointer_down(10, 10)
    explorer.on_pointer_up(10, 10, SECONDARY)
    assert explorer.viewport.max_iterations == 100

    explorer.on_pointer_down(10, 10)
    explorer.on_pointer_up(40, 90, PRIMARY)
    assert explorer.viewport.zoom < 1.0

    explorer.on_pointer_down(10, 10)
    explorer.on_pointer_up(10, 10, OTHER)
    assert explorer.viewport.snapshot() == (0.0, 0.0, 1.0, 64)


def test_release_uses_live_canvas_size(explorer):
    explorer.canvas._width, explorer.canvas._height = 400, 400
    explorer.on_pointer_down(0, 0)
    explorer.on_pointer_up(200, 100, PRIMARY)
    assert explorer.viewport.zoom == pytest.approx(0.5)
