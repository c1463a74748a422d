import pytest

from mandelbrot_explorer.canvas import Canvas


class RecordingCanvas(Canvas):
    """Canvas that records every drawing call instead of drawing."""

    def __init__(self, width, height, bulk=True):
        self._width = width
        self._height = height
        self.bulk = bulk
        self.calls = []
        self.pixels = {}
        self.image = None

    def width(self):
        return self._width

    def height(self):
        return self._height

    def clear_background(self, rgb):
        self.calls.append(('clear', rgb))

    def set_pixel(self, x, y, rgb):
        self.pixels[(x, y)] = rgb

    def put_pixels(self, rgb):
        self.calls.append(('pixels', rgb.shape))
        self.image = rgb
        if not self.bulk:
            super().put_pixels(rgb)

    def stroke_rect_outline(self, x, y, w, h, rgb):
        self.calls.append(('rect', (x, y, w, h), rgb))

    def draw_centered_text(self, text, x, y):
        self.calls.append(('text', text, (x, y)))

    def call_names(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def make_canvas():
    return RecordingCanvas
