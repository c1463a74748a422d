"""
The host-facing explorer object.

MandelbrotExplorer bundles the selection controller and renderer
behind the three callbacks a host event loop drives:

    explorer.on_pointer_down(x, y)
    explorer.on_pointer_up(x, y, button)
    explorer.on_frame()

It knows nothing about windows or event queues; the host supplies a
Canvas and a way to read the live pointer position.
"""

from .renderer import MandelbrotRenderer
from .selection import SelectionController


class MandelbrotExplorer:
    """
    Interactive Mandelbrot explorer driven by external callbacks.

    Args:
        canvas: Canvas to paint on (its size is read live every call)
        pointer_position: Callable returning the current (x, y) pointer
            position, used to outline an in-progress selection
        renderer: MandelbrotRenderer (default one created if None)
        controller: SelectionController (default one created if None)
    """

    def __init__(self, canvas, pointer_position, renderer=None, controller=None):
        self.canvas = canvas
        self.pointer_position = pointer_position
        self.renderer = renderer or MandelbrotRenderer()
        self.controller = controller or SelectionController()

    @property
    def viewport(self):
        return self.controller.viewport

    def on_pointer_down(self, x, y):
        self.controller.on_pointer_down(x, y)

    def on_pointer_up(self, x, y, button):
        self.controller.on_pointer_up(
            x, y, button, self.canvas.width(), self.canvas.height()
        )

    def on_frame(self):
        """Repaint if needed. Returns True if the canvas changed."""
        return self.renderer.on_frame(self.canvas, self.controller, self.pointer_position)
