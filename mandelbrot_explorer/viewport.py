"""
Viewport state: where in the complex plane the raster is looking.

The viewport is an origin offset and zoom factor in "view units"
(1.0 = the shorter raster side at zoom 1), plus the iteration budget.
It only changes between frames, in response to pointer releases.
"""


class Viewport:
    """
    Mutable viewport state.

    Invariants: zoom > 0 (only ever multiplied by positive factors) and
    max_iterations >= 1 (only grows, or resets to the default).
    """

    DEFAULT_ORIGIN = (0.0, 0.0)
    DEFAULT_ZOOM = 1.0
    DEFAULT_MAX_ITER = 64

    def __init__(self, origin_x=0.0, origin_y=0.0, zoom=DEFAULT_ZOOM,
                 max_iterations=DEFAULT_MAX_ITER):
        self.origin_x = origin_x
        self.origin_y = origin_y
        self.zoom = zoom
        self.max_iterations = max_iterations

    def zoom_to(self, x0, y0, x1, y1, width, height):
        """
        Zoom into the pixel rectangle spanned by two corners.

        The rectangle's top-left corner becomes the new origin, and the
        zoom shrinks by the larger of the rectangle's width and height
        fractions so the whole selection stays visible.

        Args:
            x0, y0: One corner (pointer press), in pixels
            x1, y1: Opposite corner (pointer release), in pixels
            width, height: Current raster dimensions
        """
        side = min(width, height)
        self.origin_x += self.zoom * min(x0, x1) / side
        self.origin_y += self.zoom * min(y0, y1) / side
        self.zoom *= max(abs(x1 - x0) / width, abs(y1 - y0) / height)

    def raise_iterations(self):
        """Add a quarter more iterations (integer division: 64 -> 80)."""
        self.max_iterations += self.max_iterations // 4

    def reset(self):
        """Return to the default full view."""
        self.origin_x, self.origin_y = self.DEFAULT_ORIGIN
        self.zoom = self.DEFAULT_ZOOM
        self.max_iterations = self.DEFAULT_MAX_ITER

    def snapshot(self):
        """Immutable copy of the state as (origin_x, origin_y, zoom, max_iterations)."""
        return (self.origin_x, self.origin_y, self.zoom, self.max_iterations)

    def __eq__(self, other):
        if not isinstance(other, Viewport):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    def __repr__(self):
        return (f"Viewport(origin=({self.origin_x!r}, {self.origin_y!r}), "
                f"zoom={self.zoom!r}, max_iterations={self.max_iterations})")
