"""
Full-frame Mandelbrot renderer.

The MandelbrotRenderer class handles:
- Deciding whether a frame needs repainting at all
- Computing the escape-time raster for the current viewport
- Coloring it with the banded palette
- Drawing the selection outline and help text on top
"""

import logging
import time

from .compute import compute_iterations, apply_palette
from .palette import generate_palette

logger = logging.getLogger(__name__)


class MandelbrotRenderer:
    """
    Paints frames onto a Canvas from a SelectionController's state.

    Usage:
        renderer = MandelbrotRenderer()

        # Once per tick:
        if renderer.on_frame(canvas, controller, pygame.mouse.get_pos):
            pygame.display.flip()

    Attributes:
        palette: Nx3 uint8 color table, indexed by count mod N
        highlight_color: RGB color of the selection outline
        help_text: Line drawn at the bottom of every frame
    """

    BACKGROUND = (0, 0, 0)
    HIGHLIGHT = (255, 0, 0)
    HELP_TEXT = "Click and drag to draw an area to zoom into."
    HELP_TEXT_MARGIN = 20  # Pixels between help text baseline and bottom edge

    def __init__(self, palette=None, highlight_color=None, help_text=None):
        self.palette = palette if palette is not None else generate_palette()
        self.highlight_color = tuple(highlight_color or self.HIGHLIGHT)
        self.help_text = help_text if help_text is not None else self.HELP_TEXT

    def needs_repaint(self, controller):
        """A frame is skipped when nothing changed and no selection is live."""
        return controller.dirty or controller.selecting

    def render(self, canvas, viewport):
        """
        Compute and paint the raster for a viewport.

        Returns:
            The RGB image (height, width, 3) that was painted
        """
        width = canvas.width()
        height = canvas.height()
        origin_x, origin_y, zoom, max_iter = viewport.snapshot()

        counts = compute_iterations(width, height, origin_x, origin_y, zoom, max_iter)
        rgb = apply_palette(counts, self.palette)
        canvas.put_pixels(rgb)
        return rgb

    def on_frame(self, canvas, controller, pointer_position):
        """
        Handle one frame tick.

        Args:
            canvas: Canvas to paint on
            controller: SelectionController holding viewport and flags
            pointer_position: Callable returning the live (x, y) pointer
                position; only called while a selection is active

        Returns:
            True if the frame was repainted, False if it was skipped
        """
        if not self.needs_repaint(controller):
            return False

        start = time.perf_counter()
        canvas.clear_background(self.BACKGROUND)
        self.render(canvas, controller.viewport)

        # Outline goes over the raster so it stays visible while dragging
        if controller.selecting:
            px, py = pointer_position()
            x, y, w, h = controller.selection_rect(px, py)
            canvas.stroke_rect_outline(x, y, w, h, self.highlight_color)

        if self.help_text:
            canvas.draw_centered_text(
                self.help_text,
                canvas.width() // 2,
                canvas.height() - self.HELP_TEXT_MARGIN
            )

        # The outline has to be redrawn every frame until release
        controller.dirty = controller.selecting
        logger.debug(f"Frame painted in {(time.perf_counter() - start) * 1000:.1f} ms")
        return True
