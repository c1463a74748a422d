"""
Drawing surface used by the renderer.

Canvas is the small set of primitives the renderer needs. PygameCanvas
implements it on top of a pygame surface; tests use a recording fake.
"""

import numpy as np
import pygame


class Canvas:
    """Drawing primitives the renderer paints through."""

    def width(self):
        raise NotImplementedError

    def height(self):
        raise NotImplementedError

    def clear_background(self, rgb):
        raise NotImplementedError

    def set_pixel(self, x, y, rgb):
        raise NotImplementedError

    def stroke_rect_outline(self, x, y, w, h, rgb):
        """Unfilled border; w and h may be negative."""
        raise NotImplementedError

    def draw_centered_text(self, text, x, y):
        raise NotImplementedError

    def put_pixels(self, rgb):
        """
        Paint a whole (height, width, 3) image, one set_pixel per pixel.

        Subclasses with a faster block copy should override this.
        """
        height, width = rgb.shape[:2]
        for y in range(height):
            for x in range(width):
                r, g, b = rgb[y, x]
                self.set_pixel(x, y, (int(r), int(g), int(b)))


class PygameCanvas(Canvas):
    """
    Canvas backed by a pygame surface (usually the display surface).

    Args:
        surface: Target pygame.Surface
        font: pygame.font.Font for text, or None to skip text
        text_color: RGB color for text
    """

    def __init__(self, surface, font=None, text_color=(255, 255, 255)):
        self.surface = surface
        self.font = font
        self.text_color = text_color

    def width(self):
        return self.surface.get_width()

    def height(self):
        return self.surface.get_height()

    def clear_background(self, rgb):
        self.surface.fill(rgb)

    def set_pixel(self, x, y, rgb):
        self.surface.set_at((x, y), rgb)

    def put_pixels(self, rgb):
        # surfarray is indexed [x, y]
        pygame.surfarray.blit_array(self.surface, np.ascontiguousarray(rgb.swapaxes(0, 1)))

    def stroke_rect_outline(self, x, y, w, h, rgb):
        rect = pygame.Rect(x, y, w, h)
        rect.normalize()
        pygame.draw.rect(self.surface, rgb, rect, 1)

    def draw_centered_text(self, text, x, y):
        if self.font is None:
            return
        text_surface = self.font.render(text, True, self.text_color)
        text_rect = text_surface.get_rect()
        text_rect.midbottom = (x, y)
        self.surface.blit(text_surface, text_rect)
