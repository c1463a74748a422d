"""
Selection state machine: pointer gestures -> viewport updates.

States are Idle and Selecting. A press starts a selection; the release
decides what happens to the viewport based on which button it was:

- PRIMARY with the pointer moved on both axes: zoom into the rectangle
- SECONDARY: raise the iteration budget by a quarter
- anything else: reset to the default view

A primary release that didn't move on one of the axes changes nothing.
Every release leaves the controller Idle and marks the frame dirty.
"""

import logging

from .viewport import Viewport

logger = logging.getLogger(__name__)


# Pointer button identities
PRIMARY = 0
SECONDARY = 1
OTHER = 2


class SelectionController:
    """
    Turns pointer press/release events into viewport mutations.

    Attributes:
        viewport: The Viewport being driven
        selecting: True between a press and its release
        press_x, press_y: Where the current selection started
        dirty: Set whenever the next frame must be repainted; the
            renderer clears it after a full repaint. Together with
            `selecting` it is the only signal between input handling
            and rendering.
    """

    def __init__(self, viewport=None):
        self.viewport = viewport if viewport is not None else Viewport()
        self.selecting = False
        self.press_x = 0
        self.press_y = 0
        self.dirty = True  # Nothing painted yet

    def on_pointer_down(self, x, y):
        """Start a selection at (x, y)."""
        self.press_x = x
        self.press_y = y
        self.selecting = True
        self.dirty = True

    def on_pointer_up(self, x, y, button, width, height):
        """
        Finish the selection at (x, y) and update the viewport.

        Args:
            x, y: Pointer position at release
            button: PRIMARY, SECONDARY or OTHER
            width, height: Current raster dimensions
        """
        if button == PRIMARY:
            if x != self.press_x and y != self.press_y:
                self.viewport.zoom_to(self.press_x, self.press_y, x, y, width, height)
                logger.debug(f"Zoomed to {self.viewport!r}")
        elif button == SECONDARY:
            self.viewport.raise_iterations()
            logger.debug(f"Max iterations raised to {self.viewport.max_iterations}")
        else:
            self.viewport.reset()
            logger.debug("View reset")

        self.selecting = False
        self.dirty = True

    def selection_rect(self, pointer_x, pointer_y):
        """
        Rectangle from the press point to the live pointer position.

        Returns:
            (x, y, w, h) with w/h negative when dragging up or left,
            or None when not selecting.
        """
        if not self.selecting:
            return None
        return (self.press_x, self.press_y,
                pointer_x - self.press_x, pointer_y - self.press_y)
