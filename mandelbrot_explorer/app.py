"""
Main application module for the Mandelbrot explorer.

Contains the MandelbrotApp class which handles:
- Window setup and main loop
- Translating pygame mouse events into explorer pointer events
- Driving one explorer frame per clock tick
"""

import logging

import pygame

from . import selection
from .canvas import PygameCanvas
from .compute import warmup_jit
from .config import load_settings
from .explorer import MandelbrotExplorer
from .logging_config import setup_logging
from .renderer import MandelbrotRenderer

logger = logging.getLogger(__name__)


# pygame mouse button numbers
BUTTON_LEFT = 1
BUTTON_RIGHT = 3
WHEEL_BUTTONS = (4, 5)  # Wheel notches arrive as button events too


def pointer_button(pygame_button):
    """Map a pygame mouse button number to a pointer button identity."""
    if pygame_button == BUTTON_LEFT:
        return selection.PRIMARY
    if pygame_button == BUTTON_RIGHT:
        return selection.SECONDARY
    return selection.OTHER


class MandelbrotApp:
    """
    Main application class for the Mandelbrot explorer.

    Owns the pygame window and event loop, and forwards everything
    else to a MandelbrotExplorer.
    """

    def __init__(self, width=None, height=None, settings=None):
        """
        Initialize the application.

        Args:
            width: Window width in pixels (default from settings, 600)
            height: Window height in pixels (default from settings, 400)
            settings: Settings dict (default: load_settings())
        """
        self.settings = settings or load_settings()
        self.width = width or self.settings['window_width']
        self.height = height or self.settings['window_height']
        self.fps = self.settings['fps']

        # Pygame state (initialized in run())
        self.screen = None
        self.clock = None
        self.explorer = None

        self.running = False

    def run(self):
        """Run the application main loop."""
        self._init_pygame()
        self._init_explorer()

        logger.info("Compiling (first run only)...")
        warmup_jit()

        self.running = True
        while self.running:
            self._handle_events()
            if self.explorer.on_frame():
                pygame.display.flip()
            self.clock.tick(self.fps)

        pygame.quit()

    def _init_pygame(self):
        """Initialize pygame and create window."""
        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(self.settings['window_title'])
        self.clock = pygame.time.Clock()
        logger.info(f"Window opened at {self.width}x{self.height}")

    def _init_explorer(self):
        """Create the canvas, renderer and explorer."""
        pygame.font.init()
        font = pygame.font.SysFont(self.settings['font_name'], self.settings['font_size'])
        canvas = PygameCanvas(self.screen, font)
        renderer = MandelbrotRenderer(
            highlight_color=self.settings['highlight_color'],
            help_text=self.settings['help_text']
        )
        self.explorer = MandelbrotExplorer(canvas, pygame.mouse.get_pos, renderer=renderer)

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button not in WHEEL_BUTTONS:
                    self.explorer.on_pointer_down(*event.pos)
            elif event.type == pygame.MOUSEBUTTONUP:
                if event.button not in WHEEL_BUTTONS:
                    x, y = event.pos
                    self.explorer.on_pointer_up(x, y, pointer_button(event.button))


def run(width=None, height=None, log_level=logging.INFO):
    """
    Run the Mandelbrot explorer.

    Args:
        width: Window width (default 600)
        height: Window height (default 400)
        log_level: Logging level for the package logger
    """
    setup_logging(log_level)
    app = MandelbrotApp(width, height)
    try:
        app.run()
    except KeyboardInterrupt:
        pygame.quit()
