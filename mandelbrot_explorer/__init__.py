"""
Mandelbrot Set Explorer Package

An interactive Mandelbrot set explorer using Pygame for display and
Numba for JIT-compiled computation.

Quick Start:
    from mandelbrot_explorer import run
    run()

Or from command line:
    python -m mandelbrot_explorer

Package Structure:
    - compute.py: JIT-compiled escape-time and pixel mapping functions
    - palette.py: The banded grayscale palette
    - viewport.py: Viewport state and its zoom/reset rules
    - selection.py: Pointer selection state machine
    - renderer.py: Full-frame rendering onto a canvas
    - canvas.py: Canvas interface and pygame implementation
    - explorer.py: Host-facing explorer object
    - app.py: Main application and event loop

Controls:
    - Left drag: Zoom into the selected rectangle
    - Right click: Increase max iterations by 25%
    - Middle click: Reset to default view
    - ESC: Quit
"""

from .app import run, MandelbrotApp
from .explorer import MandelbrotExplorer
from .renderer import MandelbrotRenderer
from .selection import SelectionController, PRIMARY, SECONDARY, OTHER
from .viewport import Viewport
from .palette import generate_palette, PALETTE_SIZE

__version__ = "1.0.0"
__all__ = [
    "run",
    "MandelbrotApp",
    "MandelbrotExplorer",
    "MandelbrotRenderer",
    "SelectionController",
    "Viewport",
    "generate_palette",
    "PALETTE_SIZE",
    "PRIMARY",
    "SECONDARY",
    "OTHER",
]
