"""
Mandelbrot computation functions using Numba JIT compilation.

This module contains the performance-critical functions, JIT-compiled
for speed:
- mandel: escape-time iteration count for a single point
- pixel_to_complex: raster pixel -> complex plane coordinate
- compute_iterations: the two combined over a whole raster
- apply_palette: iteration counts -> RGB image

All arithmetic is float64; at very deep zoom the view degrades the
way any fixed-precision renderer does.
"""

import numpy as np
from numba import jit


ESCAPE_RADIUS_SQ = 4.0  # |z|^2 bailout
VIEW_SPAN = 2.5         # Width of the complex plane covered at zoom 1
VIEW_LEFT = -2.0        # Real part at the left edge of the default view
VIEW_TOP = 1.25         # Imaginary part at the top edge of the default view


@jit(nopython=True, cache=True)
def mandel(cx, cy, max_iter):
    """
    Escape-time iteration count for the point c = cx + i*cy.

    Iterates z -> z^2 + c from z = 0 until |z|^2 reaches 4 or the
    budget is spent.

    Args:
        cx, cy: Real and imaginary parts of c
        max_iter: Iteration budget (>= 1)

    Returns:
        Number of iterations before escape, or 0 for points that never
        escaped. An escape can't happen on the first check (|0|^2 < 4),
        so 0 always means "in the set".
    """
    zx = 0.0
    zy = 0.0
    zx2 = 0.0
    zy2 = 0.0
    count = 0
    while count < max_iter and zx2 + zy2 < ESCAPE_RADIUS_SQ:
        zy = 2.0 * zx * zy + cy
        zx = zx2 - zy2 + cx
        zx2 = zx * zx
        zy2 = zy * zy
        count += 1
    if count == max_iter:
        return 0
    return count


@jit(nopython=True, cache=True)
def pixel_to_complex(x, y, width, height, origin_x, origin_y, zoom):
    """
    Map a raster pixel to a point in the complex plane.

    Scaling by min(width, height) keeps the aspect ratio square for any
    window shape. At zoom 1 and origin (0, 0) the view covers roughly
    [-2.0, 0.5] x [-1.25, 1.25].

    Returns:
        (dx, dy): Real and imaginary parts
    """
    r = zoom / min(width, height)
    dx = VIEW_SPAN * (x * r + origin_x) + VIEW_LEFT
    dy = VIEW_TOP - VIEW_SPAN * (y * r + origin_y)
    return dx, dy


@jit(nopython=True, cache=True)
def compute_iterations(width, height, origin_x, origin_y, zoom, max_iter):
    """
    Compute escape-time counts for every pixel of a raster.

    Args:
        width, height: Raster dimensions in pixels (both > 0)
        origin_x, origin_y, zoom: Viewport mapping
        max_iter: Iteration budget

    Returns:
        2D int64 array (height, width); entry [y, x] is the count for
        pixel (x, y).
    """
    result = np.zeros((height, width), dtype=np.int64)
    for py in range(height):
        for px in range(width):
            dx, dy = pixel_to_complex(px, py, width, height, origin_x, origin_y, zoom)
            result[py, px] = mandel(dx, dy, max_iter)
    return result


def apply_palette(counts, palette):
    """
    Color iteration counts by cyclic palette lookup.

    Args:
        counts: 2D array of iteration counts from compute_iterations
        palette: Nx3 array of RGB colors (uint8)

    Returns:
        RGB image array (height, width, 3) of uint8
    """
    return palette[counts % palette.shape[0]]


def warmup_jit():
    """
    Warm up JIT compilation with a tiny raster.

    Call this once at startup to compile the Numba functions, avoiding
    a stall on the first real frame.
    """
    _ = compute_iterations(4, 4, 0.0, 0.0, 1.0, 8)
