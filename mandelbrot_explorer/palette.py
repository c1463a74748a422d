"""
Palette definition for Mandelbrot visualization.

The palette is a small grayscale table of shape (n, 3) with RGB values
(uint8). It is indexed cyclically by iteration count, so its
"triangle wave" shape (dark -> bright -> dark) produces repeating
bands around the set.
"""

import numpy as np


PALETTE_SIZE = 48  # Number of bands before the colors repeat


def generate_palette(n=PALETTE_SIZE):
    """
    Grayscale triangle-wave palette: black -> white -> black.

    Entry i has gray level c = 2*i*256 // n, folded back down once
    it passes 255 (c -> 511 - c).

    Args:
        n: Number of entries

    Returns:
        Palette array (n, 3) of uint8 RGB values
    """
    colors = np.zeros((n, 3), dtype=np.uint8)
    for i in range(n):
        c = 2 * i * 256 // n
        if c > 255:
            c = 511 - c  # Fold back on the way down
        colors[i] = [c, c, c]
    colors.flags.writeable = False
    return colors

