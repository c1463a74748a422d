"""
Application settings.

Defaults are bundled in settings.json next to this module. Anything
missing from the file falls back to DEFAULT_SETTINGS.
"""

import json
import logging
import os

logger = logging.getLogger(__name__)


SETTINGS_PATH = os.path.join(os.path.dirname(__file__), 'settings.json')

DEFAULT_SETTINGS = {
    'window_width': 600,
    'window_height': 400,
    'window_title': 'Mandelbrot',
    'fps': 60,
    'highlight_color': [255, 0, 0],
    'help_text': 'Click and drag to draw an area to zoom into.',
    'font_name': 'Arial',
    'font_size': 14,
}


def load_settings(path=SETTINGS_PATH):
    """
    Load settings from a JSON file, merged over DEFAULT_SETTINGS.

    A missing or unreadable file is not fatal: the defaults are used
    and a warning is logged.
    """
    settings = dict(DEFAULT_SETTINGS)
    try:
        with open(path, 'r') as f:
            settings.update(json.load(f))
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.warning(f"Could not load {os.path.basename(path)}: {e}")
    return settings
