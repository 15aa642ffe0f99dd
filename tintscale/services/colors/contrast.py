"""
Text contrast classification for colored backgrounds.
"""

from typing import Literal

from .conversion import hex_to_rgb

TextColor = Literal["light", "dark"]

BRIGHTNESS_THRESHOLD = 128


def perceived_brightness(rgb) -> float:
    """Weighted luma brightness of an RGB triple, on a 0-255 scale."""
    r, g, b = rgb
    return (r * 299 + g * 587 + b * 114) / 1000


def get_text_color_for_background(hex_color: str) -> TextColor:
    """
    Recommend light or dark text for a background color.

    Unparseable input recommends light text.
    """
    parsed = hex_to_rgb(hex_color)
    if not parsed.ok:
        return "light"
    return "dark" if perceived_brightness(parsed.value) > BRIGHTNESS_THRESHOLD else "light"
