"""
Tintscale Colors Module

Pure color-space conversions, 10-step lightness scales, light/dark text
contrast, and deterministic palette extraction from RGBA pixel buffers.
"""

from .clustering import extract_colors_from_image
from .contrast import get_text_color_for_background
from .conversion import (
    HSL, RGB, ColorResult, hex_to_hsl, hex_to_rgb, hsl_to_hex, hsl_to_rgb, rgb_to_hex, rgb_to_hsl
)
from .scale import generate_color_scale

__all__ = [
    "HSL", "RGB", "ColorResult",
    "hex_to_rgb", "rgb_to_hex", "rgb_to_hsl", "hsl_to_rgb", "hex_to_hsl", "hsl_to_hex",
    "generate_color_scale", "get_text_color_for_background", "extract_colors_from_image",
]
