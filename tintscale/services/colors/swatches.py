"""
Swatch Rendering Module

Renders a color scale or extracted palette as a horizontal PNG strip for
quick visual checks. The highlighted chip gets a border in the text color
recommended for its background.
"""

import base64
from typing import List, Optional, Tuple

import cv2
import numpy as np
from loguru import logger

from tintscale.config import config

from .contrast import get_text_color_for_background
from .conversion import hex_to_rgb

LIGHT_BGR = (255, 255, 255)
DARK_BGR = (0, 0, 0)


def hex_to_bgr(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to BGR tuple for OpenCV."""
    r, g, b = hex_to_rgb(hex_color).unwrap()
    return (b, g, r)


def validate_swatch_params(hex_colors: List[str], chip_size: int, highlight_index: Optional[int]) -> None:
    """
    Validate swatch rendering parameters.

    Raises:
        ValueError: If any parameter is out of range
    """
    if not hex_colors:
        raise ValueError("hex_colors must not be empty")
    if not config.validate_chip_size(chip_size):
        raise ValueError(f"chip_size must be in 8-256, got {chip_size}")
    if highlight_index is not None and not 0 <= highlight_index < len(hex_colors):
        raise ValueError(f"highlight_index {highlight_index} outside palette of {len(hex_colors)}")


def render_swatch_strip(hex_colors: List[str],
                        chip_size: int = 40,
                        highlight_index: Optional[int] = None,
                        border_width: int = 2) -> str:
    """
    Render a horizontal strip of color swatches.

    Args:
        hex_colors: List of hex color strings
        chip_size: Size of each color chip in pixels
        highlight_index: Index of the chip to outline (e.g. the base step)
        border_width: Width of highlight border in pixels

    Returns:
        Base64-encoded PNG image string

    Raises:
        ValueError: For empty input or an unparseable color
        RuntimeError: If PNG encoding fails
    """
    validate_swatch_params(hex_colors, chip_size, highlight_index)

    k = len(hex_colors)
    logger.debug(f"Rendering swatch strip with {k} colors, chip_size={chip_size}")

    img = np.zeros((chip_size, chip_size * k, 3), dtype=np.uint8)

    for i, hex_color in enumerate(hex_colors):
        x_start = i * chip_size
        x_end = (i + 1) * chip_size
        img[:, x_start:x_end, :] = hex_to_bgr(hex_color)

    if highlight_index is not None:
        highlighted = hex_colors[highlight_index]
        border_color = LIGHT_BGR if get_text_color_for_background(highlighted) == "light" else DARK_BGR
        x_start = highlight_index * chip_size
        x_end = (highlight_index + 1) * chip_size
        cv2.rectangle(
            img,
            (x_start, 0),
            (x_end - 1, chip_size - 1),
            border_color,
            border_width
        )

    success, buffer = cv2.imencode('.png', img)
    if not success:
        raise RuntimeError("Failed to encode swatch strip as PNG")

    b64_string = base64.b64encode(buffer.tobytes()).decode('ascii')
    logger.debug(f"Encoded swatch strip: {chip_size * k}x{chip_size} -> {len(b64_string)} chars")
    return b64_string
