"""
Lightness ramp generation.

Builds a 10-step monochromatic scale around a base color. Hue and saturation
stay fixed; lightness runs from near white at step 0, through the base color
at step 4, down to near black at step 9.
"""

from typing import List

from loguru import logger

from .conversion import HSL, hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl

NUM_STEPS = 10
BASE_INDEX = 4
MAX_LIGHTNESS = 0.98
MIN_LIGHTNESS = 0.05
FALLBACK_HEX = "#000000"


def _lerp(a: float, b: float, t: float) -> float:
    return a * (1 - t) + b * t


def step_lightness(index: int, base_lightness: float) -> float:
    """Lightness of a scale step, clamped to [0, 1]."""
    if index <= BASE_INDEX:
        t = index / BASE_INDEX
        lightness = _lerp(MAX_LIGHTNESS, base_lightness, t)
    else:
        t = (index - BASE_INDEX) / (NUM_STEPS - 1 - BASE_INDEX)
        lightness = _lerp(base_lightness, MIN_LIGHTNESS, t)
    return max(0.0, min(1.0, lightness))


def generate_color_scale(base_hex: str) -> List[str]:
    """
    Generate a 10-step color scale anchored on ``base_hex``.

    Args:
        base_hex: 6-digit hex color, '#' optional

    Returns:
        Ten lowercase hex strings ordered lightest to darkest. Step 4
        reproduces the base color. An unparseable base yields ten copies
        of '#000000'.
    """
    parsed = hex_to_rgb(base_hex)
    if not parsed.ok:
        logger.debug(f"Scale fallback to black: {parsed.error}")
        return [FALLBACK_HEX] * NUM_STEPS

    h, s, base_lightness = rgb_to_hsl(parsed.value)
    scale = []
    for i in range(NUM_STEPS):
        lightness = step_lightness(i, base_lightness)
        scale.append(rgb_to_hex(hsl_to_rgb(HSL(h, s, lightness))))

    return scale
