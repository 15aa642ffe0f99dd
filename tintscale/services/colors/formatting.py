"""
Color value entry and display rules for palette rows.

A palette row shows its color as hex, "r, g, b" or "h, s, l" text and lets
the user edit it in any of those forms. Edits that do not parse leave the
row's current hex untouched.
"""

import re
from typing import List, Optional

from .conversion import HSL, RGB, hex_to_hsl, hex_to_rgb, hsl_to_hex, rgb_to_hex, round_half_up

INPUT_TYPES = ("hex", "rgb", "hsl")

# Row entry accepts 3-digit shorthand, unlike hex_to_rgb.
HEX_ENTRY_PATTERN = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")
INT_PREFIX_PATTERN = re.compile(r"^[+-]?\d+")

ZERO_TRIPLE = "0, 0, 0"


def format_rgb(hex_color: str) -> str:
    """Display string "r, g, b" for a hex color."""
    parsed = hex_to_rgb(hex_color)
    if not parsed.ok:
        return ZERO_TRIPLE
    r, g, b = parsed.value
    return f"{round_half_up(r)}, {round_half_up(g)}, {round_half_up(b)}"


def format_hsl(hex_color: str) -> str:
    """Display string "h, s, l" in degrees and percent for a hex color."""
    parsed = hex_to_hsl(hex_color)
    if not parsed.ok:
        return ZERO_TRIPLE
    h, s, l = parsed.value
    return f"{round_half_up(h * 360)}, {round_half_up(s * 100)}, {round_half_up(l * 100)}"


def is_hex_entry(value: str) -> bool:
    return bool(HEX_ENTRY_PATTERN.fullmatch(value))


def _parse_int(text: str) -> Optional[int]:
    match = INT_PREFIX_PATTERN.match(text.strip())
    return int(match.group()) if match else None


def _parse_triple(value: str) -> Optional[List[int]]:
    parts = [_parse_int(part) for part in value.split(",")]
    if len(parts) != 3 or any(part is None for part in parts):
        return None
    return parts


def parse_color_value(input_type: str, value: str, current: str) -> str:
    """
    Apply a color edit typed in one of the row formats.

    Args:
        input_type: "hex", "rgb" or "hsl"
        value: Text the user typed
        current: Hex color the row holds now

    Returns:
        The new hex color, or ``current`` when ``value`` does not parse

    Raises:
        ValueError: For an unknown input_type
    """
    if input_type not in INPUT_TYPES:
        raise ValueError(f"Unknown input type: {input_type!r}")

    if input_type == "hex":
        return value if is_hex_entry(value) else current

    parts = _parse_triple(value)
    if parts is None:
        return current

    if input_type == "rgb":
        if all(0 <= part <= 255 for part in parts):
            return rgb_to_hex(RGB(*parts))
        return current

    h, s, l = parts
    if 0 <= h <= 360 and 0 <= s <= 100 and 0 <= l <= 100:
        return hsl_to_hex(HSL(h / 360, s / 100, l / 100))
    return current
