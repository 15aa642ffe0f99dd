"""
Color space conversion utilities.

Pure conversions between the three encodings the color services speak:
6-digit hex strings, RGB triples on a 0-255 scale, and HSL triples with every
component normalized to [0, 1] (hue is a fraction of a full turn).

Parsing never raises. ``hex_to_rgb`` and ``hex_to_hsl`` return a
``ColorResult`` that callers must check before using the value.
"""

import math
import re
from dataclasses import dataclass
from typing import Generic, NamedTuple, Optional, TypeVar

from loguru import logger

HEX_PATTERN = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)

T = TypeVar("T")


class RGB(NamedTuple):
    """RGB triple on a 0-255 scale. Channels may be fractional before output."""
    r: float
    g: float
    b: float


class HSL(NamedTuple):
    """HSL triple with hue, saturation and lightness all in [0, 1]."""
    h: float
    s: float
    l: float


@dataclass(frozen=True)
class ColorResult(Generic[T]):
    """Outcome of parsing a color: either a value or a failure reason."""
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ColorResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, reason: str) -> "ColorResult[T]":
        return cls(error=reason)

    def unwrap(self) -> T:
        """Return the value, raising ValueError on a failed parse."""
        if not self.ok:
            raise ValueError(self.error)
        return self.value


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up."""
    whole = math.floor(value)
    return int(whole + 1 if value - whole >= 0.5 else whole)


def hex_to_rgb(hex_color: str) -> ColorResult[RGB]:
    """Convert a 6-digit hex string (optional '#') to an RGB triple."""
    match = HEX_PATTERN.fullmatch(hex_color) if isinstance(hex_color, str) else None
    if match is None:
        return ColorResult.failure(f"Invalid hex color: {hex_color!r}")
    r, g, b = (int(part, 16) for part in match.groups())
    return ColorResult.success(RGB(r, g, b))


def rgb_to_hex(rgb) -> str:
    """
    Convert an RGB triple to a lowercase '#rrggbb' string.

    Each channel is rounded half-up and then clamped to [0, 255].
    """
    channels = []
    for channel in rgb:
        value = round_half_up(channel)
        if value < 0 or value > 255:
            logger.debug(f"Clamping out-of-range channel {channel} in {tuple(rgb)}")
            value = min(255, max(0, value))
        channels.append(f"{value:02x}")
    return "#" + "".join(channels)


def rgb_to_hsl(rgb) -> HSL:
    """Convert an RGB triple (0-255) to normalized HSL."""
    r, g, b = (channel / 255 for channel in rgb)
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    h = s = 0.0
    l = (max_c + min_c) / 2

    if max_c != min_c:
        d = max_c - min_c
        s = d / (2 - max_c - min_c) if l > 0.5 else d / (max_c + min_c)
        if max_c == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif max_c == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return HSL(h, s, l)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl) -> RGB:
    """Convert normalized HSL to an unrounded RGB triple (0-255)."""
    h, s, l = hsl
    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGB(r * 255, g * 255, b * 255)


def hex_to_hsl(hex_color: str) -> ColorResult[HSL]:
    """Convert a hex string to HSL, propagating parse failures."""
    parsed = hex_to_rgb(hex_color)
    if not parsed.ok:
        return ColorResult.failure(parsed.error)
    return ColorResult.success(rgb_to_hsl(parsed.value))


def hsl_to_hex(hsl) -> str:
    """Convert normalized HSL to a hex string."""
    return rgb_to_hex(hsl_to_rgb(hsl))


def normalize_hex(hex_color: str) -> ColorResult[str]:
    """Canonical lowercase '#rrggbb' form of a valid hex string."""
    parsed = hex_to_rgb(hex_color)
    if not parsed.ok:
        return ColorResult.failure(parsed.error)
    return ColorResult.success(rgb_to_hex(parsed.value))
