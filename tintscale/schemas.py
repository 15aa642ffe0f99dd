"""
Tintscale API Schemas
Pydantic models for color conversion, scale, contrast and extraction endpoints.
"""
from typing import List, Literal, Optional
from pydantic import BaseModel, Field

HEX_OUT_PATTERN = r"^#[0-9a-f]{6}$"


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("tintscale", description="Service name")


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str = Field(..., description="Error message")


# ============================================================================
# CONVERSION SCHEMAS
# ============================================================================

class RGBModel(BaseModel):
    """RGB triple on a 0-255 scale."""
    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)


class HSLModel(BaseModel):
    """HSL triple with every component normalized to [0, 1]."""
    h: float = Field(..., ge=0.0, le=1.0, description="Hue as a fraction of a full turn")
    s: float = Field(..., ge=0.0, le=1.0)
    l: float = Field(..., ge=0.0, le=1.0)


class ConvertResponse(BaseModel):
    """All encodings of one color."""
    hex: str = Field(..., pattern=HEX_OUT_PATTERN, description="Lowercase #rrggbb")
    rgb: RGBModel
    hsl: HSLModel
    rgb_text: str = Field(..., description="Display string 'r, g, b'")
    hsl_text: str = Field(..., description="Display string 'h, s, l' in degrees and percent")
    text_color: Literal["light", "dark"]


class ParseValueRequest(BaseModel):
    """A color edit typed into a palette row."""
    input_type: Literal["hex", "rgb", "hsl"] = Field(..., description="Format of 'value'")
    value: str = Field(..., max_length=64, description="Text the user typed")
    current: str = Field(..., max_length=16, description="Hex color the row holds now")


class ParseValueResponse(BaseModel):
    """Result of applying a row edit."""
    hex: str = Field(..., description="New row color; equals 'current' when the edit did not parse")
    changed: bool


# ============================================================================
# CONTRAST / SCALE SCHEMAS
# ============================================================================

class ContrastResponse(BaseModel):
    """Text color recommendation for a background."""
    hex: str
    text_color: Literal["light", "dark"]
    brightness: Optional[float] = Field(None, description="Weighted luma, 0-255; null for invalid input")


class ScaleStep(BaseModel):
    """One step of a lightness scale."""
    index: int = Field(..., ge=0, le=9)
    hex: str = Field(..., pattern=HEX_OUT_PATTERN)
    text_color: Literal["light", "dark"]


class ScaleResponse(BaseModel):
    """A 10-step scale for one base color."""
    name: Optional[str] = None
    base_hex: str
    valid: bool = Field(..., description="False when base_hex did not parse and the black fallback was used")
    text_color: Literal["light", "dark"]
    scale: List[ScaleStep] = Field(..., min_length=10, max_length=10)
    swatch_png_b64: Optional[str] = Field(None, description="Base64 PNG strip of the scale")


class NamedColor(BaseModel):
    """A palette row: a role name and its color."""
    name: str = Field(..., min_length=1, max_length=64)
    color: str = Field(..., max_length=16)


class ScalesRequest(BaseModel):
    """Batch of palette rows to expand into scales."""
    colors: List[NamedColor] = Field(..., min_length=1, max_length=32)
    include_swatch: bool = False


class ScalesResponse(BaseModel):
    scales: List[ScaleResponse]


class PaletteDefaultsResponse(BaseModel):
    """Starting palette and the row appended after it."""
    palette: List[NamedColor]
    next_row: NamedColor = Field(..., description="Default for the next added row")


# ============================================================================
# EXTRACTION SCHEMAS
# ============================================================================

class ExtractedColor(BaseModel):
    """One representative color from an image."""
    name: str = Field(..., description="Default palette row name, 'Extracted N'")
    hex: str = Field(..., pattern=HEX_OUT_PATTERN)
    ratio: float = Field(..., ge=0.0, le=1.0, description="Share of samples in this cluster")
    text_color: Literal["light", "dark"]


class ExtractResponse(BaseModel):
    """Colors extracted from an uploaded image, in seed order."""
    width: int = Field(..., description="Width of the analyzed (downscaled) image")
    height: int = Field(..., description="Height of the analyzed (downscaled) image")
    original_width: int
    original_height: int
    count: int = Field(..., description="Requested number of colors")
    sampled_pixels: int
    colors: List[ExtractedColor]
    swatch_png_b64: Optional[str] = None
