"""
Tintscale Color API Routes
Conversion, contrast, scale and image extraction endpoints.
"""
from typing import Optional

from fastapi import APIRouter, File, HTTPException, Query, UploadFile

from tintscale.config import config
from tintscale.schemas import (
    ContrastResponse, ConvertResponse, ErrorResponse, ExtractResponse, HSLModel, NamedColor,
    PaletteDefaultsResponse, ParseValueRequest, ParseValueResponse, RGBModel, ScaleResponse,
    ScalesRequest, ScalesResponse
)
from tintscale.services.colors.contrast import get_text_color_for_background, perceived_brightness
from tintscale.services.colors.conversion import hex_to_rgb, rgb_to_hex, rgb_to_hsl
from tintscale.services.colors.extract_api import handle_extract
from tintscale.services.colors.formatting import format_hsl, format_rgb, parse_color_value
from tintscale.services.colors.scale_api import DEFAULT_PALETTE, build_named_scales, build_scale, new_row

router = APIRouter(prefix="/colors", tags=["Colors"])


@router.get("/convert", response_model=ConvertResponse, responses={422: {"model": ErrorResponse}})
def convert_color(hex: str = Query(..., max_length=16, description="6-digit hex color, '#' optional")):
    """Return every encoding of a hex color. Invalid input is rejected with 422."""
    parsed = hex_to_rgb(hex)
    if not parsed.ok:
        raise HTTPException(status_code=422, detail=parsed.error)

    rgb = parsed.value
    hsl = rgb_to_hsl(rgb)
    canonical = rgb_to_hex(rgb)
    return ConvertResponse(
        hex=canonical,
        rgb=RGBModel(r=rgb.r, g=rgb.g, b=rgb.b),
        hsl=HSLModel(h=hsl.h, s=hsl.s, l=hsl.l),
        rgb_text=format_rgb(canonical),
        hsl_text=format_hsl(canonical),
        text_color=get_text_color_for_background(canonical),
    )


@router.post("/parse", response_model=ParseValueResponse)
def parse_value(request: ParseValueRequest):
    """Apply a hex, rgb or hsl text edit to a palette row color."""
    new_hex = parse_color_value(request.input_type, request.value, request.current)
    return ParseValueResponse(hex=new_hex, changed=new_hex != request.current)


@router.get("/contrast", response_model=ContrastResponse)
def contrast(hex: str = Query(..., max_length=16, description="Background hex color")):
    """Recommend light or dark text. Invalid colors recommend light text."""
    parsed = hex_to_rgb(hex)
    brightness = perceived_brightness(parsed.value) if parsed.ok else None
    return ContrastResponse(
        hex=hex,
        text_color=get_text_color_for_background(hex),
        brightness=brightness,
    )


@router.get("/scale", response_model=ScaleResponse)
def scale(
    hex: str = Query(..., max_length=16, description="Base hex color"),
    name: Optional[str] = Query(None, max_length=64, description="Palette role name"),
    include_swatch: bool = Query(False, description="Include a PNG strip of the scale")
):
    """
    Generate a 10-step lightness scale.

    Step 4 reproduces the base color. An invalid base yields ten black steps
    with ``valid`` set to false.
    """
    return build_scale(hex, name=name, include_swatch=include_swatch)


@router.post("/scales", response_model=ScalesResponse)
def scales(request: ScalesRequest):
    """Expand a list of named palette rows into scales, in order."""
    entries = [{"name": c.name, "color": c.color} for c in request.colors]
    return ScalesResponse(scales=build_named_scales(entries, include_swatch=request.include_swatch))


@router.get("/defaults", response_model=PaletteDefaultsResponse)
def palette_defaults(
    rows: Optional[int] = Query(None, ge=0, le=32, description="Rows already in the palette")
):
    """Starting palette and the default for the next row added to it."""
    existing = len(DEFAULT_PALETTE) if rows is None else rows
    return PaletteDefaultsResponse(
        palette=[NamedColor(**entry) for entry in DEFAULT_PALETTE],
        next_row=NamedColor(**new_row(existing)),
    )


@router.post(
    "/extract",
    response_model=ExtractResponse,
    responses={400: {"model": ErrorResponse}, 415: {"model": ErrorResponse}}
)
async def extract(
    file: UploadFile = File(..., description="Image to extract colors from"),
    count: int = Query(config.DEFAULT_EXTRACT_COUNT, ge=1, le=config.MAX_EXTRACT_COUNT,
                       description="Number of colors to extract"),
    include_swatch: bool = Query(False, description="Include a PNG strip of the colors")
):
    """
    Extract representative colors from an image.

    - **file**: image file; it is downscaled to at most 500 px wide
    - **count**: number of colors (seed order, duplicates possible)
    """
    try:
        return await handle_extract(file, count=count, include_swatch=include_swatch)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
