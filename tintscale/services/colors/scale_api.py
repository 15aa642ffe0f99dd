"""
Scale API Orchestrator

Expands palette rows (a role name plus a base color) into 10-step scales,
annotated with text contrast, optional swatch strips, timing and metrics.
"""

import time
from typing import Any, Dict, List, Optional

from tintscale.config import config
from tintscale.schemas import ScaleResponse, ScaleStep
from tintscale.services.colors.contrast import get_text_color_for_background
from tintscale.services.colors.conversion import hex_to_rgb
from tintscale.services.colors.scale import BASE_INDEX, generate_color_scale
from tintscale.services.colors.swatches import render_swatch_strip
from tintscale.utils.ids import generate_request_id
from tintscale.utils.logging import get_logger
from tintscale.utils.metrics import get_metrics

DEFAULT_PALETTE = [{"name": "Primary", "color": "#3b82f6"}]
NEW_ROW_COLOR = "#ffffff"


def new_row(existing_count: int) -> Dict[str, str]:
    """Default entry for a row appended after ``existing_count`` rows."""
    return {"name": f"Color {existing_count + 1}", "color": NEW_ROW_COLOR}


def build_scale(base_hex: str, name: Optional[str] = None, include_swatch: bool = False) -> ScaleResponse:
    """Build one annotated scale. Invalid colors give the black fallback scale."""
    hex_colors = generate_color_scale(base_hex)
    steps = [
        ScaleStep(index=i, hex=hex_color, text_color=get_text_color_for_background(hex_color))
        for i, hex_color in enumerate(hex_colors)
    ]

    swatch_b64 = None
    if include_swatch:
        swatch_b64 = render_swatch_strip(
            hex_colors, chip_size=config.SWATCH_CHIP_SIZE, highlight_index=BASE_INDEX
        )

    return ScaleResponse(
        name=name,
        base_hex=base_hex,
        valid=hex_to_rgb(base_hex).ok,
        text_color=get_text_color_for_background(base_hex),
        scale=steps,
        swatch_png_b64=swatch_b64,
    )


def build_named_scales(entries: List[Dict[str, Any]], include_swatch: bool = False) -> List[ScaleResponse]:
    """
    Expand palette rows into scales, preserving row order.

    Args:
        entries: Dicts with "name" and "color" keys
        include_swatch: Render a PNG strip for every scale

    Returns:
        One ScaleResponse per entry
    """
    request_id = generate_request_id("scale")
    logger = get_logger()
    metrics = get_metrics()
    start_time = time.time()

    try:
        scales = [
            build_scale(entry["color"], name=entry["name"], include_swatch=include_swatch)
            for entry in entries
        ]
    except Exception as e:
        logger.error(f"Scale generation failed: {str(e)}",
                     extra={"request_id": request_id, "error_type": type(e).__name__})
        metrics.increment_failure_count("scale", type(e).__name__)
        raise

    total_ms = (time.time() - start_time) * 1000
    invalid = sum(1 for scale in scales if not scale.valid)
    if invalid:
        logger.warning(f"{invalid} palette rows had invalid colors and fell back to black",
                       extra={"request_id": request_id})

    logger.info("Scale generation completed",
                extra={"request_id": request_id, "rows": len(entries), "ms_total": total_ms})
    metrics.increment_counter("scale_requests_total")
    metrics.record_timing("scale", total_ms)
    return scales
