"""
Color Extraction API Orchestrator

Coordinates the image intake flow: upload validation and decoding, downscaling
to the analysis width, pixel clustering, and response assembly with optional
swatch strip, timing and metrics.
"""

import time
from typing import List, Optional

from fastapi import UploadFile

from tintscale.config import config
from tintscale.schemas import ExtractedColor, ExtractResponse
from tintscale.services.colors.clustering import cluster_pixels
from tintscale.services.colors.contrast import get_text_color_for_background
from tintscale.services.colors.swatches import render_swatch_strip
from tintscale.services.imaging import read_image
from tintscale.utils.ids import generate_request_id
from tintscale.utils.logging import get_logger
from tintscale.utils.metrics import get_metrics


def name_extracted_colors(colors: List[str]) -> List[dict]:
    """Label picked colors as palette rows named 'Extracted 1', 'Extracted 2', ..."""
    return [{"name": f"Extracted {i + 1}", "color": color} for i, color in enumerate(colors)]


async def handle_extract(
    file: UploadFile,
    count: Optional[int] = None,
    include_swatch: bool = False
) -> ExtractResponse:
    """
    Extract representative colors from an uploaded image.

    Args:
        file: Uploaded image file
        count: Number of colors to extract (default from config)
        include_swatch: Include a PNG strip of the extracted colors

    Returns:
        ExtractResponse with colors in seed order

    Raises:
        ValueError: For an out-of-range count
        HTTPException: For unreadable or unsupported uploads
    """
    request_id = generate_request_id("extract")
    logger = get_logger()
    metrics = get_metrics()
    start_time = time.time()

    if count is None:
        count = config.DEFAULT_EXTRACT_COUNT
    if not config.validate_extract_count(count):
        raise ValueError(f"count must be between 1 and {config.MAX_EXTRACT_COUNT}")

    logger.info("Starting color extraction", extra={"request_id": request_id, "count": count})

    try:
        image = await read_image(file)
        decode_time = time.time() - start_time
        logger.info(f"Image decoded: {image.original_width}x{image.original_height} -> "
                    f"{image.width}x{image.height}",
                    extra={"request_id": request_id, "ms_decode": decode_time * 1000})

        cluster_start = time.time()
        result = cluster_pixels(image.pixel_buffer, count)
        cluster_time = time.time() - cluster_start

        hex_colors = result.hex_colors
        named = name_extracted_colors(hex_colors)
        colors = [
            ExtractedColor(
                name=entry["name"],
                hex=entry["color"],
                ratio=ratio,
                text_color=get_text_color_for_background(entry["color"])
            )
            for entry, ratio in zip(named, result.ratios)
        ]

        swatch_b64 = None
        if include_swatch and hex_colors:
            try:
                swatch_b64 = render_swatch_strip(hex_colors, chip_size=config.SWATCH_CHIP_SIZE)
            except (ValueError, RuntimeError) as e:
                logger.warning(f"Swatch generation failed: {str(e)}",
                               extra={"request_id": request_id})

        total_time = time.time() - start_time
        logger.info("Color extraction completed successfully",
                    extra={
                        "request_id": request_id,
                        "dims": f"{image.width}x{image.height}",
                        "count": count,
                        "sampled_pixels": result.sample_count,
                        "ms_decode": decode_time * 1000,
                        "ms_cluster": cluster_time * 1000,
                        "ms_total": total_time * 1000,
                        "result": "ok"
                    })

        metrics.increment_counter("extract_requests_total")
        metrics.record_timing("extract", total_time * 1000)
        metrics.record_timing("cluster", cluster_time * 1000)

        return ExtractResponse(
            width=image.width,
            height=image.height,
            original_width=image.original_width,
            original_height=image.original_height,
            count=count,
            sampled_pixels=result.sample_count,
            colors=colors,
            swatch_png_b64=swatch_b64
        )

    except Exception as e:
        error_time = time.time() - start_time
        logger.error(f"Color extraction failed: {str(e)}",
                     extra={
                         "request_id": request_id,
                         "ms_total": error_time * 1000,
                         "result": "error",
                         "error_type": type(e).__name__
                     })
        metrics.increment_failure_count("extract", type(e).__name__)
        raise
