"""
Representative color extraction from raw pixel data.

This module reduces an interleaved RGBA buffer to a small palette with a
bounded k-means style refinement:

- strided sampling down to at most 5000 pixels
- seeding from the first ``count`` samples, in sampled order
- exactly 5 assignment/update rounds with Euclidean RGB distance
- centroids reported in seed order

Nothing here is random, so identical inputs always give identical palettes.
"""

from dataclasses import dataclass
from typing import List, Union

import numpy as np
from loguru import logger

from .conversion import rgb_to_hex

MAX_SAMPLES = 5000
ITERATIONS = 5
DEFAULT_COUNT = 8

PixelBuffer = Union[bytes, bytearray, memoryview, np.ndarray]


@dataclass
class ClusterResult:
    """Final centroids plus the bookkeeping the API reports."""
    centroids: np.ndarray
    cluster_sizes: List[int]
    sample_count: int
    pixel_count: int

    @property
    def hex_colors(self) -> List[str]:
        return [rgb_to_hex(center) for center in self.centroids]

    @property
    def ratios(self) -> List[float]:
        if self.sample_count == 0:
            return [0.0] * len(self.cluster_sizes)
        return [size / self.sample_count for size in self.cluster_sizes]


def _as_byte_array(pixels: PixelBuffer) -> np.ndarray:
    """Flatten a bytes-like object or array into a 1-D channel array."""
    if isinstance(pixels, (bytes, bytearray, memoryview)):
        return np.frombuffer(pixels, dtype=np.uint8)
    return np.asarray(pixels).reshape(-1)


def sample_pixels(pixels: PixelBuffer) -> np.ndarray:
    """
    Sample RGB values from an RGBA buffer at a fixed pixel stride.

    Args:
        pixels: Interleaved RGBA channel data, 4 values per pixel. A trailing
            partial pixel is ignored.

    Returns:
        Float64 array of shape (N, 3). N is close to, but not always
        exactly, min(pixel_count, 5000).
    """
    channels = _as_byte_array(pixels)
    pixel_count = channels.size // 4
    if pixel_count == 0:
        return np.empty((0, 3), dtype=np.float64)

    sample_size = min(pixel_count, MAX_SAMPLES)
    step = max(1, pixel_count // sample_size)
    rgba = channels[:pixel_count * 4].reshape(-1, 4)
    return rgba[::step, :3].astype(np.float64)


def assign_clusters(samples: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """Index of the nearest centroid for each sample; ties go to the lowest index."""
    diffs = samples[:, None, :] - centroids[None, :, :]
    distances = np.sqrt(np.sum(diffs ** 2, axis=2))
    return np.argmin(distances, axis=1)


def update_centroids(samples: np.ndarray, labels: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """Move each centroid to the mean of its members. Empty clusters stay put."""
    updated = centroids.copy()
    for i in range(len(centroids)):
        members = samples[labels == i]
        if len(members) > 0:
            updated[i] = members.mean(axis=0)
    return updated


def cluster_pixels(pixels: PixelBuffer, count: int = DEFAULT_COUNT) -> ClusterResult:
    """
    Run the sampling, seeding and refinement pipeline.

    Args:
        pixels: Interleaved RGBA channel data
        count: Number of representative colors to extract

    Returns:
        ClusterResult with ``count`` centroids when enough samples exist

    Raises:
        ValueError: If count is less than 1
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")

    channels = _as_byte_array(pixels)
    pixel_count = channels.size // 4
    samples = sample_pixels(channels)

    if len(samples) == 0:
        logger.warning("Empty pixel buffer, no colors extracted")
        return ClusterResult(
            centroids=np.empty((0, 3), dtype=np.float64),
            cluster_sizes=[],
            sample_count=0,
            pixel_count=pixel_count,
        )

    centroids = samples[:count].copy()
    if len(centroids) < count:
        logger.warning(f"Only {len(centroids)} samples available for {count} clusters")

    logger.debug(f"Clustering {len(samples)} samples from {pixel_count} pixels into {len(centroids)} colors")

    labels = np.zeros(len(samples), dtype=np.intp)
    for _ in range(ITERATIONS):
        labels = assign_clusters(samples, centroids)
        centroids = update_centroids(samples, labels, centroids)

    cluster_sizes = np.bincount(labels, minlength=len(centroids)).tolist()
    return ClusterResult(
        centroids=centroids,
        cluster_sizes=cluster_sizes,
        sample_count=len(samples),
        pixel_count=pixel_count,
    )


def extract_colors_from_image(pixels: PixelBuffer, count: int = DEFAULT_COUNT) -> List[str]:
    """
    Extract ``count`` representative colors from an RGBA pixel buffer.

    Colors come back in seed order, not sorted by frequency, and may repeat
    when the image has fewer distinct colors than ``count``.
    """
    return cluster_pixels(pixels, count).hex_colors
