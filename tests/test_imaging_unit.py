"""
Unit tests for image decoding and downscaling.
"""

import numpy as np
import pytest
from fastapi import HTTPException
from PIL import Image

from tintscale.services.imaging import decode_image_bytes, downscale_to_width, validate_magic_bytes


class TestMagicBytes:

    def test_png(self, png_factory):
        assert validate_magic_bytes(png_factory(4, 4)) == "image/png"

    def test_gif_and_webp(self):
        assert validate_magic_bytes(b"GIF89a" + b"\x00" * 10) == "image/gif"
        assert validate_magic_bytes(b"RIFF\x00\x00\x00\x00WEBPVP8 ") == "image/webp"

    def test_garbage_rejected(self):
        with pytest.raises(HTTPException) as exc_info:
            validate_magic_bytes(b"this is not an image at all")
        assert exc_info.value.status_code == 400

    def test_too_small(self):
        with pytest.raises(HTTPException):
            validate_magic_bytes(b"\x89PNG")


class TestDecode:

    def test_rgb_png_becomes_rgba(self, png_factory):
        rgba = decode_image_bytes(png_factory(6, 4, (10, 20, 30)))
        assert rgba.shape == (4, 6, 4)
        assert rgba.dtype == np.uint8
        assert tuple(rgba[0, 0]) == (10, 20, 30, 255)

    def test_corrupt_png(self):
        with pytest.raises(HTTPException) as exc_info:
            decode_image_bytes(b"\x89PNG\r\n\x1a\n" + b"\x00" * 32)
        assert exc_info.value.status_code == 400

    def test_decompression_bomb_is_400(self, png_factory, monkeypatch):
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)
        with pytest.raises(HTTPException) as exc_info:
            decode_image_bytes(png_factory(8, 8))
        assert exc_info.value.status_code == 400


class TestDownscale:

    def test_wide_image_downscaled_to_max_width(self):
        rgba = np.zeros((500, 1000, 4), dtype=np.uint8)
        assert downscale_to_width(rgba, 500).shape == (250, 500, 4)

    def test_height_is_truncated(self):
        rgba = np.zeros((333, 1000, 4), dtype=np.uint8)
        assert downscale_to_width(rgba, 500).shape == (166, 500, 4)

    def test_narrow_image_untouched(self):
        rgba = np.zeros((800, 400, 4), dtype=np.uint8)
        assert downscale_to_width(rgba, 500) is rgba

    def test_default_width_from_config(self):
        rgba = np.zeros((10, 600, 4), dtype=np.uint8)
        assert downscale_to_width(rgba).shape[1] == 500
