"""
Tintscale Imaging Utilities
Handles upload validation, decoding and downscaling to an RGBA pixel buffer.
"""
import io
from dataclasses import dataclass
from typing import Optional

import cv2
import numpy as np
from fastapi import HTTPException, UploadFile
from PIL import Image

from tintscale.config import config


@dataclass
class DecodedImage:
    """RGBA pixels of a decoded, downscaled image."""
    rgba: np.ndarray
    width: int
    height: int
    original_width: int
    original_height: int

    @property
    def pixel_buffer(self) -> bytes:
        """Interleaved RGBA bytes, row-major."""
        return self.rgba.tobytes()


def validate_file_upload(file: UploadFile) -> None:
    """
    Validate uploaded file metadata before reading it.

    Raises:
        HTTPException: 400 for oversized files, 415 for unsupported formats
    """
    max_bytes = config.max_file_bytes()
    if max_bytes and getattr(file, "size", None) and file.size > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Maximum size: {config.MAX_FILE_MB}MB"
        )

    if not file.content_type or not file.content_type.startswith("image/"):
        raise HTTPException(status_code=415, detail="Please upload a valid image file.")

    if file.content_type not in config.SUPPORTED_MIME_TYPES:
        raise HTTPException(
            status_code=415,
            detail=f"Unsupported media type. Supported: {', '.join(config.SUPPORTED_MIME_TYPES)}"
        )

    if file.filename and "." in file.filename:
        ext = "." + file.filename.lower().rsplit(".", 1)[-1]
        if ext not in config.SUPPORTED_EXTENSIONS:
            raise HTTPException(
                status_code=415,
                detail=f"Unsupported file extension. Supported: {', '.join(sorted(config.SUPPORTED_EXTENSIONS))}"
            )


def validate_magic_bytes(file_bytes: bytes) -> str:
    """
    Validate file magic bytes to ensure it's actually an image.

    Returns:
        Detected MIME type

    Raises:
        HTTPException: 400 for invalid/corrupt files
    """
    if len(file_bytes) < 12:
        raise HTTPException(status_code=400, detail="File too small or corrupt")

    if file_bytes.startswith(b'\xff\xd8\xff'):
        return "image/jpeg"
    elif file_bytes.startswith(b'\x89PNG\r\n\x1a\n'):
        return "image/png"
    elif file_bytes[:6] in (b'GIF87a', b'GIF89a'):
        return "image/gif"
    elif file_bytes[:4] == b'RIFF' and file_bytes[8:12] == b'WEBP':
        return "image/webp"
    elif file_bytes.startswith(b'BM'):
        return "image/bmp"
    else:
        raise HTTPException(
            status_code=400,
            detail="Invalid image file. Magic bytes don't match supported formats."
        )


def decode_image_bytes(file_bytes: bytes) -> np.ndarray:
    """
    Decode image bytes to an RGBA uint8 array of shape (H, W, 4).

    Raises:
        HTTPException: 400 if the image cannot be decoded
    """
    try:
        pil_image = Image.open(io.BytesIO(file_bytes))
        if pil_image.mode != 'RGBA':
            pil_image = pil_image.convert('RGBA')
        return np.array(pil_image)
    except Exception as e:
        raise HTTPException(status_code=400, detail=f"Could not load the image file: {str(e)}")


def downscale_to_width(rgba: np.ndarray, max_width: Optional[int] = None) -> np.ndarray:
    """
    Shrink an image so its width is at most ``max_width``, keeping aspect ratio.

    The new height is the new width divided by the aspect ratio, truncated.
    Narrower images are returned unchanged.
    """
    if max_width is None:
        max_width = config.MAX_IMAGE_WIDTH

    height, width = rgba.shape[:2]
    if width <= max_width:
        return rgba

    aspect_ratio = width / height
    new_width = max_width
    new_height = max(1, int(new_width / aspect_ratio))

    return cv2.resize(rgba, (new_width, new_height), interpolation=cv2.INTER_AREA)


async def read_image(file: UploadFile, max_width: Optional[int] = None) -> DecodedImage:
    """
    Read an uploaded image and produce the RGBA buffer used for extraction.

    Raises:
        HTTPException: 400 for read/decode errors, 415 for unsupported formats
    """
    validate_file_upload(file)

    try:
        file_bytes = await file.read()
    except OSError as e:
        raise HTTPException(status_code=400, detail=f"Failed to read file: {str(e)}")

    max_bytes = config.max_file_bytes()
    if max_bytes and len(file_bytes) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Maximum size: {config.MAX_FILE_MB}MB"
        )

    validate_magic_bytes(file_bytes)

    rgba = decode_image_bytes(file_bytes)
    original_height, original_width = rgba.shape[:2]
    resized = np.ascontiguousarray(downscale_to_width(rgba, max_width))
    height, width = resized.shape[:2]

    return DecodedImage(
        rgba=resized,
        width=width,
        height=height,
        original_width=original_width,
        original_height=original_height,
    )
