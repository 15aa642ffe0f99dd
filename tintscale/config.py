"""
Tintscale Configuration
Manages environment variables and defaults for the color services.
"""
import os
from typing import Optional

from dotenv import load_dotenv

# Pick up a local .env before reading any settings
load_dotenv()


class Config:
    """Configuration class for Tintscale services."""

    # Upload limits
    MAX_FILE_MB: int = int(os.environ.get("TINTSCALE_MAX_FILE_MB", "10"))
    MAX_IMAGE_WIDTH: int = int(os.environ.get("TINTSCALE_MAX_IMAGE_WIDTH", "500"))

    # Palette extraction
    DEFAULT_EXTRACT_COUNT: int = int(os.environ.get("TINTSCALE_DEFAULT_EXTRACT_COUNT", "12"))
    MAX_EXTRACT_COUNT: int = int(os.environ.get("TINTSCALE_MAX_EXTRACT_COUNT", "32"))

    # Swatch rendering
    SWATCH_CHIP_SIZE: int = int(os.environ.get("TINTSCALE_SWATCH_CHIP_SIZE", "40"))

    # Logging
    LOG_LEVEL: str = os.environ.get("TINTSCALE_LOG_LEVEL", "INFO")
    LOG_JSON: bool = bool(int(os.environ.get("TINTSCALE_LOG_JSON", "0")))

    # Observability
    METRICS_ENABLED: bool = bool(int(os.environ.get("TINTSCALE_METRICS_ENABLED", "1")))

    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get("TINTSCALE_ALLOWED_ORIGINS", "")

    # Supported image formats
    SUPPORTED_MIME_TYPES = ["image/jpeg", "image/png", "image/gif", "image/webp", "image/bmp"]
    SUPPORTED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp"}

    @classmethod
    def validate_extract_count(cls, count: int) -> bool:
        """Validate requested palette size."""
        return 1 <= count <= cls.MAX_EXTRACT_COUNT

    @classmethod
    def validate_chip_size(cls, chip_size: int) -> bool:
        """Validate swatch chip size."""
        return 8 <= chip_size <= 256

    @classmethod
    def allowed_origins(cls) -> list:
        """Parse comma separated CORS origins."""
        return [origin.strip() for origin in cls.ALLOWED_ORIGINS.split(",") if origin.strip()]

    @classmethod
    def max_file_bytes(cls) -> Optional[int]:
        """Upload size limit in bytes, or None when unlimited."""
        if cls.MAX_FILE_MB <= 0:
            return None
        return cls.MAX_FILE_MB * 1024 * 1024


# Global config instance
config = Config()
