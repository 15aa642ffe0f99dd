"""
Test configuration and fixtures for Tintscale tests.
"""
import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from tintscale.main import app


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def reset_metrics():
    """Reset metrics before each test."""
    from tintscale.utils.metrics import reset_metrics
    reset_metrics()


def make_png(width, height, color=(10, 20, 30)):
    """Encode a solid-color RGB image as PNG bytes."""
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_factory():
    """Factory for in-memory solid-color PNG images."""
    return make_png
