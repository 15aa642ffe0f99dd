"""
Unit tests for the text contrast classifier.
"""

import pytest

from tintscale.services.colors.contrast import get_text_color_for_background, perceived_brightness
from tintscale.services.colors.conversion import RGB


class TestPerceivedBrightness:

    def test_brand_blue(self):
        assert perceived_brightness(RGB(59, 130, 246)) == pytest.approx(121.995)

    def test_gray_is_its_own_brightness(self):
        assert perceived_brightness(RGB(128, 128, 128)) == 128.0


class TestTextColorForBackground:

    def test_extremes(self):
        assert get_text_color_for_background("#ffffff") == "dark"
        assert get_text_color_for_background("#000000") == "light"

    def test_brand_blue_gets_light_text(self):
        assert get_text_color_for_background("#3b82f6") == "light"

    def test_threshold_is_strict(self):
        assert get_text_color_for_background("#808080") == "light"
        assert get_text_color_for_background("#818181") == "dark"

    def test_invalid_defaults_to_light(self):
        assert get_text_color_for_background("not-a-color") == "light"
        assert get_text_color_for_background("#fff") == "light"
