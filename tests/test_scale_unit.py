"""
Unit tests for the 10-step lightness scale generator.
"""

import pytest

from tintscale.services.colors.conversion import hex_to_hsl, hex_to_rgb
from tintscale.services.colors.scale import (
    BASE_INDEX, MAX_LIGHTNESS, MIN_LIGHTNESS, NUM_STEPS, generate_color_scale, step_lightness
)
from tintscale.services.colors.scale_api import DEFAULT_PALETTE, build_named_scales, new_row


def assert_close_hex(actual, expected, tolerance=1):
    """Compare two hex colors channel by channel."""
    a = hex_to_rgb(actual).value
    e = hex_to_rgb(expected).value
    assert all(abs(x - y) <= tolerance for x, y in zip(a, e)), f"{actual} != {expected}"


class TestStepLightness:
    """Test lightness interpolation anchors"""

    def test_anchors(self):
        assert step_lightness(0, 0.3) == MAX_LIGHTNESS
        assert step_lightness(BASE_INDEX, 0.3) == 0.3
        assert step_lightness(NUM_STEPS - 1, 0.3) == pytest.approx(MIN_LIGHTNESS)

    def test_midpoints(self):
        assert step_lightness(2, 0.5) == pytest.approx((0.98 + 0.5) / 2)
        assert step_lightness(5, 0.55) == pytest.approx(0.55 * 0.8 + 0.05 * 0.2)


class TestGenerateColorScale:
    """Test scale generation"""

    @pytest.mark.parametrize("base", ["#3b82f6", "#ef4444", "#10b981", "#777777", "a855f7"])
    def test_ten_steps_pivoting_on_base(self, base):
        scale = generate_color_scale(base)
        assert len(scale) == 10
        assert_close_hex(scale[BASE_INDEX], base)

    def test_brand_blue_base_step_is_exact(self):
        assert generate_color_scale("#3B82F6")[4] == "#3b82f6"

    def test_invalid_base_falls_back_to_black(self):
        assert generate_color_scale("not-a-color") == ["#000000"] * 10
        assert generate_color_scale("#fff") == ["#000000"] * 10

    def test_lightest_to_darkest(self):
        scale = generate_color_scale("#3b82f6")
        lightness = [hex_to_hsl(step).value.l for step in scale]
        assert lightness == sorted(lightness, reverse=True)
        assert all(channel >= 240 for channel in hex_to_rgb(scale[0]).value)
        assert all(channel <= 30 for channel in hex_to_rgb(scale[9]).value)

    def test_hue_is_held(self):
        base_h = hex_to_hsl("#3b82f6").value.h
        for step in generate_color_scale("#3b82f6")[1:9]:
            assert hex_to_hsl(step).value.h == pytest.approx(base_h, abs=0.01)

    def test_white_scale(self):
        scale = generate_color_scale("#ffffff")
        assert scale[0] == "#fafafa"
        assert scale[4] == "#ffffff"
        assert scale[9] == "#0d0d0d"

    def test_black_scale(self):
        scale = generate_color_scale("#000000")
        assert scale[0] == "#fafafa"
        assert scale[4] == "#000000"
        assert scale[5] == "#030303"
        assert scale[9] == "#0d0d0d"


class TestPaletteDefaults:
    """Test default palette rows"""

    def test_default_palette_and_new_rows(self):
        assert DEFAULT_PALETTE == [{"name": "Primary", "color": "#3b82f6"}]
        assert new_row(len(DEFAULT_PALETTE)) == {"name": "Color 2", "color": "#ffffff"}

    def test_build_named_scales(self):
        scales = build_named_scales([{"name": "Primary", "color": "#3b82f6"}])
        assert scales[0].name == "Primary"
        assert scales[0].scale[4].hex == "#3b82f6"
        assert scales[0].text_color == "light"
