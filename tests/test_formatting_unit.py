"""
Unit tests for palette row value display and entry rules.
"""

import pytest

from tintscale.services.colors.conversion import hex_to_rgb
from tintscale.services.colors.formatting import (
    format_hsl, format_rgb, is_hex_entry, parse_color_value
)


class TestDisplayStrings:

    def test_format_rgb(self):
        assert format_rgb("#3b82f6") == "59, 130, 246"
        assert format_rgb("bogus") == "0, 0, 0"

    def test_format_hsl(self):
        assert format_hsl("#ff0000") == "0, 100, 50"
        assert format_hsl("#3b82f6") == "217, 91, 60"
        assert format_hsl("bogus") == "0, 0, 0"


class TestHexEntry:

    def test_entry_accepts_shorthand(self):
        assert is_hex_entry("#abc")
        assert is_hex_entry("#AABBCC")

    def test_entry_requires_hash(self):
        assert not is_hex_entry("aabbcc")
        assert not is_hex_entry("#abcd")

    def test_shorthand_is_accepted_but_does_not_parse(self):
        # Row entry and hex_to_rgb disagree on 3-digit shorthand.
        assert parse_color_value("hex", "#abc", "#000000") == "#abc"
        assert not hex_to_rgb("#abc").ok


class TestParseColorValue:

    def test_hex(self):
        assert parse_color_value("hex", "#123456", "#000000") == "#123456"
        assert parse_color_value("hex", "123456", "#000000") == "#000000"

    def test_rgb(self):
        assert parse_color_value("rgb", "255, 0, 0", "#000000") == "#ff0000"
        assert parse_color_value("rgb", " 59 ,130, 246 ", "#000000") == "#3b82f6"

    def test_rgb_integer_prefix(self):
        assert parse_color_value("rgb", "12abc, 0, 0", "#000000") == "#0c0000"

    @pytest.mark.parametrize("value", ["256, 0, 0", "-1, 0, 0", "1, 2", "1, 2, 3, 4", "a, b, c", ""])
    def test_rgb_rejects(self, value):
        assert parse_color_value("rgb", value, "#abcdef") == "#abcdef"

    def test_hsl(self):
        assert parse_color_value("hsl", "0, 100, 50", "#000000") == "#ff0000"
        assert parse_color_value("hsl", "120, 100, 25", "#000000") == "#008000"
        assert parse_color_value("hsl", "0, 0, 100", "#000000") == "#ffffff"

    @pytest.mark.parametrize("value", ["361, 0, 0", "0, 101, 0", "0, 0, -5", "10, 20"])
    def test_hsl_rejects(self, value):
        assert parse_color_value("hsl", value, "#abcdef") == "#abcdef"

    def test_unknown_input_type(self):
        with pytest.raises(ValueError):
            parse_color_value("cmyk", "0, 0, 0, 0", "#000000")
