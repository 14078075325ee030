"""
Tests for HSL/RGB/hex conversion and WCAG luminance math.
"""
import re

import pytest

from atlas.color_space import (
    contrast_ratio,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    is_dark,
    relative_luminance,
    rgb_to_hex,
)

HEX_RE = re.compile(r"^#[0-9a-f]{6}$")


class TestHslToRgb:
    """Tests for hsl_to_rgb() / hsl_to_hex()."""

    @pytest.mark.parametrize("hsl, expected", [
        ((0, 100, 50), "#ff0000"),
        ((120, 100, 50), "#00ff00"),
        ((240, 100, 50), "#0000ff"),
        ((0, 0, 0), "#000000"),
        ((0, 0, 100), "#ffffff"),
    ])
    def test_primaries(self, hsl, expected):
        assert hsl_to_hex(*hsl) == expected

    def test_half_rounds_up(self):
        """Mid gray is 127.5 before rounding and must land on 128."""
        assert hsl_to_rgb(0, 0, 50) == (128, 128, 128)
        assert hsl_to_hex(0, 0, 50) == "#808080"

    def test_hue_360_equals_zero(self):
        assert hsl_to_hex(360, 80, 40) == hsl_to_hex(0, 80, 40)

    def test_output_is_lowercase_hex(self):
        for hue in range(0, 360, 37):
            assert HEX_RE.match(hsl_to_hex(hue, 73, 41))


class TestHexParsing:
    """Tests for hex_to_rgb() / hex_to_hsl()."""

    def test_six_digit(self):
        assert hex_to_rgb("#1a2b3c") == (26, 43, 60)

    def test_without_hash(self):
        assert hex_to_rgb("ff8000") == (255, 128, 0)

    def test_shorthand(self):
        assert hex_to_rgb("#abc") == (170, 187, 204)

    def test_uppercase_accepted(self):
        assert hex_to_rgb("#FFAA00") == (255, 170, 0)

    @pytest.mark.parametrize("bad", ["", "#12345", "#1234567", "#gggggg", "red"])
    def test_invalid_raises(self, bad):
        with pytest.raises(ValueError):
            hex_to_rgb(bad)

    @pytest.mark.parametrize("rgb", [(0, 0, 0), (255, 255, 255), (18, 52, 86), (250, 7, 129)])
    def test_rgb_hex_round_trip(self, rgb):
        assert hex_to_rgb(rgb_to_hex(*rgb)) == rgb

    def test_hex_to_hsl_red(self):
        h, s, l = hex_to_hsl("#ff0000")
        assert h == pytest.approx(0)
        assert s == pytest.approx(100)
        assert l == pytest.approx(50)

    def test_hex_to_hsl_recovers_lightness(self):
        _, _, l = hex_to_hsl(hsl_to_hex(200, 60, 30))
        assert l == pytest.approx(30, abs=0.5)


class TestLuminance:
    """Tests for relative_luminance(), contrast_ratio() and is_dark()."""

    def test_extremes(self):
        assert relative_luminance("#000000") == pytest.approx(0.0)
        assert relative_luminance("#ffffff") == pytest.approx(1.0)

    def test_black_on_white_is_21(self):
        assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)

    def test_same_color_is_1(self):
        assert contrast_ratio("#336699", "#336699") == pytest.approx(1.0)

    def test_order_independent(self):
        assert contrast_ratio("#123456", "#fedcba") == contrast_ratio("#fedcba", "#123456")

    def test_green_brighter_than_blue(self):
        assert relative_luminance("#00ff00") > relative_luminance("#0000ff")

    def test_is_dark(self):
        assert is_dark("#000000")
        assert is_dark("#0000ff")
        assert not is_dark("#ffffff")
        assert not is_dark("#ffff00")
