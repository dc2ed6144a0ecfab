"""Tests for hex / RGB / HSL conversions and color adjustments."""

import itertools

import pytest

from utils.color_utils import (
    darken_color,
    hex_to_rgb,
    hsl_to_rgb,
    is_light_color,
    lighten_color,
    luminance,
    rgb_to_hex,
    rgb_to_hsl,
    shift_hue,
    shift_palette,
)


class TestHexParsing:
    def test_parses_with_and_without_hash(self):
        assert hex_to_rgb("#ff8000") == (255, 128, 0)
        assert hex_to_rgb("ff8000") == (255, 128, 0)

    def test_case_insensitive(self):
        assert hex_to_rgb("#AbCdEf") == (171, 205, 239)

    @pytest.mark.parametrize("value", ["#fff", "fff", "#12345", "#1234567", "#gg0000", "", "invalid", None])
    def test_invalid_shapes_return_none(self, value):
        assert hex_to_rgb(value) is None

    def test_rgb_to_hex_is_zero_padded_lowercase(self):
        assert rgb_to_hex(0, 10, 255) == "#000aff"

    @pytest.mark.parametrize("value", ["#000000", "#ffffff", "#0a0b0c", "#7f3c99", "#123456"])
    def test_hex_round_trip(self, value):
        assert rgb_to_hex(*hex_to_rgb(value)) == value


class TestHsl:
    def test_primary_colors(self):
        assert rgb_to_hsl(255, 0, 0) == pytest.approx((0.0, 1.0, 0.5))
        h, s, l = rgb_to_hsl(0, 0, 255)
        assert h == pytest.approx(2 / 3)
        assert hsl_to_rgb(1 / 3, 1.0, 0.5) == (0, 255, 0)

    def test_achromatic(self):
        h, s, l = rgb_to_hsl(128, 128, 128)
        assert h == 0 and s == 0
        assert hsl_to_rgb(h, s, l) == (128, 128, 128)

    def test_round_trip_within_one(self):
        for r, g, b in itertools.product(range(0, 256, 17), repeat=3):
            back = hsl_to_rgb(*rgb_to_hsl(r, g, b))
            assert all(abs(x - y) <= 1 for x, y in zip(back, (r, g, b))), (r, g, b, back)


class TestShiftHue:
    @pytest.mark.parametrize("value", ["#ff0000", "#3a7bd5", "#00d2ff", "#808080", "#123456"])
    def test_identity_at_zero_and_full_turn(self, value):
        assert shift_hue(value, 0) == value
        assert shift_hue(value, 360) == value

    def test_rotates_red_to_green_and_blue(self):
        assert shift_hue("#ff0000", 120) == "#00ff00"
        assert shift_hue("#ff0000", -120) == "#0000ff"

    def test_invalid_hex_returned_unchanged(self):
        assert shift_hue("not-a-color", 90) == "not-a-color"

    def test_shift_palette(self):
        assert shift_palette(["#ff0000", "#00ff00", "bad"], 120) == ["#00ff00", "#0000ff", "bad"]


class TestLightness:
    def test_darken_and_lighten(self):
        assert darken_color("#808080", 0.2) == "#4d4d4d"
        assert lighten_color("#808080", 0.2) == "#b3b3b3"

    def test_clamped_to_black_and_white(self):
        assert darken_color("#202020", 0.9) == "#000000"
        assert lighten_color("#e0e0e0", 0.9) == "#ffffff"

    def test_invalid_hex_returned_unchanged(self):
        assert darken_color("oops") == "oops"
        assert lighten_color("#abc") == "#abc"


class TestIsLightColor:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("#ffffff", True),
            ("#000000", False),
            ("#ffff00", True),
            ("#ff0000", False),
            ("#bfbfbf", False),
            ("invalid", True),
        ],
    )
    def test_classification(self, value, expected):
        assert is_light_color(value) is expected

    def test_luminance_weights(self):
        assert luminance(255, 255, 255) == pytest.approx(255)
        assert luminance(255, 255, 0) / 255 == pytest.approx(0.886)
