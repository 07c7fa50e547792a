"""Tests für die Farbraum-Mathematik."""

import numpy as np
import pytest

from frame_accent.color.color_math import (
    contrast_ratio,
    hex_to_rgb,
    hsl_to_rgb,
    is_dark_color,
    luminance,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
    saturation,
)


class TestLuminance:
    def test_black_is_zero(self):
        assert luminance(0, 0, 0) == 0

    def test_white_is_one(self):
        assert luminance(255, 255, 255) == 1

    def test_channel_weights(self):
        assert luminance(255, 0, 0) == pytest.approx(0.2126)
        assert luminance(0, 255, 0) == pytest.approx(0.7152)
        assert luminance(0, 0, 255) == pytest.approx(0.0722)

    def test_linear_segment_below_threshold(self):
        # 10/255 = 0.0392 <= 0.03928 -> linear
        assert luminance(10, 10, 10) == pytest.approx((10 / 255) / 12.92)

    def test_mid_gray(self):
        assert luminance(119, 119, 119) == pytest.approx(0.1845, abs=1e-3)


class TestSaturation:
    def test_black_has_zero_saturation(self):
        assert saturation(0, 0, 0) == 0.0

    def test_gray_has_zero_saturation(self):
        assert saturation(128, 128, 128) == 0.0

    def test_pure_color_is_fully_saturated(self):
        assert saturation(255, 0, 0) == 1.0
        assert saturation(0, 48, 216) == 1.0

    def test_partial(self):
        assert saturation(120, 192, 216) == pytest.approx(96 / 216)


class TestContrastRatio:
    def test_self_contrast_is_unity(self):
        for color in ("#000000", "#ffffff", "#336699", (12, 200, 99)):
            assert contrast_ratio(color, color) == 1

    def test_black_on_white_is_21(self):
        assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)

    def test_symmetric(self):
        assert contrast_ratio("#336699", "#ffcc00") == contrast_ratio("#ffcc00", "#336699")

    def test_accepts_tuples(self):
        assert contrast_ratio((0, 0, 0), "#ffffff") == pytest.approx(21.0)

    def test_invalid_hex_raises(self):
        with pytest.raises(ValueError):
            contrast_ratio("#zzzzzz", "#ffffff")


class TestHexCodec:
    @pytest.mark.parametrize(
        "rgb",
        [(0, 0, 0), (255, 255, 255), (51, 102, 153), (1, 2, 3), (107, 114, 128), (254, 15, 16)],
    )
    def test_round_trip(self, rgb):
        assert hex_to_rgb(rgb_to_hex(*rgb)) == rgb

    def test_hex_is_lowercase_with_hash(self):
        value = rgb_to_hex(171, 205, 239)
        assert value == "#abcdef"
        assert len(value) == 7

    def test_parse_without_hash_and_uppercase(self):
        assert hex_to_rgb("ABCDEF") == (171, 205, 239)
        assert hex_to_rgb("#AbCdEf") == (171, 205, 239)

    @pytest.mark.parametrize("value", ["", "#fff", "#1234567", "#gg0000", "red", None, 123])
    def test_invalid_returns_none(self, value):
        assert hex_to_rgb(value) is None

    def test_normalize(self):
        assert normalize_hex("336699") == "#336699"
        assert normalize_hex("nope") is None

    def test_channels_are_clamped_and_rounded(self):
        assert rgb_to_hex(300, -5, 127.6) == "#ff0080"


class TestHsl:
    def test_red(self):
        h, s, l = rgb_to_hsl(255, 0, 0)
        assert h == pytest.approx(0)
        assert s == pytest.approx(1)
        assert l == pytest.approx(0.5)

    def test_gray_has_no_hue_or_saturation(self):
        h, s, _ = rgb_to_hsl(128, 128, 128)
        assert h == 0
        assert s == 0

    def test_hue_wraps(self):
        assert hsl_to_rgb(360, 1, 0.5) == hsl_to_rgb(0, 1, 0.5) == (255, 0, 0)

    def test_round_trip_within_one(self):
        rng = np.random.default_rng(1234)
        for r, g, b in rng.integers(0, 256, size=(400, 3)).tolist():
            back = hsl_to_rgb(*rgb_to_hsl(r, g, b))
            assert all(abs(a - c) <= 1 for a, c in zip(back, (r, g, b))), (r, g, b, back)


def test_is_dark_color():
    assert is_dark_color(0, 0, 0)
    assert not is_dark_color(255, 255, 255)
