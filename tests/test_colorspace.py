# Copyright (c) 2026 Colorread
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (RGB → Hex / HSL / HSV / XYZ / LAB)."""

import math

import numpy as np
import pytest

from colorread.convert.colorspace import (
    D65_WHITE,
    get_all_color_values,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_lab,
    rgb_to_xyz,
    round2,
    srgb_to_linear,
    xyz_to_lab,
)
from colorread.schema import HSL, HSV, LAB, XYZ

INF = float("inf")
NAN = float("nan")

# Channels outside the 0-255 contract; conversions must still return
OUT_OF_RANGE = [
    (-255, 255, 0),
    (510, 0, 0),
    (-10, -20, -30),
    (300, 400, 500),
    (INF, 0, 0),
    (-INF, 0, 0),
    (INF, INF, 0),
    (NAN, 0, 0),
    (1e308, 0, 0),
]


class TestRound2:

    def test_ties_round_away_from_zero(self):
        assert round2(0.125) == 0.13
        assert round2(-0.125) == -0.13

    def test_no_negative_zero(self):
        result = round2(-0.001)
        assert result == 0.0
        assert str(result) == "0.0"

    def test_plain_values(self):
        assert round2(53.2408) == 53.24
        assert round2(100.0) == 100.0

    def test_non_finite_passes_through(self):
        assert round2(INF) == INF
        assert math.isnan(round2(NAN))
        assert round2(1e307) == 1e307


class TestRGBToHex:

    def test_black(self):
        assert rgb_to_hex(0, 0, 0) == "#000000"

    def test_white(self):
        assert rgb_to_hex(255, 255, 255) == "#FFFFFF"

    def test_red(self):
        assert rgb_to_hex(255, 0, 0) == "#FF0000"

    def test_zero_padding_and_uppercase(self):
        assert rgb_to_hex(1, 10, 171) == "#010AAB"

    def test_out_of_range_is_clamped(self):
        assert rgb_to_hex(-10, 300, 15) == "#00FF0F"

    def test_infinity_clamped(self):
        assert rgb_to_hex(INF, 0, 0) == "#FF0000"
        assert rgb_to_hex(0, -INF, 0) == "#000000"

    def test_nan_maps_to_zero(self):
        assert rgb_to_hex(NAN, 255, NAN) == "#00FF00"

    def test_clamped_before_rounding(self):
        assert rgb_to_hex(255.4, -0.4, 1e300) == "#FF00FF"

    def test_fractional_channels_rounded(self):
        assert rgb_to_hex(127.5, 0.4, 254.6) == "#8000FF"


class TestRGBToHSL:

    def test_black_is_achromatic(self):
        assert rgb_to_hsl(0, 0, 0) == HSL(h=0, s=0, l=0)

    def test_white_is_achromatic(self):
        assert rgb_to_hsl(255, 255, 255) == HSL(h=0, s=0, l=100)

    def test_gray(self):
        hsl = rgb_to_hsl(128, 128, 128)
        assert hsl.h == 0
        assert hsl.s == 0
        assert hsl.l == 50.2

    def test_red(self):
        assert rgb_to_hsl(255, 0, 0) == HSL(h=0, s=100, l=50)

    def test_green(self):
        assert rgb_to_hsl(0, 255, 0) == HSL(h=120, s=100, l=50)

    def test_blue(self):
        assert rgb_to_hsl(0, 0, 255) == HSL(h=240, s=100, l=50)

    def test_red_max_wraparound(self):
        """Red is max and green < blue: hue lands in the magenta sector."""
        hsl = rgb_to_hsl(255, 0, 128)
        assert 300 < hsl.h < 360

    def test_light_color_uses_high_lightness_formula(self):
        # L > 0.5 → s = delta / (2 - max - min)
        hsl = rgb_to_hsl(255, 128, 128)
        assert hsl.l == 75.1
        assert hsl.s == 100.0

    def test_azure(self):
        hsl = rgb_to_hsl(0, 128, 255)
        assert hsl.h == 209.88
        assert hsl.s == 100.0
        assert hsl.l == 50.0

    def test_over_range_zero_denominator(self):
        # lightness 100% with a chromatic spread: 2 - max - min == 0
        assert rgb_to_hsl(510, 0, 0) == HSL(h=0, s=0, l=100)

    def test_negative_zero_denominator(self):
        # max + min == 0
        assert rgb_to_hsl(-255, 255, 0) == HSL(h=150, s=0, l=0)

    @pytest.mark.parametrize("rgb", OUT_OF_RANGE)
    def test_out_of_range_never_raises(self, rgb):
        assert isinstance(rgb_to_hsl(*rgb), HSL)


class TestRGBToHSV:

    def test_red(self):
        assert rgb_to_hsv(255, 0, 0) == HSV(h=0, s=100, v=100)

    def test_black_has_zero_saturation(self):
        assert rgb_to_hsv(0, 0, 0) == HSV(h=0, s=0, v=0)

    def test_white(self):
        assert rgb_to_hsv(255, 255, 255) == HSV(h=0, s=0, v=100)

    def test_saturation_differs_from_hsl(self):
        hsl = rgb_to_hsl(255, 128, 128)
        hsv = rgb_to_hsv(255, 128, 128)
        assert hsv.s == 49.8
        assert hsv.s != hsl.s

    @pytest.mark.parametrize("rgb", OUT_OF_RANGE)
    def test_out_of_range_never_raises(self, rgb):
        assert isinstance(rgb_to_hsv(*rgb), HSV)

    @pytest.mark.parametrize("rgb", [
        (255, 0, 0), (12, 200, 90), (0, 128, 255), (255, 0, 128), (90, 60, 30),
    ])
    def test_hue_matches_hsl_when_chromatic(self, rgb):
        assert rgb_to_hsv(*rgb).h == rgb_to_hsl(*rgb).h


class TestRGBToXYZ:

    def test_gamma_threshold(self):
        """Values at or below 0.04045 use the linear segment."""
        val = 0.03
        linear = srgb_to_linear(np.array([val]))
        assert float(linear[0]) == pytest.approx(val / 12.92, abs=1e-12)

    def test_gamma_power_segment(self):
        linear = srgb_to_linear(np.array([0.5]))
        assert float(linear[0]) == pytest.approx(((0.5 + 0.055) / 1.055) ** 2.4, abs=1e-12)

    def test_white_is_d65(self):
        xyz = rgb_to_xyz(255, 255, 255)
        assert xyz.x == pytest.approx(D65_WHITE[0], abs=1e-3)
        assert xyz.y == pytest.approx(D65_WHITE[1], abs=1e-3)
        assert xyz.z == pytest.approx(D65_WHITE[2], abs=1e-3)

    def test_black(self):
        assert rgb_to_xyz(0, 0, 0) == XYZ(x=0.0, y=0.0, z=0.0)

    def test_red_matches_first_matrix_column(self):
        xyz = rgb_to_xyz(255, 0, 0)
        assert xyz.x == pytest.approx(41.24564, abs=1e-9)
        assert xyz.y == pytest.approx(21.26729, abs=1e-9)
        assert xyz.z == pytest.approx(1.93339, abs=1e-9)

    def test_not_rounded(self):
        xyz = rgb_to_xyz(100, 150, 200)
        assert xyz.x != round(xyz.x, 2)


class TestXYZToLab:

    def test_zero_uses_linear_branch(self):
        assert xyz_to_lab(XYZ(0.0, 0.0, 0.0)) == LAB(l=0.0, a=0.0, b=0.0)

    def test_reference_white(self):
        lab = xyz_to_lab(XYZ(95.047, 100.0, 108.883))
        assert lab == LAB(l=100.0, a=0.0, b=0.0)

    def test_small_values_below_epsilon(self):
        # y/Yn = 0.005 < ε → L = κ·t
        lab = xyz_to_lab(XYZ(0.475235, 0.5, 0.544415))
        assert lab.l == pytest.approx(903.3 * 0.005, abs=0.01)


class TestRGBToLab:

    def test_white(self):
        lab = rgb_to_lab(255, 255, 255)
        assert lab.l == pytest.approx(100.0, abs=0.01)
        assert lab.a == pytest.approx(0.0, abs=0.01)
        assert lab.b == pytest.approx(0.0, abs=0.01)

    def test_black(self):
        lab = rgb_to_lab(0, 0, 0)
        assert lab.l == pytest.approx(0.0, abs=0.01)
        assert lab.a == pytest.approx(0.0, abs=0.01)
        assert lab.b == pytest.approx(0.0, abs=0.01)

    def test_red(self):
        lab = rgb_to_lab(255, 0, 0)
        assert lab.l == pytest.approx(53.24, abs=0.01)
        assert lab.a == pytest.approx(80.09, abs=0.02)
        assert lab.b == pytest.approx(67.20, abs=0.02)

    def test_blue_has_negative_b(self):
        lab = rgb_to_lab(0, 0, 255)
        assert lab.b < -100

    def test_rounded_to_two_decimals(self):
        lab = rgb_to_lab(37, 142, 201)
        for v in (lab.l, lab.a, lab.b):
            assert v == round(v, 2)

    def test_deterministic(self):
        assert rgb_to_lab(37, 142, 201) == rgb_to_lab(37, 142, 201)


class TestGetAllColorValues:

    def test_shape(self):
        values = get_all_color_values(255, 0, 0)
        assert set(values.to_dict()) == {
            "hex", "hue", "saturation_l", "lightness", "saturation_v",
            "value", "lab_l", "lab_a", "lab_b",
        }

    def test_red(self):
        values = get_all_color_values(255, 0, 0)
        assert values.hex == "#FF0000"
        assert values.hue == 0
        assert values.saturation_l == 100
        assert values.lightness == 50
        assert values.saturation_v == 100
        assert values.value == 100
        assert values.lab == rgb_to_lab(255, 0, 0)

    def test_repeated_calls_identical(self):
        assert get_all_color_values(12, 34, 56) == get_all_color_values(12, 34, 56)

    @pytest.mark.parametrize("rgb", OUT_OF_RANGE)
    def test_out_of_range_never_raises(self, rgb):
        values = get_all_color_values(*rgb)
        assert len(values.hex) == 7
        assert values.hex.startswith("#")
