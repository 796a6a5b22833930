# Copyright (c) 2026 Colorread
# SPDX-License-Identifier: MIT

"""
Color space conversions for a single RGB reading.

Conversion chain: sRGB (0-255) → Hex / HSL / HSV
                  sRGB (0-255) → Linear RGB → XYZ (D65) → CIE-LAB

References:
- sRGB transfer function: IEC 61966-2-1
- sRGB → XYZ matrix and D65 white: http://www.brucelindbloom.com/

Every reported value is rounded to 2 decimals (half away from zero).
Intermediate XYZ is never rounded so LAB does not compound rounding error.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from colorread.schema.color_reading import HSL, HSV, LAB, XYZ, ColorValues


# =============================================================================
# Constants
# =============================================================================

# sRGB (linear, 0-100) → XYZ under D65
_SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

# D65 reference white (Xn, Yn, Zn)
D65_WHITE = np.array([95.047, 100.0, 108.883], dtype=np.float64)

# CIE constants for the piecewise LAB transform
LAB_EPSILON = 0.008856
LAB_KAPPA = 903.3


def round2(value: float) -> float:
    """Round to 2 decimals, ties away from zero.

    Adding 0.0 normalizes a negative zero produced by tiny negative inputs.
    Non-finite values pass through unchanged.
    """
    shifted = abs(value) * 100 + 0.5
    if not math.isfinite(shifted):
        return value
    return math.copysign(math.floor(shifted), value) / 100 + 0.0


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


# =============================================================================
# RGB → Hex
# =============================================================================


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Convert RGB channels to a ``#RRGGBB`` uppercase hex string.

    Channels are clamped to [0, 255] and then rounded, so this never fails
    on out-of-range input. NaN maps to 0.
    """
    def _channel(n: float) -> int:
        if math.isnan(n):
            return 0
        return int(_round_half_away(max(0.0, min(255.0, n))))

    return f"#{_channel(r):02X}{_channel(g):02X}{_channel(b):02X}"


# =============================================================================
# RGB → HSL / HSV
# =============================================================================


def _hue_fraction(r: float, g: float, b: float, mx: float, delta: float) -> float:
    """Six-sector hue in [0, 1), keyed on which channel holds the max.

    Caller guarantees ``delta > 0``.
    """
    if mx == r:
        return ((g - b) / delta + (6 if g < b else 0)) / 6
    if mx == g:
        return ((b - r) / delta + 2) / 6
    return ((r - g) / delta + 4) / 6


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """
    Convert RGB (0-255) to HSL.

    Returns:
        HSL with hue in degrees [0, 360) and saturation/lightness in
        percent [0, 100]. Achromatic input (max == min) yields h=0, s=0.
    """
    r, g, b = r / 255, g / 255, b / 255
    mx = max(r, g, b)
    mn = min(r, g, b)
    lightness = (mx + mn) / 2
    hue = 0.0
    saturation = 0.0

    if mx != mn:
        delta = mx - mn
        denom = (2 - mx - mn) if lightness > 0.5 else (mx + mn)
        # Only out-of-range input reaches a zero denominator
        saturation = delta / denom if denom != 0 else 0.0
        hue = _hue_fraction(r, g, b, mx, delta)

    return HSL(
        h=round2(hue * 360),
        s=round2(saturation * 100),
        l=round2(lightness * 100),
    )


def rgb_to_hsv(r: float, g: float, b: float) -> HSV:
    """
    Convert RGB (0-255) to HSV.

    Saturation is delta/max, and 0 for pure black.
    """
    r, g, b = r / 255, g / 255, b / 255
    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn
    saturation = 0.0 if mx == 0 else delta / mx
    hue = 0.0

    if mx != mn:
        hue = _hue_fraction(r, g, b, mx, delta)

    return HSV(
        h=round2(hue * 360),
        s=round2(saturation * 100),
        v=round2(mx * 100),
    )


# =============================================================================
# RGB → XYZ → LAB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    # Out-of-range input can send the unused power branch negative
    with np.errstate(invalid="ignore", over="ignore"):
        linear = np.where(
            srgb > 0.04045,
            np.power((srgb + 0.055) / 1.055, 2.4),
            srgb / 12.92,
        )
    return linear


def rgb_to_xyz(r: float, g: float, b: float) -> XYZ:
    """
    Convert RGB (0-255) to CIE XYZ under D65, scaled so Y(white) ≈ 100.

    Values are not rounded; XYZ is only an intermediate for LAB.
    """
    srgb = np.array([r, g, b], dtype=np.float64) / 255
    linear = srgb_to_linear(srgb) * 100
    with np.errstate(invalid="ignore", over="ignore"):
        x, y, z = _SRGB_TO_XYZ @ linear
    return XYZ(x=float(x), y=float(y), z=float(z))


def _lab_f(t: NDArray[np.float64]) -> NDArray[np.float64]:
    """CIE piecewise transform: cube root above epsilon, linear below."""
    return np.where(t > LAB_EPSILON, np.cbrt(t), (LAB_KAPPA * t + 16) / 116)


def xyz_to_lab(xyz: XYZ) -> LAB:
    """
    Convert D65 XYZ to CIE-LAB.

    Args:
        xyz: Tristimulus values on the 0-100 scale.

    Returns:
        LAB rounded to 2 decimals. a/b are not clamped.
    """
    t = np.array([xyz.x, xyz.y, xyz.z], dtype=np.float64) / D65_WHITE
    # Non-finite XYZ from out-of-range RGB propagates as inf/nan
    with np.errstate(invalid="ignore", over="ignore"):
        fx, fy, fz = _lab_f(t)
        l_star = float(116 * fy - 16)
        a_star = float(500 * (fx - fy))
        b_star = float(200 * (fy - fz))

    return LAB(l=round2(l_star), a=round2(a_star), b=round2(b_star))


def rgb_to_lab(r: float, g: float, b: float) -> LAB:
    """Convert RGB (0-255) to CIE-LAB (D65)."""
    return xyz_to_lab(rgb_to_xyz(r, g, b))


# =============================================================================
# Aggregate
# =============================================================================


def get_all_color_values(r: float, g: float, b: float) -> ColorValues:
    """
    Compute every derived representation of one RGB reading.

    This is the shape stored alongside the raw channels.
    """
    hsl = rgb_to_hsl(r, g, b)
    hsv = rgb_to_hsv(r, g, b)
    lab = rgb_to_lab(r, g, b)

    return ColorValues(
        hex=rgb_to_hex(r, g, b),
        hue=hsl.h,
        saturation_l=hsl.s,
        lightness=hsl.l,
        saturation_v=hsv.s,
        value=hsv.v,
        lab_l=lab.l,
        lab_a=lab.a,
        lab_b=lab.b,
    )
