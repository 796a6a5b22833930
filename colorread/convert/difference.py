# Copyright (c) 2026 Colorread
# SPDX-License-Identifier: MIT

"""
Perceptual color difference (ΔE) in CIE-LAB.

CIE76 is plain Euclidean distance between two LAB points. The
interpretation scale maps a ΔE value onto six ordered bands, each
half-open ``[lower, upper)``; the last band is unbounded above.
"""

from __future__ import annotations

import math
from enum import Enum

from colorread.convert.colorspace import round2
from colorread.schema.color_reading import LAB


def delta_e_76(lab1: LAB, lab2: LAB) -> float:
    """
    Calculate CIE76 ΔE between two LAB colors.

    Symmetric in its arguments and zero for identical inputs.

    Returns:
        ΔE rounded to 2 decimals (lower = more similar)
    """
    delta_l = lab1.l - lab2.l
    delta_a = lab1.a - lab2.a
    delta_b = lab1.b - lab2.b
    return round2(math.sqrt(delta_l * delta_l + delta_a * delta_a + delta_b * delta_b))


class DeltaEBand(Enum):
    """Perceptual distance bands, ordered from closest to farthest."""

    NOT_PERCEPTIBLE = "Not perceptible by human eyes"
    CLOSE_OBSERVATION = "Perceptible through close observation"
    AT_A_GLANCE = "Perceptible at a glance"
    MORE_SIMILAR = "Pair colors more similar than different"
    MORE_DIFFERENT = "Pair colors more different than similar"
    COMPLETELY_DIFFERENT = "Completely different colors"

    @property
    def label(self) -> str:
        return self.value


# Exclusive upper bound of each band; the last band has none
_BAND_UPPER_BOUNDS: tuple[tuple[float, DeltaEBand], ...] = (
    (1.0, DeltaEBand.NOT_PERCEPTIBLE),
    (2.0, DeltaEBand.CLOSE_OBSERVATION),
    (3.5, DeltaEBand.AT_A_GLANCE),
    (5.0, DeltaEBand.MORE_SIMILAR),
    (10.0, DeltaEBand.MORE_DIFFERENT),
)


def classify_delta_e(delta_e: float) -> DeltaEBand:
    """Return the perceptual band a ΔE value falls into."""
    for upper, band in _BAND_UPPER_BOUNDS:
        if delta_e < upper:
            return band
    return DeltaEBand.COMPLETELY_DIFFERENT


def interpret_delta_e(delta_e: float) -> str:
    """Human-readable description of a ΔE value."""
    return classify_delta_e(delta_e).label
