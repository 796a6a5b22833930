# Copyright (c) 2026 Colorread
# SPDX-License-Identifier: MIT

"""
Conversion core for Colorread.

Pure functions from an RGB reading to every derived color representation,
and the CIE76 distance between LAB points. No state, no I/O.
"""

from colorread.convert.colorspace import (
    get_all_color_values,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_lab,
    rgb_to_xyz,
    xyz_to_lab,
)
from colorread.convert.difference import (
    DeltaEBand,
    classify_delta_e,
    delta_e_76,
    interpret_delta_e,
)

__all__ = [
    "rgb_to_hex",
    "rgb_to_hsl",
    "rgb_to_hsv",
    "rgb_to_xyz",
    "xyz_to_lab",
    "rgb_to_lab",
    "get_all_color_values",
    "delta_e_76",
    "DeltaEBand",
    "classify_delta_e",
    "interpret_delta_e",
]
