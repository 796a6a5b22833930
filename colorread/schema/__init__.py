# Copyright (c) 2026 Colorread
# SPDX-License-Identifier: MIT

"""
Schema definitions for color readings.

All types in this module are immutable (frozen dataclasses).
Once a reading is recorded, its derived values are a fact.
"""

from colorread.schema.color_reading import (
    HSL,
    HSV,
    LAB,
    RGB,
    XYZ,
    ColorReading,
    ColorValues,
    LabSample,
    ReadingComparison,
    SampleDetail,
)

__all__ = [
    # Color value types
    "RGB",
    "HSL",
    "HSV",
    "XYZ",
    "LAB",
    "ColorValues",
    # Stored records
    "LabSample",
    "ColorReading",
    "SampleDetail",
    "ReadingComparison",
]
