# Copyright (c) 2026 Colorread
# SPDX-License-Identifier: MIT

"""
Colorread -- colorimeter reading store with color-space conversion.

Converts raw RGB readings into hex, HSL, HSV and CIE-LAB, and tracks the
CIE76 ΔE between consecutive readings from the same device.

Quick start::

    from colorread import ReadingService, SQLiteReadingStore, load_config

    with SQLiteReadingStore(load_config()) as store:
        store.migrate()
        service = ReadingService(store)
        reading = service.record_reading("lab-01", 255, 0, 0)
        reading.hex       # "#FF0000"
        reading.delta_e   # None for the first reading
"""

from __future__ import annotations

__version__ = "1.0.0"

from colorread.config import StoreConfig, load_config
from colorread.convert import (
    DeltaEBand,
    delta_e_76,
    get_all_color_values,
    interpret_delta_e,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_lab,
)
from colorread.errors import (
    ColorReadError,
    ConfigError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from colorread.schema import (
    LAB,
    RGB,
    ColorReading,
    ColorValues,
    LabSample,
    ReadingComparison,
)
from colorread.service import ReadingService
from colorread.store import ReadingStore, SQLiteReadingStore

__all__ = [
    # Core conversions
    "rgb_to_hex",
    "rgb_to_hsl",
    "rgb_to_hsv",
    "rgb_to_lab",
    "get_all_color_values",
    "delta_e_76",
    "interpret_delta_e",
    "DeltaEBand",
    # Types (commonly needed)
    "RGB",
    "LAB",
    "ColorValues",
    "ColorReading",
    "LabSample",
    "ReadingComparison",
    # Storage and service
    "ReadingStore",
    "SQLiteReadingStore",
    "ReadingService",
    "StoreConfig",
    "load_config",
    # Errors
    "ColorReadError",
    "ValidationError",
    "NotFoundError",
    "StoreError",
    "ConfigError",
    # Version
    "__version__",
]
