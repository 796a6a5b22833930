# Copyright (c) 2026 Colorread
# SPDX-License-Identifier: MIT

"""
Serializers for readings, samples and comparisons.

All serializers render stored values exactly -- no re-rounding or
recomputation.
"""

from colorread.runtime.serializers.base import SerializerFormat
from colorread.runtime.serializers.output import to_output

__all__ = [
    "SerializerFormat",
    "to_output",
]
