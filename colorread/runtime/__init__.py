# Copyright (c) 2026 Colorread
# SPDX-License-Identifier: MIT

"""
Output runtime for Colorread.

Renders schema objects as compact JSON, pretty JSON or short
human-readable text for logs and terminals.
"""

from colorread.runtime.serializers import SerializerFormat, to_output

__all__ = [
    "to_output",
    "SerializerFormat",
]
