# Copyright (c) 2026 Colorread
# SPDX-License-Identifier: MIT

"""
Persistence for samples and readings.

Stores are constructed explicitly and injected into the service.
"""

from colorread.store.base import ReadingStore
from colorread.store.sqlite import SQLiteReadingStore

__all__ = ["ReadingStore", "SQLiteReadingStore"]
