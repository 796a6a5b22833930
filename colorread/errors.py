# Copyright (c) 2026 Colorread
# SPDX-License-Identifier: MIT

"""Exception types raised outside the conversion core.

The conversion functions never raise; these cover boundary validation,
lookups, storage and configuration.
"""


class ColorReadError(Exception):
    """Base class for all Colorread errors."""


class ValidationError(ColorReadError, ValueError):
    """Raised when caller input fails boundary validation."""


class NotFoundError(ColorReadError, LookupError):
    """Raised when a reading or sample id does not exist."""


class StoreError(ColorReadError):
    """Raised when the persistence layer fails."""


class ConfigError(ColorReadError):
    """Raised when configuration validation fails."""
