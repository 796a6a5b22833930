# Copyright (c) 2026 Colorread
# SPDX-License-Identifier: MIT

"""Logging setup for applications embedding Colorread.

Modules log through ``logging.getLogger(__name__)`` and never configure
handlers themselves. Applications call ``setup_logging`` once.

Format examples:
    Human: 2026-10-19T13:45:12.345+00:00 | INFO | colorread.service | Message
    JSON:  {"t":"2026-10-19T13:45:12.345+00:00","lvl":"INFO","name":"...","msg":"..."}

Idempotent: repeated calls replace the handler rather than adding one.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO, Union

ROOT_LOGGER = "colorread"

_handler: Optional[logging.Handler] = None


class ContextFormatter(logging.Formatter):
    """Formatter with UTC timestamps and a human or JSON-lines layout."""

    def __init__(self, fmt_mode: str = "human"):
        super().__init__()
        if fmt_mode not in ("human", "json"):
            raise ValueError(f"fmt_mode must be 'human' or 'json', got {fmt_mode!r}")
        self.fmt_mode = fmt_mode

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
            timespec="milliseconds"
        )
        if self.fmt_mode == "json":
            log_dict = {
                "t": ts,
                "lvl": record.levelname,
                "name": record.name,
                "msg": record.getMessage(),
            }
            if record.exc_info:
                log_dict["exc"] = self.formatException(record.exc_info)
            return json.dumps(log_dict)

        line = f"{ts} | {record.levelname} | {record.name} | {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(
    level: Union[int, str] = logging.INFO,
    fmt_mode: str = "human",
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Attach a single stream handler to the ``colorread`` logger.

    Args:
        level: Logging level name or number.
        fmt_mode: ``"human"`` or ``"json"``.
        stream: Output stream (default: stderr).

    Returns:
        The configured package logger.
    """
    global _handler

    formatter = ContextFormatter(fmt_mode)
    logger = logging.getLogger(ROOT_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setFormatter(formatter)
    logger.addHandler(_handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
