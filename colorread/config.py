# Copyright (c) 2026 Colorread
# SPDX-License-Identifier: MIT

"""Configuration loader for the reading store.

Loads an optional YAML file into a frozen dataclass, then applies
environment overrides. Nothing else in the package reads the environment.

Usage::

    from colorread.config import load_config
    cfg = load_config()                        # defaults + env
    cfg = load_config("/etc/colorread.yaml")   # file + env

YAML layout::

    store:
      database_path: /var/lib/colorread/readings.db
      connect_retries: 10
      retry_delay_s: 3.0
      timeout_s: 10.0
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from colorread.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "COLORREAD_"


@dataclass(frozen=True)
class StoreConfig:
    """SQLite store settings.

    ``database_path`` of ``:memory:`` keeps everything in-process.
    """

    database_path: str = ":memory:"
    connect_retries: int = 5
    retry_delay_s: float = 2.0
    timeout_s: float = 10.0

    def __post_init__(self) -> None:
        if not self.database_path:
            raise ConfigError("database_path must not be empty")
        if self.connect_retries < 1:
            raise ConfigError(f"connect_retries must be >= 1, got {self.connect_retries}")
        if self.retry_delay_s < 0:
            raise ConfigError(f"retry_delay_s must be >= 0, got {self.retry_delay_s}")
        if self.timeout_s <= 0:
            raise ConfigError(f"timeout_s must be > 0, got {self.timeout_s}")


def _coerce(name: str, raw: Any, target: type) -> Any:
    try:
        if target is int:
            return int(raw)
        if target is float:
            return float(raw)
        return str(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid value for {name}: {raw!r}") from exc


_FIELD_TYPES = {"database_path": str, "connect_retries": int, "retry_delay_s": float, "timeout_s": float}


def _apply(cfg: StoreConfig, values: Mapping[str, Any], source: str) -> StoreConfig:
    known = {f.name for f in fields(StoreConfig)}
    unknown = set(values) - known
    if unknown:
        raise ConfigError(f"Unknown store settings in {source}: {sorted(unknown)}")
    updates = {k: _coerce(k, v, _FIELD_TYPES[k]) for k, v in values.items()}
    return replace(cfg, **updates)


def _read_yaml(path: Path) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Top level of {path} must be a mapping")
    store = data.get("store", {})
    if not isinstance(store, dict):
        raise ConfigError(f"'store' section of {path} must be a mapping")
    return store


def load_config(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> StoreConfig:
    """Build a StoreConfig from defaults, an optional YAML file and env vars.

    Args:
        path: Optional YAML file with a ``store:`` section.
        environ: Environment mapping (default: ``os.environ``).

    Raises:
        ConfigError: On a missing file, bad YAML, unknown keys or bad values.
    """
    cfg = StoreConfig()
    if path is not None:
        cfg = _apply(cfg, _read_yaml(Path(path)), str(path))
        logger.debug("Loaded store config from %s", path)

    env = os.environ if environ is None else environ
    overrides = {}
    for name in _FIELD_TYPES:
        key = ENV_PREFIX + name.upper()
        if key in env:
            overrides[name] = env[key]
    if overrides:
        cfg = _apply(cfg, overrides, "environment")
        logger.debug("Applied environment overrides: %s", sorted(overrides))

    return cfg
