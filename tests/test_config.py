# Copyright (c) 2026 Colorread
# SPDX-License-Identifier: MIT

"""Tests for store configuration loading."""

import pytest

from colorread.config import StoreConfig, load_config
from colorread.errors import ConfigError


class TestStoreConfig:

    def test_defaults(self):
        cfg = StoreConfig()
        assert cfg.database_path == ":memory:"
        assert cfg.connect_retries == 5
        assert cfg.retry_delay_s == 2.0

    def test_invalid_retries(self):
        with pytest.raises(ConfigError, match="connect_retries"):
            StoreConfig(connect_retries=0)

    def test_invalid_timeout(self):
        with pytest.raises(ConfigError, match="timeout_s"):
            StoreConfig(timeout_s=0)

    def test_frozen(self):
        cfg = StoreConfig()
        with pytest.raises(AttributeError):
            cfg.database_path = "x.db"


class TestLoadConfig:

    def test_no_file_no_env(self):
        assert load_config(environ={}) == StoreConfig()

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "colorread.yaml"
        path.write_text(
            "store:\n"
            "  database_path: /tmp/readings.db\n"
            "  connect_retries: 10\n"
            "  retry_delay_s: 3\n"
        )
        cfg = load_config(path, environ={})
        assert cfg.database_path == "/tmp/readings.db"
        assert cfg.connect_retries == 10
        assert cfg.retry_delay_s == 3.0

    def test_env_overrides_file(self, tmp_path):
        path = tmp_path / "colorread.yaml"
        path.write_text("store:\n  connect_retries: 10\n")
        cfg = load_config(path, environ={"COLORREAD_CONNECT_RETRIES": "2"})
        assert cfg.connect_retries == 2

    def test_os_environ(self, monkeypatch):
        monkeypatch.setenv("COLORREAD_DATABASE_PATH", "env.db")
        assert load_config().database_path == "env.db"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yaml", environ={})

    def test_bad_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("store: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path, environ={})

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("store:\n  pool_size: 4\n")
        with pytest.raises(ConfigError, match="pool_size"):
            load_config(path, environ={})

    def test_bad_env_value(self):
        with pytest.raises(ConfigError, match="COLORREAD|connect_retries"):
            load_config(environ={"COLORREAD_CONNECT_RETRIES": "many"})

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path, environ={}) == StoreConfig()
