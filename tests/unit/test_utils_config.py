"""
Unit tests for configuration loading.

Tests JSON and YAML configuration files, environment variable
overrides and the global configuration accessors.
"""

import json
import logging
import pytest
import yaml

from loom.utils.config import (
    LoomConfig,
    CacheConfig,
    LoggingConfig,
    get_config,
    set_config,
    load_config,
)
from loom.utils.logging import setup_logging


class TestLoomConfig:
    """Test configuration loading."""

    def test_defaults_without_file(self, tmp_path):
        """Test defaults when the file does not exist."""
        config = LoomConfig(str(tmp_path / "missing.json"))

        assert config.cache == CacheConfig()
        assert config.logging == LoggingConfig()
        assert config.is_cache_enabled() is True
        assert config.cache_option() is None

    def test_json_file(self, tmp_path):
        """Test loading a JSON file."""
        config_file = tmp_path / "loom.json"
        config_file.write_text(json.dumps({
            "cache": {"cache_dir": "/var/cache/loom", "auto_reload": False},
            "logging": {"level": "DEBUG"},
        }))

        config = LoomConfig(str(config_file))

        assert config.cache.cache_dir == "/var/cache/loom"
        assert config.cache.auto_reload is False
        assert config.logging.level == "DEBUG"
        assert config.cache_option() == "/var/cache/loom"

    def test_yaml_file(self, tmp_path):
        """Test loading a YAML file."""
        config_file = tmp_path / "loom.yaml"
        config_file.write_text("cache:\n  enabled: false\nlogging:\n  log_file: out.log\n")

        config = LoomConfig(str(config_file))

        assert config.cache.enabled is False
        assert config.cache_option() is False
        assert config.logging.log_file == "out.log"

    def test_empty_yaml_file(self, tmp_path):
        """Test that an empty YAML file yields defaults."""
        config_file = tmp_path / "loom.yml"
        config_file.write_text("")

        assert LoomConfig(str(config_file)).cache == CacheConfig()

    def test_empty_yaml_sections(self, tmp_path):
        """Test that sections with nothing under them yield defaults."""
        config_file = tmp_path / "loom.yaml"
        config_file.write_text("cache:\nlogging:\n")

        config = LoomConfig(str(config_file))

        assert config.cache == CacheConfig()
        assert config.logging == LoggingConfig()

    def test_scalar_yaml_document(self, tmp_path):
        """Test that a document that is not a mapping yields defaults."""
        config_file = tmp_path / "loom.yaml"
        config_file.write_text("just a string\n")

        config = LoomConfig(str(config_file))

        assert config.cache == CacheConfig()
        assert config.logging == LoggingConfig()

    def test_non_mapping_sections(self, tmp_path):
        """Test that list or scalar sections are ignored."""
        config_file = tmp_path / "loom.json"
        config_file.write_text(json.dumps({"cache": ["x"], "logging": 5}))

        config = LoomConfig(str(config_file))

        assert config.cache == CacheConfig()
        assert config.logging == LoggingConfig()

    def test_json_list_document(self, tmp_path):
        """Test that a JSON array document yields defaults."""
        config_file = tmp_path / "loom.json"
        config_file.write_text("[1, 2]")

        assert LoomConfig(str(config_file)).cache == CacheConfig()

    def test_invalid_file_uses_defaults(self, tmp_path):
        """Test that a malformed file is logged and ignored."""
        config_file = tmp_path / "loom.json"
        config_file.write_text("{not json")

        assert LoomConfig(str(config_file)).cache == CacheConfig()

    def test_config_file_from_environment(self, tmp_path, monkeypatch):
        """Test LOOM_CONFIG."""
        config_file = tmp_path / "env.json"
        config_file.write_text(json.dumps({"cache": {"auto_reload": False}}))
        monkeypatch.setenv("LOOM_CONFIG", str(config_file))

        config = LoomConfig()

        assert config.config_file == config_file
        assert config.cache.auto_reload is False

    def test_disable_cache_environment(self, tmp_path, monkeypatch):
        """Test LOOM_DISABLE_CACHE."""
        monkeypatch.setenv("LOOM_DISABLE_CACHE", "1")

        config = LoomConfig(str(tmp_path / "missing.json"))

        assert config.cache.enabled is False
        assert config.cache_option() is False

    def test_cache_dir_environment(self, tmp_path, monkeypatch):
        """Test LOOM_CACHE_DIR overriding the file."""
        config_file = tmp_path / "loom.json"
        config_file.write_text(json.dumps({"cache": {"cache_dir": "/from/file"}}))
        monkeypatch.setenv("LOOM_CACHE_DIR", "/from/env")

        assert LoomConfig(str(config_file)).cache.cache_dir == "/from/env"

    @pytest.mark.parametrize("value,expected", [("true", True), ("0", False), ("no", False), ("YES", True)])
    def test_auto_reload_environment(self, tmp_path, monkeypatch, value, expected):
        """Test LOOM_AUTO_RELOAD."""
        monkeypatch.setenv("LOOM_AUTO_RELOAD", value)

        assert LoomConfig(str(tmp_path / "missing.json")).cache.auto_reload is expected

    def test_save_config_json(self, tmp_path):
        """Test saving and reloading a JSON file."""
        config = LoomConfig(str(tmp_path / "saved.json"))
        config.cache.cache_dir = "/srv/loom"
        config.cache.auto_reload = False
        config.save_config()

        reloaded = LoomConfig(str(tmp_path / "saved.json"))

        assert reloaded.cache.cache_dir == "/srv/loom"
        assert reloaded.cache.auto_reload is False

    def test_save_config_yaml(self, tmp_path):
        """Test that YAML files are saved as YAML."""
        config = LoomConfig(str(tmp_path / "saved.yaml"))
        config.logging.level = "WARNING"
        config.save_config()

        data = yaml.safe_load((tmp_path / "saved.yaml").read_text())

        assert data["logging"]["level"] == "WARNING"
        assert data["cache"]["enabled"] is True


class TestApplyLogging:
    """Test that the logging section configures the loom logger."""

    def teardown_method(self):
        """Restore the default logging setup."""
        for handler in logging.getLogger('loom').handlers[:]:
            handler.close()
        setup_logging()

    def test_apply_level(self, tmp_path):
        """Test that the configured level reaches the logger."""
        config_file = tmp_path / "loom.json"
        config_file.write_text(json.dumps({"logging": {"level": "WARNING"}}))

        LoomConfig(str(config_file)).apply_logging()

        logger = logging.getLogger('loom')
        assert logger.level == logging.WARNING
        assert [type(h).__name__ for h in logger.handlers] == ['StreamHandler']

    def test_apply_file_logging(self, tmp_path):
        """Test that file logging adds a file handler."""
        log_file = tmp_path / "out.log"
        config_file = tmp_path / "loom.json"
        config_file.write_text(json.dumps({
            "logging": {"enable_file_logging": True, "log_file": str(log_file)},
        }))

        LoomConfig(str(config_file)).apply_logging()

        handler_types = [type(h).__name__ for h in logging.getLogger('loom').handlers]
        assert 'FileHandler' in handler_types
        assert log_file.exists()

    def test_get_config_applies_logging(self, tmp_path, monkeypatch):
        """Test that building the global config applies its logging section."""
        config_file = tmp_path / "loom.yaml"
        config_file.write_text("logging:\n  level: ERROR\n")
        monkeypatch.setenv("LOOM_CONFIG", str(config_file))

        get_config()

        assert logging.getLogger('loom').level == logging.ERROR


class TestGlobalConfig:
    """Test global configuration accessors."""

    def test_get_config_is_cached(self):
        """Test that get_config returns one instance."""
        assert get_config() is get_config()

    def test_set_config(self, tmp_path):
        """Test replacing the global configuration."""
        config = load_config(str(tmp_path / "missing.json"))
        set_config(config)

        assert get_config() is config
