"""
Configuration System for Loom.

This module provides a small, unified configuration interface for the
template loader. Settings come from a JSON or YAML file with a few
environment variable overrides on top.
"""

import json
import os
from typing import Dict, Any, Optional, Union
from pathlib import Path
from dataclasses import dataclass

import yaml

from .logging import get_logger, setup_logging

logger = get_logger(__name__)

_TRUTHY = ("1", "true", "yes")


@dataclass
class CacheConfig:
    """Compiled template cache configuration."""

    enabled: bool = True
    cache_dir: Optional[str] = None
    auto_reload: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    enable_file_logging: bool = False
    log_file: str = "loom.log"


class LoomConfig:
    """
    Unified configuration manager for Loom.

    Holds the cache and logging sections. The cache section maps onto
    the ``cache`` and ``auto_reload`` arguments of ``TemplateLoader``.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses default location.
        """
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.cache = self._create_cache_config()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Path:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        env_file = os.getenv("LOOM_CONFIG")
        if env_file:
            return Path(env_file)

        # Default location: try YAML first, then JSON
        config_dir = Path(__file__).parent
        yaml_config = config_dir / "loom_config.yaml"
        json_config = config_dir / "loom_config.json"

        if yaml_config.exists():
            return yaml_config
        return json_config

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        try:
            if self.config_file.exists():
                with open(self.config_file, "r") as f:
                    if self.config_file.suffix.lower() in [".yaml", ".yml"]:
                        config_data = yaml.safe_load(f)
                    else:
                        config_data = json.load(f)
                if config_data is None:
                    config_data = {}
                if not isinstance(config_data, dict):
                    logger.error(f"Configuration in {self.config_file} is not a mapping, using defaults")
                    return {}
                logger.info(f"Loaded configuration from {self.config_file}")
                return config_data
            else:
                logger.debug(f"Configuration file {self.config_file} not found, using defaults")
                return {}
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Failed to load configuration: {e}")
            return {}

    def _section(self, key: str) -> Dict[str, Any]:
        """Get a config section; an empty or malformed section counts as empty."""
        section = self._config_data.get(key) or {}
        if not isinstance(section, dict):
            logger.error(f"Configuration section '{key}' is not a mapping, using defaults")
            return {}
        return section

    def _create_cache_config(self) -> CacheConfig:
        """Create cache configuration from loaded data."""
        cache_data = self._section("cache")

        env_disabled = os.getenv("LOOM_DISABLE_CACHE", "").lower() in _TRUTHY
        enabled = not env_disabled and cache_data.get("enabled", True)

        cache_dir = os.getenv("LOOM_CACHE_DIR") or cache_data.get("cache_dir")

        auto_reload = cache_data.get("auto_reload", True)
        env_reload = os.getenv("LOOM_AUTO_RELOAD")
        if env_reload:
            auto_reload = env_reload.lower() in _TRUTHY

        return CacheConfig(
            enabled=enabled,
            cache_dir=cache_dir,
            auto_reload=auto_reload,
        )

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._section("logging")

        return LoggingConfig(
            level=log_data.get("level", "INFO"),
            enable_file_logging=log_data.get("enable_file_logging", False),
            log_file=log_data.get("log_file", "loom.log"),
        )

    def apply_logging(self) -> None:
        """Reconfigure the loom logger from the logging section."""
        log_file = self.logging.log_file if self.logging.enable_file_logging else None
        setup_logging(level=self.logging.level, log_file=log_file)

    def is_cache_enabled(self) -> bool:
        """Check if caching is enabled."""
        return self.cache.enabled

    def cache_option(self) -> Union[bool, str, None]:
        """
        Resolve the cache section into a ``TemplateLoader`` cache argument.

        Returns:
            False when caching is disabled, the configured directory when
            one is set, otherwise None (use the default temp directory)
        """
        if not self.cache.enabled:
            return False
        return self.cache.cache_dir

    def save_config(self) -> None:
        """Save current configuration to file."""
        config_data = {
            "version": "1.0",
            "description": "Loom Template Loader Configuration",
            "cache": {
                "enabled": self.cache.enabled,
                "cache_dir": self.cache.cache_dir,
                "auto_reload": self.cache.auto_reload,
            },
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }

        try:
            with open(self.config_file, "w") as f:
                if self.config_file.suffix.lower() in [".yaml", ".yml"]:
                    yaml.safe_dump(config_data, f, sort_keys=False)
                else:
                    json.dump(config_data, f, indent=2)
            logger.info(f"Configuration saved to {self.config_file}")
        except OSError as e:
            logger.error(f"Failed to save configuration: {e}")


# Global configuration instance
_global_config: Optional[LoomConfig] = None


def get_config() -> LoomConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = LoomConfig()
        _global_config.apply_logging()
    return _global_config


def set_config(config: Optional[LoomConfig]) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config


def load_config(config_file: str) -> LoomConfig:
    """Load configuration from a specific file."""
    return LoomConfig(config_file)
