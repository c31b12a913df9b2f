"""
Utils package for Loom.

This module provides the exception hierarchy, configuration and
logging shared by the rest of the package.
"""

from .exceptions import LoomError, SourceNotFoundError, CompilationError, LoadFailureError

from .config import (
    LoomConfig,
    CacheConfig,
    LoggingConfig,
    get_config,
    set_config,
    load_config,
)

from .logging import get_logger, setup_logging, LoomLogger

__all__ = [
    # Exceptions
    "LoomError",
    "SourceNotFoundError",
    "CompilationError",
    "LoadFailureError",

    # Configuration
    "LoomConfig",
    "CacheConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "load_config",

    # Logging
    "get_logger",
    "setup_logging",
    "LoomLogger",
]
