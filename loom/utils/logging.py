"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
Loom package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the Loom package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    if level is None:
        level = os.environ.get("LOOM_LOG_LEVEL", "INFO")

    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("loom")
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name == "loom" or name.startswith("loom."):
        return logging.getLogger(name)
    return logging.getLogger(f"loom.{name}")


class LoomLogger:
    """
    Logging helpers for the load-and-cache pipeline.

    Each method covers one decision the loader makes, so the log
    reads as a trace of why a template was reused or recompiled.
    """

    def __init__(self, name: str):
        """
        Initialize logger for specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_cache_hit(self, template_name: str, unit_id: str) -> None:
        """Log reuse of an already active or cached unit."""
        self.logger.debug(f"Cache hit for template '{template_name}' ({unit_id[:24]}...)")

    def log_cache_miss(self, template_name: str, cache_path: str) -> None:
        """Log a missing artifact that forces compilation."""
        self.logger.debug(f"Cache miss for template '{template_name}': {cache_path}")

    def log_stale(self, template_name: str, artifact_mtime: float, source_mtime: float) -> None:
        """
        Log a stale artifact about to be recompiled.

        Args:
            template_name: Template being loaded
            artifact_mtime: Last write time of the cached artifact
            source_mtime: Modification time reported by the source provider
        """
        self.logger.debug(
            f"Artifact for '{template_name}' is stale "
            f"(artifact={artifact_mtime:.3f}, source={source_mtime:.3f})"
        )

    def log_compile(self, template_name: str, source_length: int) -> None:
        """Log the start of a compilation."""
        self.logger.info(f"Compiling template '{template_name}' ({source_length} chars)")

    def log_fallback(self, template_name: str, reason: str) -> None:
        """
        Log fallback to direct in-memory activation.

        Args:
            template_name: Template being loaded
            reason: Reason the artifact store was bypassed
        """
        self.logger.warning(f"Activating template '{template_name}' in memory: {reason}")


setup_logging()
