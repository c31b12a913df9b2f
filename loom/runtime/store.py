"""
Compiled artifact storage.

This module provides the thin layer between the loader and the cache
directory: existence checks, last write times, reads and writes of
compiled template modules.
"""

import os
from enum import Enum
from pathlib import Path
from typing import Union

from ..identity import cache_path_for
from ..utils.exceptions import LoadFailureError
from ..utils.logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


class WriteResult(Enum):
    """Outcome of writing an artifact."""
    WRITTEN = "written"
    CANNOT_WRITE = "cannot_write"


class ArtifactStore:
    """
    Stores compiled templates as files in a single flat directory.

    The directory is created when the store is constructed. Files are
    addressed by direct path construction only; the directory is never
    listed and nothing is ever deleted.
    """

    def __init__(self, cache_dir: PathLike):
        """
        Initialize artifact store.

        Args:
            cache_dir: Cache root directory, created if missing
        """
        self.cache_dir = Path(cache_dir)
        self.cache_dir.mkdir(mode=0o755, parents=True, exist_ok=True)

    def path_for(self, name: str) -> Path:
        """Get the artifact path for a template name."""
        return cache_path_for(self.cache_dir, name)

    def exists(self, path: PathLike) -> bool:
        """Check whether an artifact exists."""
        return os.path.isfile(path)

    def last_write_time(self, path: PathLike) -> float:
        """
        Get the last write time of an artifact.

        Raises:
            FileNotFoundError: If the artifact does not exist
        """
        return os.stat(path).st_mtime

    def write(self, path: PathLike, content: str) -> WriteResult:
        """
        Write compiled output to an artifact.

        Failing to open the target is reported as ``CANNOT_WRITE``.
        Errors after the file was opened propagate; the file may then be
        truncated.

        Args:
            path: Artifact path
            content: Compiled output

        Returns:
            WriteResult describing the outcome
        """
        try:
            f = open(path, "w", encoding="utf-8")
        except OSError as e:
            logger.warning(f"Cannot open artifact for writing: {path} ({e})")
            return WriteResult.CANNOT_WRITE

        with f:
            f.write(content)

        logger.debug(f"Wrote artifact {path} ({len(content)} chars)")
        return WriteResult.WRITTEN

    def read(self, path: PathLike) -> str:
        """
        Read compiled output from an artifact.

        Raises:
            LoadFailureError: If the artifact is missing or unreadable
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise LoadFailureError(f"Cannot read artifact: {e}", path=str(path)) from e
