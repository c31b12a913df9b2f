"""
Template source providers.

A source provider turns a template name into the template text plus a
modification time. The loader only relies on the ``SourceProvider``
interface; the concrete providers here cover the common cases of
templates on disk, templates held in memory, and a chain of both.
"""

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, NamedTuple, Optional, Sequence, Union

from .utils.exceptions import SourceNotFoundError
from .utils.logging import get_logger

logger = get_logger(__name__)


class SourceRecord(NamedTuple):
    """
    Template source as returned by a provider.

    ``modified_at`` is a POSIX timestamp, or None when the source has
    no meaningful modification time and must never be cached.
    """
    text: str
    modified_at: Optional[float]


class SourceProvider(ABC):
    """Interface for anything that can supply template source."""

    @abstractmethod
    def get_source(self, name: str) -> SourceRecord:
        """
        Get the source of a template, given its name.

        Args:
            name: Template name

        Returns:
            SourceRecord with the text and its modification time

        Raises:
            SourceNotFoundError: If no source exists for ``name``
        """


class FilesystemSourceProvider(SourceProvider):
    """
    Loads templates from one or more directories.

    Directories are searched in order and the first match wins. Names
    are relative paths using ``/`` as separator and may not climb out
    of the search directories.
    """

    def __init__(self, paths: Union[str, Path, Sequence[Union[str, Path]]], encoding: str = "utf-8"):
        """
        Initialize filesystem provider.

        Args:
            paths: A directory or a list of directories to search
            encoding: Encoding used to read template files
        """
        if isinstance(paths, (str, Path)):
            paths = [paths]

        self.paths: List[Path] = [Path(p) for p in paths]
        self.encoding = encoding

    def _resolve(self, name: str) -> Path:
        parts = [part for part in name.replace("\\", "/").split("/") if part not in ("", ".")]
        if not parts or ".." in parts:
            raise SourceNotFoundError(name, [str(p) for p in self.paths])

        for base in self.paths:
            candidate = base.joinpath(*parts)
            if candidate.is_file():
                return candidate

        raise SourceNotFoundError(name, [str(p) for p in self.paths])

    def get_source(self, name: str) -> SourceRecord:
        path = self._resolve(name)
        logger.debug(f"Reading template '{name}' from {path}")

        with open(path, "r", encoding=self.encoding) as f:
            text = f.read()

        return SourceRecord(text, os.stat(path).st_mtime)


class DictSourceProvider(SourceProvider):
    """
    Serves templates from an in-memory mapping.

    In-memory sources have no modification time, so templates from this
    provider are always compiled and activated directly.
    """

    def __init__(self, templates: Optional[Dict[str, str]] = None):
        self.templates: Dict[str, str] = dict(templates or {})

    def set_template(self, name: str, text: str) -> None:
        """Add or replace a template."""
        self.templates[name] = text

    def get_source(self, name: str) -> SourceRecord:
        if name not in self.templates:
            raise SourceNotFoundError(name)
        return SourceRecord(self.templates[name], None)


class ChainSourceProvider(SourceProvider):
    """Asks a list of providers in turn; the first one that resolves the name wins."""

    def __init__(self, providers: Optional[Sequence[SourceProvider]] = None):
        self.providers: List[SourceProvider] = list(providers or [])

    def add_provider(self, provider: SourceProvider) -> None:
        """Append a provider to the end of the chain."""
        self.providers.append(provider)

    def get_source(self, name: str) -> SourceRecord:
        searched: List[str] = []
        for provider in self.providers:
            try:
                return provider.get_source(name)
            except SourceNotFoundError as e:
                searched.extend(e.searched or [type(provider).__name__])

        raise SourceNotFoundError(name, searched)
