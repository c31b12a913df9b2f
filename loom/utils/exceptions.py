"""
Custom exception definitions.

This module defines the exception hierarchy for Loom-specific errors.
Only failures that abort a load are exceptions; a cache artifact that
cannot be written is reported through ``WriteResult`` instead.
"""

from typing import Optional, Sequence


class LoomError(Exception):
    """
    Base exception for all Loom-related errors.

    This is the root exception class for all Loom-specific
    errors, providing common functionality and error handling.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize Loom error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class SourceNotFoundError(LoomError):
    """
    Raised when a source provider cannot resolve a template name.
    """

    def __init__(self, template_name: str, searched: Sequence[str] = ()):
        """
        Initialize source lookup error.

        Args:
            template_name: Name that could not be resolved
            searched: Locations that were tried, if any
        """
        details = {}
        if searched:
            details['searched'] = ", ".join(str(s) for s in searched)

        super().__init__(f"Unable to find template '{template_name}'", details)
        self.template_name = template_name
        self.searched = list(searched)


class CompilationError(LoomError):
    """
    Raised when a compiler rejects template source.

    Nothing is written to the cache when this is raised.
    """

    def __init__(self, message: str, template_name: str = "", source: str = ""):
        """
        Initialize compilation error.

        Args:
            message: Error description
            template_name: Template that failed to compile
            source: Source text that failed to compile
        """
        details = {}
        if template_name:
            details['template'] = template_name
        if source:
            details['source_length'] = len(source)

        super().__init__(message, details)
        self.template_name = template_name
        self.source = source


class LoadFailureError(LoomError):
    """
    Raised when compiled output cannot be activated.

    Covers missing or unreadable artifacts, artifacts that fail to
    execute, and artifacts that do not define the expected unit.
    """

    def __init__(self, message: str, unit_id: Optional[str] = None, path: Optional[str] = None):
        """
        Initialize load failure.

        Args:
            message: Error description
            unit_id: Compiled unit that was being activated
            path: Artifact path, when activating from the store
        """
        details = {}
        if unit_id is not None:
            details['unit_id'] = unit_id
        if path is not None:
            details['path'] = path

        super().__init__(message, details)
        self.unit_id = unit_id
        self.path = path
