"""
Runtime subsystem for Loom.

This module handles compiled artifact storage and the activation of
compiled templates inside the running process.
"""

from .template import Template
from .store import ArtifactStore, WriteResult
from .activator import Activator, ActiveUnitRegistry

__all__ = [
    "Template",
    "ArtifactStore",
    "WriteResult",
    "Activator",
    "ActiveUnitRegistry",
]
