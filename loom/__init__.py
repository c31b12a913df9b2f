"""
Loom: compiled template loading with an on-disk artifact cache

Loom loads named templates, compiles them into Python modules and keeps
the compiled modules in a cache directory, so later loads skip the
compiler until the template source changes.

Key Features:
- Stable, hash-based unit identifiers and cache file names
- Timestamp-based staleness checks with optional auto reload
- Direct in-memory activation when the cache is disabled or unwritable
- Filesystem, in-memory and chained template sources

Usage:
    from loom import TemplateLoader, FilesystemSourceProvider

    loader = TemplateLoader(FilesystemSourceProvider("templates"), cache="/tmp/loom")
    print(loader.render("greeting.txt", name="World"))
"""

__version__ = "0.1.0"
__author__ = "Loom Team"
__email__ = "loom@example.com"

from .identity import unit_id_for, cache_filename_for, cache_path_for
from .sources import (
    SourceRecord,
    SourceProvider,
    FilesystemSourceProvider,
    DictSourceProvider,
    ChainSourceProvider,
)
from .compiler import Compiler, TemplateCompiler
from .runtime import Template, ArtifactStore, WriteResult, Activator, ActiveUnitRegistry
from .loader import TemplateLoader, default_cache_dir
from .utils import (
    LoomError,
    SourceNotFoundError,
    CompilationError,
    LoadFailureError,
    LoomConfig,
    get_config,
)

__all__ = [
    "unit_id_for",
    "cache_filename_for",
    "cache_path_for",
    "SourceRecord",
    "SourceProvider",
    "FilesystemSourceProvider",
    "DictSourceProvider",
    "ChainSourceProvider",
    "Compiler",
    "TemplateCompiler",
    "Template",
    "ArtifactStore",
    "WriteResult",
    "Activator",
    "ActiveUnitRegistry",
    "TemplateLoader",
    "default_cache_dir",
    "LoomError",
    "SourceNotFoundError",
    "CompilationError",
    "LoadFailureError",
    "LoomConfig",
    "get_config",
]
