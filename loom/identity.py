"""
Template identity scheme.

Maps a template name to the identifier of its compiled unit and to the
file that caches it. Both are derived from a SHA-256 digest of the name,
so any string (empty, or full of path separators) yields a fixed-length,
filesystem-safe token that is stable across processes.
"""

import hashlib
from pathlib import Path
from typing import Union

UNIT_ID_PREFIX = "__LoomTemplate_"
CACHE_FILE_PREFIX = "loom_"
CACHE_FILE_SUFFIX = ".py"


def _digest(name: str) -> str:
    # surrogatepass keeps the mapping total over every str value
    return hashlib.sha256(name.encode("utf-8", "surrogatepass")).hexdigest()


def unit_id_for(name: str) -> str:
    """
    Get the compiled unit identifier for a template name.

    The identifier is a valid Python identifier and is the name of the
    class defined by the compiled output.

    Args:
        name: Template name

    Returns:
        Compiled unit identifier
    """
    return UNIT_ID_PREFIX + _digest(name)


def cache_filename_for(name: str) -> str:
    """Get the bare cache file name for a template name."""
    return f"{CACHE_FILE_PREFIX}{_digest(name)}{CACHE_FILE_SUFFIX}"


def cache_path_for(cache_dir: Union[str, Path], name: str) -> Path:
    """
    Get the cache artifact path for a template name.

    Args:
        cache_dir: Cache root directory
        name: Template name

    Returns:
        Path of the artifact directly under ``cache_dir``
    """
    return Path(cache_dir) / cache_filename_for(name)
