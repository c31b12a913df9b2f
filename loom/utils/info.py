"""
Package information utility.

This module provides a command-line utility for displaying
information about the Loom installation and its cache settings.
"""

import os
import sys
import platform
from typing import Dict, Any

import loom
from loom.loader import default_cache_dir
from loom.utils.config import get_config


def get_system_info() -> Dict[str, Any]:
    """
    Get system information relevant to Loom.

    Returns:
        Dictionary containing system information
    """
    return {
        'python_version': sys.version,
        'platform': platform.platform(),
        'architecture': platform.architecture(),
    }


def get_loom_info() -> Dict[str, Any]:
    """
    Get Loom-specific information.

    Returns:
        Dictionary containing version and resolved cache settings
    """
    config = get_config()
    info = {
        'version': loom.__version__,
        'author': loom.__author__,
        'config_file': str(config.config_file),
        'cache_enabled': config.cache.enabled,
        'auto_reload': config.cache.auto_reload,
    }

    if config.cache.enabled:
        cache_dir = config.cache.cache_dir or str(default_cache_dir())
        info['cache_dir'] = cache_dir
        info['cache_dir_exists'] = os.path.isdir(cache_dir)
        info['cache_dir_writable'] = os.access(cache_dir, os.W_OK)

    return info


def print_info() -> None:
    """Print formatted information about Loom and the system."""
    print("Loom Template Loader")
    print("=" * 40)

    loom_info = get_loom_info()
    print(f"\nLoom Version: {loom_info['version']}")
    print(f"Author: {loom_info['author']}")
    print(f"Config File: {loom_info['config_file']}")
    print(f"Cache Enabled: {loom_info['cache_enabled']}")
    print(f"Auto Reload: {loom_info['auto_reload']}")

    if 'cache_dir' in loom_info:
        print(f"Cache Directory: {loom_info['cache_dir']}")
        print(f"  exists: {loom_info['cache_dir_exists']}, writable: {loom_info['cache_dir_writable']}")

    system_info = get_system_info()
    print(f"\nPython Version: {system_info['python_version'].split()[0]}")
    print(f"Platform: {system_info['platform']}")
    print(f"Architecture: {system_info['architecture'][0]}")


def main() -> None:
    """Main entry point for the loom-info command."""
    try:
        print_info()
    except Exception as e:
        print(f"Error getting system information: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
