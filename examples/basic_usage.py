#!/usr/bin/env python3
"""
Basic usage example for Loom.

Loads a template from disk twice: the first loader compiles it and
writes the compiled module to the cache, the second loader reuses the
cached module without compiling.
"""

import tempfile
from pathlib import Path

from loom import TemplateLoader, FilesystemSourceProvider, DictSourceProvider, ChainSourceProvider


def main():
    """Demonstrate basic Loom usage."""
    print("Loom Template Loader - Basic Usage Example")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as workdir:
        templates_dir = Path(workdir) / "templates"
        cache_dir = Path(workdir) / "cache"
        templates_dir.mkdir()
        (templates_dir / "greeting.txt").write_text("Hello, $name!")

        provider = ChainSourceProvider([
            FilesystemSourceProvider(templates_dir),
            DictSourceProvider({"inline": "Inline templates are never cached, $name."}),
        ])

        print("\n1. First loader (compiles and caches)...")
        loader = TemplateLoader(provider, cache=cache_dir)
        print(loader.render("greeting.txt", name="World"))
        print(f"Cached artifact: {loader.store.path_for('greeting.txt')}")

        print("\n2. Second loader (reuses the cached artifact)...")
        second = TemplateLoader(provider, cache=cache_dir)
        print(second.render("greeting.txt", name="again"))

        print("\n3. In-memory template...")
        print(second.render("inline", name="World"))
        print(f"Artifact written: {second.store.exists(second.store.path_for('inline'))}")


if __name__ == "__main__":
    main()
