"""
Pytest configuration and shared fixtures for Loom tests.

This module provides common test fixtures, configuration, and utilities
used across the test suite.
"""

import pytest
import tempfile
import shutil
from pathlib import Path
from unittest.mock import Mock

from loom.compiler import TemplateCompiler
from loom.loader import TemplateLoader
from loom.sources import SourceProvider, SourceRecord
from loom.utils.config import set_config


@pytest.fixture(scope="session")
def temp_test_dir():
    """Create temporary directory for test artifacts."""
    temp_dir = tempfile.mkdtemp(prefix="loom_test_")
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep LOOM_* variables and the global config from leaking between tests."""
    for var in ("LOOM_CONFIG", "LOOM_DISABLE_CACHE", "LOOM_CACHE_DIR", "LOOM_AUTO_RELOAD", "LOOM_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def cache_dir(tmp_path):
    """Cache directory for a single test."""
    return tmp_path / "cache"


@pytest.fixture
def templates_dir(tmp_path):
    """Directory with a couple of template files."""
    path = tmp_path / "templates"
    path.mkdir()
    (path / "greeting.txt").write_text("Hello, $name!")
    (path / "emails").mkdir()
    (path / "emails" / "welcome.txt").write_text("Welcome aboard, ${name}.")
    return path


@pytest.fixture
def mock_provider():
    """Source provider mock returning a cacheable 'Hello' source."""
    provider = Mock(spec=SourceProvider)
    provider.get_source.return_value = SourceRecord("Hello", 100.0)
    return provider


@pytest.fixture
def spy_compiler():
    """Real compiler wrapped so calls can be counted."""
    return Mock(wraps=TemplateCompiler())


@pytest.fixture
def make_loader(mock_provider, spy_compiler, cache_dir):
    """Factory for loaders wired to the shared mocks."""
    def _make(**kwargs):
        kwargs.setdefault("cache", cache_dir)
        return TemplateLoader(mock_provider, spy_compiler, **kwargs)
    return _make


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
