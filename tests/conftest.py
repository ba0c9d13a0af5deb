import importlib
import logging
import sys
import textwrap

import pytest

from pattern_catalog.domain.models import PatternCategory, PatternExample
from pattern_catalog.infrastructure.catalog.loader import CatalogLoader
from pattern_catalog.infrastructure.execution.runner import ExampleRunner
from pattern_catalog.infrastructure.registry.pattern_registry import PatternRegistry

PATTERN_ENV_VARS = (
    "PATTERN_CATALOG_CONFIG",
    "PATTERN_CATALOG_LOG_LEVEL",
    "PATTERN_CATALOG_LOG_DESTINATION",
    "PATTERN_CATALOG_ISOLATED",
    "PATTERN_CATALOG_FAIL_FAST",
    "PATTERN_CATALOG_MANIFESTS",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Make sure no PATTERN_CATALOG_* variable leaks into a test."""
    for name in PATTERN_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_registry():
    """Start and finish every test with an empty registry singleton."""
    PatternRegistry().clear_registrations()
    yield
    PatternRegistry().clear_registrations()


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging() replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def bundled_examples():
    return CatalogLoader().load_bundled()


@pytest.fixture
def registry(bundled_examples):
    """Registry loaded with the bundled catalog."""
    registry = PatternRegistry()
    registry.register_all(bundled_examples)
    return registry


@pytest.fixture
def runner():
    return ExampleRunner(isolated=True)


@pytest.fixture
def make_example():
    """Factory for PatternExample with sensible defaults."""
    def _make(**overrides):
        data = {
            "slug": "sample",
            "name": "Sample",
            "category": PatternCategory.BEHAVIORAL,
            "summary": "A sample pattern.",
            "module": "pattern_catalog.snippets.behavioral.strategy",
            "expected_output": ["9", "3", "18", "None"],
        }
        data.update(overrides)
        return PatternExample(**data)
    return _make


@pytest.fixture
def snippet_dir(tmp_path, monkeypatch):
    """
    Directory on sys.path for throwaway snippet modules.

    Returns a function writing ``<name>.py`` and returning the module name.
    Written modules are dropped from sys.modules afterwards.
    """
    monkeypatch.syspath_prepend(str(tmp_path))
    written = []

    def _write(name, source):
        (tmp_path / f"{name}.py").write_text(textwrap.dedent(source), encoding="utf-8")
        importlib.invalidate_caches()
        written.append(name)
        return name
    yield _write

    for name in written:
        sys.modules.pop(name, None)
