"""Snippet execution with captured standard output."""

import ast
import contextlib
import importlib
import inspect
import io
import time
from types import ModuleType
from typing import Callable, List

from pattern_catalog.domain.exceptions import ExampleLoadError
from pattern_catalog.domain.models import ExecutionResult, PatternExample
from pattern_catalog.infrastructure.logging.logger import get_logger


def normalize_output(text: str) -> List[str]:
    """Split captured output into lines without trailing whitespace or trailing blank lines."""
    lines = [line.rstrip() for line in text.splitlines()]
    while lines and not lines[-1]:
        lines.pop()
    return lines


def describe_exception(error: BaseException) -> str:
    message = str(error)
    return f"{type(error).__name__}: {message}" if message else type(error).__name__


def strip_module_docstring(source: str) -> str:
    """Remove a leading module docstring and the blank lines after it."""
    tree = ast.parse(source)
    lines = source.splitlines()
    if tree.body and isinstance(tree.body[0], ast.Expr) and isinstance(
        getattr(tree.body[0], "value", None), ast.Constant
    ) and isinstance(tree.body[0].value.value, str):
        lines = lines[tree.body[0].end_lineno:]
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return "\n".join(line.rstrip() for line in lines) + "\n"


class ExampleRunner:
    """
    Runs pattern snippets one at a time.

    With ``isolated`` set, the snippet module is reloaded before every run so
    module-level state from an earlier run cannot leak into the next one.
    """

    def __init__(self, isolated: bool = True):
        self.isolated = isolated
        self.logger = get_logger(__name__)

    def load_module(self, example: PatternExample) -> ModuleType:
        """
        Import the snippet module of an example.

        Raises:
            ExampleLoadError: If the module cannot be imported
        """
        try:
            module = importlib.import_module(example.module)
            if self.isolated:
                module = importlib.reload(module)
        except (Exception, SystemExit) as e:
            raise ExampleLoadError(example.slug, describe_exception(e)) from e
        return module

    def load_entry_point(self, example: PatternExample) -> Callable[[], object]:
        """
        Resolve the callable that runs an example.

        Raises:
            ExampleLoadError: If the module or entry point is missing or not callable
        """
        module = self.load_module(example)
        entry_point = getattr(module, example.entry_point, None)
        if entry_point is None:
            raise ExampleLoadError(
                example.slug, f"module '{example.module}' has no attribute '{example.entry_point}'"
            )
        if not callable(entry_point):
            raise ExampleLoadError(example.slug, f"'{example.entry_point}' is not callable")
        return entry_point

    def run(self, example: PatternExample) -> ExecutionResult:
        """
        Run an example and capture what it prints.

        Exceptions raised by the snippet itself, including ``SystemExit``, are
        recorded in the result.

        Raises:
            ExampleLoadError: If the snippet cannot be loaded
        """
        entry_point = self.load_entry_point(example)
        buffer = io.StringIO()
        error = None

        started = time.perf_counter()
        try:
            with contextlib.redirect_stdout(buffer):
                entry_point()
        except (Exception, SystemExit) as e:
            error = describe_exception(e)
            self.logger.warning("Snippet raised", slug=example.slug, error=error)
        duration_ms = (time.perf_counter() - started) * 1000

        result = ExecutionResult(
            slug=example.slug,
            output_lines=normalize_output(buffer.getvalue()),
            duration_ms=round(duration_ms, 3),
            error=error,
        )
        self.logger.debug("Ran snippet", slug=example.slug, duration_ms=result.duration_ms)
        return result

    def get_source(self, example: PatternExample) -> str:
        """Return the snippet module source without its module docstring."""
        module = self.load_module(example)
        try:
            source = inspect.getsource(module)
        except (OSError, TypeError) as e:
            raise ExampleLoadError(example.slug, f"source unavailable: {e}") from e
        return strip_module_docstring(source)
