"""Tests for snippet execution."""

import pytest

from pattern_catalog.domain.exceptions import ExampleLoadError
from pattern_catalog.infrastructure.execution.runner import (
    ExampleRunner,
    describe_exception,
    normalize_output,
    strip_module_docstring,
)

COUNTER_SNIPPET = """
    calls = []


    def demo():
        calls.append(1)
        print(f"run {len(calls)}")
"""


class TestHelpers:
    """Test output normalization and source cleanup."""

    def test_normalize_output(self):
        assert normalize_output("a  \n\nb\t\n\n\n") == ["a", "", "b"]
        assert normalize_output("") == []

    def test_describe_exception(self):
        assert describe_exception(ValueError("boom")) == "ValueError: boom"

    def test_strip_module_docstring(self):
        source = '"""Module docs.\n\nMore docs.\n"""\n\n\nimport os\n\n\ndef demo():\n    pass\n\n'
        assert strip_module_docstring(source) == "import os\n\n\ndef demo():\n    pass\n"

    def test_strip_without_docstring(self):
        assert strip_module_docstring("x = 1\n") == "x = 1\n"


class TestExampleRunner:
    """Test running snippets and capturing output."""

    def test_runs_bundled_snippet(self, runner, make_example):
        result = runner.run(make_example())

        assert result.slug == "sample"
        assert result.output_lines == ["9", "3", "18", "None"]
        assert result.succeeded
        assert result.duration_ms >= 0

    def test_isolated_runs_reload_module(self, snippet_dir, make_example):
        module = snippet_dir("counter_isolated", COUNTER_SNIPPET)
        example = make_example(module=module)
        runner = ExampleRunner(isolated=True)

        assert runner.run(example).output_lines == ["run 1"]
        assert runner.run(example).output_lines == ["run 1"]

    def test_shared_runs_keep_module_state(self, snippet_dir, make_example):
        module = snippet_dir("counter_shared", COUNTER_SNIPPET)
        example = make_example(module=module)
        runner = ExampleRunner(isolated=False)

        assert runner.run(example).output_lines == ["run 1"]
        assert runner.run(example).output_lines == ["run 2"]

    def test_snippet_exception_is_captured(self, snippet_dir, make_example):
        module = snippet_dir(
            "raising_snippet",
            """
            def demo():
                print("before")
                raise RuntimeError("broken")
            """,
        )

        result = ExampleRunner().run(make_example(module=module))

        assert result.output_lines == ["before"]
        assert result.error == "RuntimeError: broken"
        assert not result.succeeded

    def test_missing_module(self, runner, make_example):
        with pytest.raises(ExampleLoadError, match="ModuleNotFoundError"):
            runner.run(make_example(module="no_such_snippet_module"))

    def test_snippet_calling_exit_is_captured(self, snippet_dir, make_example):
        module = snippet_dir(
            "exiting_snippet",
            """
            import sys


            def demo():
                print("before")
                sys.exit(3)
            """,
        )

        result = ExampleRunner().run(make_example(module=module))

        assert result.output_lines == ["before"]
        assert result.error == "SystemExit: 3"

    def test_module_exiting_at_import(self, snippet_dir, runner, make_example):
        module = snippet_dir("import_time_exit", "raise SystemExit(0)\n")

        with pytest.raises(ExampleLoadError, match="SystemExit: 0"):
            runner.run(make_example(module=module))

    def test_module_failing_at_import(self, snippet_dir, runner, make_example):
        module = snippet_dir("import_time_failure", "raise ImportError('needs a plugin')\n")

        with pytest.raises(ExampleLoadError, match="needs a plugin"):
            runner.run(make_example(module=module))

    def test_missing_entry_point(self, runner, make_example):
        with pytest.raises(ExampleLoadError, match="has no attribute 'main'"):
            runner.run(make_example(entry_point="main"))

    def test_entry_point_not_callable(self, snippet_dir, runner, make_example):
        module = snippet_dir("not_callable_snippet", "demo = 42\n")

        with pytest.raises(ExampleLoadError, match="'demo' is not callable"):
            runner.run(make_example(module=module))

    def test_get_source_drops_docstring(self, runner, make_example):
        source = runner.get_source(make_example())

        assert not source.startswith('"""')
        assert "class Calculator" in source
        assert source.endswith("\n")
