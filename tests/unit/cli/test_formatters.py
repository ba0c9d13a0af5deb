"""Tests for CLI output formatting."""

import json

import yaml

from pattern_catalog.cli.formatters import (
    format_lint_table,
    format_output,
    format_patterns_table,
    format_results_list,
    format_verification_table,
)

PATTERNS = {
    "patterns": [
        {"slug": "observer", "name": "Observer", "category": "behavioral", "summary": "Notify subscribers."},
        {"slug": "proxy", "name": "Proxy", "category": "structural", "summary": "Stand in for another object."},
    ]
}

VERIFICATION = {
    "total": 2,
    "passed": 1,
    "failed": 1,
    "success": False,
    "results": [
        {"slug": "observer", "passed": True, "error": None, "diff": []},
        {"slug": "proxy", "passed": False, "error": None, "diff": ["--- proxy (expected)", "+++ proxy (actual)"]},
    ],
}

LINT = {
    "source": "PATTERNS.md",
    "total": 1,
    "failed": 1,
    "success": False,
    "results": [
        {"index": 1, "line": 12, "passed": False, "error": "SyntaxError: invalid syntax"},
    ],
}


class TestFormatOutput:
    """Test format dispatch."""

    def test_json_is_default(self):
        assert json.loads(format_output(PATTERNS, "json")) == PATTERNS
        assert json.loads(format_output(PATTERNS, "unknown")) == PATTERNS

    def test_yaml_keeps_key_order(self):
        text = format_output(PATTERNS, "yaml")

        assert yaml.safe_load(text) == PATTERNS
        assert text.index("slug") < text.index("summary")

    def test_table_falls_back_to_json(self):
        assert json.loads(format_output({"logging": {"level": "INFO"}}, "table")) == {
            "logging": {"level": "INFO"}
        }

    def test_list_of_mapping(self):
        text = format_output({"slug": "observer", "aliases": ["publish-subscribe"]}, "list")
        assert text == "slug: observer\naliases:\n  - publish-subscribe"


class TestTables:
    """Test rich table rendering."""

    def test_patterns_table(self):
        text = format_patterns_table(PATTERNS["patterns"])

        assert "Slug" in text
        assert "observer" in text
        assert "Stand in for another object." in text

    def test_empty_patterns_table(self):
        assert format_patterns_table([]) == "No patterns found."

    def test_verification_table(self):
        text = format_verification_table(VERIFICATION)

        assert "PASS" in text
        assert "FAIL" in text
        assert "output differs" in text
        assert text.endswith("1/2 passed\n")

    def test_lint_table(self):
        text = format_lint_table(LINT)

        assert "SyntaxError: invalid syntax" in text
        assert text.endswith("PATTERNS.md: 1 snippets, 1 failed\n")

    def test_table_dispatch_distinguishes_lint_reports(self):
        assert "snippets" in format_output(LINT, "table")
        assert "passed" in format_output(VERIFICATION, "table")


class TestLists:
    """Test detailed list rendering."""

    def test_results_list_includes_diff(self):
        text = format_results_list(VERIFICATION)

        assert text.splitlines() == [
            "observer: PASS",
            "proxy: FAIL",
            "  --- proxy (expected)",
            "  +++ proxy (actual)",
        ]

    def test_lint_results_use_snippet_label(self):
        text = format_results_list(LINT)

        assert text.splitlines()[0] == "snippet 1 (line 12): FAIL"
        assert "  error: SyntaxError: invalid syntax" in text

    def test_patterns_list(self):
        text = format_output(PATTERNS, "list")
        assert text.split("\n\n")[1].startswith("slug: proxy")
