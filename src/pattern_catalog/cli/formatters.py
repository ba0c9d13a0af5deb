"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML serialization
- Rich tables for pattern listings, verification and lint reports
- List formatting for detailed views
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"])
    elif isinstance(data, dict) and "results" in data and "source" in data:
        return format_lint_table(data)
    elif isinstance(data, dict) and "results" in data:
        return format_verification_table(data)
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_list(data["patterns"])
    elif isinstance(data, dict) and "results" in data:
        return format_results_list(data)
    elif isinstance(data, dict):
        return _format_mapping(data)
    else:
        return json.dumps(data, indent=2, default=str)


def _render(table: Table) -> str:
    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_patterns_table(patterns: List[Dict]) -> str:
    """Format pattern summaries as a table."""
    if not patterns:
        return "No patterns found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Slug", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Category", style="blue")
    table.add_column("Summary")

    for pattern in patterns:
        table.add_row(
            str(pattern.get("slug", "N/A")),
            str(pattern.get("name", "N/A")),
            str(pattern.get("category", "N/A")),
            str(pattern.get("summary", "")),
        )
    return _render(table)


def format_verification_table(report: Dict) -> str:
    """Format a verification report as a table with a summary line."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Pattern", style="cyan")
    table.add_column("Result", justify="center")
    table.add_column("Details")

    for result in report.get("results", []):
        status = "[green]PASS[/green]" if result.get("passed") else "[red]FAIL[/red]"
        details = result.get("error") or ""
        if not details and not result.get("passed"):
            details = "output differs"
        table.add_row(str(result.get("slug")), status, details)

    summary = f"{report.get('passed', 0)}/{report.get('total', 0)} passed"
    return _render(table) + summary + "\n"


def format_lint_table(report: Dict) -> str:
    """Format a lint report as a table with a summary line."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right")
    table.add_column("Line", justify="right")
    table.add_column("Result", justify="center")
    table.add_column("Details")

    for result in report.get("results", []):
        status = "[green]PASS[/green]" if result.get("passed") else "[red]FAIL[/red]"
        table.add_row(
            str(result.get("index")),
            str(result.get("line")),
            status,
            result.get("error") or "",
        )

    failed = report.get("failed", 0)
    summary = f"{report.get('source')}: {report.get('total', 0)} snippets, {failed} failed"
    return _render(table) + summary + "\n"


def format_patterns_list(patterns: List[Dict]) -> str:
    """Format patterns as a detailed list."""
    if not patterns:
        return "No patterns found."

    blocks = []
    for pattern in patterns:
        blocks.append(_format_mapping(pattern))
    return "\n\n".join(blocks)


def format_results_list(report: Dict) -> str:
    """Format verification or lint results as a list, including diffs."""
    lines = []
    for result in report.get("results", []):
        label = result.get("slug") or f"snippet {result.get('index')} (line {result.get('line')})"
        lines.append(f"{label}: {'PASS' if result.get('passed') else 'FAIL'}")
        if result.get("error"):
            lines.append(f"  error: {result['error']}")
        for diff_line in result.get("diff") or []:
            lines.append(f"  {diff_line}")
    return "\n".join(lines)


def _format_mapping(data: Dict) -> str:
    lines = []
    for key, value in data.items():
        if isinstance(value, list):
            lines.append(f"{key}:")
            lines.extend(f"  - {item}" for item in value)
        else:
            lines.append(f"{key}: {value}")
    return "\n".join(lines)
