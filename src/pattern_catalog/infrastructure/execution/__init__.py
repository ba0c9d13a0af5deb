"""Snippet execution."""

from .runner import ExampleRunner, normalize_output, strip_module_docstring

__all__ = ["ExampleRunner", "normalize_output", "strip_module_docstring"]
