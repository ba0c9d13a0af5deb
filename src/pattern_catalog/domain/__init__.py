"""Catalog domain layer."""

from .exceptions import (
    CatalogError,
    ConfigurationError,
    DocumentError,
    DomainException,
    DuplicatePatternError,
    ExampleLoadError,
    PatternNotFoundError,
)
from .models import (
    ExecutionResult,
    LintReport,
    PatternCategory,
    PatternExample,
    SnippetLintResult,
    VerificationReport,
    VerificationResult,
)

__all__ = [
    "CatalogError",
    "ConfigurationError",
    "DocumentError",
    "DomainException",
    "DuplicatePatternError",
    "ExampleLoadError",
    "PatternNotFoundError",
    "ExecutionResult",
    "LintReport",
    "PatternCategory",
    "PatternExample",
    "SnippetLintResult",
    "VerificationReport",
    "VerificationResult",
]
