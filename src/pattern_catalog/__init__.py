"""Design Pattern Catalog - Root Package.

An educational catalog of the classic object-oriented design patterns
(creational, structural, behavioral). Each pattern is a small, independent
snippet module under ``pattern_catalog.snippets``; the rest of the package
renders those snippets into a Markdown document and verifies that every
snippet still prints the output the document claims it prints.

Key Components:
    - snippets: the illustrative pattern modules (standard library only)
    - domain: catalog models and exceptions
    - config: configuration schemas and loading
    - infrastructure: manifest loading, registry, runner, logging
    - application: verification, document rendering and linting
    - cli: command line interface

Usage:
    >>> pattern-catalog patterns list --format table
    >>> pattern-catalog patterns verify
    >>> pattern-catalog docs render --output PATTERNS.md
"""

from ._version import __version__

PACKAGE_NAME = "design-pattern-catalog"

__package_name__ = PACKAGE_NAME
__all__ = ["__version__", "PACKAGE_NAME"]
