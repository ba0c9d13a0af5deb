# src/pattern_catalog/domain/exceptions.py
from typing import List, Optional


class DomainException(Exception):
    """Base exception for all catalog errors."""
    pass


class PatternNotFoundError(DomainException):
    """Raised when a requested pattern is not in the catalog."""
    def __init__(self, name: str):
        super().__init__(f"Pattern '{name}' not found")
        self.name = name


class DuplicatePatternError(DomainException):
    """Raised when a pattern slug is registered twice."""
    def __init__(self, slug: str):
        super().__init__(f"Pattern '{slug}' is already registered")
        self.slug = slug


class CatalogError(DomainException):
    """Raised when a catalog manifest cannot be read or validated."""
    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(f"{source}: {message}" if source else message)
        self.source = source


class ExampleLoadError(DomainException):
    """Raised when a pattern's snippet module or entry point cannot be loaded."""
    def __init__(self, slug: str, reason: str):
        super().__init__(f"Cannot load example '{slug}': {reason}")
        self.slug = slug
        self.reason = reason


class DocumentError(DomainException):
    """Raised when a Markdown document cannot be read or written."""
    def __init__(self, path: str, reason: str):
        super().__init__(f"Document {path}: {reason}")
        self.path = path
        self.reason = reason


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
