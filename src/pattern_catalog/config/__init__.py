"""Configuration package."""

from .schemas import (
    AppConfig,
    CatalogConfig,
    DocumentConfig,
    ExecutionConfig,
    LoggingConfig,
    LoggingFileConfig,
)

__all__ = [
    "AppConfig",
    "CatalogConfig",
    "DocumentConfig",
    "ExecutionConfig",
    "LoggingConfig",
    "LoggingFileConfig",
]
