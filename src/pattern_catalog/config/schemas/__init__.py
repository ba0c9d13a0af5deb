"""Configuration schemas."""

from .app_schema import AppConfig
from .catalog_schema import CatalogConfig, DocumentConfig, ExecutionConfig
from .logging_schema import LoggingConfig, LoggingFileConfig

__all__ = [
    "AppConfig",
    "CatalogConfig",
    "DocumentConfig",
    "ExecutionConfig",
    "LoggingConfig",
    "LoggingFileConfig",
]
