"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field

from .catalog_schema import CatalogConfig, DocumentConfig, ExecutionConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    catalog: CatalogConfig = Field(default_factory=lambda: CatalogConfig())
    execution: ExecutionConfig = Field(default_factory=lambda: ExecutionConfig())
    document: DocumentConfig = Field(default_factory=lambda: DocumentConfig())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create configuration from a (possibly partial) dictionary."""
        return cls.model_validate(data or {})

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
