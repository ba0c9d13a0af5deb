"""Catalog, execution and document configuration schemas."""
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from pattern_catalog.domain.models import PatternCategory


class CatalogConfig(BaseModel):
    """Where pattern metadata comes from and which categories are active."""

    include_bundled: bool = Field(True, description="Load the packaged catalog manifest")
    manifest_paths: List[str] = Field(
        default_factory=list, description="Additional YAML/JSON manifests to load"
    )
    categories: List[PatternCategory] = Field(
        default_factory=lambda: list(PatternCategory),
        description="Categories included in listings, verification and documents",
    )

    @field_validator("categories")
    @classmethod
    def validate_categories(cls, v: List[PatternCategory]) -> List[PatternCategory]:
        """Validate categories."""
        if not v:
            raise ValueError("At least one category must be enabled")
        return sorted(set(v), key=lambda category: category.order)


class ExecutionConfig(BaseModel):
    """How snippets are executed."""

    isolated: bool = Field(True, description="Reload each snippet module before running it")
    fail_fast: bool = Field(False, description="Stop verification at the first failure")


class DocumentConfig(BaseModel):
    """Rendered document settings."""

    title: str = Field("Design Patterns", description="Document title")
    intro: str = Field(
        "Short, self-contained Python examples of the classic object-oriented "
        "design patterns. Every example runs on its own and prints the output "
        "shown in its comments.",
        description="Paragraph under the title",
    )
    include_output: bool = Field(True, description="Append the expected output as comments")
    template_path: Optional[str] = Field(None, description="Custom Jinja2 template file")
