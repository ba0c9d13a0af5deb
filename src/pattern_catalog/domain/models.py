"""Catalog domain models - patterns, execution and verification results."""
import re
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

_SLUG_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")
_MODULE_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")


def normalize_name(name: str) -> str:
    """Normalize a pattern name for lookup ("Factory Method" -> "factory-method")."""
    return re.sub(r"[\s_]+", "-", name.strip().lower())


class PatternCategory(str, Enum):
    """Classic grouping of the design patterns."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"

    @property
    def order(self) -> int:
        return list(PatternCategory).index(self)

    @property
    def heading(self) -> str:
        return f"{self.value.capitalize()} Patterns"


class PatternExample(BaseModel):
    """One pattern of the catalog and the snippet that illustrates it."""
    model_config = ConfigDict(frozen=True)

    slug: str
    name: str
    category: PatternCategory
    summary: str
    module: str
    entry_point: str = "demo"
    expected_output: List[str] = Field(default_factory=list)
    aliases: List[str] = Field(default_factory=list)

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        if not _SLUG_PATTERN.match(v):
            raise ValueError(f"slug must be lower-kebab-case, got '{v}'")
        return v

    @field_validator("module")
    @classmethod
    def validate_module(cls, v: str) -> str:
        if not _MODULE_PATTERN.match(v):
            raise ValueError(f"module must be a dotted import path, got '{v}'")
        return v

    @field_validator("entry_point")
    @classmethod
    def validate_entry_point(cls, v: str) -> str:
        if not v.isidentifier():
            raise ValueError(f"entry_point must be an identifier, got '{v}'")
        return v

    @field_validator("expected_output", mode="before")
    @classmethod
    def coerce_expected_output(cls, v: Any) -> Any:
        # YAML turns bare words like "True" or "42" into non-strings
        if isinstance(v, list):
            return [_as_output_line(item) for item in v]
        return v

    def matches(self, name: str) -> bool:
        """Check whether name refers to this pattern (slug, name or alias)."""
        wanted = normalize_name(name)
        candidates = [self.slug, self.name, *self.aliases]
        return any(normalize_name(candidate) == wanted for candidate in candidates)

    def to_summary_dict(self) -> Dict[str, Any]:
        return {
            "slug": self.slug,
            "name": self.name,
            "category": self.category.value,
            "summary": self.summary,
        }


def _as_output_line(item: Any) -> str:
    if item is None:
        return ""
    if isinstance(item, bool):
        return "True" if item else "False"
    return str(item)


class ExecutionResult(BaseModel):
    """Captured result of running one snippet."""

    slug: str
    output_lines: List[str] = Field(default_factory=list)
    duration_ms: float = 0.0
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


class VerificationResult(BaseModel):
    """Comparison of a snippet's actual output with its documented output."""

    slug: str
    name: str
    passed: bool
    expected: List[str] = Field(default_factory=list)
    actual: List[str] = Field(default_factory=list)
    diff: List[str] = Field(default_factory=list)
    error: Optional[str] = None


class VerificationReport(BaseModel):
    """Ordered verification results for a run."""

    results: List[VerificationResult] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def success(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "success": self.success,
            "results": [result.model_dump() for result in self.results],
        }


class SnippetLintResult(BaseModel):
    """Outcome of checking one fenced code block of a document."""

    index: int
    line: int
    syntax_ok: bool
    executed: bool = False
    passed: bool = False
    expected: Optional[List[str]] = None
    actual: List[str] = Field(default_factory=list)
    error: Optional[str] = None


class LintReport(BaseModel):
    """All snippet checks for one document."""

    source: str
    results: List[SnippetLintResult] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def failed(self) -> int:
        return sum(1 for result in self.results if not result.passed)

    @property
    def success(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "total": self.total,
            "failed": self.failed,
            "success": self.success,
            "results": [result.model_dump() for result in self.results],
        }
