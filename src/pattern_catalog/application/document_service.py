"""Rendering of the catalog as a Markdown document."""

import os
from typing import Any, Dict, Iterable, List, Optional

from jinja2 import Environment, FileSystemLoader, PackageLoader, TemplateError

from pattern_catalog.config.schemas.catalog_schema import DocumentConfig
from pattern_catalog.domain.exceptions import ConfigurationError, DocumentError
from pattern_catalog.domain.models import PatternCategory, PatternExample
from pattern_catalog.infrastructure.execution.runner import ExampleRunner
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.registry.pattern_registry import PatternRegistry
from pattern_catalog.infrastructure.utilities.file_utils import write_text_file

DEFAULT_TEMPLATE = "catalog.md.j2"
OUTPUT_MARKER = "# Output:"


def format_output_comments(lines: List[str]) -> List[str]:
    """Turn output lines into the comment lines that follow the output marker."""
    return [f"# {line}" if line else "#" for line in lines]


class DocumentService:
    """Builds the Markdown document from the registered snippets."""

    def __init__(
        self,
        registry: PatternRegistry,
        runner: ExampleRunner,
        config: Optional[DocumentConfig] = None,
        categories: Optional[Iterable[PatternCategory]] = None,
    ):
        self.registry = registry
        self.runner = runner
        self.config = config or DocumentConfig()
        self.categories = list(categories) if categories is not None else list(PatternCategory)
        self.logger = get_logger(__name__)
        self._environment = self._create_environment()

    def _create_environment(self) -> Environment:
        if self.config.template_path:
            template_dir = os.path.dirname(os.path.abspath(self.config.template_path))
            loader = FileSystemLoader(template_dir)
        else:
            loader = PackageLoader("pattern_catalog.resources", "templates")
        return Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def _template_name(self) -> str:
        if self.config.template_path:
            return os.path.basename(self.config.template_path)
        return DEFAULT_TEMPLATE

    def build_code_block(self, example: PatternExample) -> str:
        """Snippet source, a call to its entry point and the commented output."""
        source = self.runner.get_source(example).rstrip()
        lines = [source, "", "", f"{example.entry_point}()"]
        if self.config.include_output:
            lines.append(OUTPUT_MARKER)
            lines.extend(format_output_comments(example.expected_output))
        return "\n".join(lines)

    def build_context(self, categories: Optional[Iterable[PatternCategory]] = None) -> Dict[str, Any]:
        selected = list(categories) if categories else self.categories
        sections = []
        for category in sorted(set(selected), key=lambda c: c.order):
            examples = self.registry.list_patterns(category)
            if not examples:
                continue
            sections.append(
                {
                    "category": category.value,
                    "heading": category.heading,
                    "anchor": f"{category.value}-patterns",
                    "patterns": [
                        {
                            "slug": example.slug,
                            "name": example.name,
                            "summary": example.summary,
                            "code": self.build_code_block(example),
                        }
                        for example in examples
                    ],
                }
            )
        return {
            "title": self.config.title,
            "intro": self.config.intro,
            "sections": sections,
        }

    def render(self, categories: Optional[Iterable[PatternCategory]] = None) -> str:
        """
        Render the document.

        Raises:
            ConfigurationError: If the template cannot be loaded or rendered
            ExampleLoadError: If a snippet's source cannot be read
        """
        context = self.build_context(categories)
        try:
            template = self._environment.get_template(self._template_name())
            document = template.render(**context)
        except TemplateError as e:
            raise ConfigurationError(f"Cannot render document template: {e}") from e

        self.logger.debug(
            "Rendered document",
            sections=len(context["sections"]),
            patterns=sum(len(section["patterns"]) for section in context["sections"]),
        )
        return document

    def write(self, path: str, categories: Optional[Iterable[PatternCategory]] = None) -> str:
        """Render the document to a file; returns the rendered text."""
        document = self.render(categories)
        try:
            write_text_file(path, document)
        except OSError as e:
            raise DocumentError(path, str(e)) from e
        self.logger.info("Document written", path=path)
        return document
