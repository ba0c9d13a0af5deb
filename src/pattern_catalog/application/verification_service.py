"""Verification of snippet output against the documented output."""

import difflib
from typing import Iterable, List, Optional

from pattern_catalog.domain.exceptions import ExampleLoadError
from pattern_catalog.domain.models import (
    PatternCategory,
    PatternExample,
    VerificationReport,
    VerificationResult,
)
from pattern_catalog.infrastructure.execution.runner import ExampleRunner
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.registry.pattern_registry import PatternRegistry


class VerificationService:
    """
    Runs snippets and checks that each prints exactly its expected output.

    A snippet passes when it runs without raising and its normalized output
    equals the expected lines. Load failures and snippet exceptions are
    reported as failed results rather than raised.
    """

    def __init__(
        self,
        registry: PatternRegistry,
        runner: ExampleRunner,
        categories: Optional[Iterable[PatternCategory]] = None,
        fail_fast: bool = False,
    ):
        self.registry = registry
        self.runner = runner
        self.categories = list(categories) if categories is not None else list(PatternCategory)
        self.fail_fast = fail_fast
        self.logger = get_logger(__name__)

    def select(self, names: Optional[List[str]] = None) -> List[PatternExample]:
        """
        Resolve which examples to verify.

        Explicit names are honored regardless of the category filter.

        Raises:
            PatternNotFoundError: If any name is unknown
        """
        if names:
            return [self.registry.get(name) for name in names]
        return [
            example
            for example in self.registry.list_patterns()
            if example.category in self.categories
        ]

    def verify(self, names: Optional[List[str]] = None) -> VerificationReport:
        """Verify the selected examples (all enabled ones when names is empty)."""
        examples = self.select(names)
        report = VerificationReport()

        for example in examples:
            result = self.verify_example(example)
            report.results.append(result)
            if not result.passed and self.fail_fast:
                self.logger.info("Stopping verification at first failure", slug=example.slug)
                break

        self.logger.info(
            "Verification finished",
            total=report.total,
            passed=report.passed,
            failed=report.failed,
        )
        return report

    def verify_example(self, example: PatternExample) -> VerificationResult:
        """Verify a single example."""
        try:
            execution = self.runner.run(example)
        except ExampleLoadError as e:
            self.logger.error("Cannot load example", slug=example.slug, error=str(e))
            return VerificationResult(
                slug=example.slug,
                name=example.name,
                passed=False,
                expected=list(example.expected_output),
                error=str(e),
            )

        expected = list(example.expected_output)
        actual = execution.output_lines
        passed = execution.succeeded and actual == expected
        diff = [] if actual == expected else self._diff(expected, actual, example.slug)

        if not passed:
            self.logger.warning("Example output mismatch", slug=example.slug, error=execution.error)

        return VerificationResult(
            slug=example.slug,
            name=example.name,
            passed=passed,
            expected=expected,
            actual=actual,
            diff=diff,
            error=execution.error,
        )

    @staticmethod
    def _diff(expected: List[str], actual: List[str], slug: str) -> List[str]:
        return list(
            difflib.unified_diff(
                expected,
                actual,
                fromfile=f"{slug} (expected)",
                tofile=f"{slug} (actual)",
                lineterm="",
            )
        )
