"""Tests for the verification service."""

import pytest

from pattern_catalog.application.verification_service import VerificationService
from pattern_catalog.domain.exceptions import PatternNotFoundError
from pattern_catalog.domain.models import PatternCategory
from pattern_catalog.infrastructure.execution.runner import ExampleRunner


@pytest.fixture
def service(registry, runner):
    return VerificationService(registry, runner)


class TestBundledCatalogVerification:
    """Every bundled snippet must print exactly its documented output."""

    def test_all_bundled_examples_pass(self, service):
        report = service.verify()

        failures = {r.slug: r.diff or r.error for r in report.results if not r.passed}
        assert failures == {}
        assert report.total == 23
        assert report.success

    def test_results_follow_catalog_order(self, service, registry):
        report = service.verify()
        assert [r.slug for r in report.results] == [e.slug for e in registry.list_patterns()]

    def test_shared_module_state_still_passes(self, registry):
        service = VerificationService(registry, ExampleRunner(isolated=False))

        first = service.verify()
        second = service.verify()

        assert first.success
        assert second.success


class TestVerificationService:
    """Test selection, mismatch reporting and fail-fast."""

    def test_verify_by_name_and_alias(self, service):
        report = service.verify(["Observer", "virtual constructor"])
        assert [r.slug for r in report.results] == ["observer", "factory-method"]

    def test_unknown_name(self, service):
        with pytest.raises(PatternNotFoundError):
            service.verify(["observer", "monad"])

    def test_category_filter(self, registry, runner):
        service = VerificationService(registry, runner, categories=[PatternCategory.CREATIONAL])

        report = service.verify()

        assert report.total == 5
        assert {r.slug for r in report.results} == {
            "abstract-factory",
            "builder",
            "factory-method",
            "prototype",
            "singleton",
        }

    def test_explicit_names_ignore_category_filter(self, registry, runner):
        service = VerificationService(registry, runner, categories=[PatternCategory.CREATIONAL])
        report = service.verify(["visitor"])
        assert report.results[0].passed

    def test_mismatch_produces_diff(self, runner, make_example):
        example = make_example(expected_output=["9", "3", "18", "0"])

        result = VerificationService(None, runner).verify_example(example)

        assert not result.passed
        assert result.error is None
        assert result.actual == ["9", "3", "18", "None"]
        assert "-0" in result.diff
        assert "+None" in result.diff
        assert result.diff[0] == "--- sample (expected)"

    def test_snippet_exception_fails(self, snippet_dir, runner, make_example):
        module = snippet_dir(
            "failing_verification_snippet",
            """
            def demo():
                print("ok")
                raise ValueError("bad state")
            """,
        )
        example = make_example(module=module, expected_output=["ok"])

        result = VerificationService(None, runner).verify_example(example)

        assert not result.passed
        assert result.error == "ValueError: bad state"
        assert result.diff == []

    def test_load_error_is_reported_not_raised(self, runner, make_example):
        example = make_example(module="missing_snippet_module")

        result = VerificationService(None, runner).verify_example(example)

        assert not result.passed
        assert "Cannot load example 'sample'" in result.error
        assert result.expected == ["9", "3", "18", "None"]

    def test_fail_fast_stops_at_first_failure(self, make_example, runner):
        from pattern_catalog.infrastructure.registry.pattern_registry import PatternRegistry

        registry = PatternRegistry()
        registry.register_all(
            [
                make_example(slug="first"),
                make_example(slug="broken", expected_output=["nope"]),
                make_example(slug="last"),
            ]
        )

        report = VerificationService(registry, runner, fail_fast=True).verify()
        assert [r.slug for r in report.results] == ["first", "broken"]
        assert report.failed == 1

        report = VerificationService(registry, runner, fail_fast=False).verify()
        assert [r.slug for r in report.results] == ["first", "broken", "last"]
