"""Application bootstrap - wires configuration, registry and services."""

from typing import List, Optional

from pattern_catalog.application.document_service import DocumentService
from pattern_catalog.application.lint_service import LintService
from pattern_catalog.application.verification_service import VerificationService
from pattern_catalog.config.manager import ConfigurationManager
from pattern_catalog.config.schemas import AppConfig
from pattern_catalog.domain.models import PatternCategory, PatternExample
from pattern_catalog.infrastructure.catalog.loader import CatalogLoader
from pattern_catalog.infrastructure.execution.runner import ExampleRunner
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging
from pattern_catalog.infrastructure.registry.pattern_registry import PatternRegistry


class Application:
    """Application context: configuration plus lazily created services."""

    def __init__(self, config_path: Optional[str] = None, config_manager: Optional[ConfigurationManager] = None):
        """Initialize the instance."""
        self.config_path = config_path
        self.config_manager = config_manager or ConfigurationManager(config_path)
        self.registry = PatternRegistry()
        self.loader = CatalogLoader()
        self._runner: Optional[ExampleRunner] = None
        self._initialized = False
        self.logger = get_logger(__name__)

    @property
    def config(self) -> AppConfig:
        return self.config_manager.app_config

    def initialize(self, log_level: Optional[str] = None) -> "Application":
        """
        Set up logging and load every configured manifest into the registry.

        Raises:
            ConfigurationError: If configuration is invalid
            CatalogError: If a manifest is invalid
            DuplicatePatternError: If two manifests define the same slug
        """
        logging_config = self.config.logging
        if log_level:
            logging_config = logging_config.model_copy(update={"level": log_level.upper()})
        setup_logging(logging_config)

        self.registry.clear_registrations()
        examples = self._load_examples()
        self.registry.register_all(examples)

        self._initialized = True
        self.logger.info("Application initialized", patterns=len(examples))
        return self

    def _load_examples(self) -> List[PatternExample]:
        catalog_config = self.config.catalog
        examples: List[PatternExample] = []
        if catalog_config.include_bundled:
            examples.extend(self.loader.load_bundled())
        for path in catalog_config.manifest_paths:
            examples.extend(self.loader.load_file(path))
        return examples

    @property
    def categories(self) -> List[PatternCategory]:
        return list(self.config.catalog.categories)

    @property
    def runner(self) -> ExampleRunner:
        if self._runner is None:
            self._runner = ExampleRunner(isolated=self.config.execution.isolated)
        return self._runner

    def list_patterns(self, category: Optional[PatternCategory] = None) -> List[PatternExample]:
        """List registered patterns within the enabled categories."""
        return [
            example
            for example in self.registry.list_patterns(category)
            if example.category in self.categories
        ]

    def verification_service(self) -> VerificationService:
        return VerificationService(
            self.registry,
            self.runner,
            categories=self.categories,
            fail_fast=self.config.execution.fail_fast,
        )

    def document_service(self) -> DocumentService:
        return DocumentService(
            self.registry,
            self.runner,
            config=self.config.document,
            categories=self.categories,
        )

    def lint_service(self) -> LintService:
        return LintService()


def create_application(config_path: Optional[str] = None, log_level: Optional[str] = None) -> Application:
    """Create and initialize the application."""
    return Application(config_path).initialize(log_level=log_level)
