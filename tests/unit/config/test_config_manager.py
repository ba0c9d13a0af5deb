"""Tests for the configuration manager and schemas."""

from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from pattern_catalog.config.manager import ConfigurationManager
from pattern_catalog.config.schemas import (
    AppConfig,
    CatalogConfig,
    LoggingConfig,
    LoggingFileConfig,
)
from pattern_catalog.domain.exceptions import ConfigurationError
from pattern_catalog.domain.models import PatternCategory


class TestSchemas:
    """Test configuration schema defaults and validation."""

    def test_defaults(self):
        config = AppConfig.from_dict({})

        assert config.logging.level == "WARNING"
        assert config.logging.destination == "console"
        assert config.catalog.include_bundled is True
        assert config.catalog.manifest_paths == []
        assert config.catalog.categories == list(PatternCategory)
        assert config.execution.isolated is True
        assert config.execution.fail_fast is False
        assert config.document.include_output is True
        assert config.document.template_path is None

    def test_from_dict_accepts_none(self):
        assert AppConfig.from_dict(None) == AppConfig()

    def test_log_level_is_uppercased(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="chatty")

    def test_invalid_destination(self):
        with pytest.raises(ValidationError):
            LoggingConfig(destination="stdout")

    def test_file_limits_must_be_positive(self):
        with pytest.raises(ValidationError):
            LoggingFileConfig(max_size_mb=0)

    def test_categories_are_sorted_and_deduplicated(self):
        config = CatalogConfig(categories=["behavioral", "creational", "behavioral"])
        assert config.categories == [PatternCategory.CREATIONAL, PatternCategory.BEHAVIORAL]

    def test_categories_cannot_be_empty(self):
        with pytest.raises(ValidationError):
            CatalogConfig(categories=[])

    def test_to_dict_is_json_friendly(self):
        data = AppConfig().to_dict()
        assert data["catalog"]["categories"] == ["creational", "structural", "behavioral"]


class TestConfigurationManager:
    """Test lazy loading, lookup and error translation."""

    def test_loads_once(self):
        loader = Mock()
        loader.load_configuration.return_value = {"execution": {"fail_fast": True}}
        manager = ConfigurationManager("config.yaml", loader=loader)

        assert manager.app_config.execution.fail_fast is True
        assert manager.app_config is manager.app_config
        loader.load_configuration.assert_called_once_with("config.yaml")

    def test_reload(self):
        loader = Mock()
        loader.load_configuration.side_effect = [
            {"execution": {"fail_fast": False}},
            {"execution": {"fail_fast": True}},
        ]
        manager = ConfigurationManager(loader=loader)

        assert manager.app_config.execution.fail_fast is False
        assert manager.reload().execution.fail_fast is True

    def test_get_dotted_key(self):
        loader = Mock()
        loader.load_configuration.return_value = {"logging": {"level": "info"}}
        manager = ConfigurationManager(loader=loader)

        assert manager.get("logging.level") == "INFO"
        assert manager.get("logging.file.backup_count") == 3
        assert manager.get("logging.missing", "fallback") == "fallback"
        assert manager.get("logging.level.deeper") is None

    def test_validation_error_becomes_configuration_error(self):
        loader = Mock()
        loader.load_configuration.return_value = {"execution": {"isolated": "sometimes"}}
        manager = ConfigurationManager(loader=loader)

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            manager.app_config

    def test_reads_real_file(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text("document:\n  title: My Patterns\n", encoding="utf-8")

        manager = ConfigurationManager(str(path))

        assert manager.get("document.title") == "My Patterns"
