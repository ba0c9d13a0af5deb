"""Tests for configuration loading and environment overrides."""

import json
import os

import pytest

from pattern_catalog.config.loader import ConfigurationLoader
from pattern_catalog.domain.exceptions import ConfigurationError


@pytest.fixture
def loader():
    return ConfigurationLoader()


class TestLoadFromFile:
    """Test reading configuration files."""

    def test_load_yaml(self, loader, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("execution:\n  fail_fast: true\n", encoding="utf-8")

        assert loader.load_from_file(str(path)) == {"execution": {"fail_fast": True}}

    def test_load_json(self, loader, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"logging": {"level": "DEBUG"}}), encoding="utf-8")

        assert loader.load_from_file(str(path)) == {"logging": {"level": "DEBUG"}}

    def test_empty_file_is_empty_mapping(self, loader, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")

        assert loader.load_from_file(str(path)) == {}

    def test_env_vars_are_expanded(self, loader, tmp_path, monkeypatch):
        monkeypatch.setenv("CATALOG_HOME", "/srv/catalog")
        path = tmp_path / "config.yaml"
        path.write_text("catalog:\n  manifest_paths: [$CATALOG_HOME/extra.yaml]\n", encoding="utf-8")

        data = loader.load_from_file(str(path))

        assert data["catalog"]["manifest_paths"] == ["/srv/catalog/extra.yaml"]

    def test_missing_file(self, loader, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            loader.load_from_file(str(tmp_path / "missing.yaml"))

    def test_invalid_yaml(self, loader, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("logging: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid configuration file"):
            loader.load_from_file(str(path))

    def test_non_utf8_file(self, loader, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_bytes(b"document:\n  title: \xff\xfe\n")

        with pytest.raises(ConfigurationError, match="config.yaml"):
            loader.load_from_file(str(path))

    def test_directory_instead_of_file(self, loader, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read configuration file"):
            loader.load_from_file(str(tmp_path))

    def test_non_mapping(self, loader, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- one\n- two\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            loader.load_from_file(str(path))


class TestFindConfigFile:
    """Test configuration file discovery."""

    def test_env_variable_wins(self, loader, monkeypatch):
        monkeypatch.setenv("PATTERN_CATALOG_CONFIG", "/etc/catalog.yaml")
        assert loader.find_config_file() == "/etc/catalog.yaml"

    def test_working_directory_file(self, loader, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "pattern_catalog.yml").write_text("{}", encoding="utf-8")

        assert loader.find_config_file() == "pattern_catalog.yml"

    def test_nothing_found(self, loader, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert loader.find_config_file() is None
        assert loader.load_configuration() == {}


class TestEnvironmentOverrides:
    """Test PATTERN_CATALOG_* overrides."""

    def test_overrides_are_applied(self, loader, monkeypatch):
        monkeypatch.setenv("PATTERN_CATALOG_LOG_LEVEL", "debug")
        monkeypatch.setenv("PATTERN_CATALOG_LOG_DESTINATION", "none")
        monkeypatch.setenv("PATTERN_CATALOG_ISOLATED", "no")
        monkeypatch.setenv("PATTERN_CATALOG_FAIL_FAST", "1")
        monkeypatch.setenv("PATTERN_CATALOG_MANIFESTS", os.pathsep.join(["a.yaml", "b.json"]))

        data = loader.apply_environment_overrides({"logging": {"level": "INFO"}})

        assert data["logging"] == {"level": "debug", "destination": "none"}
        assert data["execution"] == {"isolated": False, "fail_fast": True}
        assert data["catalog"] == {"manifest_paths": ["a.yaml", "b.json"]}

    def test_input_is_not_mutated(self, loader, monkeypatch):
        monkeypatch.setenv("PATTERN_CATALOG_FAIL_FAST", "true")
        original = {"execution": {"fail_fast": False}}

        loader.apply_environment_overrides(original)

        assert original == {"execution": {"fail_fast": False}}

    def test_empty_variable_is_ignored(self, loader, monkeypatch):
        monkeypatch.setenv("PATTERN_CATALOG_LOG_LEVEL", "")
        assert loader.apply_environment_overrides({}) == {}

    def test_invalid_boolean(self, loader, monkeypatch):
        monkeypatch.setenv("PATTERN_CATALOG_ISOLATED", "maybe")

        with pytest.raises(ConfigurationError, match="PATTERN_CATALOG_ISOLATED"):
            loader.apply_environment_overrides({})

    def test_file_then_environment(self, loader, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("execution:\n  fail_fast: false\n  isolated: false\n", encoding="utf-8")
        monkeypatch.setenv("PATTERN_CATALOG_FAIL_FAST", "on")

        data = loader.load_configuration(str(path))

        assert data["execution"] == {"fail_fast": True, "isolated": False}
