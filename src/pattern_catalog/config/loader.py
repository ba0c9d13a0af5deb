"""Configuration loading from files and environment variables."""
import copy
import json
import logging
import os
from typing import Any, Dict, List, Optional

import yaml

from pattern_catalog.config.env_expansion import expand_env_vars
from pattern_catalog.domain.exceptions import ConfigurationError
from pattern_catalog.infrastructure.utilities.file_utils import read_structured_file

logger = logging.getLogger(__name__)

ENV_PREFIX = "PATTERN_CATALOG_"
CONFIG_FILE_ENV = f"{ENV_PREFIX}CONFIG"
DEFAULT_CONFIG_FILES = ("pattern_catalog.yaml", "pattern_catalog.yml", "pattern_catalog.json")

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Environment variable {name} must be a boolean, got '{raw}'")


class ConfigurationLoader:
    """
    Loads raw configuration data.

    Sources, lowest precedence first:
    - a YAML/JSON config file (explicit path, ``PATTERN_CATALOG_CONFIG``, or a
      ``pattern_catalog.{yaml,yml,json}`` in the working directory)
    - ``PATTERN_CATALOG_*`` environment variables
    """

    # env variable suffix -> (section, key, kind)
    ENV_OVERRIDES = {
        "LOG_LEVEL": ("logging", "level", "str"),
        "LOG_DESTINATION": ("logging", "destination", "str"),
        "ISOLATED": ("execution", "isolated", "bool"),
        "FAIL_FAST": ("execution", "fail_fast", "bool"),
        "MANIFESTS": ("catalog", "manifest_paths", "paths"),
    }

    def load_from_file(self, file_path: str) -> Dict[str, Any]:
        """
        Load configuration data from a file.

        Raises:
            ConfigurationError: If the file is missing, unreadable, unparsable or not a mapping
        """
        try:
            data = read_structured_file(file_path)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration file not found: {file_path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration file {file_path}: {e}") from e
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Invalid configuration file {file_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {file_path} must contain a mapping")

        logger.debug("Loaded configuration from %s", file_path)
        return expand_env_vars(data)

    def find_config_file(self) -> Optional[str]:
        """Locate the configuration file from the environment or working directory."""
        env_path = os.environ.get(CONFIG_FILE_ENV)
        if env_path:
            return env_path
        for candidate in DEFAULT_CONFIG_FILES:
            if os.path.exists(candidate):
                return candidate
        return None

    def load_configuration(self, config_file: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from the given or discovered file, then apply env overrides."""
        path = config_file or self.find_config_file()
        data = self.load_from_file(path) if path else {}
        return self.apply_environment_overrides(data)

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of config_data with PATTERN_CATALOG_* variables applied."""
        result = copy.deepcopy(config_data)
        for suffix, (section, key, kind) in self.ENV_OVERRIDES.items():
            name = f"{ENV_PREFIX}{suffix}"
            raw = os.environ.get(name)
            if raw is None or raw == "":
                continue

            value: Any
            if kind == "bool":
                value = _parse_bool(name, raw)
            elif kind == "paths":
                value = self._split_paths(raw)
            else:
                value = raw

            section_data = result.setdefault(section, {})
            if not isinstance(section_data, dict):
                raise ConfigurationError(f"Configuration section '{section}' must be a mapping")
            section_data[key] = value
            logger.debug("Applied environment override %s", name)
        return result

    @staticmethod
    def _split_paths(raw: str) -> List[str]:
        return [os.path.expandvars(part) for part in raw.split(os.pathsep) if part]
