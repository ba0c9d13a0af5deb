"""Unified configuration management for the application."""
import logging
import threading
from typing import Any, Dict, Optional

from pydantic import ValidationError

from pattern_catalog.config.loader import ConfigurationLoader
from pattern_catalog.config.schemas import AppConfig
from pattern_catalog.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_MISSING = object()


class ConfigurationManager:
    """
    Single source of truth for configuration.

    Loading is lazy and happens once; the validated ``AppConfig`` is cached.
    """

    def __init__(self, config_file: Optional[str] = None, loader: Optional[ConfigurationLoader] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._loader = loader or ConfigurationLoader()
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        config_data = self._loader.load_configuration(self._config_file)
        try:
            config = AppConfig.from_dict(config_data)
        except ValidationError as e:
            missing = [
                ".".join(str(part) for part in error["loc"])
                for error in e.errors()
                if error.get("type") == "missing"
            ]
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=missing) from e
        logger.debug("Configuration loaded (file=%s)", self._config_file)
        return config

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dotted key, e.g. ``execution.fail_fast``."""
        value: Any = self.to_dict()
        for part in key.split("."):
            if not isinstance(value, dict):
                return default
            value = value.get(part, _MISSING)
            if value is _MISSING:
                return default
        return value

    def to_dict(self) -> Dict[str, Any]:
        return self.app_config.to_dict()

    def reload(self) -> AppConfig:
        """Discard the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
        return self.app_config
