"""Catalog manifest loading.

A manifest is a YAML or JSON document with a top-level ``patterns`` list;
each entry is validated into a ``PatternExample``.
"""

import json
from importlib import resources
from pathlib import Path
from typing import Any, List

import yaml
from pydantic import ValidationError

from pattern_catalog.domain.exceptions import CatalogError
from pattern_catalog.domain.models import PatternExample
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.utilities.file_utils import read_text_file

BUNDLED_PACKAGE = "pattern_catalog.resources"
BUNDLED_MANIFEST = "catalog.yaml"


class CatalogLoader:
    """Reads pattern manifests into domain models."""

    def __init__(self):
        self.logger = get_logger(__name__)

    def load_bundled(self) -> List[PatternExample]:
        """Load the manifest shipped with the package."""
        text = resources.files(BUNDLED_PACKAGE).joinpath(BUNDLED_MANIFEST).read_text(encoding="utf-8")
        return self.load_text(text, source=f"{BUNDLED_PACKAGE}/{BUNDLED_MANIFEST}")

    def load_file(self, path: str) -> List[PatternExample]:
        """
        Load a manifest file (.json is parsed as JSON, anything else as YAML).

        Raises:
            CatalogError: If the file is missing, malformed or has invalid entries
        """
        try:
            text = read_text_file(path)
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogError(f"cannot read manifest: {e}", source=str(path)) from e
        return self.load_text(text, source=str(path), as_json=Path(path).suffix.lower() == ".json")

    def load_text(self, text: str, source: str = "<string>", as_json: bool = False) -> List[PatternExample]:
        """Parse and validate manifest text."""
        try:
            data = json.loads(text) if as_json else yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise CatalogError(f"malformed manifest: {e}", source=source) from e

        examples = self._parse(data, source)
        self.logger.debug("Loaded catalog manifest", source=source, patterns=len(examples))
        return examples

    def _parse(self, data: Any, source: str) -> List[PatternExample]:
        if not isinstance(data, dict) or not isinstance(data.get("patterns"), list):
            raise CatalogError("manifest must contain a 'patterns' list", source=source)

        examples = []
        for position, entry in enumerate(data["patterns"], start=1):
            if not isinstance(entry, dict):
                raise CatalogError(f"entry {position} must be a mapping", source=source)
            try:
                examples.append(PatternExample.model_validate(entry))
            except ValidationError as e:
                label = entry.get("slug", f"#{position}")
                raise CatalogError(f"invalid entry {label}: {e}", source=source) from e
        return examples
