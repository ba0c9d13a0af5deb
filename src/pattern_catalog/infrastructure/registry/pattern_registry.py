"""Pattern Registry - registry of catalog entries.

Entries are keyed by slug and can be looked up by slug, display name or alias.
Thread-safe singleton implementation.
"""

import threading
from typing import Dict, Iterable, List, Optional

from pattern_catalog.domain.exceptions import DuplicatePatternError, PatternNotFoundError
from pattern_catalog.domain.models import PatternCategory, PatternExample
from pattern_catalog.infrastructure.logging.logger import get_logger


class PatternRegistry:
    """
    Registry for pattern examples.

    Registration order is preserved within a category; listings are grouped
    by category in creational, structural, behavioral order.
    """

    _instance: Optional['PatternRegistry'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'PatternRegistry':
        """Ensure singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize pattern registry."""
        if hasattr(self, '_initialized'):
            return

        self._registrations: Dict[str, PatternExample] = {}
        self._registry_lock = threading.RLock()
        self.logger = get_logger(__name__)
        self._initialized = True

        self.logger.debug("Pattern registry initialized")

    def register(self, example: PatternExample) -> None:
        """
        Register a pattern example.

        Raises:
            DuplicatePatternError: If the slug is already registered
        """
        with self._registry_lock:
            if example.slug in self._registrations:
                raise DuplicatePatternError(example.slug)
            self._registrations[example.slug] = example
            self.logger.debug("Registered pattern", slug=example.slug, category=example.category.value)

    def register_all(self, examples: Iterable[PatternExample]) -> int:
        """Register several examples; returns how many were registered."""
        count = 0
        for example in examples:
            self.register(example)
            count += 1
        return count

    def get(self, name: str) -> PatternExample:
        """
        Get a pattern by slug, name or alias.

        Raises:
            PatternNotFoundError: If no registered pattern matches
        """
        with self._registry_lock:
            example = self._registrations.get(name)
            if example is not None:
                return example
            for candidate in self._registrations.values():
                if candidate.matches(name):
                    return candidate
        raise PatternNotFoundError(name)

    def is_registered(self, name: str) -> bool:
        try:
            self.get(name)
        except PatternNotFoundError:
            return False
        return True

    def list_patterns(self, category: Optional[PatternCategory] = None) -> List[PatternExample]:
        """List registered patterns, optionally restricted to one category."""
        with self._registry_lock:
            examples = list(self._registrations.values())
        if category is not None:
            examples = [example for example in examples if example.category == category]
        # sorted() is stable, so registration order survives within a category
        return sorted(examples, key=lambda example: example.category.order)

    def get_registered_slugs(self) -> List[str]:
        with self._registry_lock:
            return list(self._registrations.keys())

    def clear_registrations(self) -> None:
        """Remove all registrations (used by tests and reloads)."""
        with self._registry_lock:
            self._registrations.clear()
            self.logger.debug("Pattern registry cleared")


def get_pattern_registry() -> PatternRegistry:
    """Get the singleton pattern registry instance."""
    return PatternRegistry()
