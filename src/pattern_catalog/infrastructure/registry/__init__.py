"""Infrastructure registry."""

from .pattern_registry import PatternRegistry, get_pattern_registry

__all__ = ['PatternRegistry', 'get_pattern_registry']
