"""Catalog manifest loading."""

from .loader import CatalogLoader

__all__ = ["CatalogLoader"]
