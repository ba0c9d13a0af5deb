"""Packaged data: the catalog manifest and document templates."""
