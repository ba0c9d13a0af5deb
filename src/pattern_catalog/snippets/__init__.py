"""Self-contained design pattern snippets, one module per pattern.

Snippet modules use the standard library only and never import the rest of
``pattern_catalog``: their source is copied verbatim into the rendered
document, where it must run on its own.
"""
