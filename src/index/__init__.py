# src/index/__init__.py — v1
"""Word occurrence index."""
