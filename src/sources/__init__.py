# src/sources/__init__.py — v1
"""Content-set loading."""
