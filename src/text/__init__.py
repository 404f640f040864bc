# src/text/__init__.py — v1
"""Text normalization."""
