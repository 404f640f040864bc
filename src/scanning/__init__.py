# src/scanning/__init__.py — v1
"""Document scanning."""
