# src/rules/__init__.py — v1
"""Exception rules: declarations, compilation and the exception file."""
