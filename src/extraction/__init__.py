# src/extraction/__init__.py — v1
"""Markup text extractors."""
