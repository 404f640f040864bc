# src/cache/__init__.py — v1
"""Incremental check cache: fingerprints and the persisted check record."""
