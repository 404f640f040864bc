# src/pipeline/__init__.py — v1
"""Spellcheck run orchestration."""
