# src/verdict/__init__.py — v1
"""Misspelling verdicts."""
