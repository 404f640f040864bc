# src/dictionary/__init__.py — v1
"""Spelling dictionary backends."""
