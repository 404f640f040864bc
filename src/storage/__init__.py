# src/storage/__init__.py — v1
"""Failure report output."""
