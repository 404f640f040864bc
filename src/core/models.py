# src/core/models.py — v1
"""Shared Pydantic domain models used across modules.

Documents, scan results and reports are passed between phases as these types.
"""

from __future__ import annotations

import json

from pydantic import BaseModel, Field


# === CONTENT SET ===


class SourceFile(BaseModel):
    """One file of the build's content set."""

    contents: bytes
    spelling_exceptions: list[str] = Field(default_factory=list)

    @property
    def text(self) -> str:
        return self.contents.decode("utf-8", errors="replace")


# === SCANNING ===


class ScanResult(BaseModel):
    """Outcome of scanning a single document."""

    key: str
    content_hash: str
    exception_hash: str
    skipped: bool = False
    words: list[str] = Field(default_factory=list)


# === REPORTING ===


class SpellingReport(BaseModel):
    """Misspelled words mapped to the documents that still exhibit them."""

    misspellings: dict[str, list[str]] = Field(default_factory=dict)

    @property
    def words(self) -> list[str]:
        return list(self.misspellings)

    @property
    def is_clean(self) -> bool:
        return not self.misspellings

    def to_json(self) -> str:
        """Serialize in the failure-file layout: a flat, 4-space indented object."""
        return json.dumps(self.misspellings, indent=4)
