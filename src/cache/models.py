# src/cache/models.py — v1
"""Cache domain model: the persisted check record.

The record maps each checked document (and each dictionary source file) to
its content fingerprint, and each document to the fingerprint of the
exception rules that applied to it when it was last scanned.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, Field


class CheckCache(BaseModel):
    """Fingerprints recorded by the previous successful run."""

    files: dict[str, str] = Field(default_factory=dict)
    exceptions: dict[str, str] = Field(default_factory=dict)

    def dictionary_unchanged(self, dictionary_hashes: Mapping[str, str]) -> bool:
        """True when every dictionary source hashes as it did last run."""
        return all(
            self.files.get(key) == digest for key, digest in dictionary_hashes.items()
        )

    def is_current(self, key: str, content_hash: str, exception_hash: str) -> bool:
        return (
            self.files.get(key) == content_hash
            and self.exceptions.get(key) == exception_hash
        )

    def record(self, key: str, content_hash: str, exception_hash: str) -> None:
        self.files[key] = content_hash
        self.exceptions[key] = exception_hash
