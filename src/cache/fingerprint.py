# src/cache/fingerprint.py — v1
"""Content fingerprints used to decide whether a document needs re-checking.

Three fingerprints feed the decision: the checked part of each document, the
set of exception rules applying to it, and the dictionary source files.
"""

from __future__ import annotations

import hashlib
import json
from collections.abc import Iterable

from sitespell.rules.models import ExceptionRule


def source_fingerprint(raw_bytes: bytes) -> str:
    """SHA-256 on raw file bytes (dictionary sources)."""
    return hashlib.sha256(raw_bytes).hexdigest()


def content_fingerprint(checked_markup: str) -> str:
    """SHA-256 on the markup of the checked part of a document."""
    return hashlib.sha256(checked_markup.encode("utf-8")).hexdigest()


def exception_fingerprint(rules: Iterable[ExceptionRule]) -> str:
    """SHA-256 on the sorted identities of the rules applying to a document.

    Only identities are hashed, not scopes.
    """
    identities = sorted({rule.identity for rule in rules})
    payload = json.dumps(identities, separators=(",", ":"))
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
