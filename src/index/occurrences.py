# src/index/occurrences.py — v1
"""Occurrence index: word -> documents it appears in."""

from __future__ import annotations

from collections.abc import Iterable

from sitespell.core.models import ScanResult


def build_occurrence_index(scans: Iterable[ScanResult]) -> dict[str, list[str]]:
    """Map every word found this run to the unique keys of its documents.

    Skipped (cached) documents contribute nothing.
    """
    index: dict[str, list[str]] = {}
    for scan in scans:
        if scan.skipped:
            continue
        for word in scan.words:
            keys = index.setdefault(word, [])
            if scan.key not in keys:
                keys.append(scan.key)
    return index
