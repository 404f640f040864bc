# src/storage/report_writer.py — v1
"""Failure report writer.

The report file exists only while misspellings remain: it is rewritten on a
failing run and removed on a clean one.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sitespell.core.models import SpellingReport

logger = logging.getLogger(__name__)


class ReportWriter:
    """Write or remove the failure report on the local filesystem."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def write(self, report: SpellingReport) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(report.to_json(), encoding="utf-8")
        logger.debug("Wrote %d misspellings to %s", len(report.misspellings), self._path)

    async def clear(self) -> None:
        if self._path.exists():
            self._path.unlink()
            logger.debug("Removed stale report %s", self._path)
