# src/cache/json_store.py — v1
"""JSON file-backed check cache.

The cache is advisory: a missing or unreadable record loads as empty, which
forces a full scan.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from sitespell.cache.models import CheckCache

logger = logging.getLogger(__name__)


def parse_check_cache(raw: bytes | str | None) -> CheckCache:
    """Parse cache file contents, falling back to an empty record."""
    if not raw:
        return CheckCache()
    try:
        return CheckCache.model_validate_json(raw)
    except ValidationError as e:
        logger.warning("Ignoring unreadable check cache: %s", e.errors()[0]["msg"])
        return CheckCache()


class JsonCheckCacheStore:
    """Persists the check record at a single JSON path."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def save(self, cache: CheckCache) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(cache.model_dump_json(indent=4), encoding="utf-8")
        logger.debug(
            "Wrote check cache for %d files to %s", len(cache.files), self._path,
        )
