# src/sources/loader.py — v1
"""Source loader — read a built site directory into a content set.

Every file becomes a SourceFile keyed by its POSIX path relative to the
root. HTML pages may carry inline exceptions as
``<meta name="spelling_exceptions" content="...">`` tags, one declaration per
tag.
"""

from __future__ import annotations

import logging
from pathlib import Path

from bs4 import BeautifulSoup

from sitespell.core.models import SourceFile

logger = logging.getLogger(__name__)

INLINE_META_NAME = "spelling_exceptions"


def load_source_tree(source_dir: Path, recursive: bool = True) -> dict[str, SourceFile]:
    """Load every file under ``source_dir``.

    Raises:
        ValueError: If ``source_dir`` is not a directory.
    """
    if not source_dir.is_dir():
        raise ValueError(f"Source root is not a directory: {source_dir}")

    files: dict[str, SourceFile] = {}
    pattern_fn = source_dir.rglob if recursive else source_dir.glob
    for path in sorted(pattern_fn("*")):
        if not path.is_file():
            continue
        key = path.relative_to(source_dir).as_posix()
        contents = path.read_bytes()
        exceptions = inline_exceptions(contents) if key.lower().endswith(".html") else []
        files[key] = SourceFile(contents=contents, spelling_exceptions=exceptions)

    logger.info("Loaded %d files from %s", len(files), source_dir)
    return files


def inline_exceptions(markup: bytes | str) -> list[str]:
    """Exception declarations from a page's spelling_exceptions meta tags."""
    soup = BeautifulSoup(markup, "html.parser")
    declarations = []
    for tag in soup.find_all("meta", attrs={"name": INLINE_META_NAME}):
        content = (tag.get("content") or "").strip()
        if content:
            declarations.append(content)
    return declarations
