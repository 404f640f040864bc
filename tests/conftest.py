# tests/conftest.py — v1
"""Shared test fixtures for all unit and integration tests.

Provides an in-memory dictionary, two sample pages, and a builder for
temporary site directories. No dictionary files are needed.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from sitespell.config.settings import Settings
from sitespell.core.models import SourceFile
from sitespell.dictionary.base_dictionary import SpellDictionary


class FakeDictionary(SpellDictionary):
    """Word-set dictionary that records every lookup."""

    def __init__(self, words: set[str]) -> None:
        self.words = {w.lower() for w in words}
        self.lookups: list[str] = []

    async def is_correct(self, word: str) -> bool:
        self.lookups.append(word)
        return word.lower() in self.words


KNOWN_WORDS = {
    "a", "and", "apart", "bought", "broken", "every", "fine", "from",
    "geoffrey", "has", "here", "in", "is", "it", "page", "the", "this",
    "word", "working",
}

BROKEN_HTML = """<!DOCTYPE html>
<html><head><title>Broken page</title></head>
<body>
<p>This page has a wrd in it.</p>
<p>Geoffrey Challen bought a smartphone.</p>
<script>var notChecked = "qwzx";</script>
<p>Every <code>zzyzx</code> word is fine.</p>
</body></html>
"""

WORKING_HTML = """<!DOCTYPE html>
<html><head><title>Working page</title></head>
<body>
<p>Every word here is fine, apart from the wrd.</p>
<div class="spelling_exception">Xyzzy plugh</div>
<!-- a commentt -->
</body></html>
"""


# === FIXTURES: Dictionary ===


@pytest.fixture
def fake_dictionary() -> FakeDictionary:
    return FakeDictionary(KNOWN_WORDS)


@pytest.fixture
def dictionary_factory() -> Callable[[set[str]], FakeDictionary]:
    return FakeDictionary


# === FIXTURES: Settings ===


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment, tolerant of misspellings."""
    return Settings(_env_file=None, fail_errors=False)


# === FIXTURES: Content ===


@pytest.fixture
def sample_files() -> dict[str, SourceFile]:
    return {
        "broken.html": SourceFile(contents=BROKEN_HTML.encode()),
        "working.html": SourceFile(contents=WORKING_HTML.encode()),
        "style.css": SourceFile(contents=b"body { color: red; }"),
    }


@pytest.fixture
def make_site(tmp_path: Path) -> Callable[..., Path]:
    """Write a site directory from {relative path: text} and return its root."""

    def _make(pages: dict[str, str] | None = None) -> Path:
        root = tmp_path / "site"
        root.mkdir(exist_ok=True)
        pages = pages if pages is not None else {
            "broken.html": BROKEN_HTML,
            "working.html": WORKING_HTML,
        }
        for rel, text in pages.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return root

    return _make
