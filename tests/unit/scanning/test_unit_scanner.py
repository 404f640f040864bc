# tests/unit/scanning/test_unit_scanner.py — v1
"""Tests for scanning/scanner.py and index/occurrences.py."""

from __future__ import annotations

import pytest

from sitespell.cache.models import CheckCache
from sitespell.core.models import ScanResult, SourceFile
from sitespell.extraction.html_extractor import HtmlTextExtractor
from sitespell.index.occurrences import build_occurrence_index
from sitespell.rules.compiler import compile_exceptions
from sitespell.scanning.scanner import DocumentScanner

from tests.conftest import BROKEN_HTML


def _doc(markup: str) -> SourceFile:
    return SourceFile(contents=markup.encode())


class TestDocumentScanner:
    @pytest.mark.asyncio
    async def test_collects_unique_words_in_order(self):
        scanner = DocumentScanner(HtmlTextExtractor(), {})
        result = await scanner.scan("a.html", _doc("<p>wrd one wrd</p><p>two wrd.</p>"))
        assert result.words == ["wrd", "one", "two"]
        assert result.skipped is False

    @pytest.mark.asyncio
    async def test_bare_fragment_text_is_scanned(self):
        scanner = DocumentScanner(HtmlTextExtractor(), {})
        result = await scanner.scan("a.html", _doc("<h1>Title</h1>\nSome wrd text"))
        assert result.words == ["Title", "Some", "wrd", "text"]

    @pytest.mark.asyncio
    async def test_excepted_words_are_removed(self):
        rules = compile_exceptions(configured=["Geoffrey Challen"])
        scanner = DocumentScanner(HtmlTextExtractor(), rules)
        result = await scanner.scan("broken.html", _doc(BROKEN_HTML))
        assert "Geoffrey" not in result.words
        assert "Challen" not in result.words
        assert "smartphone" in result.words
        assert "qwzx" not in result.words

    @pytest.mark.asyncio
    async def test_regex_exception_removes_matches(self):
        rules = compile_exceptions(configured=["/smartphones?/i"])
        scanner = DocumentScanner(HtmlTextExtractor(), rules)
        result = await scanner.scan(
            "a.html", _doc("<p>Smartphone smartphones smartphoned</p>"),
        )
        assert result.words == ["smartphoned"]

    @pytest.mark.asyncio
    async def test_out_of_scope_rule_is_ignored(self):
        rules = compile_exceptions(persisted={"wrd": ["b.html"]})
        scanner = DocumentScanner(HtmlTextExtractor(), rules)
        result = await scanner.scan("a.html", _doc("<p>wrd</p>"))
        assert result.words == ["wrd"]

    @pytest.mark.asyncio
    async def test_skip_when_unchanged(self):
        first = await DocumentScanner(HtmlTextExtractor(), {}).scan(
            "a.html", _doc("<p>wrd</p>"),
        )
        previous = CheckCache()
        previous.record("a.html", first.content_hash, first.exception_hash)

        scanner = DocumentScanner(HtmlTextExtractor(), {}, previous, allow_skip=True)
        again = await scanner.scan("a.html", _doc("<p>wrd</p>"))
        assert again.skipped is True
        assert again.words == []

    @pytest.mark.asyncio
    async def test_no_skip_when_not_allowed(self):
        first = await DocumentScanner(HtmlTextExtractor(), {}).scan(
            "a.html", _doc("<p>wrd</p>"),
        )
        previous = CheckCache()
        previous.record("a.html", first.content_hash, first.exception_hash)

        scanner = DocumentScanner(HtmlTextExtractor(), {}, previous, allow_skip=False)
        again = await scanner.scan("a.html", _doc("<p>wrd</p>"))
        assert again.skipped is False
        assert again.words == ["wrd"]

    @pytest.mark.asyncio
    async def test_exception_change_forces_rescan(self):
        first = await DocumentScanner(HtmlTextExtractor(), {}).scan(
            "a.html", _doc("<p>wrd</p>"),
        )
        previous = CheckCache()
        previous.record("a.html", first.content_hash, first.exception_hash)

        rules = compile_exceptions(configured=["wrd"])
        scanner = DocumentScanner(HtmlTextExtractor(), rules, previous, allow_skip=True)
        again = await scanner.scan("a.html", _doc("<p>wrd</p>"))
        assert again.skipped is False
        assert again.words == []

    @pytest.mark.asyncio
    async def test_markup_outside_checked_part_does_not_force_rescan(self):
        extractor = HtmlTextExtractor(checked_part="main")
        first = await DocumentScanner(extractor, {}).scan(
            "a.html", _doc("<nav>one</nav><main>wrd</main>"),
        )
        previous = CheckCache()
        previous.record("a.html", first.content_hash, first.exception_hash)

        scanner = DocumentScanner(extractor, {}, previous, allow_skip=True)
        again = await scanner.scan("a.html", _doc("<nav>two</nav><main>wrd</main>"))
        assert again.skipped is True


class TestOccurrenceIndex:
    def test_maps_words_to_documents(self):
        scans = [
            ScanResult(key="a.html", content_hash="", exception_hash="", words=["wrd", "x"]),
            ScanResult(key="b.html", content_hash="", exception_hash="", words=["wrd"]),
        ]
        assert build_occurrence_index(scans) == {
            "wrd": ["a.html", "b.html"],
            "x": ["a.html"],
        }

    def test_skipped_documents_contribute_nothing(self):
        scans = [
            ScanResult(key="a.html", content_hash="", exception_hash="", skipped=True),
            ScanResult(key="b.html", content_hash="", exception_hash="", words=["wrd"]),
        ]
        assert build_occurrence_index(scans) == {"wrd": ["b.html"]}

    def test_document_listed_once(self):
        scans = [
            ScanResult(key="a.html", content_hash="", exception_hash="", words=["wrd", "wrd"]),
        ]
        assert build_occurrence_index(scans) == {"wrd": ["a.html"]}

    def test_empty(self):
        assert build_occurrence_index([]) == {}
