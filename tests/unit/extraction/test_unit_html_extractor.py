# tests/unit/extraction/test_unit_html_extractor.py — v1
"""Tests for extraction/html_extractor.py."""

from __future__ import annotations

import pytest

from sitespell.core.errors import ConfigurationError
from sitespell.extraction.html_extractor import HtmlTextExtractor

from tests.conftest import BROKEN_HTML, WORKING_HTML


def _text(extracted) -> str:
    return " ".join(extracted.fragments)


class TestHtmlTextExtractor:
    def test_handles(self):
        extractor = HtmlTextExtractor()
        assert extractor.handles("index.html")
        assert extractor.handles("docs/INDEX.HTML")
        assert not extractor.handles("style.css")

    def test_excludes_script_and_code(self):
        text = _text(HtmlTextExtractor().extract_sync(BROKEN_HTML))
        assert "wrd" in text
        assert "Broken page" in text
        assert "qwzx" not in text
        assert "zzyzx" not in text

    def test_excludes_marked_elements_and_comments(self):
        text = _text(HtmlTextExtractor().extract_sync(WORKING_HTML))
        assert "apart from the wrd" in text
        assert "Xyzzy" not in text
        assert "commentt" not in text

    def test_no_whitespace_fragments(self):
        extracted = HtmlTextExtractor().extract_sync(BROKEN_HTML)
        assert all(fragment.strip() for fragment in extracted.fragments)

    def test_nested_matches_collected_once(self):
        extracted = HtmlTextExtractor().extract_sync(
            "<div><p>one <b>two</b></p></div>"
        )
        assert extracted.fragments == ["one ", "two"]

    def test_fragment_text_outside_elements(self):
        extracted = HtmlTextExtractor().extract_sync("<h1>Title</h1>\nSome wrd text")
        assert extracted.fragments == ["Title", "\nSome wrd text"]
        assert "Some wrd text" in extracted.checked_markup

    def test_checked_part(self):
        markup = "<header>Navv</header><main><p>Body txt</p></main>"
        extractor = HtmlTextExtractor(checked_part="main")
        extracted = extractor.extract_sync(markup)
        assert extracted.fragments == ["Body txt"]
        assert extracted.checked_markup == "<p>Body txt</p>"

    def test_checked_part_change_outside_does_not_change_markup(self):
        extractor = HtmlTextExtractor(checked_part="main")
        a = extractor.extract_sync("<header>one</header><main>x</main>")
        b = extractor.extract_sync("<header>two</header><main>x</main>")
        assert a.checked_markup == b.checked_markup

    def test_no_match_yields_nothing(self):
        extracted = HtmlTextExtractor(checked_part="article").extract_sync(
            "<p>text</p>"
        )
        assert extracted.fragments == []
        assert extracted.checked_markup == ""

    def test_custom_exclusions(self):
        extractor = HtmlTextExtractor(excluded_selectors=["nav"])
        extracted = extractor.extract_sync(
            "<nav>menuu</nav><p>text</p><code>kept</code>"
        )
        assert extracted.fragments == ["text", "kept"]

    def test_invalid_selector(self):
        with pytest.raises(ConfigurationError, match="Invalid selector"):
            HtmlTextExtractor(checked_part="main[").extract_sync("<main></main>")

    @pytest.mark.asyncio
    async def test_extract_async(self):
        extracted = await HtmlTextExtractor().extract("<p>hello</p>")
        assert extracted.fragments == ["hello"]
