# src/extraction/html_extractor.py — v1
"""HTML extractor using BeautifulSoup.

Selects the checked part of a page with a CSS selector and returns every text
node inside it, except whitespace-only nodes, comments and similar markup
declarations, and text under an excluded subtree (scripts, code blocks,
elements marked ``spelling_exception`` by default).
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from bs4 import BeautifulSoup
from bs4.element import PreformattedString, Tag
from soupsieve import SelectorSyntaxError

from sitespell.core.errors import ConfigurationError
from sitespell.extraction.base_extractor import BaseTextExtractor, ExtractedText

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDED_SELECTORS = ("script", "style", "code", ".spelling_exception")


class HtmlTextExtractor(BaseTextExtractor):
    """Extractor for rendered HTML pages (.html)."""

    def __init__(
        self,
        checked_part: str = "*",
        excluded_selectors: Sequence[str] = DEFAULT_EXCLUDED_SELECTORS,
        parser: str = "html.parser",
    ) -> None:
        self._checked_part = checked_part
        self._excluded_selectors = list(excluded_selectors)
        self._parser = parser

    @property
    def supported_extensions(self) -> list[str]:
        return [".html"]

    async def extract(self, markup: str) -> ExtractedText:
        """Parse markup off the event loop and collect checked text."""
        return await asyncio.to_thread(self.extract_sync, markup)

    def extract_sync(self, markup: str) -> ExtractedText:
        soup = BeautifulSoup(markup, self._parser)

        tops: list[Tag]
        if self._checked_part == "*":
            # The whole document, including text outside any element.
            tops = [soup]
        else:
            roots = self._select(soup, self._checked_part)
            root_ids = {id(r) for r in roots}
            # Nested matches are covered by their outermost match.
            tops = [r for r in roots if not any(id(p) in root_ids for p in r.parents)]

        excluded: set[int] = set()
        for selector in self._excluded_selectors:
            excluded.update(id(el) for el in self._select(soup, selector))

        fragments: list[str] = []
        for top in tops:
            for node in top.find_all(string=True):
                if isinstance(node, PreformattedString):
                    continue
                if not node.strip():
                    continue
                if any(id(parent) in excluded for parent in node.parents):
                    continue
                fragments.append(str(node))

        checked_markup = "".join(top.decode_contents() for top in tops)
        logger.debug(
            "Extracted %d text fragments from %d checked elements",
            len(fragments), len(tops),
        )
        return ExtractedText(checked_markup=checked_markup, fragments=fragments)

    @staticmethod
    def _select(soup: BeautifulSoup, selector: str) -> list[Tag]:
        try:
            return soup.select(selector)
        except SelectorSyntaxError as e:
            raise ConfigurationError(f"Invalid selector {selector!r}: {e}") from e
