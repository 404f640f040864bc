# src/scanning/scanner.py — v1
"""Document scanner — fingerprint, cache short-circuit, and word collection.

For each document:
  1. Extract the checked part and its text fragments
  2. Fingerprint the checked markup and the applicable exception rules
  3. Skip when both fingerprints match the previous run (and the run allows
     skipping, i.e. caching is on and the dictionary is unchanged)
  4. Otherwise normalize every fragment, blank out excepted text, and union
     the remaining words into the document's word list
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from sitespell.cache.fingerprint import content_fingerprint, exception_fingerprint
from sitespell.cache.models import CheckCache
from sitespell.core.models import ScanResult, SourceFile
from sitespell.extraction.base_extractor import BaseTextExtractor
from sitespell.logging.context import set_document_context
from sitespell.rules.compiler import rules_for
from sitespell.rules.models import ExceptionRule
from sitespell.text.normalizer import clean_text

logger = logging.getLogger(__name__)


class DocumentScanner:
    """Scan documents into word lists.

    Args:
        extractor: Markup text extractor.
        rules: Compiled exception rules for the run.
        previous: Check record from the previous run.
        allow_skip: Whether unchanged documents may be skipped this run.
    """

    def __init__(
        self,
        extractor: BaseTextExtractor,
        rules: Mapping[str, ExceptionRule],
        previous: CheckCache | None = None,
        allow_skip: bool = False,
    ) -> None:
        self._extractor = extractor
        self._rules = rules
        self._previous = previous or CheckCache()
        self._allow_skip = allow_skip

    async def scan(self, key: str, document: SourceFile) -> ScanResult:
        set_document_context(key)
        extracted = await self._extractor.extract(document.text)
        applicable = rules_for(self._rules, key)

        content_hash = content_fingerprint(extracted.checked_markup)
        exception_hash = exception_fingerprint(applicable)

        if self._allow_skip and self._previous.is_current(
            key, content_hash, exception_hash
        ):
            logger.debug("Unchanged since last check, skipping %s", key)
            return ScanResult(
                key=key,
                content_hash=content_hash,
                exception_hash=exception_hash,
                skipped=True,
            )

        words: dict[str, None] = {}
        for fragment in extracted.fragments:
            cleaned = " ".join(clean_text(fragment))
            for rule in applicable:
                cleaned = rule.strip_from(cleaned)
            for word in cleaned.split():
                words.setdefault(word, None)

        logger.debug("Scanned %s: %d distinct words", key, len(words))
        return ScanResult(
            key=key,
            content_hash=content_hash,
            exception_hash=exception_hash,
            words=list(words),
        )
