# src/verdict/engine.py — v1
"""Verdict engine — decide which words are misspelled, and where.

Per distinct word ``w`` found in documents ``F(w)``:
  1. Suppress ``w`` when a rule matches it and the rule's scope is every
     document, or covers exactly ``F(w)``
  2. Ask the dictionary about every remaining word (bounded fan-out)
  3. Report a misspelled word for ``F(w)`` minus the documents its literal
     exception lists; drop it when nothing is left
  4. Order words case-insensitively
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping

from sitespell.core.concurrency import gather_bounded
from sitespell.core.errors import DictionaryError
from sitespell.core.models import SpellingReport
from sitespell.dictionary.base_dictionary import SpellDictionary
from sitespell.rules.compiler import literal_identity
from sitespell.rules.models import ExceptionRule

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENCY = 8


def report_order(word: str) -> tuple[str, str]:
    return (word.lower(), word)


class VerdictEngine:
    """Filter an occurrence index through exceptions and a dictionary.

    Args:
        rules: Compiled exception rules for the run.
        dictionary: Spelling backend.
        document_keys: Every document checked this run, for resolving
            glob scopes into concrete file sets.
        max_concurrency: Max dictionary lookups in flight.
        timeout: Optional per-lookup timeout in seconds.
    """

    def __init__(
        self,
        rules: Mapping[str, ExceptionRule],
        dictionary: SpellDictionary,
        document_keys: Iterable[str],
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
        timeout: float | None = None,
    ) -> None:
        self._rules = rules
        self._dictionary = dictionary
        self._max_concurrency = max_concurrency
        self._timeout = timeout
        keys = list(document_keys)
        self._resolved: dict[str, frozenset[str]] = {
            identity: frozenset(rule.scope.resolve(keys))
            for identity, rule in rules.items()
            if not rule.scope.everywhere
        }

    async def judge(self, occurrences: Mapping[str, list[str]]) -> SpellingReport:
        candidates = [
            word for word, files in occurrences.items()
            if not self.is_suppressed(word, files)
        ]
        logger.debug(
            "%d of %d words left after exceptions",
            len(candidates), len(occurrences),
        )

        verdicts = await gather_bounded(
            self._is_correct, candidates, self._max_concurrency,
        )
        misspelled = [w for w, correct in zip(candidates, verdicts) if not correct]

        misspellings: dict[str, list[str]] = {}
        for word in sorted(misspelled, key=report_order):
            residual = self.residual_files(word, occurrences[word])
            if residual:
                misspellings[word] = residual
            else:
                logger.debug("'%s' is excused in every file it appears in", word)

        return SpellingReport(misspellings=misspellings)

    def is_suppressed(self, word: str, files: Iterable[str]) -> bool:
        occurrence_set = frozenset(files)
        for identity, rule in self._rules.items():
            if not rule.matches(word):
                continue
            if rule.scope.everywhere or self._resolved[identity] == occurrence_set:
                return True
        return False

    def residual_files(self, word: str, files: list[str]) -> list[str]:
        """``files`` minus those explicitly excused for exactly ``word``."""
        rule = self._rules.get(literal_identity(word))
        if rule is None or rule.scope.everywhere:
            return list(files)
        excused = self._resolved[rule.identity]
        return [f for f in files if f not in excused]

    async def _is_correct(self, word: str) -> bool:
        try:
            if self._timeout is None:
                return await self._dictionary.is_correct(word)
            return await asyncio.wait_for(
                self._dictionary.is_correct(word), self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise DictionaryError(
                f"Dictionary lookup for {word!r} timed out after {self._timeout}s"
            ) from e
        except DictionaryError:
            raise
        except Exception as e:
            raise DictionaryError(f"Dictionary lookup for {word!r} failed: {e}") from e
