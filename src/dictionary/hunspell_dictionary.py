# src/dictionary/hunspell_dictionary.py — v1
"""Hunspell dictionary backend using spylls.

Builds from the raw bytes of an ``.aff``/``.dic`` pair, as found in the
build's content set.
"""

from __future__ import annotations

import asyncio
import logging
import tempfile
from pathlib import Path

from spylls.hunspell import Dictionary

from sitespell.core.errors import DictionaryError
from sitespell.dictionary.base_dictionary import SpellDictionary

logger = logging.getLogger(__name__)


class HunspellDictionary(SpellDictionary):
    """SpellDictionary backed by a spylls Hunspell dictionary."""

    def __init__(self, dictionary: Dictionary) -> None:
        self._dictionary = dictionary

    @classmethod
    def from_buffers(cls, aff: bytes, dic: bytes) -> HunspellDictionary:
        """Build from affix and word-list contents.

        Raises:
            DictionaryError: If spylls cannot read the pair.
        """
        with tempfile.TemporaryDirectory(prefix="sitespell-") as tmp:
            base = Path(tmp) / "dictionary"
            base.with_suffix(".aff").write_bytes(aff)
            base.with_suffix(".dic").write_bytes(dic)
            try:
                dictionary = Dictionary.from_files(str(base))
            except Exception as e:
                raise DictionaryError(f"Cannot build Hunspell dictionary: {e}") from e
        logger.debug("Loaded Hunspell dictionary (%d bytes of words)", len(dic))
        return cls(dictionary)

    async def is_correct(self, word: str) -> bool:
        return await asyncio.to_thread(self._dictionary.lookup, word)
