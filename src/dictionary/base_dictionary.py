# src/dictionary/base_dictionary.py — v1
"""Abstract spelling dictionary interface.

Any spell-checking backend can be plugged into a run as long as it answers
one question per word.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class SpellDictionary(ABC):
    """Narrow capability interface for spelling backends."""

    @abstractmethod
    async def is_correct(self, word: str) -> bool:
        """Return True when ``word`` is spelled correctly."""
