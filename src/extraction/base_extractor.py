# src/extraction/base_extractor.py — v1
"""Abstract extractor interface for checkable document text."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class ExtractedText:
    """Text pulled from one document.

    ``checked_markup`` is the markup of the checked part, used for
    fingerprinting; ``fragments`` are its text nodes in document order.
    """

    checked_markup: str
    fragments: list[str] = field(default_factory=list)


class BaseTextExtractor(ABC):
    """Unified interface for markup text extractors."""

    @property
    @abstractmethod
    def supported_extensions(self) -> list[str]:
        """File extensions this extractor handles (e.g., ['.html'])."""

    @abstractmethod
    async def extract(self, markup: str) -> ExtractedText:
        """Extract the checked part's markup and text fragments."""

    def handles(self, key: str) -> bool:
        return any(key.lower().endswith(ext) for ext in self.supported_extensions)
