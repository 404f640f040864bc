# src/rules/models.py — v1
"""Exception rule model: an immutable matcher plus an accumulating scope."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Literal

from wcmatch import glob

_GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE


@dataclass
class RuleScope:
    """Documents a rule applies to.

    A scope is either everywhere or a list of document keys and glob
    patterns. Merging is a union, and once a scope is everywhere it stays so.
    """

    everywhere: bool = False
    patterns: list[str] = field(default_factory=list)

    @classmethod
    def all_files(cls) -> RuleScope:
        return cls(everywhere=True)

    @classmethod
    def of(cls, patterns: Iterable[str]) -> RuleScope:
        scope = cls()
        scope._extend(patterns)
        return scope

    def merge(self, other: RuleScope) -> None:
        if self.everywhere:
            return
        if other.everywhere:
            self.everywhere = True
            self.patterns = []
            return
        self._extend(other.patterns)

    def applies_to(self, key: str) -> bool:
        if self.everywhere:
            return True
        return any(
            key == pattern or glob.globmatch(key, pattern, flags=_GLOB_FLAGS)
            for pattern in self.patterns
        )

    def resolve(self, keys: Iterable[str]) -> set[str]:
        """Concrete document keys, out of ``keys``, covered by this scope."""
        return {key for key in keys if self.applies_to(key)}

    def _extend(self, patterns: Iterable[str]) -> None:
        for pattern in patterns:
            if pattern not in self.patterns:
                self.patterns.append(pattern)


@dataclass(frozen=True)
class ExceptionRule:
    """A compiled exception: matcher identity, boundary-wrapped regex, scope."""

    identity: str
    kind: Literal["literal", "regex"]
    source: str
    pattern: re.Pattern[str]
    scope: RuleScope = field(default_factory=RuleScope, compare=False)

    def matches(self, word: str) -> bool:
        return self.pattern.search(word) is not None

    def strip_from(self, text: str) -> str:
        """Blank out every occurrence of the rule in normalized text."""
        return self.pattern.sub(" ", text)
