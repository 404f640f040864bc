# src/core/errors.py — v1
"""Error taxonomy shared by every phase of a spellcheck run.

Configuration and dictionary errors abort a run before any document is
scanned. SpellingViolation is a reported condition: the runner raises it only
when the build is configured to fail on misspellings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sitespell.core.models import SpellingReport


class SpellcheckError(Exception):
    """Base class for all sitespell errors."""


class ConfigurationError(SpellcheckError):
    """Raised when settings or exception declarations are unusable."""


class DictionaryError(SpellcheckError):
    """Raised when the spelling dictionary cannot be built or queried."""


class SpellingViolation(SpellcheckError):
    """Raised when unresolved misspellings remain and fail_errors is set."""

    def __init__(self, report: SpellingReport, fail_file: str) -> None:
        self.report = report
        self.fail_file = fail_file
        super().__init__(
            f"fail spelling check: {len(report.misspellings)} word(s). "
            f"See {fail_file}"
        )
