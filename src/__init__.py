# src/__init__.py — v1
"""sitespell — spellcheck a built HTML site with layered exceptions and an incremental cache.

Usage:
    from sitespell import SpellcheckRunner, Settings
    result = await SpellcheckRunner(source_dir, Settings(...), dictionary=...).run(files)
"""

from sitespell.config.settings import Settings, load_settings
from sitespell.core.errors import (
    ConfigurationError,
    DictionaryError,
    SpellcheckError,
    SpellingViolation,
)
from sitespell.core.models import SourceFile, SpellingReport
from sitespell.dictionary.base_dictionary import SpellDictionary
from sitespell.pipeline.runner import RunResult, SpellcheckRunner
from sitespell.version import __version__

__all__ = [
    "ConfigurationError",
    "DictionaryError",
    "RunResult",
    "Settings",
    "SourceFile",
    "SpellDictionary",
    "SpellcheckError",
    "SpellcheckRunner",
    "SpellingReport",
    "SpellingViolation",
    "__version__",
    "load_settings",
]
