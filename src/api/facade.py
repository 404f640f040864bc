# src/api/facade.py — v1
"""Public API facade — check a built site directory.

Usage:
    from sitespell.api.facade import check_directory
    result = await check_directory(Path("build"), settings)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from sitespell.config.settings import Settings
from sitespell.pipeline.runner import RunResult, SpellcheckRunner
from sitespell.sources.loader import load_source_tree

if TYPE_CHECKING:
    from sitespell.dictionary.base_dictionary import SpellDictionary

logger = logging.getLogger(__name__)


async def check_directory(
    source_dir: Path,
    settings: Settings | None = None,
    site_exceptions: Sequence[str] = (),
    dictionary: SpellDictionary | None = None,
) -> RunResult:
    """Load ``source_dir`` and spellcheck its HTML pages.

    Working files (exception file, check record, failure report, dictionary
    sources) are read from the directory; the check record and report are
    written back to it.

    Raises:
        ConfigurationError: Unusable settings or exception declarations.
        DictionaryError: Dictionary could not be built or queried.
        SpellingViolation: Misspellings remain and fail_errors is set.
    """
    settings = settings or Settings()
    files = load_source_tree(source_dir)
    runner = SpellcheckRunner(
        source_dir,
        settings=settings,
        site_exceptions=site_exceptions,
        dictionary=dictionary,
    )
    logger.info("Checking %s", source_dir)
    return await runner.run(files)
