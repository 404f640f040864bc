# src/dictionary/dictionary_factory.py — v1
"""Dictionary factory — resolve the dictionary for a run.

An injected SpellDictionary wins; otherwise the Hunspell pair named by
settings.aff_file / settings.dic_file is read from the content set.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from sitespell.core.errors import ConfigurationError
from sitespell.core.models import SourceFile
from sitespell.dictionary.base_dictionary import SpellDictionary

if TYPE_CHECKING:
    from sitespell.config.settings import Settings

logger = logging.getLogger(__name__)


def create_dictionary(
    settings: Settings,
    files: Mapping[str, SourceFile],
    dictionary: SpellDictionary | None = None,
) -> SpellDictionary:
    """Return the dictionary to check words against.

    Raises:
        ConfigurationError: If no dictionary is injected and the Hunspell
            source files are not configured or not present.
        DictionaryError: If the Hunspell source files cannot be loaded.
    """
    if dictionary is not None:
        return dictionary

    if not settings.aff_file or not settings.dic_file:
        raise ConfigurationError(
            "must provide either a dictionary or both aff_file and dic_file"
        )

    missing = [k for k in (settings.aff_file, settings.dic_file) if k not in files]
    if missing:
        raise ConfigurationError(f"dictionary source not found: {', '.join(missing)}")

    from sitespell.dictionary.hunspell_dictionary import HunspellDictionary

    logger.info("Loading Hunspell dictionary %s / %s", settings.aff_file, settings.dic_file)
    return HunspellDictionary.from_buffers(
        files[settings.aff_file].contents,
        files[settings.dic_file].contents,
    )
