# src/rules/loader.py — v1
"""Parse the persisted exception file.

The file is a JSON object mapping a word, phrase or ``/regex/flags`` string to
either ``true`` (excused everywhere) or a list of document keys and globs.
"""

from __future__ import annotations

import logging
from typing import Literal, Union

from pydantic import TypeAdapter, ValidationError

from sitespell.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

ExceptionFileData = dict[str, Union[Literal[True], list[str]]]

_ADAPTER: TypeAdapter[ExceptionFileData] = TypeAdapter(ExceptionFileData)


def parse_exception_file(raw: bytes | str, name: str = "exception file") -> ExceptionFileData:
    """Validate and parse exception file contents.

    Raises:
        ConfigurationError: If the contents are not valid JSON of the expected shape.
    """
    try:
        data = _ADAPTER.validate_json(raw)
    except ValidationError as exc:
        raise ConfigurationError(f"Malformed {name}: {exc}") from exc
    logger.debug("Loaded %d declarations from %s", len(data), name)
    return data
