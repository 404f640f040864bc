# src/text/classifiers.py — v1
"""Token classifiers: numbers, emails, URLs and calendar dates.

Tokens reaching these checks only contain ASCII letters, digits, apostrophes,
periods and at-signs, so dates are limited to dotted forms such as
15.01.2020 or Jan.15.2020.
"""

from __future__ import annotations

import re
from datetime import datetime

import validators

# Plain integers, decimals and dotted version numbers.
_NUMERIC_RE = re.compile(r"^[-+]?[0-9]+(?:\.[0-9]+)*$")

_DATE_FORMATS = (
    "%Y.%m.%d",
    "%d.%m.%Y",
    "%m.%d.%Y",
    "%d.%m.%y",
    "%m.%d.%y",
    "%d.%b.%Y",
    "%b.%d.%Y",
)


def is_numeric(token: str) -> bool:
    return bool(_NUMERIC_RE.match(token))


def is_email(token: str) -> bool:
    return bool(validators.email(token))


def is_url(token: str) -> bool:
    """True for full URLs and for bare host names such as example.com."""
    return bool(validators.url(token)) or bool(validators.domain(token))


def is_date(token: str) -> bool:
    for fmt in _DATE_FORMATS:
        try:
            datetime.strptime(token, fmt)
        except ValueError:
            continue
        return True
    return False
