# src/text/normalizer.py — v1
"""Text normalizer: raw text fragment -> ordered list of checkable words.

The same function expands bare exception phrases into literal words, so a
phrase and the page text it excuses always tokenize identically.
"""

from __future__ import annotations

import re

from sitespell.text.classifiers import is_date, is_email, is_numeric, is_url

_CURLY_QUOTES_RE = re.compile("[‘’]")
_NON_WORD_RE = re.compile(r"[^a-zA-Z0-9'.@]+")
_LETTER_RE = re.compile(r"[a-zA-Z]")


def clean_text(text: str) -> list[str]:
    """Split a text fragment into word tokens.

    Order and duplicates are preserved; deduplication happens when words
    are merged per document.
    """
    text = _CURLY_QUOTES_RE.sub("'", text.strip())
    text = text.replace("...", ".")
    text = _NON_WORD_RE.sub(" ", text).strip()

    words = [_trim_token(raw) for raw in text.split()]
    return [w for w in words if not _is_rejected(w)]


def _trim_token(word: str) -> str:
    # "U.S." keeps its final period; "end." does not.
    if word.count(".") == 1 and word.endswith("."):
        word = word[:-1]
    if word.endswith("'"):
        return word[:-1]
    if word.endswith("'s"):
        return word[:-2]
    return word


def _is_rejected(word: str) -> bool:
    if word == "'s" or not _LETTER_RE.search(word):
        return True
    return is_numeric(word) or is_email(word) or is_url(word) or is_date(word)
