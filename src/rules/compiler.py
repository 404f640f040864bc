# src/rules/compiler.py — v1
"""Exception compiler — merge layered exception declarations into rules.

Four layers feed the compiler:

  1. the configured exception list (scope: every document)
  2. the site-wide exception list (scope: every document)
  3. the persisted exception file (scope: ``true`` or a list of keys/globs)
  4. inline per-document declarations (scope: that document)

A declaration is either a bare phrase, expanded through the text normalizer
into one literal rule per word, or a ``/pattern/flags`` regex. Declarations
sharing a matcher identity collapse into one rule whose scope is the union of
their scopes.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Mapping
from typing import Literal

from sitespell.core.errors import ConfigurationError
from sitespell.core.models import SourceFile
from sitespell.rules.models import ExceptionRule, RuleScope
from sitespell.text.normalizer import clean_text

logger = logging.getLogger(__name__)

DECLARATION_RE = re.compile(r"^/(.*?)/([gims]*)$")
START_BOUNDARY = r"(?:^|[^a-zA-Z0-9'@])"
END_BOUNDARY = r"(?=$|[^a-zA-Z0-9'.@])"

_FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
}


def literal_identity(word: str) -> str:
    return f"literal:{word}"


class ExceptionCompiler:
    """Accumulate declarations into rules keyed by matcher identity."""

    def __init__(self) -> None:
        self._rules: dict[str, ExceptionRule] = {}

    @property
    def rules(self) -> dict[str, ExceptionRule]:
        return self._rules

    def add(self, declaration: str, scope: RuleScope) -> None:
        """Compile one declaration and merge it under ``scope``."""
        match = DECLARATION_RE.match(declaration)
        if match:
            self._add_regex(declaration, match.group(1), match.group(2), scope)
            return

        words = clean_text(declaration)
        if not words:
            logger.debug("Exception %r has no checkable words", declaration)
        for word in words:
            self._merge(
                literal_identity(word),
                "literal",
                declaration,
                lambda w=word: re.compile(START_BOUNDARY + re.escape(w) + END_BOUNDARY),
                scope,
            )

    def add_all(self, declarations: Iterable[str], scope: RuleScope) -> None:
        for declaration in declarations:
            self.add(declaration, scope)

    def _add_regex(
        self, declaration: str, body: str, flags: str, scope: RuleScope,
    ) -> None:
        flag_set = set(flags) | {"g"}
        identity = f"regex:/{body}/{''.join(sorted(flag_set))}"

        def build() -> re.Pattern[str]:
            re_flags = 0
            for flag in flag_set:
                re_flags |= _FLAG_MAP.get(flag, 0)
            try:
                return re.compile(
                    START_BOUNDARY + "(?:" + body + ")" + END_BOUNDARY, re_flags,
                )
            except re.error as exc:
                raise ConfigurationError(
                    f"Invalid exception pattern {declaration!r}: {exc}"
                ) from exc

        self._merge(identity, "regex", declaration, build, scope)

    def _merge(
        self,
        identity: str,
        kind: Literal["literal", "regex"],
        source: str,
        build: Callable[[], re.Pattern[str]],
        scope: RuleScope,
    ) -> None:
        existing = self._rules.get(identity)
        if existing is not None:
            existing.scope.merge(scope)
            return
        rule_scope = RuleScope()
        rule_scope.merge(scope)
        self._rules[identity] = ExceptionRule(
            identity=identity,
            kind=kind,
            source=source,
            pattern=build(),
            scope=rule_scope,
        )


def compile_exceptions(
    configured: Iterable[str] = (),
    site_wide: Iterable[str] = (),
    persisted: Mapping[str, bool | list[str]] | None = None,
    documents: Mapping[str, SourceFile] | None = None,
) -> dict[str, ExceptionRule]:
    """Compile all exception layers into a single rule mapping.

    Args:
        configured: Exception list from settings.
        site_wide: Exception list supplied by the surrounding build.
        persisted: Parsed exception file (declaration -> true | keys/globs).
        documents: Checked documents, for their inline declarations.

    Returns:
        Mapping of matcher identity to compiled rule.

    Raises:
        ConfigurationError: If a regex declaration does not compile.
    """
    compiler = ExceptionCompiler()
    everywhere = RuleScope.all_files()

    compiler.add_all(configured, everywhere)
    compiler.add_all(site_wide, everywhere)

    for declaration, files in (persisted or {}).items():
        scope = everywhere if files is True else RuleScope.of(files or [])
        compiler.add(declaration, scope)

    for key, document in (documents or {}).items():
        if document.spelling_exceptions:
            compiler.add_all(document.spelling_exceptions, RuleScope.of([key]))

    logger.debug("Compiled %d exception rules", len(compiler.rules))
    return compiler.rules


def rules_for(rules: Mapping[str, ExceptionRule], key: str) -> list[ExceptionRule]:
    """Rules whose scope covers document ``key``, sorted by identity."""
    return sorted(
        (rule for rule in rules.values() if rule.scope.applies_to(key)),
        key=lambda rule: rule.identity,
    )
