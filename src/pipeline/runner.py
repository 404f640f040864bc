# src/pipeline/runner.py — v1
"""Spellcheck runner — drive one check over a build's content set.

Phases, each finishing before the next starts:
  1. setup    — dictionary, persisted exceptions, previous check record
  2. compile  — merge every exception layer into rules
  3. scan     — bounded fan-out over documents, skipping unchanged ones
  4. verdict  — occurrence index, exceptions, dictionary lookups
  5. persist  — check record, failure report

Configuration and dictionary errors stop the run in phase 1. Nothing is
persisted unless phase 4 completes. Working files are removed from the
content set on every exit path.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Mapping, MutableMapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from sitespell.cache.fingerprint import source_fingerprint
from sitespell.cache.json_store import JsonCheckCacheStore, parse_check_cache
from sitespell.cache.models import CheckCache
from sitespell.config.settings import Settings
from sitespell.core.concurrency import gather_bounded
from sitespell.core.errors import SpellingViolation
from sitespell.core.models import ScanResult, SourceFile, SpellingReport
from sitespell.dictionary.base_dictionary import SpellDictionary
from sitespell.dictionary.dictionary_factory import create_dictionary
from sitespell.extraction.base_extractor import BaseTextExtractor
from sitespell.extraction.html_extractor import HtmlTextExtractor
from sitespell.index.occurrences import build_occurrence_index
from sitespell.logging.context import (
    clear_context,
    set_phase_context,
    set_run_context,
)
from sitespell.rules.compiler import compile_exceptions
from sitespell.rules.loader import ExceptionFileData, parse_exception_file
from sitespell.scanning.scanner import DocumentScanner
from sitespell.storage.report_writer import ReportWriter
from sitespell.verdict.engine import VerdictEngine

logger = logging.getLogger(__name__)

_REPORT_ADAPTER: TypeAdapter[dict[str, list[str]]] = TypeAdapter(dict[str, list[str]])


@dataclass
class RunResult:
    """Result of a spellcheck run that did not raise."""

    run_id: str
    report: SpellingReport
    scanned: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    duration_ms: int = 0

    @property
    def success(self) -> bool:
        return self.report.is_clean


def remove_artifacts(
    files: MutableMapping[str, SourceFile], settings: Settings,
) -> list[str]:
    """Drop working files from the content set; return the removed keys."""
    removed = []
    for key in settings.artifact_keys:
        if key in files:
            del files[key]
            removed.append(key)
    return removed


class SpellcheckRunner:
    """Check every HTML document of a content set.

    Args:
        source_dir: Directory the check record and failure report are
            written to (keys of the content set are relative to it).
        settings: Run settings. Loaded from the environment if None.
        site_exceptions: Exceptions supplied by the surrounding build,
            applied to every document.
        dictionary: Injected spelling backend. If None, a Hunspell
            dictionary is built from settings.aff_file / settings.dic_file.
        extractor: Markup text extractor. Defaults to HTML.
    """

    def __init__(
        self,
        source_dir: Path,
        settings: Settings | None = None,
        site_exceptions: Sequence[str] = (),
        dictionary: SpellDictionary | None = None,
        extractor: BaseTextExtractor | None = None,
    ) -> None:
        self._source_dir = Path(source_dir)
        self._settings = settings or Settings()
        self._site_exceptions = list(site_exceptions)
        self._dictionary = dictionary
        self._extractor = extractor or HtmlTextExtractor(
            checked_part=self._settings.checked_part,
            excluded_selectors=self._settings.excluded_selectors,
        )

    async def run(self, files: MutableMapping[str, SourceFile]) -> RunResult:
        """Check ``files`` and strip working files from it.

        Raises:
            ConfigurationError: Unusable settings or exception declarations.
            DictionaryError: Dictionary could not be built or queried.
            SpellingViolation: Misspellings remain and fail_errors is set.
        """
        run_id = uuid.uuid4().hex[:12]
        set_run_context(run_id)
        try:
            return await self._run(files, run_id)
        finally:
            removed = remove_artifacts(files, self._settings)
            if removed:
                logger.debug("Removed working files from output: %s", removed)
            clear_context()

    async def _run(self, files: Mapping[str, SourceFile], run_id: str) -> RunResult:
        start_ns = time.monotonic_ns()
        settings = self._settings

        # --- Phase 1: setup ---
        set_phase_context("setup")
        dictionary = create_dictionary(settings, files, self._dictionary)
        persisted = self._load_persisted_exceptions(files)
        previous = self._load_previous_cache(files)

        dictionary_hashes = {
            key: source_fingerprint(files[key].contents)
            for key in settings.dictionary_keys
            if key in files
        }
        allow_skip = settings.cache_checks and previous.dictionary_unchanged(
            dictionary_hashes
        )
        if settings.cache_checks and previous.files and not allow_skip:
            logger.info("Dictionary changed since last check, re-checking everything")

        artifacts = set(settings.artifact_keys)
        documents = {
            key: document
            for key, document in files.items()
            if key not in artifacts and self._extractor.handles(key)
        }

        # --- Phase 2: compile ---
        set_phase_context("compile")
        rules = compile_exceptions(
            configured=settings.exceptions,
            site_wide=self._site_exceptions,
            persisted=persisted,
            documents=documents,
        )

        # --- Phase 3: scan ---
        set_phase_context("scan")
        scanner = DocumentScanner(self._extractor, rules, previous, allow_skip)
        scans = await gather_bounded(
            lambda item: scanner.scan(*item),
            list(documents.items()),
            settings.max_concurrency,
        )
        scanned = [s.key for s in scans if not s.skipped]
        skipped = [s.key for s in scans if s.skipped]
        logger.info(
            "Scanned %d documents, %d unchanged since last check",
            len(scanned), len(skipped),
        )

        # --- Phase 4: verdict ---
        set_phase_context("verdict")
        occurrences = build_occurrence_index(scans)
        engine = VerdictEngine(
            rules,
            dictionary,
            documents.keys(),
            max_concurrency=settings.max_concurrency,
            timeout=settings.dictionary_timeout,
        )
        report = await engine.judge(occurrences)

        # --- Phase 5: persist ---
        set_phase_context("persist")
        # The report goes first: a check record must never mark documents
        # current when their misspellings were not recorded.
        writer = ReportWriter(self._source_dir / settings.fail_file)
        if documents and not scanned:
            # Every document unchanged: keep the previous report as is.
            report = self._previous_report(files)
        elif report.is_clean:
            await writer.clear()
        else:
            await writer.write(report)

        cache = self._next_cache(previous, scans, dictionary_hashes, documents)
        await JsonCheckCacheStore(self._source_dir / settings.check_file).save(cache)

        result = RunResult(
            run_id=run_id,
            report=report,
            scanned=scanned,
            skipped=skipped,
            duration_ms=(time.monotonic_ns() - start_ns) // 1_000_000,
        )
        logger.info(
            "Spellcheck complete: %d misspelled words, %dms",
            len(report.misspellings), result.duration_ms,
        )

        if not report.is_clean:
            level = logging.WARNING if settings.verbose else logging.DEBUG
            logger.log(level, "There were spelling errors. See %s", settings.fail_file)
            if settings.fail_errors:
                raise SpellingViolation(report, settings.fail_file)
        return result

    def _load_persisted_exceptions(
        self, files: Mapping[str, SourceFile],
    ) -> ExceptionFileData:
        key = self._settings.exception_file
        if key not in files:
            return {}
        return parse_exception_file(files[key].contents, name=key)

    def _load_previous_cache(self, files: Mapping[str, SourceFile]) -> CheckCache:
        key = self._settings.check_file
        if not self._settings.cache_checks or key not in files:
            return CheckCache()
        return parse_check_cache(files[key].contents)

    def _previous_report(self, files: Mapping[str, SourceFile]) -> SpellingReport:
        key = self._settings.fail_file
        if key not in files:
            return SpellingReport()
        try:
            return SpellingReport(
                misspellings=_REPORT_ADAPTER.validate_json(files[key].contents)
            )
        except ValidationError:
            logger.warning("Ignoring unreadable previous report %s", key)
            return SpellingReport()

    @staticmethod
    def _next_cache(
        previous: CheckCache,
        scans: list[ScanResult],
        dictionary_hashes: Mapping[str, str],
        documents: Mapping[str, SourceFile],
    ) -> CheckCache:
        """Carry over still-present entries, then record fresh fingerprints."""
        cache = CheckCache(
            files={
                k: v for k, v in previous.files.items()
                if k in documents or k in dictionary_hashes
            },
            exceptions={
                k: v for k, v in previous.exceptions.items() if k in documents
            },
        )
        cache.files.update(dictionary_hashes)
        for scan in scans:
            if not scan.skipped:
                cache.record(scan.key, scan.content_hash, scan.exception_hash)
        return cache
