# src/main.py — v1
"""CLI entry point.

Usage:
    sitespell check <source_dir> [options]

Exit codes: 0 clean (or failures tolerated), 1 misspellings found,
2 configuration or dictionary error, 130 interrupted.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from sitespell.core.errors import (
    ConfigurationError,
    DictionaryError,
    SpellingViolation,
)
from sitespell.version import __version__

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISSPELLINGS = 1
EXIT_CONFIG = 2
EXIT_INTERRUPTED = 130


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    if not hasattr(args, "func"):
        parser.print_help()
        return EXIT_MISSPELLINGS

    try:
        return asyncio.run(args.func(args))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return EXIT_INTERRUPTED
    except SpellingViolation as exc:
        logger.error("%s", exc)
        return EXIT_MISSPELLINGS
    except (ConfigurationError, DictionaryError, ValidationError) as exc:
        logger.error("Cannot run spellcheck: %s", exc)
        return EXIT_CONFIG
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return EXIT_MISSPELLINGS


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="sitespell",
        description=f"sitespell v{__version__} - spellcheck a built HTML site",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    p_check = subparsers.add_parser(
        "check", help="Spellcheck the HTML pages of a directory",
    )
    p_check.add_argument("source_dir", type=Path, help="Built site directory")
    p_check.add_argument(
        "--aff", dest="aff_file", default=None,
        help="Hunspell .aff file, relative to source_dir",
    )
    p_check.add_argument(
        "--dic", dest="dic_file", default=None,
        help="Hunspell .dic file, relative to source_dir",
    )
    p_check.add_argument(
        "-e", "--exception", dest="exceptions", action="append", default=None,
        help="Word, phrase or /regex/flags excused everywhere (repeatable)",
    )
    p_check.add_argument(
        "--site-exceptions", type=Path, default=None,
        help="JSON array of site-wide exceptions",
    )
    p_check.add_argument(
        "--checked-part", default=None,
        help="CSS selector of the checked part of each page (default: *)",
    )
    p_check.add_argument("--exception-file", default=None)
    p_check.add_argument("--check-file", default=None)
    p_check.add_argument("--fail-file", default=None)
    p_check.add_argument(
        "--no-fail", action="store_true",
        help="Report misspellings without failing",
    )
    p_check.add_argument(
        "--no-cache", action="store_true",
        help="Re-check every page even if unchanged",
    )
    p_check.add_argument(
        "-q", "--quiet", action="store_true",
        help="Do not announce the failure report",
    )
    p_check.set_defaults(func=_cmd_check)

    return parser


async def _cmd_check(args: argparse.Namespace) -> int:
    """Execute a spellcheck of one directory."""
    from sitespell.api.facade import check_directory
    from sitespell.config.settings import load_settings
    from sitespell.logging.logger import setup_logging

    source_dir: Path = args.source_dir
    if not source_dir.is_dir():
        logger.error("Not a directory: %s", source_dir)
        return EXIT_CONFIG

    settings = load_settings(**_settings_overrides(args))
    setup_logging(
        level="DEBUG" if args.verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )
    site_exceptions = _read_site_exceptions(args.site_exceptions)

    result = await check_directory(
        source_dir, settings=settings, site_exceptions=site_exceptions,
    )

    if result.report.is_clean:
        print(f"No spelling errors ({len(result.scanned)} checked, "
              f"{len(result.skipped)} unchanged)")
        return EXIT_OK

    print(f"\n{len(result.report.misspellings)} misspelled word(s):")
    for word, keys in result.report.misspellings.items():
        print(f"  {word}: {', '.join(keys)}")
    return EXIT_OK


def _settings_overrides(args: argparse.Namespace) -> dict[str, object]:
    overrides: dict[str, object] = {}
    for name in ("aff_file", "dic_file", "checked_part",
                 "exception_file", "check_file", "fail_file", "exceptions"):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value
    if args.no_fail:
        overrides["fail_errors"] = False
    if args.no_cache:
        overrides["cache_checks"] = False
    if args.quiet:
        overrides["verbose"] = False
    return overrides


def _read_site_exceptions(path: Path | None) -> list[str]:
    if path is None:
        return []
    try:
        return TypeAdapter(list[str]).validate_json(path.read_bytes())
    except (OSError, ValidationError) as exc:
        raise ConfigurationError(f"Cannot read site exceptions {path}: {exc}") from exc


def _setup_logging(verbose: bool) -> None:
    """Configure logging for CLI usage."""
    from sitespell.logging.logger import setup_logging

    setup_logging(level="DEBUG" if verbose else "INFO", log_format="text")


if __name__ == "__main__":
    sys.exit(main())
