# src/config/settings.py — v1
"""Typed configuration loaded from the environment via pydantic-settings.

Every option can be set with a SITESPELL_ prefixed environment variable, a
.env file, or keyword overrides passed to load_settings().
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sitespell.core.errors import ConfigurationError

__all__ = ["ConfigurationError", "Settings", "load_settings"]


class Settings(BaseSettings):
    """Spellcheck run settings."""

    model_config = SettingsConfigDict(
        env_prefix="SITESPELL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Reporting ===
    verbose: bool = True
    fail_errors: bool = True

    # === Caching ===
    cache_checks: bool = True

    # === Extraction ===
    checked_part: str = "*"
    excluded_selectors: list[str] = [
        "script",
        "style",
        "code",
        ".spelling_exception",
    ]

    # === Working files (keys inside the content set) ===
    exception_file: str = "spelling_exceptions.json"
    check_file: str = ".spelling_check.json"
    fail_file: str = "spelling_failed.json"
    aff_file: str | None = None
    dic_file: str | None = None

    # === Exceptions applied to every document ===
    exceptions: list[str] = []

    # === Dictionary lookups ===
    max_concurrency: int = 8
    dictionary_timeout: float | None = None

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 5

    # --- Validators ---

    @field_validator("checked_part")
    @classmethod
    def validate_checked_part(cls, v: str) -> str:  # noqa: N805
        if not v.strip():
            raise ValueError("checked_part must not be empty")
        return v.strip()

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Reject option combinations that cannot produce a meaningful run."""
        errors: list[str] = []

        if self.max_concurrency < 1:
            errors.append("MAX_CONCURRENCY must be >= 1")

        if bool(self.aff_file) != bool(self.dic_file):
            errors.append("AFF_FILE and DIC_FILE must be given together")

        if self.dictionary_timeout is not None and self.dictionary_timeout <= 0:
            errors.append("DICTIONARY_TIMEOUT must be positive")

        working = [self.exception_file, self.check_file, self.fail_file]
        if len(set(working)) != len(working):
            errors.append(
                "EXCEPTION_FILE, CHECK_FILE and FAIL_FILE must be distinct"
            )

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def dictionary_keys(self) -> list[str]:
        """Content-set keys holding the dictionary source files."""
        return [k for k in (self.aff_file, self.dic_file) if k]

    @property
    def artifact_keys(self) -> list[str]:
        """Working files never passed downstream with the checked content."""
        return [
            self.check_file,
            self.fail_file,
            self.exception_file,
            *self.dictionary_keys,
        ]


def load_settings(**overrides: object) -> Settings:
    """Load settings from the environment with optional overrides.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
