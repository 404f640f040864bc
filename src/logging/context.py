# src/logging/context.py — v1
"""Contextual logging support — attach run_id, document and phase to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Each asyncio task gets its own copy, so concurrent scans never see each
# other's document.
_run_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "run_id", default=None
)
_document: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "document", default=None
)
_phase: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "phase", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    run_id: str | None = None
    document: str | None = None
    phase: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        run_id=_run_id.get(),
        document=_document.get(),
        phase=_phase.get(),
    )


def set_run_context(run_id: str) -> None:
    """Set run-level context (called once per spellcheck run)."""
    _run_id.set(run_id)


def set_phase_context(phase: str | None) -> None:
    _phase.set(phase)


def set_document_context(document: str | None) -> None:
    """Set the document being scanned (called per scan task)."""
    _document.set(document)


def clear_context() -> None:
    """Reset all context variables."""
    _run_id.set(None)
    _document.set(None)
    _phase.set(None)
