"""Errors raised while reconciling records against the store."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ReconciliationError(RuntimeError):
    """Base class for failures that abort a reconciliation run."""


class MalformedRecordError(ReconciliationError):
    """Raised when an input row cannot be turned into a typed record."""

    def __init__(self, message: str, *, path: Path | None = None, line: int | None = None) -> None:
        self.path = path
        self.line = line
        location = ""
        if path is not None:
            location = f"{path}:{line}: " if line is not None else f"{path}: "
        super().__init__(f"{location}{message}")


class StoreUnavailableError(ReconciliationError):
    """Raised when the store cannot be reached or the connection breaks mid-run."""


class ConstraintViolationError(ReconciliationError):
    """Raised when the store rejects a write, e.g. a dangling foreign key."""
