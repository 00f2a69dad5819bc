"""Reconciliation engine: routing, batching and the transaction boundary."""

from __future__ import annotations

from .accumulator import FlushResult, StatementAccumulator
from .context import DEFAULT_BATCH_SIZE, KindSummary, ReconciliationResult, RunContext
from .driver import reconcile
from .service import sync_records

__all__ = [
    "DEFAULT_BATCH_SIZE",
    "FlushResult",
    "KindSummary",
    "ReconciliationResult",
    "RunContext",
    "StatementAccumulator",
    "reconcile",
    "sync_records",
]
