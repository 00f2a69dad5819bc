"""Insert-or-update routing of records into batched writes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from empsync.domain.model import RECONCILIATION_ORDER
from empsync.domain.reconciliation.context import (
    DEFAULT_BATCH_SIZE,
    ReconciliationResult,
    RunContext,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from empsync.domain.model import EntityKind, Record
    from empsync.domain.ports.source import ReconciliationDataset
    from empsync.domain.ports.unit_of_work import ReconciliationRepositories
    from empsync.domain.reconciliation.accumulator import StatementAccumulator

log = logging.getLogger(__name__)


def reconcile(
    dataset: ReconciliationDataset,
    repositories: ReconciliationRepositories,
    *,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> ReconciliationResult:
    """Route every record of ``dataset`` to an insert or update batch and flush them.

    Kinds are processed one after another in ``RECONCILIATION_ORDER``. A single
    counter spans all kinds: every ``batch_size``-th record flushes the
    accumulator of the kind currently being processed, and a final pass flushes
    every accumulator. Any exception aborts the loop and propagates; the caller
    owns the transaction and decides whether anything becomes durable.
    """

    context = RunContext.for_repositories(repositories, batch_size=batch_size)

    for kind in RECONCILIATION_ORDER:
        _process_kind(context, kind, dataset.records(kind))

    for kind in RECONCILIATION_ORDER:
        _flush(context, context.accumulator(kind))

    return context.result


def _process_kind(context: RunContext, kind: EntityKind, records: Sequence[Record]) -> None:
    accumulator = context.accumulator(kind)
    summary = context.result.summaries[kind]
    oracle = accumulator.store

    for record in records:
        if accumulator.is_pending(record.key):
            # the earlier write must reach the store before we can ask about the key again
            _flush(context, accumulator)

        if oracle.exists(record.key):
            accumulator.add_update(record)
            summary.updated += 1
        else:
            accumulator.add_insert(record)
            summary.inserted += 1
        context.result.processed += 1

        if context.tick():
            _flush(context, accumulator)


def _flush(context: RunContext, accumulator: StatementAccumulator[Any]) -> None:
    if not accumulator.flush().empty:
        context.result.flushes += 1
