"""Transaction boundary around a reconciliation run."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from empsync.domain.reconciliation.context import DEFAULT_BATCH_SIZE
from empsync.domain.reconciliation.driver import reconcile

if TYPE_CHECKING:
    from collections.abc import Callable

    from empsync.domain.ports.source import RecordSource
    from empsync.domain.ports.unit_of_work import ReconciliationUnitOfWork
    from empsync.domain.reconciliation.context import ReconciliationResult

log = logging.getLogger(__name__)


def sync_records(
    *,
    source: RecordSource,
    unit_of_work_factory: Callable[[], ReconciliationUnitOfWork],
    batch_size: int = DEFAULT_BATCH_SIZE,
    dry_run: bool = False,
) -> ReconciliationResult:
    """Reconcile everything ``source`` yields as one all-or-nothing transaction.

    The source is drained before the unit of work is opened, so malformed input
    never touches the store. Any failure inside the run rolls the whole
    transaction back and is re-raised unchanged. With ``dry_run`` the run is
    completed and then rolled back instead of committed.
    """

    dataset = source.load()
    counts = dataset.counts()
    log.info(
        "Starting reconciliation: batch_size=%s, employees=%s, departments=%s, assignments=%s",
        batch_size,
        *counts.values(),
    )

    with unit_of_work_factory() as uow:
        result = reconcile(dataset, uow.repositories, batch_size=batch_size)
        if dry_run:
            uow.rollback()
            log.info("Dry run requested, rolled back %s records", result.processed)
        else:
            uow.commit()
            result.committed = True

    log.info(
        "Finished reconciliation: processed=%s, inserted=%s, updated=%s, flushes=%s",
        result.processed,
        result.inserted,
        result.updated,
        result.flushes,
    )
    return result
