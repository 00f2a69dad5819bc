"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from sqlalchemy.engine import make_url

from empsync.adapters.csv import CsvRecordSource
from empsync.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyReconciliationUnitOfWork,
    configured_engine,
    startup,
)
from empsync.config import (
    ConfigurationError,
    get_input_files_config,
    get_reconciliation_config,
)
from empsync.domain.ports.unit_of_work import ReconciliationUnitOfWork
from empsync.domain.reconciliation import sync_records

if TYPE_CHECKING:
    from empsync.config import InputFilesConfig
    from empsync.domain.ports.source import RecordSource
    from empsync.domain.reconciliation import ReconciliationResult

UnitOfWorkFactory = Callable[[], ReconciliationUnitOfWork]


log = getLogger(__name__)


def _ensure_started(database_uri: str | None) -> None:
    """Start the store adapter, or check that the running one targets ``database_uri``."""

    engine = configured_engine()
    if engine is None:
        startup(database_uri=database_uri)
        return
    if database_uri is not None and make_url(database_uri) != engine.url:
        raise ConfigurationError(
            f"Database adapter already started for {engine.url!r}; "
            f"cannot switch to {make_url(database_uri)!r}"
        )


def initialise_database(*, database_uri: str | None = None) -> None:
    """Create or upgrade the target schema."""

    _ensure_started(database_uri)
    engine = configured_engine()
    if engine is not None:
        log.info("Database ready at %s", engine.url)


def reconcile_csv_files(
    *,
    inputs: InputFilesConfig | None = None,
    batch_size: int | None = None,
    database_uri: str | None = None,
    dry_run: bool = False,
    source: RecordSource | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ReconciliationResult:
    """Upsert the employee CSV exports into the configured database in one transaction."""

    if batch_size is None:
        batch_size = get_reconciliation_config().batch_size
    if source is None:
        files = inputs or get_input_files_config()
        source = CsvRecordSource(
            employees_path=files.employees,
            departments_path=files.departments,
            department_employees_path=files.department_employees,
            delimiter=files.delimiter,
        )
    if unit_of_work_factory is None:
        _ensure_started(database_uri)
        unit_of_work_factory = SqlAlchemyReconciliationUnitOfWork

    return sync_records(
        source=source,
        unit_of_work_factory=unit_of_work_factory,
        batch_size=batch_size,
        dry_run=dry_run,
    )
