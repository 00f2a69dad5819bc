"""SQLAlchemy table metadata for the reconciled entities."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import (
    Column,
    Date,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    create_engine,
    event,
)

from empsync.domain.model import EntityKind

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

employees_table = Table(
    "employees",
    metadata,
    Column("emp_no", Integer, primary_key=True, autoincrement=False),
    Column("first_name", String(14), nullable=False),
    Column("last_name", String(16), nullable=False),
    Column("gender", String(1), nullable=False),
    Column("hire_date", Date, nullable=False),
    Column("birth_date", Date, nullable=False),
)

departments_table = Table(
    "departments",
    metadata,
    Column("dept_no", String(4), primary_key=True),
    Column("dept_name", String(40), nullable=False),
)

# Assignments may be flushed before the rows they reference, so the
# foreign keys are only checked at commit.
dept_emp_table = Table(
    "dept_emp",
    metadata,
    Column(
        "emp_no",
        Integer,
        ForeignKey(
            "employees.emp_no", ondelete="CASCADE", deferrable=True, initially="DEFERRED"
        ),
        primary_key=True,
    ),
    Column(
        "dept_no",
        String(4),
        ForeignKey(
            "departments.dept_no", ondelete="CASCADE", deferrable=True, initially="DEFERRED"
        ),
        primary_key=True,
    ),
    Column("from_date", Date, nullable=False),
    Column("to_date", Date, nullable=False),
)

TABLE_BY_KIND: dict[EntityKind, Table] = {
    EntityKind.EMPLOYEE: employees_table,
    EntityKind.DEPARTMENT: departments_table,
    EntityKind.DEPARTMENT_EMPLOYEE: dept_emp_table,
}


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def enforce_foreign_keys(engine: Engine) -> None:
    """Make SQLite check foreign keys on every new connection; other dialects already do."""

    if engine.dialect.name != "sqlite":
        return
    if not event.contains(engine, "connect", _enable_sqlite_foreign_keys):
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        log.debug("Enabled SQLite foreign key enforcement for %s", engine.url)


def create_database_engine(database_uri: str) -> Engine:
    engine = create_engine(database_uri, future=True)
    enforce_foreign_keys(engine)
    return engine
