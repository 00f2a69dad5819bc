"""Record stores backed by SQLAlchemy sessions."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING, Any, ClassVar, cast

from sqlalchemy import bindparam, func, insert, select, update

from empsync.adapters.sqlalchemy.errors import translate_store_errors
from empsync.adapters.sqlalchemy.tables import departments_table, dept_emp_table, employees_table
from empsync.domain.model import (
    Department,
    DepartmentEmployee,
    DepartmentEmployeeKey,
    DepartmentKey,
    Employee,
    EmployeeKey,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy import ColumnElement, Table
    from sqlalchemy.orm import Session


class SqlAlchemyRecordStore[TRecord, TKey]:
    """Existence checks and executemany writes against one table.

    Every statement runs through the session's current transaction, so rows
    written by an earlier flush are visible to later ``exists`` calls.
    """

    table: ClassVar[Table]
    key_columns: ClassVar[tuple[str, ...]]

    def __init__(self, session: Session) -> None:
        self.session = session

    @property
    def value_columns(self) -> tuple[str, ...]:
        return tuple(column.name for column in self.table.c if column.name not in self.key_columns)

    def exists(self, key: TKey) -> bool:
        stmt = select(func.count()).select_from(self.table).where(*self._key_criteria(key))
        with translate_store_errors():
            return self.session.execute(stmt).scalar_one() > 0

    def insert_many(self, records: Sequence[TRecord]) -> None:
        if not records:
            return
        rows = [self._to_row(record) for record in records]
        with translate_store_errors():
            self.session.execute(insert(self.table), rows)

    def update_many(self, records: Sequence[TRecord]) -> None:
        if not records:
            return
        # bind names must differ from column names inside an UPDATE ... SET
        stmt = (
            update(self.table)
            .where(*(self.table.c[name] == bindparam(f"key_{name}") for name in self.key_columns))
            .values({name: bindparam(f"new_{name}") for name in self.value_columns})
        )
        params: list[dict[str, Any]] = []
        for record in records:
            row = self._to_row(record)
            params.append(
                {f"key_{name}": row[name] for name in self.key_columns}
                | {f"new_{name}": row[name] for name in self.value_columns}
            )
        with translate_store_errors():
            self.session.execute(stmt, params)

    def _key_criteria(self, key: TKey) -> list[ColumnElement[bool]]:
        values = cast(tuple[Any, ...], key) if isinstance(key, tuple) else (key,)
        pairs = zip(self.key_columns, values, strict=True)
        return [self.table.c[name] == value for name, value in pairs]

    @staticmethod
    def _to_row(record: TRecord) -> dict[str, Any]:
        return asdict(cast(Any, record))


class SqlAlchemyEmployeeStore(SqlAlchemyRecordStore[Employee, EmployeeKey]):
    table = employees_table
    key_columns = ("emp_no",)


class SqlAlchemyDepartmentStore(SqlAlchemyRecordStore[Department, DepartmentKey]):
    table = departments_table
    key_columns = ("dept_no",)


class SqlAlchemyDepartmentEmployeeStore(
    SqlAlchemyRecordStore[DepartmentEmployee, DepartmentEmployeeKey]
):
    table = dept_emp_table
    key_columns = ("emp_no", "dept_no")


if TYPE_CHECKING:
    from empsync.domain.ports.persistence import (
        DepartmentEmployeeStore,
        DepartmentStore,
        EmployeeStore,
    )

    _session_stub = cast("Session", object())
    _employee_check: EmployeeStore = SqlAlchemyEmployeeStore(_session_stub)
    _department_check: DepartmentStore = SqlAlchemyDepartmentStore(_session_stub)
    _assignment_check: DepartmentEmployeeStore = SqlAlchemyDepartmentEmployeeStore(_session_stub)
