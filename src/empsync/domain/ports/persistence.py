"""Ports for reading and writing reconciled records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

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


@runtime_checkable
class RecordStore[TRecord, TKey](Protocol):
    """Existence lookups and batched writes for one entity kind."""

    def exists(self, key: TKey) -> bool: ...

    def insert_many(self, records: Sequence[TRecord]) -> None: ...

    def update_many(self, records: Sequence[TRecord]) -> None: ...


@runtime_checkable
class EmployeeStore(RecordStore[Employee, EmployeeKey], Protocol):
    """Store contract for employees."""


@runtime_checkable
class DepartmentStore(RecordStore[Department, DepartmentKey], Protocol):
    """Store contract for departments."""


@runtime_checkable
class DepartmentEmployeeStore(
    RecordStore[DepartmentEmployee, DepartmentEmployeeKey], Protocol
):
    """Store contract for department assignments."""
