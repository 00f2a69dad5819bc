"""Ports describing where candidate records come from."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from empsync.domain.model import EntityKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from empsync.domain.model import Department, DepartmentEmployee, Employee, Record


@dataclass(frozen=True, slots=True)
class ReconciliationDataset:
    """Fully parsed input for one run, each sequence in source order."""

    employees: Sequence[Employee] = field(default_factory=tuple)
    departments: Sequence[Department] = field(default_factory=tuple)
    department_employees: Sequence[DepartmentEmployee] = field(default_factory=tuple)

    def records(self, kind: EntityKind) -> Sequence[Record]:
        match kind:
            case EntityKind.EMPLOYEE:
                return self.employees
            case EntityKind.DEPARTMENT:
                return self.departments
            case EntityKind.DEPARTMENT_EMPLOYEE:
                return self.department_employees

    def counts(self) -> dict[EntityKind, int]:
        return {kind: len(self.records(kind)) for kind in EntityKind}


@runtime_checkable
class RecordSource(Protocol):
    """Produces the complete dataset before any store interaction happens."""

    def load(self) -> ReconciliationDataset: ...
