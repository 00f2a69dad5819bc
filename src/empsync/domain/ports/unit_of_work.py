"""Unit-of-work abstraction wrapping one reconciliation transaction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from empsync.domain.model import EntityKind

if TYPE_CHECKING:
    from types import TracebackType

    from empsync.domain.ports.persistence import (
        DepartmentEmployeeStore,
        DepartmentStore,
        EmployeeStore,
        RecordStore,
    )


@dataclass(slots=True)
class ReconciliationRepositories:
    """Stores for every entity kind, all bound to the same transaction."""

    employees: EmployeeStore
    departments: DepartmentStore
    department_employees: DepartmentEmployeeStore

    def for_kind(self, kind: EntityKind) -> RecordStore[Any, Any]:
        match kind:
            case EntityKind.EMPLOYEE:
                return self.employees
            case EntityKind.DEPARTMENT:
                return self.departments
            case EntityKind.DEPARTMENT_EMPLOYEE:
                return self.department_employees


@runtime_checkable
class ReconciliationUnitOfWork(Protocol):
    """Transaction boundary: nothing written through it is durable before ``commit``."""

    @property
    def repositories(self) -> ReconciliationRepositories: ...

    def __enter__(self) -> ReconciliationUnitOfWork: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
