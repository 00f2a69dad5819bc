"""Record types reconciled against the store.

Records are transient value objects: they are built by a record source, consumed
once by the reconciliation driver and dropped after their batch is flushed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from .enums import EntityKind

if TYPE_CHECKING:
    from datetime import date

type EmployeeKey = int
type DepartmentKey = str
type DepartmentEmployeeKey = tuple[int, str]


@dataclass(frozen=True, slots=True)
class Employee:
    kind: ClassVar[EntityKind] = EntityKind.EMPLOYEE

    emp_no: int
    first_name: str
    last_name: str
    gender: str
    hire_date: date
    birth_date: date

    @property
    def key(self) -> EmployeeKey:
        return self.emp_no


@dataclass(frozen=True, slots=True)
class Department:
    kind: ClassVar[EntityKind] = EntityKind.DEPARTMENT

    dept_no: str
    dept_name: str

    @property
    def key(self) -> DepartmentKey:
        return self.dept_no


@dataclass(frozen=True, slots=True)
class DepartmentEmployee:
    """Assignment of an employee to a department over a validity interval."""

    kind: ClassVar[EntityKind] = EntityKind.DEPARTMENT_EMPLOYEE

    emp_no: int
    dept_no: str
    from_date: date
    to_date: date

    @property
    def key(self) -> DepartmentEmployeeKey:
        return (self.emp_no, self.dept_no)


type Record = Employee | Department | DepartmentEmployee
