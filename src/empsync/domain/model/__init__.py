"""Domain model for employee reconciliation."""

from __future__ import annotations

from .enums import RECONCILIATION_ORDER, EntityKind
from .records import (
    Department,
    DepartmentEmployee,
    DepartmentEmployeeKey,
    DepartmentKey,
    Employee,
    EmployeeKey,
    Record,
)

__all__ = [
    "RECONCILIATION_ORDER",
    "Department",
    "DepartmentEmployee",
    "DepartmentEmployeeKey",
    "DepartmentKey",
    "Employee",
    "EmployeeKey",
    "EntityKind",
    "Record",
]
