"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import DepartmentEmployeeStore, DepartmentStore, EmployeeStore, RecordStore
from .source import ReconciliationDataset, RecordSource
from .unit_of_work import ReconciliationRepositories, ReconciliationUnitOfWork

__all__ = [
    "DepartmentEmployeeStore",
    "DepartmentStore",
    "EmployeeStore",
    "ReconciliationDataset",
    "ReconciliationRepositories",
    "ReconciliationUnitOfWork",
    "RecordSource",
    "RecordStore",
]
