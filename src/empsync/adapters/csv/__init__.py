"""CSV adapter producing reconciliation datasets."""

from __future__ import annotations

from .schema import DepartmentEmployeeRow, DepartmentRow, EmployeeRow
from .source import CsvRecordSource, read_rows

__all__ = [
    "CsvRecordSource",
    "DepartmentEmployeeRow",
    "DepartmentRow",
    "EmployeeRow",
    "read_rows",
]
