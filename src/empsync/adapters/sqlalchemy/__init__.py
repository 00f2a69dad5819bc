"""SQLAlchemy adapter package for empsync."""

from __future__ import annotations

from .repositories import (
    SqlAlchemyDepartmentEmployeeStore,
    SqlAlchemyDepartmentStore,
    SqlAlchemyEmployeeStore,
    SqlAlchemyRecordStore,
)
from .tables import (
    TABLE_BY_KIND,
    create_database_engine,
    departments_table,
    dept_emp_table,
    employees_table,
    enforce_foreign_keys,
    metadata,
)

__all__ = [
    "TABLE_BY_KIND",
    "SqlAlchemyDepartmentEmployeeStore",
    "SqlAlchemyDepartmentStore",
    "SqlAlchemyEmployeeStore",
    "SqlAlchemyRecordStore",
    "create_database_engine",
    "departments_table",
    "dept_emp_table",
    "employees_table",
    "enforce_foreign_keys",
    "metadata",
]
