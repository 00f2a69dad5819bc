"""Translate validated CSV rows into domain records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from empsync.domain.model import Department, DepartmentEmployee, Employee

if TYPE_CHECKING:
    from .schema import DepartmentEmployeeRow, DepartmentRow, EmployeeRow


def translate_employee(row: EmployeeRow) -> Employee:
    return Employee(
        emp_no=row.emp_no,
        first_name=row.first_name,
        last_name=row.last_name,
        gender=row.gender,
        hire_date=row.hire_date,
        birth_date=row.birth_date,
    )


def translate_department(row: DepartmentRow) -> Department:
    return Department(dept_no=row.dept_no, dept_name=row.dept_name)


def translate_department_employee(row: DepartmentEmployeeRow) -> DepartmentEmployee:
    return DepartmentEmployee(
        emp_no=row.emp_no,
        dept_no=row.dept_no,
        from_date=row.from_date,
        to_date=row.to_date,
    )
