"""Pydantic models describing the rows of the input CSV files."""

from __future__ import annotations

from datetime import date, datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

DATE_FORMAT = "%Y-%m-%d"


def _parse_iso_date(value: object) -> object:
    if isinstance(value, str):
        return datetime.strptime(value.strip(), DATE_FORMAT).date()  # noqa: DTZ007
    return value


class CsvRow(BaseModel):
    """A positional CSV row; ``columns`` names the fields in file order."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    columns: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def from_fields(cls, fields: list[str]) -> CsvRow:
        if len(fields) != len(cls.columns):
            raise ValueError(f"expected {len(cls.columns)} columns, got {len(fields)}")
        return cls.model_validate(dict(zip(cls.columns, fields, strict=True)))


class EmployeeRow(CsvRow):
    columns: ClassVar[tuple[str, ...]] = (
        "emp_no",
        "first_name",
        "last_name",
        "gender",
        "hire_date",
        "birth_date",
    )

    emp_no: int
    first_name: str
    last_name: str
    gender: str = Field(min_length=1)
    hire_date: date
    birth_date: date

    _parse_dates = field_validator("hire_date", "birth_date", mode="before")(_parse_iso_date)


class DepartmentRow(CsvRow):
    columns: ClassVar[tuple[str, ...]] = ("dept_no", "dept_name")

    dept_no: str = Field(min_length=1)
    dept_name: str


class DepartmentEmployeeRow(CsvRow):
    columns: ClassVar[tuple[str, ...]] = ("emp_no", "dept_no", "from_date", "to_date")

    emp_no: int
    dept_no: str = Field(min_length=1)
    from_date: date
    to_date: date

    _parse_dates = field_validator("from_date", "to_date", mode="before")(_parse_iso_date)
