"""Record source reading the three employee CSV exports."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

from pydantic import ValidationError

from empsync.domain.errors import MalformedRecordError
from empsync.domain.ports.source import ReconciliationDataset

from .schema import CsvRow, DepartmentEmployeeRow, DepartmentRow, EmployeeRow
from .translator import translate_department, translate_department_employee, translate_employee

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

log = logging.getLogger(__name__)


def read_rows[TRow: CsvRow, TRecord](
    path: Path,
    row_type: type[TRow],
    translate: Callable[[TRow], TRecord],
    *,
    delimiter: str = ",",
) -> list[TRecord]:
    """Parse ``path`` into records, skipping the header row and blank lines.

    Raises ``MalformedRecordError`` for the first row that does not validate.
    """

    records: list[TRecord] = []
    try:
        with path.open(newline="", encoding="utf-8") as handle:
            reader = csv.reader(handle, delimiter=delimiter)
            next(reader, None)
            for fields in reader:
                if not any(field.strip() for field in fields):
                    continue
                try:
                    row = cast(TRow, row_type.from_fields(fields))
                except (ValidationError, ValueError) as exc:
                    raise MalformedRecordError(
                        _describe(exc), path=path, line=reader.line_num
                    ) from exc
                records.append(translate(row))
    except (csv.Error, UnicodeDecodeError) as exc:
        raise MalformedRecordError(str(exc), path=path) from exc
    except OSError as exc:
        raise MalformedRecordError(f"cannot read input: {exc.strerror}", path=path) from exc

    log.debug("Read %s %s rows from %s", len(records), row_type.__name__, path)
    return records


def _describe(exc: ValidationError | ValueError) -> str:
    if isinstance(exc, ValidationError):
        return "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
    return str(exc)


@dataclass(frozen=True, slots=True)
class CsvRecordSource:
    """Reads all three files eagerly so a bad row aborts before any store access."""

    employees_path: Path
    departments_path: Path
    department_employees_path: Path
    delimiter: str = ","

    def load(self) -> ReconciliationDataset:
        return ReconciliationDataset(
            employees=read_rows(
                self.employees_path, EmployeeRow, translate_employee, delimiter=self.delimiter
            ),
            departments=read_rows(
                self.departments_path,
                DepartmentRow,
                translate_department,
                delimiter=self.delimiter,
            ),
            department_employees=read_rows(
                self.department_employees_path,
                DepartmentEmployeeRow,
                translate_department_employee,
                delimiter=self.delimiter,
            ),
        )
