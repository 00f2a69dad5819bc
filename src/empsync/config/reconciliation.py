"""Reconciliation run configuration: batch size and input files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from empsync.domain.reconciliation.context import DEFAULT_BATCH_SIZE

from .env import optional_env_var, positive_int_env_var
from .errors import ConfigurationError

DEFAULT_DELIMITER: Final[str] = ","
DEFAULT_EMPLOYEES_CSV: Final[str] = "employees_continued.csv"
DEFAULT_DEPARTMENTS_CSV: Final[str] = "departments_continued.csv"
DEFAULT_DEPT_EMP_CSV: Final[str] = "employees_departments_related_dates.csv"


@dataclass(frozen=True, slots=True)
class InputFilesConfig:
    employees: Path
    departments: Path
    department_employees: Path
    delimiter: str = DEFAULT_DELIMITER


@dataclass(frozen=True, slots=True)
class ReconciliationConfig:
    batch_size: int
    inputs: InputFilesConfig


def get_input_files_config() -> InputFilesConfig:
    delimiter = optional_env_var("EMPSYNC_CSV_DELIMITER") or DEFAULT_DELIMITER
    if len(delimiter) != 1:
        raise ConfigurationError(f"EMPSYNC_CSV_DELIMITER must be one character, got {delimiter!r}")
    return InputFilesConfig(
        employees=Path(optional_env_var("EMPSYNC_EMPLOYEES_CSV") or DEFAULT_EMPLOYEES_CSV),
        departments=Path(optional_env_var("EMPSYNC_DEPARTMENTS_CSV") or DEFAULT_DEPARTMENTS_CSV),
        department_employees=Path(
            optional_env_var("EMPSYNC_DEPT_EMP_CSV") or DEFAULT_DEPT_EMP_CSV
        ),
        delimiter=delimiter,
    )


def get_reconciliation_config() -> ReconciliationConfig:
    return ReconciliationConfig(
        batch_size=positive_int_env_var("EMPSYNC_BATCH_SIZE", DEFAULT_BATCH_SIZE),
        inputs=get_input_files_config(),
    )
