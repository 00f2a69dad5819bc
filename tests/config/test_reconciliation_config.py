from __future__ import annotations

from pathlib import Path

import pytest

from empsync.config import (
    DEFAULT_BATCH_SIZE,
    ConfigurationError,
    get_database_config,
    get_input_files_config,
    get_reconciliation_config,
    get_storage_config,
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "EMPSYNC_BATCH_SIZE",
        "EMPSYNC_EMPLOYEES_CSV",
        "EMPSYNC_DEPARTMENTS_CSV",
        "EMPSYNC_DEPT_EMP_CSV",
        "EMPSYNC_CSV_DELIMITER",
        "EMPSYNC_DATA_DIR",
        "DATABASE_URI",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    config = get_reconciliation_config()

    assert config.batch_size == DEFAULT_BATCH_SIZE == 5
    assert config.inputs.employees == Path("employees_continued.csv")
    assert config.inputs.departments == Path("departments_continued.csv")
    assert config.inputs.department_employees == Path("employees_departments_related_dates.csv")
    assert config.inputs.delimiter == ","


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EMPSYNC_BATCH_SIZE", " 50 ")
    monkeypatch.setenv("EMPSYNC_EMPLOYEES_CSV", "/data/emp.csv")
    monkeypatch.setenv("EMPSYNC_CSV_DELIMITER", ";")

    config = get_reconciliation_config()

    assert config.batch_size == 50
    assert config.inputs.employees == Path("/data/emp.csv")
    assert config.inputs.delimiter == ";"


@pytest.mark.parametrize("value", ["0", "-1", "five", "2.5"])
def test_invalid_batch_size(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("EMPSYNC_BATCH_SIZE", value)

    with pytest.raises(ConfigurationError) as exc:
        get_reconciliation_config()

    assert "EMPSYNC_BATCH_SIZE" in str(exc.value)


def test_blank_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EMPSYNC_BATCH_SIZE", "   ")
    monkeypatch.setenv("EMPSYNC_DEPARTMENTS_CSV", "")

    config = get_reconciliation_config()

    assert config.batch_size == DEFAULT_BATCH_SIZE
    assert config.inputs.departments == Path("departments_continued.csv")


def test_multi_character_delimiter_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EMPSYNC_CSV_DELIMITER", "||")

    with pytest.raises(ConfigurationError):
        get_input_files_config()


def test_database_uri_prefers_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URI", "mysql+pymysql://user@localhost/employees")

    assert get_database_config().uri == "mysql+pymysql://user@localhost/employees"


def test_database_uri_defaults_to_sqlite_in_data_dir(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("EMPSYNC_DATA_DIR", str(tmp_path))

    storage = get_storage_config()
    uri = get_database_config(storage=storage).uri

    assert uri == f"sqlite+pysqlite:///{tmp_path.resolve() / 'empsync.db'}"
    assert tmp_path.exists()
