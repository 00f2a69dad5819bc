from __future__ import annotations

import logging
from pathlib import Path

import pytest

from empsync.domain.errors import MalformedRecordError
from empsync.domain.reconciliation import ReconciliationResult
from empsync.ui import cli


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "EMPSYNC_EMPLOYEES_CSV",
        "EMPSYNC_DEPARTMENTS_CSV",
        "EMPSYNC_DEPT_EMP_CSV",
        "EMPSYNC_CSV_DELIMITER",
    ):
        monkeypatch.delenv(name, raising=False)


def _capture(monkeypatch: pytest.MonkeyPatch) -> dict[str, object]:
    captured: dict[str, object] = {}

    def fake_reconcile(**kwargs: object) -> ReconciliationResult:
        captured.update(kwargs)
        return ReconciliationResult()

    monkeypatch.setattr(cli, "reconcile_csv_files", fake_reconcile)
    return captured


def test_reconcile_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = _capture(monkeypatch)

    cli.main(["reconcile"])

    inputs = captured["inputs"]
    assert isinstance(inputs, cli.InputFilesConfig)
    assert inputs.employees == Path("employees_continued.csv")
    assert captured["batch_size"] is None
    assert captured["database_uri"] is None
    assert captured["dry_run"] is False


def test_reconcile_with_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = _capture(monkeypatch)

    cli.main(
        [
            "reconcile",
            "--verbose",
            "--employees",
            "e.csv",
            "--departments",
            "d.csv",
            "--dept-emp",
            "de.csv",
            "--batch-size",
            "20",
            "--database-uri",
            "sqlite+pysqlite:///:memory:",
            "--dry-run",
        ]
    )

    inputs = captured["inputs"]
    assert isinstance(inputs, cli.InputFilesConfig)
    assert (inputs.employees, inputs.departments, inputs.department_employees) == (
        Path("e.csv"),
        Path("d.csv"),
        Path("de.csv"),
    )
    assert captured["batch_size"] == 20
    assert captured["database_uri"] == "sqlite+pysqlite:///:memory:"
    assert captured["dry_run"] is True


def test_invalid_batch_size_exits_with_usage_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _capture(monkeypatch)

    with pytest.raises(SystemExit) as exc:
        cli.main(["reconcile", "--batch-size", "0"])

    assert exc.value.code == 2


def test_reconciliation_failure_exits_with_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_reconcile(**_: object) -> ReconciliationResult:
        raise MalformedRecordError("bad row")

    monkeypatch.setattr(cli, "reconcile_csv_files", failing_reconcile)

    with pytest.raises(SystemExit) as exc:
        cli.main(["reconcile"])

    assert exc.value.code == 1


def test_init_db_forwards_database_uri(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}
    monkeypatch.setattr(cli, "initialise_database", lambda **kwargs: captured.update(kwargs))

    cli.main(["init-db", "--database-uri", "sqlite+pysqlite:///:memory:"])

    assert captured == {"database_uri": "sqlite+pysqlite:///:memory:"}


@pytest.mark.parametrize(
    ("argv", "expected_level"),
    [
        (["reconcile"], logging.INFO),
        (["--verbose", "reconcile"], logging.DEBUG),
        (["reconcile", "--verbose"], logging.DEBUG),
        (["--verbose", "reconcile", "--verbose"], logging.DEBUG),
        (["init-db", "--verbose"], logging.DEBUG),
    ],
)
def test_verbose_is_accepted_before_or_after_the_subcommand(
    monkeypatch: pytest.MonkeyPatch, argv: list[str], expected_level: int
) -> None:
    _capture(monkeypatch)
    monkeypatch.setattr(cli, "initialise_database", lambda **_: None)
    levels: list[int] = []
    monkeypatch.setattr(cli, "configure_logging", lambda *, level: levels.append(level))

    cli.main(argv)

    assert levels == [expected_level]
