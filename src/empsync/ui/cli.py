from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from empsync.app import initialise_database, reconcile_csv_files
from empsync.config import (
    ConfigurationError,
    InputFilesConfig,
    configure_logging,
    get_input_files_config,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile employee CSV exports into a database")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every batch flush",
    )
    # Also accepted after the subcommand; SUPPRESS leaves the top-level value in place.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Log every batch flush",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    reconcile = subparsers.add_parser(
        "reconcile", parents=[common], help="Insert or update records from CSV files"
    )
    reconcile.add_argument(
        "--employees",
        type=Path,
        help="Employees CSV (defaults to config)",
    )
    reconcile.add_argument(
        "--departments",
        type=Path,
        help="Departments CSV (defaults to config)",
    )
    reconcile.add_argument(
        "--dept-emp",
        type=Path,
        help="Employee/department assignments CSV (defaults to config)",
    )
    reconcile.add_argument(
        "--batch-size",
        type=int,
        default=None,
        help="Records between batch flushes (defaults to config)",
    )
    reconcile.add_argument(
        "--database-uri",
        type=str,
        help="SQLAlchemy database URL (defaults to config)",
    )
    reconcile.add_argument(
        "--dry-run",
        action="store_true",
        help="Run the whole reconciliation, then roll it back",
    )

    init_db = subparsers.add_parser(
        "init-db", parents=[common], help="Create or upgrade the database schema"
    )
    init_db.add_argument(
        "--database-uri",
        type=str,
        help="SQLAlchemy database URL (defaults to config)",
    )

    return parser.parse_args(list(argv))


def _resolve_inputs(args: argparse.Namespace) -> InputFilesConfig:
    defaults = get_input_files_config()
    return InputFilesConfig(
        employees=args.employees or defaults.employees,
        departments=args.departments or defaults.departments,
        department_employees=args.dept_emp or defaults.department_employees,
        delimiter=defaults.delimiter,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    inputs: InputFilesConfig | None = None
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
        if parsed_args.command == "reconcile":
            if parsed_args.batch_size is not None and parsed_args.batch_size < 1:
                raise ValueError("Batch size must be positive")  # noqa: TRY301
            inputs = _resolve_inputs(parsed_args)
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "reconcile":
            result = reconcile_csv_files(
                inputs=inputs,
                batch_size=parsed_args.batch_size,
                database_uri=parsed_args.database_uri,
                dry_run=parsed_args.dry_run,
            )
            for kind, summary in result.summaries.items():
                log.info("%s: inserted=%s, updated=%s", kind, summary.inserted, summary.updated)
        elif parsed_args.command == "init-db":
            initialise_database(database_uri=parsed_args.database_uri)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
