"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, positive_int_env_var
from .errors import ConfigurationError
from .logging import configure_logging
from .reconciliation import (
    DEFAULT_BATCH_SIZE,
    InputFilesConfig,
    ReconciliationConfig,
    get_input_files_config,
    get_reconciliation_config,
)
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "DEFAULT_BATCH_SIZE",
    "ConfigurationError",
    "DatabaseConfig",
    "InputFilesConfig",
    "ReconciliationConfig",
    "StorageConfig",
    "configure_logging",
    "get_database_config",
    "get_input_files_config",
    "get_reconciliation_config",
    "get_storage_config",
    "optional_env_var",
    "positive_int_env_var",
]
