"""Translation of SQLAlchemy exceptions into reconciliation errors."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

from sqlalchemy.exc import DBAPIError, IntegrityError, InterfaceError, OperationalError

from empsync.domain.errors import ConstraintViolationError, StoreUnavailableError

if TYPE_CHECKING:
    from collections.abc import Iterator


@contextmanager
def translate_store_errors() -> Iterator[None]:
    """Re-raise driver failures as domain errors, keeping the original as the cause."""

    try:
        yield
    except IntegrityError as exc:
        raise ConstraintViolationError(str(exc.orig)) from exc
    except (OperationalError, InterfaceError) as exc:
        raise StoreUnavailableError(str(exc.orig)) from exc
    except DBAPIError as exc:
        if exc.connection_invalidated:
            raise StoreUnavailableError(str(exc.orig)) from exc
        raise
