"""Pending insert/update batches for a single entity kind."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Hashable

    from empsync.domain.model import EntityKind
    from empsync.domain.ports.persistence import RecordStore

log = logging.getLogger(__name__)


class _Keyed(Protocol):
    @property
    def key(self) -> Hashable: ...


@dataclass(frozen=True, slots=True)
class FlushResult:
    inserted: int = 0
    updated: int = 0

    @property
    def empty(self) -> bool:
        return not (self.inserted or self.updated)


class StatementAccumulator[TRecord: _Keyed]:
    """Collects writes for one kind and submits them to its store in two batches.

    A record sits in exactly one of the two pending sequences until the next
    ``flush``. Both sequences keep source order, and a flush always writes the
    insert batch before the update batch.
    """

    def __init__(self, kind: EntityKind, store: RecordStore[TRecord, Any]) -> None:
        self.kind = kind
        self._store = store
        self._pending_inserts: list[TRecord] = []
        self._pending_updates: list[TRecord] = []
        self._pending_keys: set[Hashable] = set()

    @property
    def store(self) -> RecordStore[TRecord, Any]:
        return self._store

    @property
    def pending_inserts(self) -> tuple[TRecord, ...]:
        return tuple(self._pending_inserts)

    @property
    def pending_updates(self) -> tuple[TRecord, ...]:
        return tuple(self._pending_updates)

    def __len__(self) -> int:
        return len(self._pending_inserts) + len(self._pending_updates)

    def is_pending(self, key: Hashable) -> bool:
        return key in self._pending_keys

    def add_insert(self, record: TRecord) -> None:
        self._track(record)
        self._pending_inserts.append(record)

    def add_update(self, record: TRecord) -> None:
        self._track(record)
        self._pending_updates.append(record)

    def flush(self) -> FlushResult:
        """Write both pending batches; a no-op when nothing is pending."""

        if not self._pending_inserts and not self._pending_updates:
            return FlushResult()

        inserts = self._pending_inserts
        updates = self._pending_updates
        if inserts:
            self._store.insert_many(inserts)
        if updates:
            self._store.update_many(updates)

        self._pending_inserts = []
        self._pending_updates = []
        self._pending_keys.clear()

        result = FlushResult(inserted=len(inserts), updated=len(updates))
        log.debug(
            "Flushed %s batch: inserted=%s, updated=%s",
            self.kind,
            result.inserted,
            result.updated,
        )
        return result

    def _track(self, record: TRecord) -> None:
        key = record.key
        if key in self._pending_keys:
            raise ValueError(f"{self.kind} {key!r} already has a pending write; flush first")
        self._pending_keys.add(key)
