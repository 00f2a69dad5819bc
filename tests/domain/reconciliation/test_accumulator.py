from __future__ import annotations

import pytest

from empsync.domain.model import EntityKind
from empsync.domain.reconciliation import StatementAccumulator
from tests.helpers.records import FakeRecordStore, make_employee


def test_add_does_not_touch_the_store() -> None:
    store = FakeRecordStore(EntityKind.EMPLOYEE)
    accumulator = StatementAccumulator(EntityKind.EMPLOYEE, store)

    accumulator.add_insert(make_employee(1))
    accumulator.add_update(make_employee(2))

    assert store.journal == []
    assert len(accumulator) == 2
    assert accumulator.is_pending(1)
    assert accumulator.is_pending(2)


def test_flush_writes_inserts_before_updates_in_source_order() -> None:
    existing = [make_employee(2), make_employee(4)]
    store = FakeRecordStore(EntityKind.EMPLOYEE, existing)
    accumulator = StatementAccumulator(EntityKind.EMPLOYEE, store)

    accumulator.add_update(make_employee(4, last_name="Changed"))
    accumulator.add_insert(make_employee(3))
    accumulator.add_update(make_employee(2, last_name="Changed"))
    accumulator.add_insert(make_employee(1))

    result = accumulator.flush()

    assert result.inserted == 2
    assert result.updated == 2
    assert store.writes() == [
        (EntityKind.EMPLOYEE, "insert", (3, 1)),
        (EntityKind.EMPLOYEE, "update", (4, 2)),
    ]
    assert store.rows[4].last_name == "Changed"


def test_flush_clears_pending_batches() -> None:
    store = FakeRecordStore(EntityKind.EMPLOYEE)
    accumulator = StatementAccumulator(EntityKind.EMPLOYEE, store)
    accumulator.add_insert(make_employee(1))

    accumulator.flush()

    assert len(accumulator) == 0
    assert accumulator.pending_inserts == ()
    assert accumulator.pending_updates == ()
    assert not accumulator.is_pending(1)


def test_flush_without_pending_records_is_a_noop() -> None:
    store = FakeRecordStore(EntityKind.EMPLOYEE)
    accumulator = StatementAccumulator(EntityKind.EMPLOYEE, store)

    first = accumulator.flush()
    second = accumulator.flush()

    assert first.empty
    assert second.empty
    assert store.journal == []


def test_flush_skips_the_empty_batch() -> None:
    store = FakeRecordStore(EntityKind.EMPLOYEE, [make_employee(1)])
    accumulator = StatementAccumulator(EntityKind.EMPLOYEE, store)
    accumulator.add_update(make_employee(1, first_name="Eva"))

    accumulator.flush()

    assert store.writes() == [(EntityKind.EMPLOYEE, "update", (1,))]


def test_same_key_cannot_be_pending_twice() -> None:
    accumulator = StatementAccumulator(EntityKind.EMPLOYEE, FakeRecordStore(EntityKind.EMPLOYEE))
    accumulator.add_insert(make_employee(1))

    with pytest.raises(ValueError, match="pending"):
        accumulator.add_update(make_employee(1))

    assert accumulator.pending_updates == ()
