"""Explicit state carried through one reconciliation run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from empsync.domain.model import EntityKind
from empsync.domain.reconciliation.accumulator import StatementAccumulator

if TYPE_CHECKING:
    from empsync.domain.ports.unit_of_work import ReconciliationRepositories

DEFAULT_BATCH_SIZE = 5


@dataclass(slots=True)
class KindSummary:
    inserted: int = 0
    updated: int = 0

    @property
    def total(self) -> int:
        return self.inserted + self.updated


@dataclass(slots=True)
class ReconciliationResult:
    """Outcome of a reconciliation run."""

    summaries: dict[EntityKind, KindSummary] = field(
        default_factory=lambda: {kind: KindSummary() for kind in EntityKind}
    )
    processed: int = 0
    flushes: int = 0
    committed: bool = False

    @property
    def inserted(self) -> int:
        return sum(summary.inserted for summary in self.summaries.values())

    @property
    def updated(self) -> int:
        return sum(summary.updated for summary in self.summaries.values())


@dataclass(slots=True)
class RunContext:
    """Counter, batch size and accumulators for a single run.

    The counter is shared by all entity kinds; it is never reset between kinds.
    """

    batch_size: int
    accumulators: dict[EntityKind, StatementAccumulator[Any]]
    counter: int = 0
    result: ReconciliationResult = field(default_factory=ReconciliationResult)

    def __post_init__(self) -> None:
        if self.batch_size < 1:
            raise ValueError(f"Batch size must be positive, got {self.batch_size}")

    @classmethod
    def for_repositories(
        cls,
        repositories: ReconciliationRepositories,
        *,
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> RunContext:
        accumulators: dict[EntityKind, StatementAccumulator[Any]] = {
            kind: StatementAccumulator(kind, repositories.for_kind(kind)) for kind in EntityKind
        }
        return cls(batch_size=batch_size, accumulators=accumulators)

    def accumulator(self, kind: EntityKind) -> StatementAccumulator[Any]:
        return self.accumulators[kind]

    def tick(self) -> bool:
        """Count one routed record and report whether the flush cadence was hit."""

        self.counter += 1
        return self.counter % self.batch_size == 0
