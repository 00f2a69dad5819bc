"""Enumerations shared across the domain model."""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class EntityKind(StrEnum):
    EMPLOYEE = "employee"
    DEPARTMENT = "department"
    DEPARTMENT_EMPLOYEE = "department_employee"


RECONCILIATION_ORDER: Final[tuple[EntityKind, ...]] = (
    EntityKind.EMPLOYEE,
    EntityKind.DEPARTMENT,
    EntityKind.DEPARTMENT_EMPLOYEE,
)
"""Processing order; associations come last so their referenced keys are handled first."""
