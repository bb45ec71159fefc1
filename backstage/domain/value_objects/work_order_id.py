"""
WorkOrderID Value Object - Opaque identifier of a work order.

No emptiness check here: presence is an aggregate invariant, enforced by
the WorkOrder validator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class WorkOrderID:
    value: Optional[str]  # upstream order id, used as-is

    @classmethod
    def from_value(cls, value: Optional[str]) -> WorkOrderID:
        return cls(value)

    def __str__(self) -> str:
        return "" if self.value is None else self.value
