"""
WorkOrderStatus - Preparation state of a work order.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class WorkOrderStatus(Enum):
    RECEIVED = "RECEIVED"
    PREPARING = "PREPARING"
    READY = "READY"
    DELIVERED = "DELIVERED"

    @classmethod
    def from_value(cls, value: Optional[str]) -> WorkOrderStatus:
        """Parse a status token. Exact, case-sensitive match on the member name."""
        for status in cls:
            if status.name == value:
                return status
        raise ValueError(f"Invalid WorkOrderStatus: {value}")

    def __str__(self) -> str:
        return self.name
