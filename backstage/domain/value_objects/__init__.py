"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass or Enum)
- Pure Python (no framework dependencies)
"""

from backstage.domain.value_objects.aggregate_kind import AggregateKind
from backstage.domain.value_objects.work_order_id import WorkOrderID
from backstage.domain.value_objects.work_order_item import WorkOrderItem
from backstage.domain.value_objects.work_order_status import WorkOrderStatus

__all__ = [
    "AggregateKind",
    "WorkOrderID",
    "WorkOrderItem",
    "WorkOrderStatus",
]
