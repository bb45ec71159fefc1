"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Validates its invariants on every construction path
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from backstage.domain.entities.work_order import WorkOrder
from backstage.domain.entities.work_order_validator import (
    WorkOrderValidator,
    validate_work_order,
)

__all__ = [
    "WorkOrder",
    "WorkOrderValidator",
    "validate_work_order",
]
