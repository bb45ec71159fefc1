"""Work order DTOs returned by the query handlers."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from backstage.domain.entities.work_order import WorkOrder
from backstage.domain.value_objects.work_order_item import WorkOrderItem


class WorkOrderItemOutput(BaseModel):
    model_config = {"frozen": True}

    # Items are not validated on construction, so either field may be missing
    name: Optional[str]
    quantity: Optional[int]

    @classmethod
    def from_entity(cls, item: WorkOrderItem) -> WorkOrderItemOutput:
        return cls(name=item.name, quantity=item.quantity)


class WorkOrderOutput(BaseModel):
    """Read-only view of a WorkOrder. Items keep their submission order."""

    model_config = {"frozen": True}

    id: str
    order_number: str
    items: tuple[WorkOrderItemOutput, ...]
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, work_order: WorkOrder) -> WorkOrderOutput:
        return cls(
            id=work_order.id.value,
            order_number=work_order.order_number,
            items=tuple(WorkOrderItemOutput.from_entity(i) for i in work_order.items),
            status=work_order.status.name,
            created_at=work_order.created_at,
            updated_at=work_order.updated_at,
        )
