"""
Inbound order message schema.

Entry field "payload" of the orders stream holds:

    {"data": {"id": "o1", "orderNumber": "ORD-1",
              "items": [{"name": "Burger", "quantity": 2}]}}

Only the shape is checked here; business rules belong to the WorkOrder aggregate.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from backstage.application.commands.work_orders import (
    CreateWorkOrderCommand,
    CreateWorkOrderItemCommand,
)


class ReceivedOrderItem(BaseModel):
    name: Optional[str] = None
    quantity: Optional[int] = None


class ReceivedOrder(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    order_number: Optional[str] = Field(default=None, alias="orderNumber")
    items: list[ReceivedOrderItem] = Field(default_factory=list)

    def to_command(self) -> CreateWorkOrderCommand:
        return CreateWorkOrderCommand(
            id=self.id,
            order_number=self.order_number,
            items=tuple(
                CreateWorkOrderItemCommand(name=item.name, quantity=item.quantity)
                for item in self.items
            ),
        )


class ReceivedOrderMessage(BaseModel):
    data: ReceivedOrder
