"""
Create Work Order Command.

Issued when an upstream order is accepted. Items and the aggregate are built
under a Notification so every violation is reported together; the port only
ever receives a valid WorkOrder.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from backstage.application.common.interfaces import Command, CommandHandler
from backstage.domain.entities.work_order import WorkOrder
from backstage.domain.exceptions import NotificationError
from backstage.domain.ports import WorkOrderPort
from backstage.domain.validation.notification import Notification
from backstage.domain.value_objects.work_order_item import WorkOrderItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateWorkOrderItemCommand:
    name: Optional[str]
    quantity: Optional[int]


@dataclass(frozen=True)
class CreateWorkOrderCommand(Command[None]):
    id: Optional[str]
    order_number: str
    items: tuple[CreateWorkOrderItemCommand, ...] = field(default_factory=tuple)


class CreateWorkOrderHandler(CommandHandler[None]):
    _work_order_port: WorkOrderPort

    def __init__(self, work_order_port: WorkOrderPort):
        self._work_order_port = work_order_port

    async def execute(self, command: CreateWorkOrderCommand) -> None:
        logger.info(
            f"Receiving work order id={command.id}, order_number={command.order_number}"
        )

        notification = Notification()

        items = [
            notification.validate(
                lambda item=item: WorkOrderItem.create(item.name, item.quantity)
            )
            for item in command.items or ()
        ]

        work_order = notification.validate(
            lambda: WorkOrder.create(command.id, command.order_number, items)
        )

        if notification.has_error():
            raise NotificationError(
                "could not create an aggregate workorder", notification
            )

        await self._work_order_port.create(work_order)
        logger.info(f"Work order id={command.id} created")
