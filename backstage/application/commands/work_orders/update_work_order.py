"""
Update Work Order Command.

Persists the new status, then broadcasts it. The notification is sent only
after the persistence call returns; if persistence raises, nothing is sent.
A failed notification after a successful write is not compensated.
"""

import logging
from dataclasses import dataclass

from backstage.application.common.interfaces import Command, CommandHandler
from backstage.domain.ports import NotificationPort, WorkOrderPort
from backstage.domain.value_objects.work_order_id import WorkOrderID
from backstage.domain.value_objects.work_order_status import WorkOrderStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateWorkOrderCommand(Command[None]):
    id: str
    status: str


class UpdateWorkOrderHandler(CommandHandler[None]):
    def __init__(
        self, work_order_port: WorkOrderPort, notification_port: NotificationPort
    ):
        self._work_order_port = work_order_port
        self._notification_port = notification_port

    async def execute(self, command: UpdateWorkOrderCommand) -> None:
        work_order_id = WorkOrderID.from_value(command.id)
        new_status = WorkOrderStatus.from_value(command.status)

        logger.info(f"Updating work order id={work_order_id} to status={new_status}")

        await self._work_order_port.update_status(work_order_id, new_status)
        await self._notification_port.send_work_order_status_update_notification(
            work_order_id, new_status
        )

        logger.info(f"Work order id={work_order_id} updated to status={new_status}")
