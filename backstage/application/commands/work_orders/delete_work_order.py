"""Delete Work Order Command."""

import logging
from dataclasses import dataclass

from backstage.application.common.interfaces import Command, CommandHandler
from backstage.domain.ports import WorkOrderPort
from backstage.domain.value_objects.work_order_id import WorkOrderID

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteWorkOrderCommand(Command[None]):
    id: str


class DeleteWorkOrderHandler(CommandHandler[None]):
    def __init__(self, work_order_port: WorkOrderPort):
        self._work_order_port = work_order_port

    async def execute(self, command: DeleteWorkOrderCommand) -> None:
        work_order_id = WorkOrderID.from_value(command.id)

        logger.info(f"Deleting work order id={work_order_id}")
        await self._work_order_port.delete_by_id(work_order_id)
        logger.info(f"Work order id={work_order_id} deleted")
