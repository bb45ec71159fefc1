"""List Work Orders Query - exact-status lookup, in the order the port returns."""

import logging
from dataclasses import dataclass

from backstage.application.common.interfaces import Query, QueryHandler
from backstage.application.dto.work_order import WorkOrderOutput
from backstage.domain.ports import WorkOrderPort
from backstage.domain.value_objects.work_order_status import WorkOrderStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListWorkOrdersQuery(Query[list[WorkOrderOutput]]):
    status: str


class ListWorkOrdersHandler(QueryHandler[list[WorkOrderOutput]]):
    def __init__(self, work_order_port: WorkOrderPort):
        self._work_order_port = work_order_port

    async def execute(self, query: ListWorkOrdersQuery) -> list[WorkOrderOutput]:
        # Raises ValueError before the port is touched
        status = WorkOrderStatus.from_value(query.status)

        logger.info(f"Listing work orders by status={status}")
        work_orders = await self._work_order_port.find_all_by_status(status)
        logger.info(f"Found {len(work_orders)} work orders with status={status}")

        return [WorkOrderOutput.from_entity(work_order) for work_order in work_orders]
