"""Get Work Order Query."""

import logging
from dataclasses import dataclass

from backstage.application.common.interfaces import Query, QueryHandler
from backstage.application.dto.work_order import WorkOrderOutput
from backstage.domain.exceptions import NotFoundError
from backstage.domain.ports import WorkOrderPort
from backstage.domain.value_objects.aggregate_kind import AggregateKind
from backstage.domain.value_objects.work_order_id import WorkOrderID

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GetWorkOrderQuery(Query[WorkOrderOutput]):
    id: str


class GetWorkOrderHandler(QueryHandler[WorkOrderOutput]):
    def __init__(self, work_order_port: WorkOrderPort):
        self._work_order_port = work_order_port

    async def execute(self, query: GetWorkOrderQuery) -> WorkOrderOutput:
        work_order_id = WorkOrderID.from_value(query.id)
        logger.info(f"Retrieving work order by id={work_order_id}")

        work_order = await self._work_order_port.find_by_id(work_order_id)
        if work_order is None:
            raise NotFoundError.with_id(AggregateKind.WORK_ORDER, work_order_id)

        return WorkOrderOutput.from_entity(work_order)
