"""
Redis Work Order Repository.

Implements WorkOrderPort on top of redis.asyncio.

Redis Data Structures:
- Document: STRING "{prefix}:{id}" holding the JSON document (work_order_document.py)
- Status index: SORTED SET "{prefix}:status:{STATUS}"
    member = work order id, score = created_at (epoch seconds)
    ZRANGE returns ids oldest first, which is the order find_all_by_status promises

Writes that touch both the document and the index go through a MULTI/EXEC
pipeline so readers never see one without the other. There is no optimistic
concurrency check: concurrent status updates for the same id are last-write-wins.
"""

import logging
from typing import Optional

from redis.asyncio import Redis

from backstage.config.settings import Config
from backstage.domain.entities.work_order import WorkOrder
from backstage.domain.ports import WorkOrderPort
from backstage.domain.value_objects.work_order_id import WorkOrderID
from backstage.domain.value_objects.work_order_status import WorkOrderStatus
from backstage.infrastructure.persistence.work_order_document import (
    deserialize,
    serialize,
)
from backstage.observability.metrics import (
    increment_status_update,
    increment_work_orders_stored,
)

logger = logging.getLogger(__name__)


class RedisWorkOrderRepository(WorkOrderPort):
    _redis: Redis

    def __init__(self, redis: Redis, key_prefix: str = Config.WORK_ORDER_KEY_PREFIX):
        self._redis = redis
        self._prefix = key_prefix

    def _key(self, work_order_id: WorkOrderID) -> str:
        return f"{self._prefix}:{work_order_id.value}"

    def _status_key(self, status: WorkOrderStatus) -> str:
        return f"{self._prefix}:status:{status.name}"

    async def create(self, work_order: WorkOrder) -> None:
        """Store the work order, replacing any previous document with the same id."""
        member = work_order.id.value
        logger.debug(f"Saving work order id={member}")

        async with self._redis.pipeline(transaction=True) as pipe:
            # A replaced document may have been indexed under another status
            for status in WorkOrderStatus:
                if status != work_order.status:
                    pipe.zrem(self._status_key(status), member)
            pipe.set(self._key(work_order.id), serialize(work_order))
            pipe.zadd(
                self._status_key(work_order.status),
                {member: work_order.created_at.timestamp()},
            )
            await pipe.execute()

        increment_work_orders_stored()

    async def find_by_id(self, work_order_id: WorkOrderID) -> Optional[WorkOrder]:
        logger.debug(f"Looking up work order id={work_order_id.value}")
        raw = await self._redis.get(self._key(work_order_id))
        return deserialize(raw) if raw is not None else None

    async def find_all_by_status(self, status: WorkOrderStatus) -> list[WorkOrder]:
        logger.debug(f"Querying status index for status={status.name}")
        ids = await self._redis.zrange(self._status_key(status), 0, -1)
        if not ids:
            return []

        raws = await self._redis.mget(
            [self._key(WorkOrderID.from_value(member)) for member in ids]
        )
        work_orders = []
        for member, raw in zip(ids, raws):
            if raw is None:
                logger.warning(
                    f"Status index {status.name} references missing work order id={member}"
                )
                continue
            work_orders.append(deserialize(raw))
        return work_orders

    async def update_status(
        self, work_order_id: WorkOrderID, status: WorkOrderStatus
    ) -> None:
        logger.info(
            f"Updating status of work order id={work_order_id.value} to {status.name}"
        )

        work_order = await self.find_by_id(work_order_id)
        if work_order is None:
            logger.error(
                f"Failed to update: work order id={work_order_id.value} not found"
            )
            return

        previous_status = work_order.status
        work_order.update_status(status)
        member = work_order_id.value

        async with self._redis.pipeline(transaction=True) as pipe:
            if previous_status != status:
                pipe.zrem(self._status_key(previous_status), member)
            pipe.zadd(
                self._status_key(status), {member: work_order.created_at.timestamp()}
            )
            pipe.set(self._key(work_order_id), serialize(work_order))
            await pipe.execute()

        increment_status_update(status.name)
        logger.info(f"Work order id={member} updated to status {status.name}")

    async def delete_by_id(self, work_order_id: WorkOrderID) -> None:
        """Delete the document and its index entry. Unknown ids are a no-op."""
        member = work_order_id.value
        logger.debug(f"Deleting work order id={member}")

        async with self._redis.pipeline(transaction=True) as pipe:
            pipe.delete(self._key(work_order_id))
            for status in WorkOrderStatus:
                pipe.zrem(self._status_key(status), member)
            await pipe.execute()
