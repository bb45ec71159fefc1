"""
Redis Stream Notification Adapter.

Implements NotificationPort by appending one entry per status change to the
order-status stream. Entry field "payload" holds:

    {"data": {"id": "o1", "status": "PREPARING"}}

Redis errors propagate to the caller; encoding problems become InternalError.
"""

import json
import logging

from redis.asyncio import Redis

from backstage.config.settings import Config
from backstage.domain.exceptions import InternalError
from backstage.domain.ports import NotificationPort
from backstage.domain.value_objects.work_order_id import WorkOrderID
from backstage.domain.value_objects.work_order_status import WorkOrderStatus
from backstage.observability.metrics import increment_notification_published

logger = logging.getLogger(__name__)

PAYLOAD_FIELD = "payload"


class RedisStreamNotificationAdapter(NotificationPort):
    def __init__(
        self,
        redis: Redis,
        stream: str = Config.ORDER_STATUS_STREAM,
        maxlen: int = Config.ORDER_STATUS_STREAM_MAXLEN,
    ):
        self._redis = redis
        self._stream = stream
        self._maxlen = maxlen

    async def send_work_order_status_update_notification(
        self, work_order_id: WorkOrderID, status: WorkOrderStatus
    ) -> None:
        try:
            payload = json.dumps(
                {"data": {"id": work_order_id.value, "status": status.name}}
            )
        except (TypeError, ValueError) as e:
            raise InternalError("Failed to encode work order status notification") from e

        message_id = await self._redis.xadd(
            self._stream,
            {PAYLOAD_FIELD: payload},
            maxlen=self._maxlen,
            approximate=True,
        )
        increment_notification_published(status.name)

        logger.info(
            f"Sent status update notification for work order id={work_order_id.value} "
            f"with status={status.name}. MessageId: {message_id}"
        )
