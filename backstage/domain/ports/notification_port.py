"""
Notification Port - Broadcasts work-order status changes to downstream systems.
Implementation: backstage/infrastructure/messaging/redis_stream_notification_adapter.py
"""

from abc import ABC, abstractmethod

from backstage.domain.value_objects.work_order_id import WorkOrderID
from backstage.domain.value_objects.work_order_status import WorkOrderStatus


class NotificationPort(ABC):
    @abstractmethod
    async def send_work_order_status_update_notification(
        self, work_order_id: WorkOrderID, status: WorkOrderStatus
    ) -> None: ...
