"""
Messaging Layer - Redis Streams adapters.

- redis_stream_notification_adapter.py → NotificationPort implementation (outbound)
- order_consumer.py                    → accepted-order listener (inbound)
"""

from backstage.infrastructure.messaging.redis_stream_notification_adapter import (
    RedisStreamNotificationAdapter,
)
from backstage.infrastructure.messaging.order_consumer import OrderConsumer

__all__ = [
    "RedisStreamNotificationAdapter",
    "OrderConsumer",
]
