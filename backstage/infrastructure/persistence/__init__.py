"""
Persistence Layer - Database implementations.

Contains the Redis implementation of the WorkOrderPort.
"""

from backstage.infrastructure.persistence.redis_work_order_repository import (
    RedisWorkOrderRepository,
)

__all__ = [
    "RedisWorkOrderRepository",
]
