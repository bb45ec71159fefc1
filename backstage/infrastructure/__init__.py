"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- redis_client.py: async Redis client factory
- persistence/: Redis work-order store (WorkOrderPort)
- messaging/: Redis Streams notification publisher and order consumer
"""

from backstage.infrastructure.redis_client import close_redis_client, create_redis_client

__all__ = [
    "create_redis_client",
    "close_redis_client",
]
