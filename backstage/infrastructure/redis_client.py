"""
Async Redis client shared by the work-order store and the order streams.

The consumer's blocking XREADGROUP must fit inside the socket timeout, so the
read timeout is never shorter than ORDER_CONSUMER_BLOCK_MS plus one second.
"""

import logging
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

import redis.asyncio as redis
from redis.asyncio import Redis

from backstage.config.settings import Config

logger = logging.getLogger(__name__)


def redact_url(url: str) -> str:
    """Hide the password of a redis:// URL before it reaches the logs."""
    parts = urlsplit(url)
    if parts.password is None:
        return url
    netloc = parts.netloc.replace(f":{parts.password}@", ":***@", 1)
    return urlunsplit(parts._replace(netloc=netloc))


def socket_timeout_for(
    block_ms: Optional[int] = Config.ORDER_CONSUMER_BLOCK_MS,
    timeout: float = Config.REDIS_SOCKET_TIMEOUT,
) -> float:
    if not block_ms:
        return timeout
    return max(timeout, block_ms / 1000 + 1)


async def create_redis_client(url: Optional[str] = None) -> Redis:
    """
    Connect to Redis and check the connection.

    Raises:
        redis.ConnectionError: If Redis is not reachable
    """
    url = url or Config.REDIS_URL
    client = redis.from_url(
        url,
        decode_responses=True,
        socket_timeout=socket_timeout_for(),
        socket_connect_timeout=Config.REDIS_SOCKET_TIMEOUT,
        health_check_interval=Config.REDIS_HEALTH_CHECK_INTERVAL,
    )

    await client.ping()
    logger.info(f"Connected to Redis at {redact_url(url)}")
    return client


async def close_redis_client(client: Redis) -> None:
    await client.aclose()
    logger.info("Redis connection closed")
