"""
Order Consumer - Turns accepted upstream orders into work orders.

Reads the orders stream through a consumer group and runs each message through
the create-work-order use case.

Acknowledgement policy:
- Created                    → XACK
- Undecodable message        → log, XACK (it can never succeed)
- NotificationError or ValueError (invalid order) → log, XACK (it can never succeed)
- Anything else (e.g. Redis down while storing) → log, leave pending; every poll
  retries this consumer's pending entries before reading new ones

Usage:
    consumer = OrderConsumer(redis, handle=handler.execute)
    await consumer.run()   # until consumer.stop()
"""

import logging
from typing import Awaitable, Callable, Optional

from pydantic import ValidationError
from redis.asyncio import Redis
from redis.exceptions import ResponseError

from backstage.application.commands.work_orders import CreateWorkOrderCommand
from backstage.config.logging_config import correlation_id_var
from backstage.config.settings import Config
from backstage.domain.exceptions import NotificationError
from backstage.infrastructure.messaging.received_order import ReceivedOrderMessage
from backstage.observability.metrics import OrderMessageOutcome, increment_order_message

logger = logging.getLogger(__name__)

PAYLOAD_FIELD = "payload"

CreateWorkOrder = Callable[[CreateWorkOrderCommand], Awaitable[None]]


class OrderConsumer:
    def __init__(
        self,
        redis: Redis,
        handle: CreateWorkOrder,
        stream: str = Config.ORDER_STREAM,
        group: str = Config.ORDER_CONSUMER_GROUP,
        consumer_name: str = Config.ORDER_CONSUMER_NAME,
        batch_size: int = Config.ORDER_CONSUMER_BATCH,
        block_ms: Optional[int] = Config.ORDER_CONSUMER_BLOCK_MS,
    ):
        self._redis = redis
        self._handle = handle
        self._stream = stream
        self._group = group
        self._consumer_name = consumer_name
        self._batch_size = batch_size
        self._block_ms = block_ms
        self._running = False

    @staticmethod
    def decode(fields: dict) -> CreateWorkOrderCommand:
        """Decode one stream entry. Raises ValueError/KeyError on malformed input."""
        message = ReceivedOrderMessage.model_validate_json(fields[PAYLOAD_FIELD])
        return message.data.to_command()

    async def ensure_group(self) -> None:
        """Create the consumer group (and the stream) if it does not exist yet."""
        try:
            await self._redis.xgroup_create(
                self._stream, self._group, id="0", mkstream=True
            )
            logger.info(f"Created consumer group {self._group} on {self._stream}")
        except ResponseError as e:
            if "BUSYGROUP" not in str(e):
                raise

    async def poll_once(self) -> int:
        """
        Retry this consumer's pending entries, then read and process one new batch.

        Returns:
            How many work orders were created
        """
        created = await self._process_batch(
            await self._redis.xreadgroup(
                self._group,
                self._consumer_name,
                {self._stream: "0"},
                count=self._batch_size,
            )
        )
        created += await self._process_batch(
            await self._redis.xreadgroup(
                self._group,
                self._consumer_name,
                {self._stream: ">"},
                count=self._batch_size,
                block=self._block_ms,
            )
        )
        return created

    async def _process_batch(self, response) -> int:
        created = 0
        for _stream, messages in response or []:
            for message_id, fields in messages:
                if not fields:
                    # Pending entry whose data was trimmed from the stream
                    logger.warning(
                        f"Dropping pending order message {message_id} with no data"
                    )
                    await self._ack(message_id)
                    continue
                if await self._process(message_id, fields):
                    created += 1
        return created

    async def _process(self, message_id: str, fields: dict) -> bool:
        correlation_id_var.set(message_id)
        logger.info(f"Received order message {message_id}")

        try:
            command = self.decode(fields)
        except (ValidationError, ValueError, KeyError) as e:
            logger.error(f"Discarding undecodable order message {message_id}: {e}")
            increment_order_message(OrderMessageOutcome.UNDECODABLE)
            await self._ack(message_id)
            return False

        try:
            await self._handle(command)
        except NotificationError as e:
            logger.error(
                f"Discarding invalid order message {message_id}: "
                f"{[error.message for error in e.errors]}"
            )
            increment_order_message(OrderMessageOutcome.REJECTED)
            await self._ack(message_id)
            return False
        except ValueError as e:
            logger.error(f"Discarding invalid order message {message_id}: {e}")
            increment_order_message(OrderMessageOutcome.REJECTED)
            await self._ack(message_id)
            return False
        except Exception:
            logger.exception(
                f"Failed to process order message {message_id}, leaving it pending"
            )
            increment_order_message(OrderMessageOutcome.FAILED)
            return False

        increment_order_message(OrderMessageOutcome.CREATED)
        await self._ack(message_id)
        return True

    async def _ack(self, message_id: str) -> None:
        await self._redis.xack(self._stream, self._group, message_id)

    async def run(self) -> None:
        await self.ensure_group()
        self._running = True
        logger.info(
            f"Consuming {self._stream} as {self._group}/{self._consumer_name}"
        )
        while self._running:
            await self.poll_once()
        logger.info("Order consumer stopped")

    def stop(self) -> None:
        self._running = False
