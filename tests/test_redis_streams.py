"""
Tests for the Redis Streams adapters: status notifications out, accepted orders in.

Run with: pytest tests/test_redis_streams.py -v
"""

import json
from unittest.mock import AsyncMock

import pytest

from backstage.application.commands.work_orders import (
    CreateWorkOrderCommand,
    CreateWorkOrderHandler,
    CreateWorkOrderItemCommand,
)
from backstage.domain.value_objects import WorkOrderID, WorkOrderStatus
from backstage.infrastructure.messaging import (
    OrderConsumer,
    RedisStreamNotificationAdapter,
)
from backstage.infrastructure.persistence import RedisWorkOrderRepository

ORDERS = "test-orders"
GROUP = "test-group"


def _order_payload(**data):
    return {"payload": json.dumps({"data": data})}


async def _pending(redis) -> int:
    summary = await redis.xpending(ORDERS, GROUP)
    return summary["pending"]


@pytest.fixture()
def consumer_factory(redis):
    def factory(handle):
        return OrderConsumer(
            redis,
            handle=handle,
            stream=ORDERS,
            group=GROUP,
            consumer_name="test-consumer",
            batch_size=10,
            block_ms=None,
        )

    return factory


class TestRedisStreamNotificationAdapter:
    async def test_appends_status_message(self, redis):
        adapter = RedisStreamNotificationAdapter(redis, stream="test-status", maxlen=100)

        await adapter.send_work_order_status_update_notification(
            WorkOrderID("o1"), WorkOrderStatus.READY
        )

        entries = await redis.xrange("test-status")
        assert len(entries) == 1
        _message_id, fields = entries[0]
        assert json.loads(fields["payload"]) == {
            "data": {"id": "o1", "status": "READY"}
        }

    async def test_one_entry_per_notification_in_order(self, redis):
        adapter = RedisStreamNotificationAdapter(redis, stream="test-status", maxlen=100)

        for status in (WorkOrderStatus.PREPARING, WorkOrderStatus.READY):
            await adapter.send_work_order_status_update_notification(
                WorkOrderID("o1"), status
            )

        entries = await redis.xrange("test-status")
        statuses = [json.loads(fields["payload"])["data"]["status"] for _, fields in entries]
        assert statuses == ["PREPARING", "READY"]


class TestOrderConsumerDecode:
    def test_decodes_payload_into_command(self):
        command = OrderConsumer.decode(
            _order_payload(
                id="o1",
                orderNumber="ORD-1",
                items=[{"name": "Burger", "quantity": 2}],
            )
        )

        assert command == CreateWorkOrderCommand(
            id="o1",
            order_number="ORD-1",
            items=(CreateWorkOrderItemCommand(name="Burger", quantity=2),),
        )

    def test_missing_payload_field_raises(self):
        with pytest.raises(KeyError):
            OrderConsumer.decode({"other": "x"})

    def test_malformed_json_raises(self):
        with pytest.raises(ValueError):
            OrderConsumer.decode({"payload": "{nope"})


class TestOrderConsumer:
    async def test_ensure_group_is_idempotent(self, redis, consumer_factory):
        consumer = consumer_factory(AsyncMock())

        await consumer.ensure_group()
        await consumer.ensure_group()

        groups = await redis.xinfo_groups(ORDERS)
        assert [group["name"] for group in groups] == [GROUP]

    async def test_valid_order_becomes_work_order(self, redis, consumer_factory):
        handler = CreateWorkOrderHandler(RedisWorkOrderRepository(redis))
        consumer = consumer_factory(handler.execute)
        await consumer.ensure_group()
        await redis.xadd(
            ORDERS,
            _order_payload(
                id="o1", orderNumber="ORD-1", items=[{"name": "Burger", "quantity": 2}]
            ),
        )

        created = await consumer.poll_once()

        assert created == 1
        stored = await RedisWorkOrderRepository(redis).find_by_id(WorkOrderID("o1"))
        assert stored.status is WorkOrderStatus.RECEIVED
        assert await _pending(redis) == 0

    async def test_invalid_order_is_acknowledged_and_dropped(
        self, redis, consumer_factory
    ):
        handler = CreateWorkOrderHandler(RedisWorkOrderRepository(redis))
        consumer = consumer_factory(handler.execute)
        await consumer.ensure_group()
        await redis.xadd(ORDERS, _order_payload(id="o1", orderNumber="", items=[]))

        created = await consumer.poll_once()

        assert created == 0
        assert await redis.exists("workorder:o1") == 0
        assert await _pending(redis) == 0

    async def test_order_without_id_is_acknowledged_and_dropped(
        self, redis, consumer_factory
    ):
        handler = CreateWorkOrderHandler(RedisWorkOrderRepository(redis))
        consumer = consumer_factory(handler.execute)
        await consumer.ensure_group()
        await redis.xadd(
            ORDERS,
            _order_payload(orderNumber="ORD-1", items=[{"name": "Burger", "quantity": 2}]),
        )

        assert await consumer.poll_once() == 0
        assert await _pending(redis) == 0

    async def test_undecodable_message_is_acknowledged(self, redis, consumer_factory):
        handle = AsyncMock()
        consumer = consumer_factory(handle)
        await consumer.ensure_group()
        await redis.xadd(ORDERS, {"payload": "not json"})

        assert await consumer.poll_once() == 0

        handle.assert_not_awaited()
        assert await _pending(redis) == 0

    async def test_infrastructure_failure_leaves_message_pending(
        self, redis, consumer_factory
    ):
        handle = AsyncMock(side_effect=ConnectionError("redis down"))
        consumer = consumer_factory(handle)
        await consumer.ensure_group()
        await redis.xadd(
            ORDERS,
            _order_payload(
                id="o1", orderNumber="ORD-1", items=[{"name": "Burger", "quantity": 2}]
            ),
        )

        assert await consumer.poll_once() == 0

        handle.assert_awaited_once()
        assert await _pending(redis) == 1

    async def test_failed_message_is_retried_on_next_poll(
        self, redis, consumer_factory
    ):
        handler = CreateWorkOrderHandler(RedisWorkOrderRepository(redis))
        attempts = []

        async def handle(command):
            attempts.append(command.id)
            if len(attempts) == 1:
                raise ConnectionError("redis down")
            await handler.execute(command)

        consumer = consumer_factory(handle)
        await consumer.ensure_group()
        await redis.xadd(
            ORDERS,
            _order_payload(
                id="o1", orderNumber="ORD-1", items=[{"name": "Burger", "quantity": 2}]
            ),
        )

        assert await consumer.poll_once() == 0
        assert await _pending(redis) == 1

        assert await consumer.poll_once() == 1

        assert attempts == ["o1", "o1"]
        assert await _pending(redis) == 0
        stored = await RedisWorkOrderRepository(redis).find_by_id(WorkOrderID("o1"))
        assert stored.order_number == "ORD-1"

    async def test_pending_message_is_retried_every_poll(
        self, redis, consumer_factory
    ):
        handle = AsyncMock(side_effect=ConnectionError("redis down"))
        consumer = consumer_factory(handle)
        await consumer.ensure_group()
        await redis.xadd(
            ORDERS,
            _order_payload(
                id="o1", orderNumber="ORD-1", items=[{"name": "Burger", "quantity": 2}]
            ),
        )

        for _ in range(3):
            assert await consumer.poll_once() == 0

        assert handle.await_count == 3
        assert await _pending(redis) == 1

    async def test_poll_with_nothing_new(self, consumer_factory):
        consumer = consumer_factory(AsyncMock())
        await consumer.ensure_group()

        assert await consumer.poll_once() == 0

    async def test_stop_ends_run_loop(self, redis, consumer_factory):
        consumer = None

        async def handle(command):
            consumer.stop()

        consumer = consumer_factory(handle)
        await redis.xadd(
            ORDERS,
            _order_payload(
                id="o1", orderNumber="ORD-1", items=[{"name": "Burger", "quantity": 2}]
            ),
        )

        await consumer.run()

        assert await _pending(redis) == 0
