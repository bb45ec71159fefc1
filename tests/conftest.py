import os

os.environ.setdefault("TESTING", "true")

import fakeredis.aioredis
import pytest
from unittest.mock import AsyncMock

from backstage.domain.entities.work_order import WorkOrder
from backstage.domain.ports import NotificationPort, WorkOrderPort
from backstage.domain.value_objects.work_order_item import WorkOrderItem


@pytest.fixture()
def items():
    return [WorkOrderItem.create("Burger", 2), WorkOrderItem.create("Fries", 1)]


@pytest.fixture()
def work_order(items):
    return WorkOrder.create("o1", "ORD-1", items)


@pytest.fixture()
def work_order_port():
    return AsyncMock(spec=WorkOrderPort)


@pytest.fixture()
def notification_port():
    return AsyncMock(spec=NotificationPort)


@pytest.fixture()
def fake_server():
    return fakeredis.FakeServer()


@pytest.fixture()
async def redis(fake_server):
    client = fakeredis.aioredis.FakeRedis(server=fake_server, decode_responses=True)
    yield client
    await client.aclose()
