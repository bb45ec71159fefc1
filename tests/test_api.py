"""
End-to-end tests of the work-order HTTP API.

The DI container gets a fakeredis client, so requests run through the real
handlers and Redis adapters.

Run with: pytest tests/test_api.py -v
"""

import json

import fakeredis
import fakeredis.aioredis
import pytest
from dishka import Provider, Scope, provide
from fastapi.testclient import TestClient
from redis.asyncio import Redis

from backstage.fastapi_app import create_fastapi_app
from backstage.setup.ioc.container import create_container


class FakeRedisProvider(Provider):
    """Hands a fakeredis client to the container instead of a real connection."""

    def __init__(self, redis: Redis):
        super().__init__()
        self._redis = redis

    @provide(scope=Scope.APP)
    def get_redis(self) -> Redis:
        return self._redis


ORDER = {
    "id": "o1",
    "orderNumber": "ORD-1",
    "items": [{"name": "Burger", "quantity": 2}, {"name": "Fries", "quantity": 1}],
}


@pytest.fixture()
def sync_redis(fake_server):
    """Same fake server as the app's client, for seeding and inspection."""
    return fakeredis.FakeRedis(server=fake_server, decode_responses=True)


@pytest.fixture()
def client(fake_server):
    async_redis = fakeredis.aioredis.FakeRedis(server=fake_server, decode_responses=True)
    app = create_fastapi_app(create_container(FakeRedisProvider(async_redis)))
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


def _messages(response):
    return [error["message"] for error in response.json()["errors"]]


class TestHealth:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_metrics(self, client):
        client.get("/health")

        response = client.get("/metrics")

        assert response.status_code == 200
        assert "http_server_request_duration_seconds" in response.text

    def test_correlation_id_is_echoed(self, client):
        response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})

        assert response.headers["X-Correlation-ID"] == "abc-123"


class TestCreateAndGet:
    def test_create_then_get(self, client):
        created = client.post("/work-orders", json=ORDER)

        assert created.status_code == 201

        response = client.get("/work-orders/o1")
        assert response.status_code == 200
        body = response.json()
        assert body["id"] == "o1"
        assert body["orderNumber"] == "ORD-1"
        assert body["status"] == "RECEIVED"
        assert body["items"] == ORDER["items"]
        assert body["createdAt"] == body["updatedAt"]

    def test_invalid_order_returns_every_error(self, client):
        response = client.post(
            "/work-orders", json={"id": "o1", "orderNumber": "", "items": []}
        )

        assert response.status_code == 422
        body = response.json()
        assert body["status"] == 422
        assert "timestamp" in body
        assert _messages(response) == [
            "'orderNumber' should not be null or empty",
            "'items' should not be null or empty",
        ]
        assert client.get("/work-orders/o1").status_code == 404

    def test_missing_id_returns_422(self, client):
        response = client.post(
            "/work-orders", json={"orderNumber": "ORD-1", "items": ORDER["items"]}
        )

        assert response.status_code == 422
        assert _messages(response) == ["'workOrderID' should not be null"]

    def test_item_fields_are_optional_end_to_end(self, client):
        order = {"id": "o2", "orderNumber": "ORD-2", "items": [{}]}

        assert client.post("/work-orders", json=order).status_code == 201

        response = client.get("/work-orders/o2")
        assert response.status_code == 200
        assert response.json()["items"] == [{"name": None, "quantity": None}]

        listed = client.get("/work-orders", params={"status": "RECEIVED"})
        assert listed.status_code == 200
        assert [body["items"] for body in listed.json()] == [
            [{"name": None, "quantity": None}]
        ]

    def test_unknown_id_returns_404(self, client):
        response = client.get("/work-orders/missing")

        assert response.status_code == 404
        assert _messages(response) == ["workorder with id missing was not found"]

    def test_corrupt_document_returns_500(self, client, sync_redis):
        sync_redis.set("workorder:broken", "{not json")

        response = client.get("/work-orders/broken")

        assert response.status_code == 500
        assert _messages(response) == ["Internal server error"]


class TestList:
    def test_lists_only_exact_status(self, client):
        client.post("/work-orders", json=ORDER)
        client.post("/work-orders", json={**ORDER, "id": "o2", "orderNumber": "ORD-2"})
        client.put("/work-orders/o2/status", json={"status": "READY"})

        received = client.get("/work-orders", params={"status": "RECEIVED"})
        ready = client.get("/work-orders", params={"status": "READY"})

        assert [w["id"] for w in received.json()] == ["o1"]
        assert [w["id"] for w in ready.json()] == ["o2"]

    def test_unknown_status_returns_400(self, client):
        response = client.get("/work-orders", params={"status": "ready"})

        assert response.status_code == 400
        assert _messages(response) == ["Invalid WorkOrderStatus: ready"]

    def test_missing_status_returns_400(self, client):
        response = client.get("/work-orders")

        assert response.status_code == 400


class TestUpdateStatus:
    def test_updates_and_publishes_notification(self, client, sync_redis):
        client.post("/work-orders", json=ORDER)

        response = client.put("/work-orders/o1/status", json={"status": "PREPARING"})

        assert response.status_code == 204
        body = client.get("/work-orders/o1").json()
        assert body["status"] == "PREPARING"
        assert body["updatedAt"] != body["createdAt"]

        entries = sync_redis.xrange("order-status")
        assert [json.loads(fields["payload"]) for _, fields in entries] == [
            {"data": {"id": "o1", "status": "PREPARING"}}
        ]

    def test_invalid_status_returns_400_and_publishes_nothing(
        self, client, sync_redis
    ):
        client.post("/work-orders", json=ORDER)

        response = client.put("/work-orders/o1/status", json={"status": "DONE"})

        assert response.status_code == 400
        assert client.get("/work-orders/o1").json()["status"] == "RECEIVED"
        assert sync_redis.xlen("order-status") == 0


class TestDelete:
    def test_delete_then_get_returns_404(self, client):
        client.post("/work-orders", json=ORDER)

        assert client.delete("/work-orders/o1").status_code == 204
        assert client.get("/work-orders/o1").status_code == 404
        assert client.get("/work-orders", params={"status": "RECEIVED"}).json() == []

    def test_delete_unknown_id_is_204(self, client):
        assert client.delete("/work-orders/never-existed").status_code == 204
