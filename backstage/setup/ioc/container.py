"""
Dishka DI Container Setup.

- Registers the Redis client, the port implementations and the use-case handlers
- Maps abstract ports to concrete adapters
- Manages lifecycle (APP = one Redis client, REQUEST = adapters and handlers)

Flow:
  Container → provides → RedisWorkOrderRepository → to → CreateWorkOrderHandler
                                    ↓
                            uses WorkOrderPort interface
"""

from typing import AsyncIterable, Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from redis.asyncio import Redis

from backstage.application.commands.work_orders import (
    CreateWorkOrderHandler,
    DeleteWorkOrderHandler,
    UpdateWorkOrderHandler,
)
from backstage.application.queries.work_orders import (
    GetWorkOrderHandler,
    ListWorkOrdersHandler,
)
from backstage.config.settings import Config
from backstage.domain.ports import NotificationPort, WorkOrderPort
from backstage.infrastructure.messaging.redis_stream_notification_adapter import (
    RedisStreamNotificationAdapter,
)
from backstage.infrastructure.persistence.redis_work_order_repository import (
    RedisWorkOrderRepository,
)
from backstage.infrastructure.redis_client import close_redis_client, create_redis_client


class RedisProvider(Provider):
    """The shared Redis client."""

    @provide(scope=Scope.APP)
    async def get_redis(self) -> AsyncIterable[Redis]:
        """
        Provide the Redis client (singleton, app-scoped).

        - Created ONCE on first use, shared across all requests
        - Closed when the container closes
        """
        client = await create_redis_client(Config.REDIS_URL)
        yield client
        await close_redis_client(client)


class AdapterProvider(Provider):
    """Port implementations built on the shared Redis client."""

    @provide(scope=Scope.REQUEST)
    def get_work_order_port(self, redis: Redis) -> WorkOrderPort:
        return RedisWorkOrderRepository(redis, key_prefix=Config.WORK_ORDER_KEY_PREFIX)

    @provide(scope=Scope.REQUEST)
    def get_notification_port(self, redis: Redis) -> NotificationPort:
        return RedisStreamNotificationAdapter(
            redis,
            stream=Config.ORDER_STATUS_STREAM,
            maxlen=Config.ORDER_STATUS_STREAM_MAXLEN,
        )


class HandlerProvider(Provider):
    """
    Use-case handlers.

    Parameters ask for the abstract ports; Dishka resolves them from whichever
    provider registered WorkOrderPort / NotificationPort.
    """

    scope = Scope.REQUEST

    @provide
    def get_create_work_order_handler(
        self, work_order_port: WorkOrderPort
    ) -> CreateWorkOrderHandler:
        return CreateWorkOrderHandler(work_order_port)

    @provide
    def get_get_work_order_handler(
        self, work_order_port: WorkOrderPort
    ) -> GetWorkOrderHandler:
        return GetWorkOrderHandler(work_order_port)

    @provide
    def get_list_work_orders_handler(
        self, work_order_port: WorkOrderPort
    ) -> ListWorkOrdersHandler:
        return ListWorkOrdersHandler(work_order_port)

    @provide
    def get_update_work_order_handler(
        self, work_order_port: WorkOrderPort, notification_port: NotificationPort
    ) -> UpdateWorkOrderHandler:
        return UpdateWorkOrderHandler(work_order_port, notification_port)

    @provide
    def get_delete_work_order_handler(
        self, work_order_port: WorkOrderPort
    ) -> DeleteWorkOrderHandler:
        return DeleteWorkOrderHandler(work_order_port)


def create_container(redis_provider: Optional[Provider] = None) -> AsyncContainer:
    """
    Create and configure the DI container.

    - Call this ONCE per process (API or consumer)
    - redis_provider replaces RedisProvider, e.g. to hand in a fake client
    """
    return make_async_container(
        redis_provider or RedisProvider(), AdapterProvider(), HandlerProvider()
    )
