"""
Entry point for the accepted-order consumer.

Reads the orders stream and creates one work order per message, each inside
its own DI request scope.

Usage:
    python run_consumer.py
"""

import asyncio
import logging
import signal

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from redis.asyncio import Redis

from backstage.application.commands.work_orders import (
    CreateWorkOrderCommand,
    CreateWorkOrderHandler,
)
from backstage.config.logging_config import setup_logging
from backstage.config.settings import Config
from backstage.infrastructure.messaging.order_consumer import OrderConsumer
from backstage.setup.ioc.container import create_container

logger = logging.getLogger("backstage.consumer")


async def main() -> None:
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)
    container = create_container()

    async def create_work_order(command: CreateWorkOrderCommand) -> None:
        async with container() as request_container:
            handler = await request_container.get(CreateWorkOrderHandler)
            await handler.execute(command)

    try:
        redis = await container.get(Redis)
        consumer = OrderConsumer(redis, handle=create_work_order)

        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, consumer.stop)

        await consumer.run()
    finally:
        await container.close()
        logger.info("Consumer shutdown. DI container closed.")


if __name__ == "__main__":
    asyncio.run(main())
