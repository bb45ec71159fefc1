from backstage.setup.ioc.container import (
    AdapterProvider,
    HandlerProvider,
    RedisProvider,
    create_container,
)

__all__ = ["AdapterProvider", "HandlerProvider", "RedisProvider", "create_container"]
