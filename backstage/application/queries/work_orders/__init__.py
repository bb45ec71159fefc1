"""Work order queries."""

from backstage.application.queries.work_orders.get_work_order import (
    GetWorkOrderQuery,
    GetWorkOrderHandler,
)
from backstage.application.queries.work_orders.list_work_orders import (
    ListWorkOrdersQuery,
    ListWorkOrdersHandler,
)

__all__ = [
    "GetWorkOrderQuery",
    "GetWorkOrderHandler",
    "ListWorkOrdersQuery",
    "ListWorkOrdersHandler",
]
