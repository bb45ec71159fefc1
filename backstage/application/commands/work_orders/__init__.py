"""Work order commands."""

from .create_work_order import (
    CreateWorkOrderCommand,
    CreateWorkOrderHandler,
    CreateWorkOrderItemCommand,
)
from .delete_work_order import DeleteWorkOrderCommand, DeleteWorkOrderHandler
from .update_work_order import UpdateWorkOrderCommand, UpdateWorkOrderHandler

__all__ = [
    "CreateWorkOrderCommand",
    "CreateWorkOrderHandler",
    "CreateWorkOrderItemCommand",
    "DeleteWorkOrderCommand",
    "DeleteWorkOrderHandler",
    "UpdateWorkOrderCommand",
    "UpdateWorkOrderHandler",
]
