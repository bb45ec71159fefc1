"""
Base interfaces for the CQRS split of the work-order use cases.

Commands change work-order state (create, update status, delete); queries only
read it (get, list). Both are frozen dataclasses carrying raw input; handlers
parse that input into domain types and talk to the ports.

Usage:
    @dataclass(frozen=True)
    class DeleteWorkOrderCommand(Command[None]):
        id: str

    class DeleteWorkOrderHandler(CommandHandler[None]):
        def __init__(self, work_order_port: WorkOrderPort):
            self._work_order_port = work_order_port

        async def execute(self, command: DeleteWorkOrderCommand) -> None:
            await self._work_order_port.delete_by_id(WorkOrderID(command.id))
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

TResult = TypeVar("TResult")


class Command(ABC, Generic[TResult]):
    """Write request. TResult is what its handler returns."""


class CommandHandler(ABC, Generic[TResult]):
    @abstractmethod
    async def execute(self, command: Command[TResult]) -> TResult: ...


class Query(ABC, Generic[TResult]):
    """Read request. TResult is what its handler returns."""


class QueryHandler(ABC, Generic[TResult]):
    @abstractmethod
    async def execute(self, query: Query[TResult]) -> TResult: ...
