"""
WorkOrder Port - Interface for work-order persistence.
Implementation: backstage/infrastructure/persistence/redis_work_order_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from backstage.domain.entities.work_order import WorkOrder
from backstage.domain.value_objects.work_order_id import WorkOrderID
from backstage.domain.value_objects.work_order_status import WorkOrderStatus


class WorkOrderPort(ABC):
    @abstractmethod
    async def create(self, work_order: WorkOrder) -> None: ...

    @abstractmethod
    async def find_by_id(self, work_order_id: WorkOrderID) -> Optional[WorkOrder]: ...

    @abstractmethod
    async def find_all_by_status(self, status: WorkOrderStatus) -> list[WorkOrder]:
        """Work orders in `status`, oldest first."""
        ...

    @abstractmethod
    async def update_status(
        self, work_order_id: WorkOrderID, status: WorkOrderStatus
    ) -> None:
        """Persist a new status. Unknown ids are ignored."""
        ...

    @abstractmethod
    async def delete_by_id(self, work_order_id: WorkOrderID) -> None: ...
