"""
WorkOrder Aggregate - A kitchen work order and its preparation status.

Every construction path (fresh creation, reconstitution from storage, direct
instantiation) runs the same invariant check; an invalid WorkOrder never exists.
Only `status` and `updated_at` change after construction, through update_status().
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from backstage.domain.entities.work_order_validator import validate_work_order
from backstage.domain.exceptions.notification_error import NotificationError
from backstage.domain.validation.error import Error
from backstage.domain.validation.fail_fast import FailFast
from backstage.domain.validation.handler import ValidationHandler
from backstage.domain.validation.notification import Notification
from backstage.domain.validation.result import ValidationResult
from backstage.domain.value_objects.work_order_id import WorkOrderID
from backstage.domain.value_objects.work_order_item import WorkOrderItem
from backstage.domain.value_objects.work_order_status import WorkOrderStatus


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, eq=False)
class WorkOrder:
    id: WorkOrderID
    order_number: str
    status: WorkOrderStatus
    created_at: datetime
    updated_at: datetime
    items: tuple[WorkOrderItem, ...]

    def __post_init__(self):
        object.__setattr__(
            self, "items", tuple(self.items) if self.items is not None else ()
        )
        notification = Notification()
        self.validate(notification)
        if notification.has_error():
            raise NotificationError(
                "failed to create an aggregate workorder", notification
            )

    @classmethod
    def create(
        cls,
        order_id: Optional[str],
        order_number: str,
        items: Optional[Iterable[WorkOrderItem]],
    ) -> WorkOrder:
        """Factory for a freshly received work order."""
        now = utcnow()
        return cls(
            id=WorkOrderID.from_value(order_id),
            order_number=order_number,
            status=WorkOrderStatus.RECEIVED,
            created_at=now,
            updated_at=now,
            items=tuple(items) if items is not None else (),
        )

    @classmethod
    def restore(
        cls,
        id: WorkOrderID,
        order_number: str,
        status: WorkOrderStatus,
        created_at: datetime,
        updated_at: datetime,
        items: Optional[Iterable[WorkOrderItem]],
    ) -> WorkOrder:
        """Factory for reconstituting a stored work order."""
        return cls(
            id=id,
            order_number=order_number,
            status=status,
            created_at=created_at,
            updated_at=updated_at,
            items=tuple(items) if items is not None else (),
        )

    @classmethod
    def try_create(
        cls,
        order_id: Optional[str],
        order_number: str,
        items: Optional[Iterable[WorkOrderItem]],
    ) -> ValidationResult[WorkOrder]:
        notification = Notification()
        work_order = notification.validate(
            lambda: cls.create(order_id, order_number, items)
        )
        return ValidationResult.from_handler(work_order, notification)

    @classmethod
    def try_restore(
        cls,
        id: WorkOrderID,
        order_number: str,
        status: WorkOrderStatus,
        created_at: datetime,
        updated_at: datetime,
        items: Optional[Iterable[WorkOrderItem]],
    ) -> ValidationResult[WorkOrder]:
        notification = Notification()
        work_order = notification.validate(
            lambda: cls.restore(id, order_number, status, created_at, updated_at, items)
        )
        return ValidationResult.from_handler(work_order, notification)

    def validate(self, handler: ValidationHandler) -> None:
        validate_work_order(self, handler)

    def update_status(self, new_status: WorkOrderStatus) -> WorkOrder:
        """Set the status and refresh updated_at. Any status may follow any other."""
        if new_status is None:
            FailFast().append(Error("'status' should not be null"))
        now = utcnow()
        if now <= self.updated_at:
            now = self.updated_at + timedelta(microseconds=1)
        object.__setattr__(self, "status", new_status)
        object.__setattr__(self, "updated_at", now)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WorkOrder):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
