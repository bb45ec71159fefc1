"""
WorkOrder invariants.

The checks run against any object exposing the WorkOrder attributes and report
through whichever ValidationHandler the caller supplies, so the same rules serve
both the accumulate-all and the fail-fast strategies.
"""

from __future__ import annotations

from typing import Any

from backstage.domain.validation.error import Error
from backstage.domain.validation.handler import ValidationHandler


def validate_work_order(candidate: Any, handler: ValidationHandler) -> ValidationHandler:
    """Run every WorkOrder invariant against `candidate`, reporting into `handler`."""
    WorkOrderValidator(candidate, handler).validate()
    return handler


class WorkOrderValidator:
    def __init__(self, work_order: Any, handler: ValidationHandler):
        self._work_order = work_order
        self._handler = handler

    def validate(self) -> None:
        self._validate_work_order_id()
        self._validate_order_number()
        self._validate_items()
        self._validate_status()
        self._validate_created_at()
        self._validate_updated_at()

    def _validate_work_order_id(self) -> None:
        work_order_id = self._work_order.id
        if work_order_id is None or work_order_id.value is None:
            self._handler.append(Error("'workOrderID' should not be null"))

    def _validate_order_number(self) -> None:
        order_number = self._work_order.order_number
        if order_number is None or not str(order_number).strip():
            self._handler.append(Error("'orderNumber' should not be null or empty"))

    def _validate_items(self) -> None:
        if not self._work_order.items:
            self._handler.append(Error("'items' should not be null or empty"))

    def _validate_status(self) -> None:
        if self._work_order.status is None:
            self._handler.append(Error("'status' should not be null"))

    def _validate_created_at(self) -> None:
        created_at = self._work_order.created_at
        if created_at is None:
            self._handler.append(Error("'createdAt' should not be null"))
            return

        updated_at = self._work_order.updated_at
        if updated_at is not None and created_at > updated_at:
            self._handler.append(Error("'createdAt' should not be after 'updatedAt'"))

    def _validate_updated_at(self) -> None:
        updated_at = self._work_order.updated_at
        if updated_at is None:
            self._handler.append(Error("'updatedAt' should not be null"))
            return

        created_at = self._work_order.created_at
        if created_at is not None and updated_at < created_at:
            self._handler.append(Error("'updatedAt' should not be before 'createdAt'"))
