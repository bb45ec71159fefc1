"""
NotFoundError - Raised when a requested aggregate does not exist.
Maps to: HTTP 404 Not Found
"""

from __future__ import annotations

from typing import Union

from backstage.domain.exceptions.domain_error import DomainError
from backstage.domain.validation.error import Error
from backstage.domain.value_objects.aggregate_kind import AggregateKind
from backstage.domain.value_objects.work_order_id import WorkOrderID


class NotFoundError(DomainError):
    """Exception raised when a requested aggregate is not found."""

    @classmethod
    def with_id(
        cls, kind: AggregateKind, identifier: Union[WorkOrderID, str]
    ) -> NotFoundError:
        value = identifier.value if isinstance(identifier, WorkOrderID) else identifier
        return cls(f"{kind.label} with id {value} was not found")

    @classmethod
    def with_error(cls, error: Error) -> NotFoundError:
        return cls(error.message, [error])
