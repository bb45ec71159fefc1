"""
Mapping between WorkOrder aggregates and their stored JSON documents.

Document shape (camelCase, ISO-8601 timestamps):
    {
        "id": "o1",
        "orderNumber": "ORD-1",
        "status": "RECEIVED",
        "createdAt": "2025-01-27T12:00:00+00:00",
        "updatedAt": "2025-01-27T12:00:00+00:00",
        "items": [{"name": "Burger", "quantity": 2}]
    }
"""

import json
from datetime import datetime
from typing import Any, Optional

from backstage.domain.entities.work_order import WorkOrder
from backstage.domain.exceptions import InternalError
from backstage.domain.value_objects.work_order_id import WorkOrderID
from backstage.domain.value_objects.work_order_item import WorkOrderItem
from backstage.domain.value_objects.work_order_status import WorkOrderStatus

MAPPING_ERROR = "Error mapping stored work order to WorkOrder"


def to_document(work_order: WorkOrder) -> dict[str, Any]:
    return {
        "id": work_order.id.value,
        "orderNumber": work_order.order_number,
        "status": work_order.status.name,
        "createdAt": work_order.created_at.isoformat(),
        "updatedAt": work_order.updated_at.isoformat(),
        "items": [
            {"name": item.name, "quantity": item.quantity} for item in work_order.items
        ],
    }


def serialize(work_order: WorkOrder) -> str:
    return json.dumps(to_document(work_order))


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value is not None else None


def from_document(document: dict[str, Any]) -> WorkOrder:
    """Rebuild the aggregate. Anything that cannot be mapped is an InternalError."""
    try:
        result = WorkOrder.try_restore(
            id=WorkOrderID.from_value(document.get("id")),
            order_number=document.get("orderNumber"),
            status=WorkOrderStatus.from_value(document.get("status")),
            created_at=_parse_timestamp(document.get("createdAt")),
            updated_at=_parse_timestamp(document.get("updatedAt")),
            items=[
                WorkOrderItem.create(item.get("name"), item.get("quantity"))
                for item in document.get("items") or []
            ],
        )
    except (AttributeError, TypeError, ValueError) as e:
        raise InternalError(MAPPING_ERROR) from e

    if not result.is_valid:
        raise InternalError(MAPPING_ERROR, list(result.errors))
    return result.value


def deserialize(raw: str) -> WorkOrder:
    try:
        document = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InternalError(MAPPING_ERROR) from e
    if not isinstance(document, dict):
        raise InternalError(MAPPING_ERROR)
    return from_document(document)
