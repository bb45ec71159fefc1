"""
Work Orders API Router - FastAPI endpoints for the kitchen work-order lifecycle.

- Receives handlers via Dependency Injection (Dishka)
- Thin layer: only handles HTTP concerns (request/response)
- Delegates business logic to Application layer handlers
- Domain errors are mapped to responses by the handlers in fastapi_app.py

Flow:
  HTTP Request → Router → Command/Query → Handler → WorkOrderPort → Redis
                                      ↓
  HTTP Response ← Router ← WorkOrderOutput ←

Endpoints:
  POST   /work-orders                → 201
  GET    /work-orders/{id}           → 200 WorkOrderResponse
  GET    /work-orders?status=READY   → 200 [WorkOrderResponse]
  PUT    /work-orders/{id}/status    → 204
  DELETE /work-orders/{id}           → 204
"""

from datetime import datetime
from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Query, Response, status
from pydantic import BaseModel, ConfigDict, Field

from backstage.application.commands.work_orders import (
    CreateWorkOrderCommand,
    CreateWorkOrderHandler,
    CreateWorkOrderItemCommand,
    DeleteWorkOrderCommand,
    DeleteWorkOrderHandler,
    UpdateWorkOrderCommand,
    UpdateWorkOrderHandler,
)
from backstage.application.dto.work_order import WorkOrderOutput
from backstage.application.queries.work_orders import (
    GetWorkOrderHandler,
    GetWorkOrderQuery,
    ListWorkOrdersHandler,
    ListWorkOrdersQuery,
)

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class WorkOrderItemRequest(BaseModel):
    name: Optional[str] = None
    quantity: Optional[int] = None


class CreateWorkOrderRequest(BaseModel):
    """
    Request body for creating a work order.

    {"id": "o1", "orderNumber": "ORD-1", "items": [{"name": "Burger", "quantity": 2}]}

    Fields are optional here so that missing values reach the aggregate and are
    reported together as validation errors.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    order_number: Optional[str] = Field(default=None, alias="orderNumber")
    items: list[WorkOrderItemRequest] = Field(default_factory=list)


class UpdateWorkOrderStatusRequest(BaseModel):
    status: str


class WorkOrderItemResponse(BaseModel):
    name: Optional[str]
    quantity: Optional[int]


class WorkOrderResponse(BaseModel):
    """
    A stored work order.

    {
        "id": "o1",
        "orderNumber": "ORD-1",
        "items": [{"name": "Burger", "quantity": 2}],
        "status": "RECEIVED",
        "createdAt": "2025-01-27T12:00:00Z",
        "updatedAt": "2025-01-27T12:00:00Z"
    }
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    order_number: str = Field(alias="orderNumber")
    items: list[WorkOrderItemResponse]
    status: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_output(cls, output: WorkOrderOutput) -> "WorkOrderResponse":
        return cls(
            id=output.id,
            order_number=output.order_number,
            items=[
                WorkOrderItemResponse(name=item.name, quantity=item.quantity)
                for item in output.items
            ],
            status=output.status,
            created_at=output.created_at,
            updated_at=output.updated_at,
        )


# ==================== ROUTER ====================

router = APIRouter(prefix="/work-orders", tags=["work-orders"])


# ==================== ENDPOINTS ====================


@router.post("", status_code=status.HTTP_201_CREATED)
@inject
async def create_work_order(
    request: CreateWorkOrderRequest,
    handler: FromDishka[CreateWorkOrderHandler],
):
    """Create a work order in status RECEIVED."""
    command = CreateWorkOrderCommand(
        id=request.id,
        order_number=request.order_number,
        items=tuple(
            CreateWorkOrderItemCommand(name=item.name, quantity=item.quantity)
            for item in request.items
        ),
    )
    await handler.execute(command)

    return Response(status_code=status.HTTP_201_CREATED)


@router.get(
    "/{work_order_id}",
    response_model=WorkOrderResponse,
    response_model_by_alias=True,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_work_order(
    work_order_id: str,
    handler: FromDishka[GetWorkOrderHandler],
):
    """Get a work order by id. Unknown ids answer 404."""
    output = await handler.execute(GetWorkOrderQuery(id=work_order_id))
    return WorkOrderResponse.from_output(output)


@router.get(
    "",
    response_model=list[WorkOrderResponse],
    response_model_by_alias=True,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_work_orders(
    handler: FromDishka[ListWorkOrdersHandler],
    work_order_status: str = Query(alias="status"),
):
    """List work orders with exactly the given status, oldest first."""
    outputs = await handler.execute(ListWorkOrdersQuery(status=work_order_status))
    return [WorkOrderResponse.from_output(output) for output in outputs]


@router.put("/{work_order_id}/status", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def update_work_order_status(
    work_order_id: str,
    request: UpdateWorkOrderStatusRequest,
    handler: FromDishka[UpdateWorkOrderHandler],
):
    """Move a work order to a new status and broadcast the change."""
    command = UpdateWorkOrderCommand(id=work_order_id, status=request.status)
    await handler.execute(command)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{work_order_id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_work_order(
    work_order_id: str,
    handler: FromDishka[DeleteWorkOrderHandler],
):
    """Delete a work order. Unknown ids are a no-op."""
    await handler.execute(DeleteWorkOrderCommand(id=work_order_id))

    return Response(status_code=status.HTTP_204_NO_CONTENT)
