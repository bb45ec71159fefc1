"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- work_order.py → WorkOrderOutput, WorkOrderItemOutput

Note: These are different from domain entities.
DTOs are read-only outputs, entities are for business logic.
"""

from backstage.application.dto.work_order import WorkOrderItemOutput, WorkOrderOutput

__all__ = [
    "WorkOrderItemOutput",
    "WorkOrderOutput",
]
