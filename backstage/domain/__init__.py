"""
DOMAIN LAYER - The Heart of the Work-Order Service

This layer contains:
- Entities: the WorkOrder aggregate and its invariants
- Value Objects: WorkOrderID, WorkOrderItem, WorkOrderStatus, AggregateKind
- Validation: Error, ValidationHandler strategies (Notification, FailFast)
- Ports: Interfaces that infrastructure implements
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Redis, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no message queues)
3. Only depends on Python stdlib
4. This is where business rules live
"""
