"""
API Routers - FastAPI endpoint definitions.
"""

from backstage.presentation.api.work_orders import router as work_orders_router
from backstage.presentation.api.metrics import router as metrics_router

__all__ = [
    "work_orders_router",
    "metrics_router",
]
