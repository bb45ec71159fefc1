"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers for work orders and metrics
"""
