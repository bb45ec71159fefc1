"""
Prometheus Metrics Endpoint.

DATA FLOW:
    observability/metrics.py         This file              Prometheus
    ────────────────────────         ─────────              ──────────
    Define & record metrics ──────►  /metrics endpoint ───► scrape

Test with: curl http://localhost:8080/metrics
"""

from fastapi import APIRouter, Response

from backstage.observability.metrics import get_metrics_content

router = APIRouter(prefix="/metrics", tags=["observability"])


@router.get("")
async def metrics():
    """Return all registered metrics in Prometheus text format."""
    content, content_type = get_metrics_content()
    return Response(content=content, media_type=content_type)
