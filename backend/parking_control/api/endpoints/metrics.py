"""Metrics scrape endpoint.

Serves the parking spot counters (created, updated, deleted, conflicts by
field) together with the HTTP request metrics in Prometheus text format.
"""

from fastapi import APIRouter, Response

from ...core.constants import Metrics
from ...core.metrics import get_content_type, get_metrics

router = APIRouter()


@router.get(Metrics.ENDPOINT_PATH, include_in_schema=False)
async def prometheus_metrics() -> Response:
    """Current values of every registered metric.

    Scrapes of this path are not counted by ``PrometheusMiddleware``.
    """
    return Response(content=get_metrics(), media_type=get_content_type())
