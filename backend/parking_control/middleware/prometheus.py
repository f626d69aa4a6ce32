"""Prometheus Middleware.

Automatically captures HTTP metrics for all requests.
"""

import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from ..core.constants import HttpStatusCodes, Metrics
from ..core.metrics import (
    http_request_duration_seconds,
    http_requests_in_progress,
    http_requests_total,
)
from ..utils.converters import normalize_path


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware to capture Prometheus metrics for HTTP requests.

    Paths are labelled with ids replaced by ``{id}`` so each parking spot
    does not create its own time series. Scrapes of the metrics endpoint
    itself are not counted.
    """

    async def dispatch(self, request: Request, call_next):
        method = request.method
        endpoint = normalize_path(request.url.path)

        if endpoint == Metrics.ENDPOINT_PATH:
            return await call_next(request)

        in_progress = http_requests_in_progress.labels(method=method, endpoint=endpoint)
        in_progress.inc()
        start_time = time.time()
        status_code = HttpStatusCodes.INTERNAL_SERVER_ERROR

        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            http_requests_total.labels(
                method=method,
                endpoint=endpoint,
                status_code=status_code
            ).inc()
            http_request_duration_seconds.labels(
                method=method,
                endpoint=endpoint
            ).observe(time.time() - start_time)
            in_progress.dec()
