"""Request ID Middleware.

Tags every parking spot request with an ID that shows up in each log line
written while the request runs, and in the ``X-Request-ID`` response header.
Callers that already send ``X-Request-ID`` keep their own ID, so a client
can correlate its logs with this service's.

This middleware is also the last stop for errors no exception handler
claims. A storage outage (lost connection, failed commit) is logged with its
traceback and reported as a bare 500 that carries only the request ID.
"""

import time

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from ..core.constants import ErrorMessages, HttpHeaders
from ..core.logging import get_logger, set_request_id
from ..utils.converters import normalize_path

logger = get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Bind a request ID to the request context and echo it back."""

    async def dispatch(self, request: Request, call_next):
        request_id = set_request_id(request.headers.get(HttpHeaders.REQUEST_ID) or None)
        route = normalize_path(request.url.path)

        logger.info(
            "Request started",
            extra={
                'method': request.method,
                'path': request.url.path,
                'route': route,
                'client': request.client.host if request.client else 'unknown'
            }
        )

        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                extra={
                    'route': route,
                    'error': str(e),
                    'error_type': type(e).__name__,
                    'process_time': time.perf_counter() - started
                },
                exc_info=True
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error": ErrorMessages.INTERNAL_SERVER_ERROR,
                    "request_id": request_id
                },
                headers={HttpHeaders.REQUEST_ID: request_id}
            )

        process_time = time.perf_counter() - started
        response.headers[HttpHeaders.REQUEST_ID] = request_id
        response.headers[HttpHeaders.PROCESS_TIME] = f"{process_time:.6f}"

        logger.info(
            "Request completed",
            extra={
                'route': route,
                'status_code': response.status_code,
                'process_time': process_time
            }
        )
        return response
