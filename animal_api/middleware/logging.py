"""
Animal API: Request Logging Middleware
======================================

What:  One access log line per HTTP request, tagged with the animal id when
       the route addresses a single record.
Who:   Applied to every request via Starlette middleware.
When:  Inside RequestIDMiddleware, so the request ID is already set.

Line format:
    GET /v1/animals/2 200 0.4ms [a1b2c3d4] animal=2 from 127.0.0.1
    POST /v1/animals 201 0.6ms [a1b2c3d4] from 127.0.0.1

Log levels by status:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from animal_api.middleware.request_id import request_id_var

logger = logging.getLogger("animal_api.access")


def _status_log_level(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Writes the access log line for each animal API request."""

    # Probes hit this every few seconds
    SKIPPED_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in self.SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        # Filled in by the router once the request matched /animals/{animal_id}
        animal_id = request.path_params.get("animal_id")
        rid = request_id_var.get("")
        client_ip = request.client.host if request.client else "unknown"
        status = response.status_code

        logger.log(
            _status_log_level(status),
            "%s %s %d %.1fms [%s]%s from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            f" animal={animal_id}" if animal_id is not None else "",
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "animal_id": animal_id,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
