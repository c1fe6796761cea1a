"""
Hotel Listing Backend — Request Logging Middleware
====================================================

What:  One access-log line per request: method, path, requested API
       version, status, duration, request ID, client IP.
How:   Level follows the status class (5xx ERROR, 4xx WARNING, else INFO).
       /health is skipped.

Request bodies and Authorization headers are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from hotel_listing.middleware.request_id import request_id_var
from hotel_listing.versioning import requested_version

logger = logging.getLogger("hotel_listing.access")

SKIPPED_PATHS = {"/health"}


def level_for_status(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log for the API; latency covers routing, auth and the database."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in SKIPPED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        entry = {
            "request_id": request_id_var.get(""),
            "method": request.method,
            "path": request.url.path,
            "api_version": requested_version(request),
            "status": response.status_code,
            "duration_ms": round(elapsed_ms, 2),
            "client_ip": request.client.host if request.client else "unknown",
        }
        logger.log(
            level_for_status(response.status_code),
            "%s %s v%s %d %.1fms [%s] from %s",
            entry["method"],
            entry["path"],
            entry["api_version"],
            entry["status"],
            elapsed_ms,
            entry["request_id"],
            entry["client_ip"],
            extra=entry,
        )
        return response
