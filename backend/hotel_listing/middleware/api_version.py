"""
Hotel Listing Backend — API Version Headers Middleware
========================================================

What:  Adds api-supported-versions and api-deprecated-versions to every
       response under /api/.
How:   Runs around the exception handlers, so 400/401/403/404 envelopes get
       the headers as well as successful responses.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from hotel_listing.versioning import VERSIONED_PATH_PREFIX, version_headers


class ApiVersionHeadersMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        if request.url.path.startswith(VERSIONED_PATH_PREFIX):
            response.headers.update(version_headers())
        return response
