"""
Hotel Listing Backend — API Versioning
========================================

What:  Reads the requested API version and checks it against what an
       endpoint implements.
How:   The version comes from the `api-version` header, else the
       `api-version` query parameter, else DEFAULT_VERSION. Every response under
       /api/, errors included, reports the supported and deprecated versions
       in headers (ApiVersionHeadersMiddleware).

    GET /api/country                          → 1.0
    GET /api/country   api-version: 2.0       → 2.0 (deprecated)
    GET /api/hotel?api-version=2.0            → 400 unsupported_api_version
"""

import logging
from typing import Callable, Dict

from fastapi import Depends, Request

from hotel_listing.exceptions import UnsupportedApiVersionError

logger = logging.getLogger(__name__)

V1 = "1.0"
V2 = "2.0"

DEFAULT_VERSION = V1
SUPPORTED_VERSIONS = (V1, V2)
DEPRECATED_VERSIONS = (V2,)

VERSION_HEADER = "api-version"
VERSION_QUERY_PARAM = "api-version"

VERSIONED_PATH_PREFIX = "/api/"


def normalize_version(raw: str) -> str:
    """Accepts "2", "2.0", "v2" and "V2.0" as the same version."""
    value = raw.strip().lower().lstrip("v")
    if value and "." not in value:
        value = f"{value}.0"
    return value


def requested_version(request: Request) -> str:
    """The normalized version the request asks for, DEFAULT_VERSION if none."""
    raw = request.headers.get(VERSION_HEADER) or request.query_params.get(VERSION_QUERY_PARAM)
    return normalize_version(raw) if raw else DEFAULT_VERSION


def version_headers() -> Dict[str, str]:
    """Reporting headers added to every response under VERSIONED_PATH_PREFIX."""
    return {
        "api-supported-versions": ", ".join(SUPPORTED_VERSIONS),
        "api-deprecated-versions": ", ".join(DEPRECATED_VERSIONS),
    }


def require_api_version(*versions: str) -> Callable:
    """
    Builds a dependency that rejects requests for versions the endpoint
    does not implement, and returns the resolved version otherwise.
    """
    implemented = tuple(versions)

    async def version_checker(version: str = Depends(requested_version)) -> str:
        if version not in implemented:
            logger.warning("Unsupported API version %s (implemented: %s)", version, implemented)
            raise UnsupportedApiVersionError(requested=version, supported=implemented)
        if version in DEPRECATED_VERSIONS:
            logger.info("Deprecated API version %s requested", version)
        return version

    return version_checker
