# Middleware package init
"""
Hotel Listing Backend — Middleware Package
============================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [API version headers] → [GZip] → [CORS] → Route

    Request ID runs first so the access log line and any error envelope
    carry the correlation ID. The version headers wrap the exception
    handlers, so error responses under /api/ carry them too. Role and
    API-version checks are not middleware; they are route dependencies
    (hotel_listing.security, hotel_listing.versioning) so they run only for
    the routes that need them.
"""
