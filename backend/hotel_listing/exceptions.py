"""
Hotel Listing Backend — Custom Exception Hierarchy
====================================================

What:  Application-specific exceptions for the different error scenarios.
How:   Each exception class carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the JSON error envelope with the matching HTTP status code.
Who:   Raised by services, security dependencies and the versioning layer.

Exception Hierarchy:
    HotelListingError (base)
    ├── ValidationError             → 400 Bad Request
    ├── UnsupportedApiVersionError  → 400 Bad Request
    ├── AuthenticationError         → 401 Unauthorized
    ├── AuthorizationError          → 403 Forbidden
    ├── NotFoundError               → 404 Not Found
    └── DatabaseError               → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class HotelListingError(Exception):
    """
    Base exception for all Hotel Listing application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(HotelListingError):
    """
    Raised when client input fails a business rule.

    When:    Non-positive identifier, unknown country reference, update or
             delete of a missing row, duplicate e-mail, unknown role.
    HTTP:    400 Bad Request

    A missing hotel on update/delete is reported through this exception,
    not NotFoundError: the request named something it may not act on.
    """

    def __init__(
        self,
        message: str = "Submitted data is invalid",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class UnsupportedApiVersionError(HotelListingError):
    """Raised when an endpoint does not implement the requested API version."""

    def __init__(
        self,
        requested: str,
        supported: tuple = (),
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["requested_version"] = requested
        ctx["supported_versions"] = list(supported)
        super().__init__(
            message=f"The HTTP resource does not support API version '{requested}'",
            context=ctx,
        )
        self.requested = requested


class AuthenticationError(HotelListingError):
    """
    Raised when the caller cannot be identified.

    When:    Missing/malformed/expired bearer token, wrong login credentials.
    HTTP:    401 Unauthorized (with WWW-Authenticate: Bearer)
    """

    def __init__(
        self,
        message: str = "Authentication credentials are missing or invalid",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class AuthorizationError(HotelListingError):
    """
    Raised when an authenticated caller lacks a required role.

    HTTP:    403 Forbidden
    """

    def __init__(
        self,
        required_roles: tuple = (),
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["required_roles"] = list(required_roles)
        super().__init__(
            message="You do not have permission to perform this action",
            context=ctx,
        )
        self.required_roles = required_roles


class NotFoundError(HotelListingError):
    """
    Raised when a requested resource does not exist.

    When:    GET /api/hotel/{id} or GET /api/country/{id} with an unknown id.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(HotelListingError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; the original
    exception type and identifiers travel in `context` for the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
