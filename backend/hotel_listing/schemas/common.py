"""
Hotel Listing Backend — Shared Pydantic Schemas
=================================================

What:  Base model for every API schema plus the cross-cutting response
       shapes (errors, health) and paging parameters.
How:   All schemas serialize with camelCase aliases (countryId, pageSize)
       and accept either camelCase or snake_case on input.
"""

from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for API contracts: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestParams(ApiModel):
    """
    Paging parameters for list endpoints that page.

    pageSize is capped at 50; larger values are clamped rather than rejected.
    """
    page_number: int = Field(default=1, ge=1, description="1-based page index")
    page_size: int = Field(default=10, ge=1, description="Items per page (max 50)")

    MAX_PAGE_SIZE: ClassVar[int] = 50

    @property
    def effective_page_size(self) -> int:
        return min(self.page_size, self.MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.effective_page_size


# ══════════════════════════════════════════════════════════════════════════
# Error & Health Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(ApiModel):
    """
    What:  Error envelope returned by every exception handler.

    Fields:
        error: Machine-readable error code (e.g. "validation_error")
        message: Human-readable description
        request_id: Correlation ID for tracing this error in server logs

    Field-level validation detail is deliberately absent; it is logged.
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(ApiModel):
    """Returned by GET /health for monitoring and load balancer health checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
