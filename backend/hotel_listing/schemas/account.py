"""
Hotel Listing Backend — Account Schemas
=========================================

What:  Request/response contracts for POST /api/account/register and
       POST /api/account/login.
"""

import uuid
from typing import List, Optional

from pydantic import EmailStr, Field, field_validator

from hotel_listing.models.identity import ROLE_USER
from hotel_listing.schemas.common import ApiModel


class LoginRequest(ApiModel):
    """Credentials exchanged for an access token."""
    email: EmailStr = Field(description="Account e-mail address")
    password: str = Field(min_length=6, max_length=15, description="Account password")


class RegisterRequest(LoginRequest):
    """
    New account. `roles` must name roles that exist in the store
    (User, Administrator); it defaults to ["User"]. Anything beyond User needs an
    Administrator caller.
    """
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    phone_number: Optional[str] = Field(default=None, max_length=32)
    roles: List[str] = Field(default_factory=lambda: [ROLE_USER])

    @field_validator("roles")
    @classmethod
    def dedupe_roles(cls, v: List[str]) -> List[str]:
        """Drops blanks and duplicates while keeping the caller's order."""
        seen: List[str] = []
        for role in v:
            name = role.strip()
            if name and name not in seen:
                seen.append(name)
        if not seen:
            raise ValueError("At least one role is required")
        return seen


class UserResponse(ApiModel):
    """Public view of a registered user. Never includes the password hash."""
    id: uuid.UUID
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone_number: Optional[str] = None
    roles: List[str] = Field(default_factory=list)


class TokenResponse(ApiModel):
    """Returned by a successful login."""
    token: str = Field(description="Signed JWT bearer token")
    token_type: str = Field(default="bearer")
    expires_in: int = Field(description="Token lifetime in seconds")
