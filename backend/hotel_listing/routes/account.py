"""
Hotel Listing Backend — Account Route Handlers
================================================

What:  POST /api/account/register and POST /api/account/login.
Why:   The Administrator-only hotel and country routes need callers with
       role-bearing tokens; these endpoints create accounts and issue them.

Both answer 202 Accepted on success.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, status

from hotel_listing.repositories.unit_of_work import UnitOfWork, get_unit_of_work
from hotel_listing.schemas.account import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from hotel_listing.schemas.common import ErrorResponse
from hotel_listing.security.auth import Principal, get_optional_principal
from hotel_listing.services.account_service import account_service
from hotel_listing.versioning import V1, require_api_version

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/account",
    tags=["Account"],
    dependencies=[Depends(require_api_version(V1))],
)


@router.post(
    "/register",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=UserResponse,
    responses={
        400: {"description": "Invalid data, duplicate e-mail or unknown role", "model": ErrorResponse},
        401: {"description": "Invalid bearer token", "model": ErrorResponse},
        403: {"description": "Only an Administrator may grant privileged roles", "model": ErrorResponse},
    },
    summary="Register a new account",
)
async def register(
    user: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    principal: Optional[Principal] = Depends(get_optional_principal),
) -> UserResponse:
    """
    Anonymous callers may register as User only; granting Administrator
    needs an Administrator bearer token (403 otherwise).
    """
    logger.info("Registration attempt for %s", user.email)
    return await account_service.register(uow, user, principal)


@router.post(
    "/login",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=TokenResponse,
    responses={401: {"description": "Invalid credentials", "model": ErrorResponse}},
    summary="Exchange credentials for a bearer token",
)
async def login(
    credentials: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> TokenResponse:
    logger.info("Login attempt for %s", credentials.email)
    return await account_service.login(uow, credentials)
