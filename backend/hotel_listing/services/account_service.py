"""
Hotel Listing Backend — Account Service
=========================================

What:  Registers users against the fixed role set and exchanges
       credentials for access tokens.
Who:   Called by routes/account.py.

Registration rules:
    - e-mail is unique case-insensitively (normalized_email)
    - every requested role must already exist; roles are never created here
    - only an Administrator caller may grant roles other than User
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from hotel_listing.config import settings
from hotel_listing.exceptions import AuthenticationError, AuthorizationError, ValidationError
from hotel_listing.mappers import user_to_response
from hotel_listing.models.identity import ROLE_ADMINISTRATOR, ROLE_USER, User
from hotel_listing.repositories.identity import normalize
from hotel_listing.repositories.unit_of_work import UnitOfWork
from hotel_listing.schemas.account import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from hotel_listing.security.auth import (
    Principal,
    create_access_token,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)


class AccountService:

    async def register(
        self,
        uow: UnitOfWork,
        request: RegisterRequest,
        principal: Optional[Principal] = None,
    ) -> UserResponse:
        """
        Creates the account. Roles other than User may only be granted by
        an Administrator caller; anonymous sign-up is always a plain User.
        """
        if await uow.users.get_by_email(request.email) is not None:
            logger.error("Invalid registration attempt: %s is already registered", request.email)
            raise ValidationError(
                message="An account with this e-mail already exists",
                field="email",
            )

        roles = await uow.roles.get_by_names(request.roles)
        known = {normalize(role.name) for role in roles}
        unknown = [name for name in request.roles if normalize(name) not in known]
        if unknown:
            logger.error("Invalid registration attempt: unknown roles %s", unknown)
            raise ValidationError(
                message=f"Unknown role(s): {', '.join(unknown)}",
                field="roles",
                context={"unknown_roles": unknown},
            )

        self._ensure_may_grant(request.roles, principal)

        user = User(
            email=request.email,
            normalized_email=normalize(request.email),
            password_hash=hash_password(request.password),
            first_name=request.first_name,
            last_name=request.last_name,
            phone_number=request.phone_number,
        )
        user.roles = roles

        try:
            await uow.users.insert(user)
            await uow.save()
        except IntegrityError:
            # Concurrent registration of the same e-mail
            await uow.rollback()
            raise ValidationError(
                message="An account with this e-mail already exists",
                field="email",
            )

        logger.info("User %s registered with roles %s", user.id, user.role_names)
        return user_to_response(user)

    async def login(self, uow: UnitOfWork, request: LoginRequest) -> TokenResponse:
        user = await uow.users.get_by_email(request.email)
        if user is None or not verify_password(request.password, user.password_hash):
            logger.warning("Failed login attempt for %s", request.email)
            raise AuthenticationError(message="Invalid e-mail or password")

        token = create_access_token(
            user_id=str(user.id),
            email=user.email,
            roles=user.role_names,
        )
        return TokenResponse(
            token=token,
            expires_in=settings.access_token_lifetime_minutes * 60,
        )

    def _ensure_may_grant(self, roles: List[str], principal: Optional[Principal]) -> None:
        privileged = [name for name in roles if normalize(name) != normalize(ROLE_USER)]
        if not privileged:
            return
        if principal is None or not principal.has_any_role([ROLE_ADMINISTRATOR]):
            logger.error(
                "Invalid registration attempt: %s may not grant %s",
                principal.user_id if principal else "anonymous caller",
                privileged,
            )
            raise AuthorizationError(required_roles=(ROLE_ADMINISTRATOR,))


account_service = AccountService()
