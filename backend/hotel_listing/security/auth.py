"""
Hotel Listing Backend — Authentication & Role Authorization
=============================================================

What:  Password hashing, access-token issue/verify, and the FastAPI
       dependencies that identify the caller and enforce roles.
How:   bcrypt for password hashes; HS256 JWTs (python-jose) carrying the
       caller's role names in a `roles` claim. require_roles() builds a
       dependency that runs before the route handler and rejects callers
       whose token lacks every required role.

Token claims:
    sub    user id (UUID string)
    email  account e-mail
    roles  list of role names, e.g. ["Administrator"]
    iss    settings.jwt_issuer
    exp    issue time + settings.access_token_lifetime_minutes

The role check trusts the signed claims; it does not reload the user.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable, List, Optional, Tuple

import bcrypt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from hotel_listing.config import settings
from hotel_listing.exceptions import AuthenticationError, AuthorizationError

logger = logging.getLogger(__name__)

# auto_error=False: a missing header becomes our AuthenticationError (401
# envelope) instead of FastAPI's bare 403
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Principal:
    """The authenticated caller, as described by a verified token."""
    user_id: str
    email: str
    roles: Tuple[str, ...] = field(default_factory=tuple)

    def has_any_role(self, roles: Iterable[str]) -> bool:
        return any(role in self.roles for role in roles)


# ── Passwords ─────────────────────────────────────────────────────────────

def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        logger.warning("Stored password hash could not be parsed")
        return False


# ── Tokens ────────────────────────────────────────────────────────────────

def create_access_token(
    user_id: str,
    email: str,
    roles: Iterable[str],
    lifetime: Optional[timedelta] = None,
) -> str:
    """Signs an access token for the given user and role names."""
    now = datetime.now(timezone.utc)
    expire = now + (lifetime or timedelta(minutes=settings.access_token_lifetime_minutes))
    claims = {
        "sub": str(user_id),
        "email": email,
        "roles": list(roles),
        "iss": settings.jwt_issuer,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Principal:
    """
    Verifies signature, expiry and issuer and returns the caller.

    Raises:
        AuthenticationError: the token is malformed, expired, signed with a
        different key or issued by someone else.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            issuer=settings.jwt_issuer,
        )
    except JWTError as e:
        raise AuthenticationError(context={"reason": str(e)})

    subject = payload.get("sub")
    if not subject:
        raise AuthenticationError(context={"reason": "token has no subject"})

    roles = payload.get("roles") or []
    if isinstance(roles, str):
        roles = [roles]

    return Principal(
        user_id=subject,
        email=payload.get("email", ""),
        roles=tuple(roles),
    )


# ── Dependencies ──────────────────────────────────────────────────────────

async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Principal:
    """Identifies the caller from the Authorization: Bearer header."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError(context={"reason": "missing bearer token"})
    return decode_access_token(credentials.credentials)


async def get_optional_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[Principal]:
    """
    The caller if a bearer token was sent, otherwise None.

    A token that is present but invalid still raises AuthenticationError.
    """
    if credentials is None or not credentials.credentials:
        return None
    return decode_access_token(credentials.credentials)



def require_roles(*roles: str) -> Callable:
    """
    Builds a dependency that admits callers holding at least one of `roles`.

    Usage:
        @router.post("/hotel", dependencies=[Depends(require_roles("Administrator"))])
    """
    required: List[str] = list(roles)

    async def role_checker(
        principal: Principal = Depends(get_current_principal),
    ) -> Principal:
        if not principal.has_any_role(required):
            logger.warning(
                "User %s denied: requires one of %s, has %s",
                principal.user_id,
                required,
                list(principal.roles),
            )
            raise AuthorizationError(required_roles=tuple(required))
        return principal

    return role_checker
