"""
Hotel Listing Backend — Authentication & Authorization Unit Tests
===================================================================

What we test:
    ✅ bcrypt hashing round trip and malformed stored hashes
    ✅ Token claims, expiry, foreign signature and foreign issuer
    ✅ require_roles() admits any listed role and rejects the rest
"""

from datetime import timedelta

import pytest
from fastapi.security import HTTPAuthorizationCredentials
from jose import jwt

from hotel_listing.config import settings
from hotel_listing.exceptions import AuthenticationError, AuthorizationError
from hotel_listing.security.auth import (
    Principal,
    create_access_token,
    decode_access_token,
    get_current_principal,
    hash_password,
    require_roles,
    verify_password,
)


class TestPasswords:

    def test_hash_verifies(self):
        hashed = hash_password("P@ssw0rd")

        assert hashed != "P@ssw0rd"
        assert verify_password("P@ssw0rd", hashed)
        assert not verify_password("p@ssw0rd", hashed)

    def test_malformed_hash_does_not_verify(self):
        assert verify_password("P@ssw0rd", "not-a-bcrypt-hash") is False


class TestTokens:

    def test_claims_round_trip(self):
        token = create_access_token("user-1", "a@hotellisting.com", ["Administrator", "User"])
        principal = decode_access_token(token)

        assert principal == Principal(
            user_id="user-1",
            email="a@hotellisting.com",
            roles=("Administrator", "User"),
        )

    def test_token_carries_issuer(self):
        token = create_access_token("user-1", "a@hotellisting.com", [])
        claims = jwt.get_unverified_claims(token)

        assert claims["iss"] == settings.jwt_issuer
        assert claims["exp"] > claims["iat"]

    def test_expired_token_is_rejected(self):
        token = create_access_token(
            "user-1", "a@hotellisting.com", ["User"], lifetime=timedelta(seconds=-1)
        )

        with pytest.raises(AuthenticationError):
            decode_access_token(token)

    def test_foreign_signature_is_rejected(self):
        token = jwt.encode(
            {"sub": "user-1", "iss": settings.jwt_issuer, "roles": ["Administrator"]},
            "some-other-secret",
            algorithm="HS256",
        )

        with pytest.raises(AuthenticationError):
            decode_access_token(token)

    def test_foreign_issuer_is_rejected(self):
        token = jwt.encode(
            {"sub": "user-1", "iss": "SomeoneElse", "roles": ["Administrator"]},
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(AuthenticationError):
            decode_access_token(token)

    def test_token_without_subject_is_rejected(self):
        token = jwt.encode(
            {"iss": settings.jwt_issuer, "roles": ["Administrator"]},
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(AuthenticationError):
            decode_access_token(token)


class TestDependencies:

    @pytest.mark.asyncio
    async def test_missing_credentials_is_authentication_error(self):
        with pytest.raises(AuthenticationError):
            await get_current_principal(None)

    @pytest.mark.asyncio
    async def test_bearer_credentials_resolve_principal(self):
        token = create_access_token("user-7", "u@hotellisting.com", ["User"])
        credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)

        principal = await get_current_principal(credentials)

        assert principal.user_id == "user-7"

    @pytest.mark.asyncio
    async def test_role_checker_admits_any_listed_role(self):
        checker = require_roles("Administrator", "User")
        principal = Principal(user_id="u", email="u@x.io", roles=("User",))

        assert await checker(principal) is principal

    @pytest.mark.asyncio
    async def test_role_checker_rejects_missing_role(self):
        checker = require_roles("Administrator")
        principal = Principal(user_id="u", email="u@x.io", roles=("User",))

        with pytest.raises(AuthorizationError) as exc_info:
            await checker(principal)
        assert exc_info.value.required_roles == ("Administrator",)
