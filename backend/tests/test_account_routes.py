"""
Hotel Listing Backend — Account Endpoint Tests
================================================

What:  Registration and login through /api/account, and the issued token
       used against an Administrator-only route.
"""

import pytest

from hotel_listing.security.auth import decode_access_token


def registration(email="jane@hotellisting.com", roles=None):
    body = {
        "email": email,
        "password": "P@ssw0rd",
        "firstName": "Jane",
        "lastName": "Brown",
    }
    if roles is not None:
        body["roles"] = roles
    return body


class TestRegister:

    @pytest.mark.asyncio
    async def test_register_defaults_to_user_role(self, test_client):
        response = await test_client.post("/api/account/register", json=registration())

        assert response.status_code == 202
        body = response.json()
        assert body["email"] == "jane@hotellisting.com"
        assert body["firstName"] == "Jane"
        assert body["roles"] == ["User"]
        assert "password" not in body
        assert "passwordHash" not in body

    @pytest.mark.asyncio
    async def test_administrator_may_grant_both_roles(self, test_client, admin_headers):
        response = await test_client.post(
            "/api/account/register",
            json=registration(roles=["Administrator", "User"]),
            headers=admin_headers,
        )

        assert response.status_code == 202
        assert response.json()["roles"] == ["Administrator", "User"]

    @pytest.mark.asyncio
    async def test_anonymous_cannot_self_register_as_administrator(self, test_client):
        response = await test_client.post(
            "/api/account/register", json=registration(roles=["Administrator"])
        )

        assert response.status_code == 403
        assert response.json()["error"] == "forbidden"

        login = await test_client.post(
            "/api/account/login",
            json={"email": "jane@hotellisting.com", "password": "P@ssw0rd"},
        )
        assert login.status_code == 401

    @pytest.mark.asyncio
    async def test_user_cannot_grant_administrator(self, test_client, user_headers):
        response = await test_client.post(
            "/api/account/register",
            json=registration(roles=["User", "Administrator"]),
            headers=user_headers,
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_user_role_needs_no_token(self, test_client):
        response = await test_client.post(
            "/api/account/register", json=registration(roles=["user"])
        )

        assert response.status_code == 202
        assert response.json()["roles"] == ["User"]

    @pytest.mark.asyncio
    async def test_invalid_token_on_register_is_401(self, test_client):
        response = await test_client.post(
            "/api/account/register",
            json=registration(),
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_duplicate_email_is_400_case_insensitive(self, test_client):
        await test_client.post("/api/account/register", json=registration())
        response = await test_client.post(
            "/api/account/register", json=registration(email="JANE@hotellisting.com")
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_unknown_role_is_400(self, test_client):
        response = await test_client.post(
            "/api/account/register", json=registration(roles=["Owner"])
        )

        assert response.status_code == 400
        assert "Owner" in response.json()["message"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [
            {"email": "not-an-email"},
            {"password": "short"},
            {"password": "sixteen-chars-xx"},
            {"roles": []},
        ],
    )
    async def test_invalid_registration_is_400(self, test_client, overrides):
        response = await test_client.post(
            "/api/account/register", json={**registration(), **overrides}
        )

        assert response.status_code == 400


class TestLogin:

    @pytest.mark.asyncio
    async def test_login_issues_role_bearing_token(self, test_client, admin_headers):
        await test_client.post(
            "/api/account/register",
            json=registration(roles=["Administrator"]),
            headers=admin_headers,
        )
        response = await test_client.post(
            "/api/account/login",
            json={"email": "jane@hotellisting.com", "password": "P@ssw0rd"},
        )

        assert response.status_code == 202
        body = response.json()
        assert body["tokenType"] == "bearer"
        assert body["expiresIn"] > 0
        principal = decode_access_token(body["token"])
        assert principal.email == "jane@hotellisting.com"
        assert principal.roles == ("Administrator",)

    @pytest.mark.asyncio
    async def test_wrong_password_is_401(self, test_client):
        await test_client.post("/api/account/register", json=registration())
        response = await test_client.post(
            "/api/account/login",
            json={"email": "jane@hotellisting.com", "password": "wrong-pass"},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_unknown_email_is_401(self, test_client):
        response = await test_client.post(
            "/api/account/login",
            json={"email": "nobody@hotellisting.com", "password": "P@ssw0rd"},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_issued_token_authorizes_by_role(
        self, test_client, admin_headers, sample_hotel_data
    ):
        await test_client.post("/api/account/register", json=registration())
        await test_client.post(
            "/api/account/register",
            json=registration(email="admin@hotellisting.com", roles=["Administrator"]),
            headers=admin_headers,
        )

        async def bearer(email):
            login = await test_client.post(
                "/api/account/login", json={"email": email, "password": "P@ssw0rd"}
            )
            return {"Authorization": f"Bearer {login.json()['token']}"}

        as_user = await test_client.post(
            "/api/hotel", json=sample_hotel_data, headers=await bearer("jane@hotellisting.com")
        )
        as_admin = await test_client.post(
            "/api/hotel", json=sample_hotel_data, headers=await bearer("admin@hotellisting.com")
        )

        assert as_user.status_code == 403
        assert as_admin.status_code == 201
