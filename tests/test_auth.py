"""
Authentication Tests

Tests for the credential check and the /login endpoint.
"""

import pytest
from jose import jwt

from product_api.services import auth_service
from product_api.services.results import ErrorKind


class TestAuthenticate:
    """Tests for the auth service."""

    def test_accepts_configured_credential(self, test_settings):
        """Verify the configured pair yields a token."""
        result = auth_service.authenticate("Paras", "123", test_settings)

        assert result.ok
        assert jwt.get_unverified_claims(result.value)["name"] == "Paras"

    @pytest.mark.parametrize(
        "username, password",
        [
            ("Paras", "wrong"),
            ("paras", "123"),
            ("someone", "123"),
            ("", ""),
        ],
    )
    def test_rejects_other_credentials(self, test_settings, username, password):
        """Verify anything but the exact pair is refused."""
        result = auth_service.authenticate(username, password, test_settings)

        assert result.error == ErrorKind.UNAUTHORIZED
        assert result.value is None

    def test_uses_injected_credential(self, test_settings):
        """Verify the credential comes from settings."""
        custom = test_settings.model_copy(
            update={"ADMIN_USERNAME": "ops", "ADMIN_PASSWORD": "s3cret"}
        )

        assert auth_service.authenticate("ops", "s3cret", custom).ok
        assert not auth_service.authenticate("Paras", "123", custom).ok


class TestLoginEndpoint:
    """Tests for POST /login."""

    @pytest.mark.asyncio
    async def test_login_returns_token(self, client, test_settings):
        """Verify a correct login returns a decodable token."""
        response = await client.post("/login", json={"username": "Paras", "password": "123"})

        assert response.status_code == 200
        token = response.json()["token"]
        payload = jwt.decode(
            token,
            test_settings.JWT_KEY,
            algorithms=["HS256"],
            audience=test_settings.JWT_AUDIENCE,
            issuer=test_settings.JWT_ISSUER,
        )
        assert payload["name"] == "Paras"
        assert payload["role"] == "Admin"
        assert payload["exp"] - payload["iat"] == 1800

    @pytest.mark.asyncio
    async def test_login_accepts_camel_case_username(self, client):
        """Verify the userName spelling is accepted."""
        response = await client.post("/login", json={"userName": "Paras", "password": "123"})

        assert response.status_code == 200
        assert "token" in response.json()

    @pytest.mark.asyncio
    async def test_login_rejects_wrong_password(self, client):
        """Verify a bad credential gives 401 with no token."""
        response = await client.post("/login", json={"username": "Paras", "password": "nope"})

        assert response.status_code == 401
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_login_rejects_missing_fields(self, client):
        """Verify malformed login bodies are a 400."""
        response = await client.post("/login", json={"username": "Paras"})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request data."

    @pytest.mark.asyncio
    async def test_issued_token_opens_protected_routes(self, client):
        """Verify the login token is accepted by product routes."""
        login = await client.post("/login", json={"username": "Paras", "password": "123"})
        headers = {"Authorization": f"Bearer {login.json()['token']}"}

        response = await client.get("/api/products", headers=headers)

        assert response.status_code == 204
