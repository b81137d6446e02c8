"""Integration tests for registration, login, logout and navigation."""

import pytest
from httpx import AsyncClient

ANA = {
    "name": "Ana",
    "email": "ana@x.com",
    "password": "secret1",
    "confirm_password": "secret1",
    "age": "22",
    "specialty": "software",
}


async def _register(client: AsyncClient, **overrides) -> dict:
    response = await client.post("/api/v1/users", json={**ANA, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


class TestRegisterAPI:
    @pytest.mark.asyncio
    async def test_register_creates_account_without_login(self, app_client: AsyncClient):
        body = await _register(app_client)

        assert body["data"]["id"]
        assert body["message"] == "Your account has been created"
        session = (await app_client.get("/api/v1/session")).json()
        assert session["user"] is None
        assert session["is_authenticated"] is False

    @pytest.mark.asyncio
    async def test_register_duplicate_email_returns_409(self, app_client: AsyncClient):
        await _register(app_client)

        response = await app_client.post("/api/v1/users", json=ANA)

        assert response.status_code == 409
        assert response.json()["error_code"] == "EMAIL_TAKEN"

    @pytest.mark.asyncio
    async def test_register_validates_form(self, app_client: AsyncClient):
        response = await app_client.post(
            "/api/v1/users", json={**ANA, "confirm_password": "different"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["message"] == "Passwords do not match"

    @pytest.mark.asyncio
    async def test_list_specialties(self, app_client: AsyncClient):
        response = await app_client.get("/api/v1/specialties")

        options = response.json()["data"]
        assert {"value": "software", "label": "Software Development"} in options
        assert len(options) == 9


class TestLoginAPI:
    @pytest.mark.asyncio
    async def test_login_switches_navigation_to_app_tabs(self, app_client: AsyncClient):
        await _register(app_client)
        before = (await app_client.get("/api/v1/navigation")).json()

        response = await app_client.post(
            "/api/v1/session/login", json={"email": "ana@x.com", "password": "secret1"}
        )

        assert response.status_code == 200
        session = response.json()
        assert session["is_authenticated"] is True
        assert session["user"]["name"] == "Ana"
        assert "password" not in session["user"]
        after = (await app_client.get("/api/v1/navigation")).json()
        assert before["screen"] == "auth"
        assert after["screen"] == "app"
        assert after["initial_route"] == "Home"

    @pytest.mark.asyncio
    async def test_login_unknown_email_returns_404(self, app_client: AsyncClient):
        response = await app_client.post(
            "/api/v1/session/login", json={"email": "ghost@x.com", "password": "secret1"}
        )

        assert response.status_code == 404
        assert response.json()["error_code"] == "USER_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_login_wrong_password_returns_401(self, app_client: AsyncClient):
        await _register(app_client)

        response = await app_client.post(
            "/api/v1/session/login", json={"email": "ana@x.com", "password": "wrong"}
        )

        assert response.status_code == 401
        assert response.json()["error_code"] == "INVALID_CREDENTIALS"

    @pytest.mark.asyncio
    async def test_login_requires_all_fields(self, app_client: AsyncClient):
        response = await app_client.post("/api/v1/session/login", json={"email": "ana@x.com"})

        assert response.status_code == 400
        assert response.json()["message"] == "Please complete all fields"

    @pytest.mark.asyncio
    async def test_logout_returns_to_auth_stack(self, app_client: AsyncClient):
        await _register(app_client)
        await app_client.post(
            "/api/v1/session/login", json={"email": "ana@x.com", "password": "secret1"}
        )

        first = await app_client.post("/api/v1/session/logout")
        second = await app_client.post("/api/v1/session/logout")

        assert first.status_code == second.status_code == 200
        navigation = (await app_client.get("/api/v1/navigation")).json()
        assert navigation["screen"] == "auth"
        assert [r["name"] for r in navigation["routes"]] == ["Login", "Register"]
