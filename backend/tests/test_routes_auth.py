"""
Nainaland Backend — Auth Endpoint Tests
=========================================

What we test:
    ✅ Login returns a token and the public user
    ✅ Wrong credentials and malformed bodies are rejected
    ✅ The token opens admin routes; missing/invalid tokens get 401
"""

import pytest


class TestLogin:

    @pytest.mark.asyncio
    async def test_login_success(self, test_client):
        response = await test_client.post(
            "/api/auth/login", json={"username": "admin", "password": "admin123"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["token"]
        assert body["user"] == {"id": 1, "username": "admin"}
        assert "password" not in str(body)

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, test_client):
        response = await test_client.post(
            "/api/auth/login", json={"username": "admin", "password": "nope"}
        )

        assert response.status_code == 401
        body = response.json()
        assert body["error"] == "unauthorized"
        assert body["message"] == "Invalid credentials"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_login_missing_fields(self, test_client):
        response = await test_client.post("/api/auth/login", json={"username": "admin"})

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_login_token_opens_admin_route(self, test_client):
        login = await test_client.post(
            "/api/auth/login", json={"username": "admin", "password": "admin123"}
        )
        token = login.json()["token"]

        response = await test_client.get(
            "/api/messages", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 200


class TestMe:

    @pytest.mark.asyncio
    async def test_me_with_token(self, test_client, auth_headers):
        response = await test_client.get("/api/auth/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"id": 1, "username": "admin"}

    @pytest.mark.asyncio
    async def test_me_without_token(self, test_client):
        response = await test_client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json()["message"] == "Unauthorized: No token provided"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "header",
        ["Bearer not-a-real-token", "Bearer ", "Basic YWRtaW46YWRtaW4xMjM=", "token-without-scheme"],
    )
    async def test_me_with_bad_authorization_header(self, test_client, header):
        response = await test_client.get("/api/auth/me", headers={"Authorization": header})

        assert response.status_code == 401
        assert response.json()["error"] == "unauthorized"
