"""
Tests for signup/login and the profile routes.
"""

import pytest

from career_guide.routers.profile import is_valid_phone


class TestSignup:
    """Tests for POST /api/auth/signup."""

    @pytest.mark.asyncio
    async def test_signup(self, client):
        resp = await client.post(
            "/api/auth/signup",
            json={"email": "  New@Example.com ", "password": "longenough", "name": "New User"},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["email"] == "new@example.com"
        assert data["name"] == "New User"

    @pytest.mark.asyncio
    async def test_missing_fields(self, client):
        resp = await client.post("/api/auth/signup", json={"email": "a@b.c"})
        assert resp.status_code == 400
        assert resp.json()["error"] == "Email and password are required"

    @pytest.mark.asyncio
    async def test_short_password(self, client):
        resp = await client.post("/api/auth/signup", json={"email": "a@b.c", "password": "short"})
        assert resp.status_code == 400
        assert resp.json()["error"] == "Password must be at least 8 characters"

    @pytest.mark.asyncio
    async def test_duplicate_email(self, client, user):
        resp = await client.post(
            "/api/auth/signup", json={"email": "STUDENT@example.com", "password": "longenough"}
        )
        assert resp.status_code == 409
        assert resp.json()["error"] == "An account with this email already exists"


class TestLogin:
    """Tests for POST /api/auth/login and GET /api/auth/me."""

    @pytest.mark.asyncio
    async def test_login_and_me(self, client, user):
        resp = await client.post(
            "/api/auth/login", data={"username": "student@example.com", "password": "student123"}
        )
        assert resp.status_code == 200
        token = resp.json()["access_token"]
        assert resp.json()["token_type"] == "bearer"

        me = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        assert me.json()["email"] == "student@example.com"
        assert me.json()["name"] == "Demo Student"

    @pytest.mark.asyncio
    async def test_wrong_password(self, client, user):
        resp = await client.post(
            "/api/auth/login", data={"username": "student@example.com", "password": "nope"}
        )
        assert resp.status_code == 401
        assert resp.json() == {"error": "Invalid email or password"}

    @pytest.mark.asyncio
    async def test_bad_token(self, client):
        resp = await client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"})
        assert resp.status_code == 401
        assert resp.json() == {"error": "Unauthorized"}


class TestProfile:
    """Tests for GET/PUT /api/profile."""

    @pytest.mark.asyncio
    async def test_get_profile(self, client, auth_headers):
        resp = await client.get("/api/profile", headers=auth_headers)
        assert resp.status_code == 200
        data = resp.json()
        assert data["name"] == "Demo Student"
        assert "createdAt" in data

    @pytest.mark.asyncio
    async def test_partial_update(self, client, auth_headers):
        resp = await client.put(
            "/api/profile",
            json={"phone": "+1 (555) 123-4567", "interests": ["AI", "Design"]},
            headers=auth_headers,
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["phone"] == "+1 (555) 123-4567"
        assert data["interests"] == ["AI", "Design"]
        # name untouched
        assert data["name"] == "Demo Student"

    @pytest.mark.asyncio
    async def test_invalid_phone(self, client, auth_headers):
        resp = await client.put("/api/profile", json={"phone": "call me"}, headers=auth_headers)
        assert resp.status_code == 400
        assert resp.json()["error"] == "Please enter a valid phone number"

    def test_phone_validation(self):
        assert is_valid_phone("+15551234567")
        assert is_valid_phone("555-123-4567")
        assert not is_valid_phone("12345")
        assert not is_valid_phone("+1 555 abc 4567")
