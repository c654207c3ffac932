"""
Tests for registration, login and session handling.
"""

from paynote.services.auth_service import AuthService

from conftest import TEST_PASSWORD


class TestRegister:

    def test_register_returns_201(self, client):
        response = client.post("/auth/register", json={
            "email": "new@example.com",
            "name": "New User",
            "password": TEST_PASSWORD,
        })
        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "new@example.com"
        assert "password" not in data
        assert "password_hash" not in data

    def test_duplicate_email_returns_400(self, client, owner):
        response = client.post("/auth/register", json={
            "email": owner.email,
            "name": "Copy",
            "password": TEST_PASSWORD,
        })
        assert response.status_code == 400

    def test_concurrent_duplicate_email_returns_400(self, client, owner, monkeypatch):
        # Another request registered the email after our uniqueness check
        monkeypatch.setattr(AuthService, "_find_by_email", lambda self, email: None)

        response = client.post("/auth/register", json={
            "email": owner.email,
            "name": "Copy",
            "password": TEST_PASSWORD,
        })
        assert response.status_code == 400
        assert "already exists" in response.json()["detail"]

    def test_short_password_returns_400(self, client):
        response = client.post("/auth/register", json={
            "email": "new@example.com",
            "name": "New User",
            "password": "short",
        })
        assert response.status_code == 400
        assert "password" in response.json()["detail"]


class TestSession:

    def test_login_then_me(self, client, owner):
        response = client.post("/auth/login", json={
            "email": owner.email,
            "password": TEST_PASSWORD,
        })
        assert response.status_code == 200

        me = client.get("/auth/me")
        assert me.status_code == 200
        assert me.json()["id"] == owner.id

    def test_bad_login_returns_401(self, client, owner):
        response = client.post("/auth/login", json={
            "email": owner.email,
            "password": "wrong-password",
        })
        assert response.status_code == 401
        assert client.get("/auth/me").status_code == 401

    def test_me_without_session_returns_401(self, client):
        response = client.get("/auth/me")
        assert response.status_code == 401
        assert response.json()["detail"] == "Unauthorized"

    def test_logout_ends_session(self, auth_client):
        assert auth_client.get("/auth/me").status_code == 200

        response = auth_client.post("/auth/logout")
        assert response.status_code == 200
        assert auth_client.get("/auth/me").status_code == 401
