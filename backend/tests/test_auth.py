"""Tests for the /api/auth endpoints."""

from datetime import timedelta

from jobly.models import User
from jobly.services.auth import create_access_token, decode_access_token


class TestToken:
    """Tests for POST /api/auth/token."""

    def test_works(self, client, sample_users):
        response = client.post(
            "/api/auth/token",
            json={"username": "u1", "password": "password1"},
        )
        assert response.status_code == 200
        payload = decode_access_token(response.json()["token"])
        assert payload["sub"] == "u1"
        assert payload["isAdmin"] is True

    def test_unknown_user(self, client, sample_users):
        response = client.post(
            "/api/auth/token",
            json={"username": "no-such-user", "password": "password1"},
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid username/password"

    def test_wrong_password(self, client, sample_users):
        response = client.post(
            "/api/auth/token",
            json={"username": "u1", "password": "nope"},
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid username/password"

    def test_missing_data(self, client):
        response = client.post("/api/auth/token", json={"username": "u1"})
        assert response.status_code == 422


class TestRegister:
    """Tests for POST /api/auth/register."""

    NEW_USER = {
        "username": "new",
        "firstName": "first",
        "lastName": "last",
        "password": "password",
        "email": "new@email.com",
    }

    def test_works(self, client, db):
        response = client.post("/api/auth/register", json=self.NEW_USER)
        assert response.status_code == 201
        payload = decode_access_token(response.json()["token"])
        assert payload["sub"] == "new"
        assert payload["isAdmin"] is False

        user = db.get(User, "new")
        assert user is not None
        assert user.first_name == "first"

    def test_cannot_register_as_admin(self, client):
        response = client.post("/api/auth/register", json={**self.NEW_USER, "isAdmin": True})
        assert response.status_code == 422

    def test_duplicate_username(self, client, sample_users):
        response = client.post("/api/auth/register", json={**self.NEW_USER, "username": "u1"})
        assert response.status_code == 400
        assert "Duplicate username" in response.json()["detail"]

    def test_invalid_email(self, client):
        response = client.post("/api/auth/register", json={**self.NEW_USER, "email": "not-an-email"})
        assert response.status_code == 422

    def test_password_too_short(self, client):
        response = client.post("/api/auth/register", json={**self.NEW_USER, "password": "abc"})
        assert response.status_code == 422
        assert "5 characters" in str(response.json())

    def test_missing_fields(self, client):
        response = client.post("/api/auth/register", json={"username": "new"})
        assert response.status_code == 422


class TestTokenChecks:
    """Tests for bearer token handling on protected routes."""

    def test_no_token(self, client, sample_users):
        response = client.get("/api/users")
        assert response.status_code == 401
        assert "Not authenticated" in response.json()["detail"]

    def test_garbage_token(self, client, sample_users):
        response = client.get("/api/users", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401

    def test_wrong_scheme(self, client, u1_token):
        response = client.get("/api/users", headers={"Authorization": f"Basic {u1_token}"})
        assert response.status_code == 401

    def test_expired_token(self, client, sample_users):
        token = create_access_token(
            data={"sub": "u1", "isAdmin": True}, expires_delta=timedelta(seconds=-1)
        )
        response = client.get("/api/users", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
