"""
Tests for password hashing, token issue/verify and the login endpoint.
"""
from datetime import datetime, timedelta, timezone

import jwt
import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.core.exceptions import UnauthorizedError
from app.utils.auth import get_password_hash, verify_password
from common_utils.auth.utils import create_access_token, verify_token


class TestPasswordHashing:

    def test_hash_is_salted_and_verifiable(self):
        first = get_password_hash("s3cret")
        second = get_password_hash("s3cret")
        assert first != second
        assert verify_password("s3cret", first)
        assert not verify_password("other", first)

    def test_empty_hash_never_verifies(self):
        assert verify_password("anything", "") is False


class TestTokens:

    def test_claims_and_expiry(self):
        token, expires_at = create_access_token("admin")
        claims = verify_token(token)

        assert claims["sub"] == "admin"
        assert "iat" in claims
        expected = datetime.now(timezone.utc) + timedelta(hours=24)
        assert abs(datetime.fromtimestamp(claims["exp"], timezone.utc) - expected) < timedelta(minutes=1)
        assert abs(expires_at - expected) < timedelta(minutes=1)

    def test_expired_token(self):
        token, _ = create_access_token("admin", expires_delta=timedelta(seconds=-10))
        with pytest.raises(UnauthorizedError):
            verify_token(token)

    def test_wrong_signature(self):
        forged = jwt.encode(
            {"sub": "admin", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            "not-the-secret",
            algorithm=settings.ALGORITHM,
        )
        with pytest.raises(UnauthorizedError):
            verify_token(forged)

    def test_malformed_token(self):
        with pytest.raises(UnauthorizedError):
            verify_token("not.a.token")

    def test_token_without_subject(self):
        token = jwt.encode(
            {"exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
        )
        with pytest.raises(UnauthorizedError):
            verify_token(token)


class TestLoginEndpoint:

    def test_login_success(self, client: TestClient, admin_user):
        response = client.post(
            "/api/v1/login",
            json={"username": "admin", "password": "correct-password"},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["token_type"] == "bearer"
        assert verify_token(body["data"]["token"])["sub"] == "admin"

    def test_login_wrong_password(self, client: TestClient, admin_user):
        response = client.post(
            "/api/v1/login",
            json={"username": "admin", "password": "wrong-password"},
        )
        assert response.status_code == 401
        assert response.json()["error_code"] == "UNAUTHORIZED"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_login_inactive_user(self, client: TestClient, test_db, admin_user):
        admin_user.active = False
        test_db.commit()

        response = client.post(
            "/api/v1/login",
            json={"username": "admin", "password": "correct-password"},
        )
        assert response.status_code == 401

    def test_login_missing_fields(self, client: TestClient):
        response = client.post("/api/v1/login", json={"username": "admin"})
        assert response.status_code == 422


class TestBearerProtection:

    def test_missing_token(self, client: TestClient):
        response = client.get("/api/v1/cars")
        assert response.status_code == 401
        assert response.json()["success"] is False

    def test_garbage_token(self, client: TestClient):
        response = client.get("/api/v1/cars", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401

    def test_valid_token(self, client: TestClient, auth_headers):
        response = client.get("/api/v1/cars", headers=auth_headers)
        assert response.status_code == 200

    def test_public_routes(self, client: TestClient):
        assert client.get("/").status_code == 200
        health = client.get("/health")
        assert health.status_code == 200
        assert "X-Request-ID" in health.headers
