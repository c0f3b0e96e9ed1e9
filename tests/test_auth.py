"""
Tests for sign up, sign in and bearer token handling.
"""

from datetime import timedelta
from unittest.mock import patch

import jwt
from sqlalchemy.exc import SQLAlchemyError

from credguard.models import db, utcnow
from credguard.models.identity import EncryptedIdentity, DEFAULT_METRICS
from credguard.models.profile import Profile, TrustScoreHistory
from credguard.models.user import User
from tests.conftest import auth_headers, register


class TestSignup:
    def test_creates_account_profile_and_identity(self, app, client):
        body = register(client, email="grace@example.com", password="hopper1")

        assert body["message"] == "Account created! Your encrypted identity is being generated."
        assert body["token"]
        assert body["user"]["email"] == "grace@example.com"
        assert body["profile"]["display_name"] == "grace"
        assert body["profile"]["trust_score"] == 750

        with app.app_context():
            user = User.get_by_email("grace@example.com")
            identity = EncryptedIdentity.get_by_user(user.id)
            assert identity.encrypted_vector.startswith("0x")
            assert identity.behavioral_metrics == DEFAULT_METRICS
            assert identity.cyborgdb_indexed is False
            assert len(TrustScoreHistory.get_by_user(user.id)) == 1

    def test_display_name(self, app, client):
        body = register(client, display_name="  Ada L.  ")
        assert body["profile"]["display_name"] == "Ada L."

    def test_duplicate_email(self, client):
        register(client)
        response = client.post("/api/auth/signup", json={"email": "ADA@example.com", "password": "secret123"})
        assert response.status_code == 409
        assert response.get_json()["message"] == "This email is already registered. Please sign in."

    def test_invalid_email(self, client):
        response = client.post("/api/auth/signup", json={"email": "not-an-email", "password": "secret123"})
        assert response.status_code == 400
        assert response.get_json()["message"] == "Please enter a valid email address"

    def test_short_password(self, client):
        response = client.post("/api/auth/signup", json={"email": "a@example.com", "password": "12345"})
        assert response.status_code == 400
        assert "at least 6" in response.get_json()["message"]

    def test_no_body(self, client):
        response = client.post("/api/auth/signup")
        assert response.status_code == 400
        assert response.get_json()["message"] == "No data provided"

    def test_demo_data_is_seeded_when_enabled(self, seeded_client):
        headers = auth_headers(register(seeded_client)["token"])
        institutions = seeded_client.get("/api/institutions", headers=headers).get_json()
        assert institutions["connected_count"] == 4


class TestLogin:
    def test_success(self, client):
        register(client)
        response = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "secret123"})
        assert response.status_code == 200
        body = response.get_json()
        assert body["message"] == "Successfully signed in to CREDGUARD."
        assert body["user"]["last_sign_in_at"]
        assert body["profile"]["trust_score"] == 750

    def test_wrong_password(self, client):
        register(client)
        response = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "wrong-pass"})
        assert response.status_code == 401
        assert response.get_json()["message"] == "Invalid email or password. Please try again."

    def test_unknown_user(self, client):
        response = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "secret123"})
        assert response.status_code == 401

    def test_failed_sign_in_stamp(self, client):
        register(client)
        with patch.object(db.session, "commit", side_effect=SQLAlchemyError("disk I/O error")):
            response = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "secret123"})

        assert response.status_code == 500
        assert response.get_json() == {"message": "Login failed"}


class TestTokens:
    def test_session(self, client, session):
        response = client.get("/api/auth/session", headers=session["headers"])
        assert response.status_code == 200
        assert response.get_json()["user"]["email"] == "ada@example.com"

    def test_missing_token(self, client):
        response = client.get("/api/auth/session")
        assert response.status_code == 401
        assert response.get_json()["message"] == "Token is missing"

    def test_bad_format(self, client):
        response = client.get("/api/auth/session", headers={"Authorization": "Token abc"})
        assert response.status_code == 401
        assert response.get_json()["message"] == "Token format invalid"

    def test_invalid_token(self, client):
        response = client.get("/api/auth/session", headers=auth_headers("garbage"))
        assert response.status_code == 401
        assert response.get_json()["message"] == "Token is invalid"

    def test_expired_token(self, app, client, session):
        token = jwt.encode(
            {"user_id": session["user"]["id"], "exp": utcnow() - timedelta(minutes=1)},
            app.config["SECRET_KEY"],
            algorithm="HS256",
        )
        response = client.get("/api/auth/session", headers=auth_headers(token))
        assert response.status_code == 401
        assert response.get_json()["message"] == "Token has expired"

    def test_logout(self, client, headers):
        response = client.post("/api/auth/logout", headers=headers)
        assert response.status_code == 200
        assert response.get_json()["message"] == "You have been signed out successfully."


def test_profile_row_created(app, session):
    with app.app_context():
        profile = Profile.get_by_user(session["user"]["id"])
        assert profile.email == "ada@example.com"
