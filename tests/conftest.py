"""
Shared test fixtures for the CREDGUARD API test suite.
"""

import pytest

from credguard.config import TestingConfig
from credguard.main import create_app


class SeededTestingConfig(TestingConfig):
    SEED_DEMO_DATA = True


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def seeded_app():
    return create_app(SeededTestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded_client(seeded_app):
    return seeded_app.test_client()


def register(client, email="ada@example.com", password="secret123", **extra):
    """Sign up and return the JSON body."""
    response = client.post("/api/auth/signup", json={"email": email, "password": password, **extra})
    assert response.status_code == 201, response.get_json()
    return response.get_json()


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def session(client):
    """A signed-up user on a blank database: the signup body plus headers."""
    body = register(client)
    body["headers"] = auth_headers(body["token"])
    return body


@pytest.fixture
def headers(session):
    return session["headers"]


@pytest.fixture
def seeded_headers(seeded_client):
    body = register(seeded_client)
    return auth_headers(body["token"])
