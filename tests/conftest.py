"""Pytest configuration and fixtures for testing."""

import pytest

from api import create_app
from models import storage
from models.user import User
from utils.decorators import AUTH_GATE_EXTENSION
from utils.security import create_access_token, hash_password

PASSWORD = "pw123456"


@pytest.fixture(scope="function")
def app():
    """App on a fresh in-memory SQLite database."""
    app = create_app("testing")
    yield app
    storage.close()


@pytest.fixture(scope="function")
def client(app):
    return app.test_client()


@pytest.fixture(scope="function")
def settings(app):
    return app.extensions[AUTH_GATE_EXTENSION].settings


@pytest.fixture(scope="function")
def make_user(app):
    """Factory that inserts a user directly through storage."""
    def _make(email="a@x.com", password=PASSWORD):
        user = User(email=email, hashed_password=hash_password(password))
        storage.new(user)
        storage.save()
        return user

    return _make


@pytest.fixture(scope="function")
def auth_headers(settings):
    """Authorization header carrying a fresh access token for user_id."""
    def _headers(user_id):
        token = create_access_token(user_id, settings.token_secret)
        return {"Authorization": f"Bearer {token}"}

    return _headers
