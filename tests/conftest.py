import os

# Keep password hashing cheap; must be set before the settings module is imported.
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")

import pytest  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402

from user_directory_api.app.main import create_app  # noqa: E402
from user_directory_api.app.services.user_service import UserService  # noqa: E402
from user_directory_api.app.services.user_store import UserStore  # noqa: E402


@pytest.fixture
def store():
    return UserStore()


@pytest.fixture
def service(store):
    return UserService(store)


@pytest.fixture
def app(store):
    """Fresh application around the per-test store."""
    return create_app(store=store)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def created_user(client):
    """Create a user through the API and return its id."""
    resp = client.post(
        "/users",
        json={"email": "a@x.com", "password": "p", "firstName": "Ada", "lastName": "Lovelace"},
    )
    assert resp.status_code == 201
    return resp.json()["id"]
