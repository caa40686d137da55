"""Pytest configuration and global fixtures for tasktrack tests.

Every test gets its own in-memory SQLite database and a low bcrypt cost so
the suite stays fast.
"""

import pytest
from fastapi.testclient import TestClient

from tasktrack.c1_database_session import DatabaseManager
from tasktrack.c2_account_service import AccountService
from tasktrack.c2_credential_service import CredentialService
from tasktrack.c2_password_service import PasswordService
from tasktrack.c2_task_service import TaskService
from tasktrack.core.config import Settings
from tasktrack.server import create_app

TEST_SECRET = "test-signing-secret"
DEFAULT_PASSWORD = "secret1"


@pytest.fixture
def test_settings():
    """Settings pointing at a private in-memory database."""
    return Settings(
        jwt_secret=TEST_SECRET,
        database_url="sqlite://",
        bcrypt_rounds=4,
        enable_cors=False,
    )


@pytest.fixture
def db_manager():
    """Create a test database."""
    manager = DatabaseManager("sqlite://")
    manager.create_tables()
    yield manager
    manager.dispose()


@pytest.fixture
def passwords():
    return PasswordService(rounds=4)


@pytest.fixture
def credentials():
    return CredentialService(TEST_SECRET)


@pytest.fixture
def account_service(db_manager, passwords):
    return AccountService(db_manager, passwords)


@pytest.fixture
def task_service(db_manager):
    return TaskService(db_manager)


@pytest.fixture
def owner(account_service):
    """An account that owns the tasks under test."""
    return account_service.register("owner@example.com", DEFAULT_PASSWORD)


@pytest.fixture
def other_account(account_service):
    """A second account that must never see the owner's tasks."""
    return account_service.register("other@example.com", DEFAULT_PASSWORD)


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
def test_client(app):
    """Create a test client with test database."""
    return TestClient(app)


@pytest.fixture
def register_and_login(test_client):
    """Register an account through the API and return auth headers for it."""

    def _register_and_login(email, password=DEFAULT_PASSWORD):
        response = test_client.post("/auth/register", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        response = test_client.post("/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _register_and_login


@pytest.fixture
def auth_headers(register_and_login):
    return register_and_login("alice@example.com")


@pytest.fixture
def other_auth_headers(register_and_login):
    return register_and_login("bob@example.com")
