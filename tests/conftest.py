"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging

import pytest
from fastapi.testclient import TestClient

from notekeeper.config import Settings, get_settings
from notekeeper.core.services import AuthService
from notekeeper.database import Database
from notekeeper.main import create_app

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def test_settings():
    """Settings for testing: in-memory DB, fixed secret, no log files."""
    return Settings(
        database_url=MEMORY_URL,
        secret_key="test-secret-key",
        debug=True,
        log_to_file=False,
        environment="test",
    )


@pytest.fixture
async def database():
    """Initialised gateway over a fresh in-memory database."""
    db = Database(MEMORY_URL)
    await db.initialize()
    try:
        yield db
    finally:
        await db.close()


@pytest.fixture
def auth_service(database, test_settings):
    return AuthService(database, test_settings)


@pytest.fixture
async def alice(auth_service):
    """Registered user ``alice``."""
    return await auth_service.register("alice", "pw1")


@pytest.fixture
async def bob(auth_service):
    """Registered user ``bob``."""
    return await auth_service.register("bob", "pw2")


@pytest.fixture
def test_app(test_settings):
    """FastAPI app bound to the test settings."""
    app = create_app(test_settings)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(test_app):
    """Test client; entering it runs the lifespan and creates the schema."""
    with TestClient(test_app) as c:
        yield c


def signup_and_login(client, username: str, password: str) -> dict[str, str]:
    """Helper for registering then logging in to get bearer headers."""
    resp = client.post("/api/signup", json={"username": username, "password": password})
    assert resp.status_code == 201, resp.text

    resp = client.post("/api/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def auth_headers(client):
    """Bearer headers for user ``alice``."""
    return signup_and_login(client, "alice", "alicepassword123")


@pytest.fixture
def second_auth_headers(client):
    """Bearer headers for user ``bob``."""
    return signup_and_login(client, "bob", "bobpassword456")


@pytest.fixture
def override_settings(test_settings):
    """Mapping for ``app.dependency_overrides`` on ad-hoc apps."""
    return {get_settings: lambda: test_settings}


@pytest.fixture
def register_user(client):
    """Sign up and log in an arbitrary user, returning bearer headers."""

    def _register(username: str, password: str) -> dict[str, str]:
        return signup_and_login(client, username, password)

    return _register
