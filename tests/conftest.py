"""Pytest configuration and shared fixtures."""

import bcrypt
import pytest
from httpx import ASGITransport, AsyncClient

from inkfolio.config import Settings
from inkfolio.database import create_engine_for, create_session_maker, init_db
from inkfolio.server import create_app


ADMIN_PASSWORD = "correct horse battery staple"
# Low cost factor keeps the suite fast; verification is identical
ADMIN_PASSWORD_HASH = bcrypt.hashpw(
    ADMIN_PASSWORD.encode("utf-8"), bcrypt.gensalt(rounds=4)
).decode("utf-8")
JWT_SECRET = "test_secret_key_12345"


# ============================================================================
# Settings and store
# ============================================================================

@pytest.fixture
def database_url(tmp_path):
    """Fresh SQLite file per test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'inkfolio.db'}"


@pytest.fixture
def settings(database_url):
    return Settings(
        ADMIN_PASSWORD=ADMIN_PASSWORD_HASH,
        JWT_SECRET=JWT_SECRET,
        DATABASE_URL=database_url,
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
async def session(database_url):
    """Async session on an initialised store, for repository/service tests."""
    engine = create_engine_for(database_url)
    await init_db(engine)
    async with create_session_maker(engine)() as session:
        yield session
    await engine.dispose()


# ============================================================================
# HTTP clients
# ============================================================================

@pytest.fixture
async def app(settings):
    """App with its schema created; ASGITransport does not run lifespan."""
    app = create_app(settings)
    await init_db(app.state.engine)
    yield app
    await app.state.engine.dispose()


@pytest.fixture
async def client(app):
    """Create an async HTTP client for testing."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def admin_token(client):
    response = await client.post("/api/auth/verify", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def auth_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def admin_password():
    return ADMIN_PASSWORD


@pytest.fixture
def admin_password_hash():
    return ADMIN_PASSWORD_HASH


@pytest.fixture
def jwt_secret():
    return JWT_SECRET
