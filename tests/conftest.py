"""
Shared test fixtures for the HR Desk test suite.

Every test gets a fresh app: in-memory SQLite, a temporary upload
directory and cheap bcrypt rounds.
"""

import os
import sys
from typing import AsyncGenerator, Awaitable, Callable

import pytest

# Ensure project root is importable
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

# Override environment BEFORE importing application modules
os.environ["RATE_LIMIT_ENABLED"] = "false"

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from hrdesk.core.config import Settings
from hrdesk.main import create_app, init_storage

ADMIN = ("admin", "admin123")
STAFF = ("staff", "staff123")


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        UPLOAD_DIR=str(tmp_path / "uploads"),
        SECRET_KEY="test-secret-key",
        PASSWORD_HASH_ROUNDS=4,
        RATE_LIMIT_ENABLED=False,
    )


@pytest.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI, None]:
    """App with tables created and accounts seeded.

    ASGITransport does not run the lifespan, so storage is initialised here.
    """
    application = create_app(settings)
    await init_storage(application)
    yield application
    await application.state.engine.dispose()


def _client(app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver")


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Anonymous client."""
    async with _client(app) as client:
        yield client


@pytest.fixture
def login() -> Callable[[AsyncClient, str, str], Awaitable[dict]]:
    """Log *client* in and pin its session token as a Bearer header."""

    async def _login(client: AsyncClient, username: str, password: str) -> dict:
        resp = await client.post("/login", json={"username": username, "password": password})
        token = resp.cookies.get("hr_session")
        if token:
            client.headers["Authorization"] = f"Bearer {token}"
        return resp.json()

    return _login


@pytest.fixture
async def admin_client(app: FastAPI, login) -> AsyncGenerator[AsyncClient, None]:
    async with _client(app) as client:
        await login(client, *ADMIN)
        yield client


@pytest.fixture
async def staff_client(app: FastAPI, login) -> AsyncGenerator[AsyncClient, None]:
    async with _client(app) as client:
        await login(client, *STAFF)
        yield client


@pytest.fixture
async def db_session(app: FastAPI) -> AsyncGenerator[AsyncSession, None]:
    """Return a raw database session for direct queries in tests."""
    async with app.state.session_factory() as session:
        yield session


@pytest.fixture
def alice() -> dict:
    """Form payload for a standard employee record."""
    return {
        "name": "Alice",
        "email": "a@x.com",
        "role": "Engineer",
        "department": "R&D",
        "salary": "50000",
    }
