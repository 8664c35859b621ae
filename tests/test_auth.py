"""Tests for login, logout and the session guards."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

from hrdesk.api.endpoints.auth import limiter
from hrdesk.main import create_app, init_storage
from hrdesk.models.user import User


@pytest.mark.asyncio
async def test_login_admin_success(async_client: AsyncClient):
    """Seeded admin credentials open a session."""
    resp = await async_client.post("/login", json={"username": "admin", "password": "admin123"})
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "role": "admin"}
    assert "hr_session" in resp.cookies

    set_cookie = resp.headers.get("set-cookie")
    assert "HttpOnly" in set_cookie
    assert "SameSite=lax" in set_cookie


@pytest.mark.asyncio
async def test_login_staff_role(async_client: AsyncClient):
    resp = await async_client.post("/login", json={"username": "staff", "password": "staff123"})
    assert resp.json() == {"success": True, "role": "staff"}


@pytest.mark.asyncio
async def test_login_wrong_password(async_client: AsyncClient):
    """A bad password is a 200 with success=false, not an HTTP error."""
    resp = await async_client.post("/login", json={"username": "admin", "password": "nope"})
    assert resp.status_code == 200
    assert resp.json() == {"success": False}
    assert "hr_session" not in resp.cookies


@pytest.mark.asyncio
async def test_login_unknown_user(async_client: AsyncClient):
    resp = await async_client.post("/login", json={"username": "ghost", "password": "admin123"})
    assert resp.status_code == 200
    assert resp.json() == {"success": False}


@pytest.mark.asyncio
async def test_session_cookie_authenticates(async_client: AsyncClient):
    """The cookie set at login is enough to reach protected endpoints."""
    await async_client.post("/login", json={"username": "staff", "password": "staff123"})
    resp = await async_client.get("/api/me")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "role": "staff"}


@pytest.mark.asyncio
async def test_me_requires_session(async_client: AsyncClient):
    resp = await async_client.get("/api/me")
    assert resp.status_code == 401
    assert resp.json() == {"detail": "Unauthorized", "success": False}


@pytest.mark.asyncio
async def test_garbage_token_rejected(async_client: AsyncClient):
    resp = await async_client.get(
        "/api/employees", headers={"Authorization": "Bearer not-a-real-token"}
    )
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_logout_destroys_session(async_client: AsyncClient, login, app):
    await login(async_client, "admin", "admin123")
    assert len(app.state.sessions) == 1

    resp = await async_client.post("/logout")
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert len(app.state.sessions) == 0

    # The Bearer header still carries the old token; it must no longer resolve
    resp = await async_client.get("/api/employees")
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_logout_without_session(async_client: AsyncClient):
    resp = await async_client.post("/logout")
    assert resp.status_code == 200
    assert resp.json() == {"success": True}


@pytest.mark.asyncio
async def test_seeding_is_idempotent(app, db_session):
    await init_storage(app)
    count = await db_session.execute(select(func.count(User.id)))
    assert count.scalar() == 2


@pytest.mark.asyncio
async def test_seeded_passwords_are_hashed(db_session):
    result = await db_session.execute(select(User).where(User.username == "admin"))
    admin = result.scalar_one()
    assert admin.role == "admin"
    assert admin.password_hash != "admin123"
    assert admin.password_hash.startswith("$2")


@pytest.mark.asyncio
async def test_login_rate_limited(settings):
    """The sixth login attempt within a minute is refused with 429."""
    app = create_app(settings.model_copy(update={"RATE_LIMIT_ENABLED": True}))
    await init_storage(app)
    limiter.reset()
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
            for _ in range(5):
                resp = await client.post("/login", json={"username": "admin", "password": "x"})
                assert resp.json() == {"success": False}
            resp = await client.post("/login", json={"username": "admin", "password": "x"})
            assert resp.status_code == 429
            assert resp.json()["success"] is False
    finally:
        limiter.reset()
        limiter.enabled = False
        await app.state.engine.dispose()


@pytest.mark.asyncio
async def test_logout_clears_cookie_with_login_flags(async_client: AsyncClient, login):
    await login(async_client, "admin", "admin123")
    resp = await async_client.post("/logout")
    set_cookie = resp.headers.get("set-cookie")
    assert set_cookie.startswith("hr_session=")
    assert "Max-Age=0" in set_cookie
    assert "HttpOnly" in set_cookie
    assert "SameSite=lax" in set_cookie
