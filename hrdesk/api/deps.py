"""
FastAPI dependencies — database session, repositories and auth guards.

Every stateful collaborator is read from ``request.app.state``, where
``create_app`` put it; nothing here is a module-level singleton.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from hrdesk.core.config import Settings
from hrdesk.core.security import PasswordHasher
from hrdesk.core.sessions import SessionData, SessionManager
from hrdesk.core.uploads import UploadStore
from hrdesk.repositories.employees import EmployeeRepository
from hrdesk.repositories.users import CredentialStore

# auto_error=False so we can fall back to the session cookie
bearer_scheme = HTTPBearer(auto_error=False)


# ── App-scoped collaborators ────────────────────────────────────────
def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_session_manager(request: Request) -> SessionManager:
    return request.app.state.sessions


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.hasher


def get_upload_store(request: Request) -> UploadStore:
    return request.app.state.uploads


# ── Database session & repositories ─────────────────────────────────
async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    async with request.app.state.session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


def get_credential_store(db: AsyncSession = Depends(get_db)) -> CredentialStore:
    return CredentialStore(db)


def get_employee_repository(db: AsyncSession = Depends(get_db)) -> EmployeeRepository:
    return EmployeeRepository(db)


# ── Auth guards ─────────────────────────────────────────────────────
def get_session_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> str | None:
    """Token from the Authorization header, else from the session cookie."""
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


async def require_authenticated(
    token: str | None = Depends(get_session_token),
    sessions: SessionManager = Depends(get_session_manager),
) -> SessionData:
    """Reject requests without a live session (401)."""
    session = sessions.resolve(token)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return session


async def require_admin(
    session: SessionData = Depends(require_authenticated),
) -> SessionData:
    """Only allow the admin role to proceed (403)."""
    if not session.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden",
        )
    return session
