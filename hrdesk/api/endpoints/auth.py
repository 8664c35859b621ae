"""
Auth endpoints — session login / logout.

A failed login is *not* an HTTP error: it answers 200 ``{"success": false}``
so the dashboard can show its own message.
"""

import logging

from fastapi import APIRouter, Depends, Request, Response
from slowapi import Limiter
from slowapi.util import get_remote_address

from hrdesk.api.deps import (get_credential_store, get_password_hasher,
                             get_session_manager, get_session_token,
                             get_settings, require_authenticated)
from hrdesk.core.config import Settings, settings as env_settings
from hrdesk.core.security import PasswordHasher
from hrdesk.core.sessions import SessionData, SessionManager
from hrdesk.repositories.users import CredentialStore
from hrdesk.schemas.auth import LoginRequest, LoginResponse, SuccessResponse

# Rate limiter keyed by client IP; create_app toggles ``enabled``
limiter = Limiter(key_func=get_remote_address)

router = APIRouter(tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/login", response_model=LoginResponse, response_model_exclude_none=True)
@limiter.limit(env_settings.LOGIN_RATE_LIMIT)
async def login(
    request: Request,
    response: Response,
    body: LoginRequest,
    users: CredentialStore = Depends(get_credential_store),
    hasher: PasswordHasher = Depends(get_password_hasher),
    sessions: SessionManager = Depends(get_session_manager),
    settings: Settings = Depends(get_settings),
) -> LoginResponse:
    """Verify credentials and open a server-side session held in an HttpOnly cookie."""
    user = await users.find_by_username(body.username)
    if user is None or not await hasher.verify(body.password, user.password_hash):
        logger.warning("Failed login for '%s'", body.username)
        return LoginResponse(success=False)

    token = sessions.create(user.role)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.COOKIE_SECURE,  # Set to True in HTTPS production
        samesite="lax",
        max_age=settings.SESSION_EXPIRE_MINUTES * 60,
    )
    logger.info("User '%s' logged in (%s)", user.username, user.role)
    return LoginResponse(success=True, role=user.role)


@router.post("/logout", response_model=SuccessResponse)
async def logout(
    response: Response,
    token: str | None = Depends(get_session_token),
    sessions: SessionManager = Depends(get_session_manager),
    settings: Settings = Depends(get_settings),
) -> SuccessResponse:
    """Destroy the session and clear its cookie."""
    sessions.destroy(token)
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
    )
    return SuccessResponse(success=True)


@router.get("/api/me", response_model=LoginResponse)
async def read_current_session(
    session: SessionData = Depends(require_authenticated),
) -> LoginResponse:
    """Return the role of the current session."""
    return LoginResponse(success=True, role=session.role)
