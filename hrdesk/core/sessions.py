"""
Server-side login sessions.

The client only ever holds a signed token wrapping an opaque session id;
the role lives in server memory and is looked up on every request.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionData:
    role: str
    expires_at: datetime

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


class SessionManager:
    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(minutes=480),
    ) -> None:
        self._secret = secret_key
        self._algorithm = algorithm
        self._ttl = ttl
        self._sessions: dict[str, SessionData] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self, role: str) -> str:
        """Open a session for *role* and return the token to hand to the client."""
        self._purge_expired()
        sid = secrets.token_urlsafe(32)
        expires_at = datetime.now(timezone.utc) + self._ttl
        self._sessions[sid] = SessionData(role=role, expires_at=expires_at)
        return jwt.encode(
            {"sid": sid, "exp": expires_at},
            self._secret,
            algorithm=self._algorithm,
        )

    def resolve(self, token: str | None) -> SessionData | None:
        """Return the live session behind *token*, else ``None``."""
        sid = self._session_id(token)
        if sid is None:
            return None
        data = self._sessions.get(sid)
        if data is None:
            return None
        if data.expires_at <= datetime.now(timezone.utc):
            del self._sessions[sid]
            return None
        return data

    def destroy(self, token: str | None) -> None:
        sid = self._session_id(token)
        if sid is not None:
            self._sessions.pop(sid, None)

    def _session_id(self, token: str | None) -> str | None:
        if not token:
            return None
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError:
            return None
        sid = payload.get("sid")
        return sid if isinstance(sid, str) else None

    def _purge_expired(self) -> None:
        now = datetime.now(timezone.utc)
        expired = [sid for sid, data in self._sessions.items() if data.expires_at <= now]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.debug("Purged %d expired sessions", len(expired))
