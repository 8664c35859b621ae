"""
Centralised application settings loaded from environment / .env file.

Uses pydantic-settings so every value can be overridden via env vars
or the .env file at the project root.
"""

from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings

INSECURE_SECRET_KEY = "CHANGE-ME-TO-A-RANDOM-64-CHAR-HEX-STRING-IN-PRODUCTION"
_DEFAULT_SEED_PASSWORDS = {"admin123", "staff123"}


class Settings(BaseSettings):
    # ── Project ──────────────────────────────────────────────────────
    PROJECT_NAME: str = "HR Desk"
    VERSION: str = "1.0.0"

    # ── Server ───────────────────────────────────────────────────────
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # ── Database (async SQLite via aiosqlite) ───────────────────────
    DATABASE_URL: str = "sqlite+aiosqlite:///./employees.db"

    # ── Sessions ─────────────────────────────────────────────────────
    SECRET_KEY: str = INSECURE_SECRET_KEY
    ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "hr_session"
    SESSION_EXPIRE_MINUTES: int = 480
    COOKIE_SECURE: bool = False  # Set True in HTTPS production

    # ── Passwords ────────────────────────────────────────────────────
    PASSWORD_HASH_ROUNDS: int = 12

    # ── Uploads ──────────────────────────────────────────────────────
    UPLOAD_DIR: str = "uploads"

    # ── Rate limiting ────────────────────────────────────────────────
    RATE_LIMIT_ENABLED: bool = True
    LOGIN_RATE_LIMIT: str = "5/minute"

    # ── CORS ─────────────────────────────────────────────────────────
    CORS_ORIGINS: list[str] = [
        "http://localhost",
        "http://localhost:3000",
        "http://127.0.0.1",
        "http://127.0.0.1:3000",
    ]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _parse_cors(cls, v: object) -> list[str]:
        if isinstance(v, str):
            return [o.strip() for o in v.split(",") if o.strip()]
        return v  # type: ignore[return-value]

    # ── Logging ──────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    # ── Seed accounts (inserted on startup when absent) ──────────────
    SEED_ADMIN_USERNAME: str = "admin"
    SEED_ADMIN_PASSWORD: str = "admin123"
    SEED_STAFF_USERNAME: str = "staff"
    SEED_STAFF_PASSWORD: str = "staff123"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    def seed_accounts(self) -> list[tuple[str, str, str]]:
        """(username, password, role) for every account seeded at startup."""
        return [
            (self.SEED_ADMIN_USERNAME, self.SEED_ADMIN_PASSWORD, "admin"),
            (self.SEED_STAFF_USERNAME, self.SEED_STAFF_PASSWORD, "staff"),
        ]


def warn_insecure_defaults(cfg: Settings) -> None:
    """Log a warning for every secret still at its shipped default."""
    logger = logging.getLogger("hrdesk.core.config")
    if cfg.SECRET_KEY == INSECURE_SECRET_KEY:
        logger.warning(
            "⚠️  WARNING: You are running with the default INSECURE Secret Key! "
            "Update the SECRET_KEY in your .env file immediately."
        )
    for username, password, _role in cfg.seed_accounts():
        if password in _DEFAULT_SEED_PASSWORDS:
            logger.warning(
                "⚠️  Seed account '%s' uses a default password. "
                "Set SEED_*_PASSWORD in your .env file.",
                username,
            )


settings = Settings()
