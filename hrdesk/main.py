"""
HR Desk — Application entry point.

This is the **only** file that assembles the app.  All business logic
lives in the `api/`, `repositories/`, and `core/` packages.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import timedelta
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from hrdesk.api.endpoints.auth import limiter
from hrdesk.api.router import api_router
from hrdesk.core.config import Settings, settings as env_settings, warn_insecure_defaults
from hrdesk.core.exceptions import register_exception_handlers
from hrdesk.core.security import PasswordHasher
from hrdesk.core.sessions import SessionManager
from hrdesk.core.uploads import PUBLIC_PREFIX, UploadStore
from hrdesk.db.base import Base
from hrdesk.db.session import build_engine, build_session_factory

# Ensure all models are imported so metadata.create_all can see them
from hrdesk.models.employee import Employee  # noqa: F401
from hrdesk.models.user import User  # noqa: F401
from hrdesk.repositories.users import CredentialStore

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )


async def init_storage(app: FastAPI) -> None:
    """Create tables if absent and seed the fixed login accounts."""
    state = app.state
    async with state.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables initialised")

    async with state.session_factory() as session:
        created = await CredentialStore(session).seed(
            state.settings.seed_accounts(), state.hasher
        )
    logger.info("Seed accounts ready (%d created)", created)


# ── Lifespan ────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_storage(app)
    logger.info("🚀 %s v%s started", app.state.settings.PROJECT_NAME, app.state.settings.VERSION)
    yield
    await app.state.engine.dispose()
    logger.info("Shutdown complete")


# ── App factory ─────────────────────────────────────────────────────
def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or env_settings
    warn_insecure_defaults(settings)

    application = FastAPI(
        title=settings.PROJECT_NAME,
        description="HR record keeping: employees, attendance, photos",
        version=settings.VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Per-app collaborators, handed to handlers through app.state
    engine = build_engine(settings.DATABASE_URL)
    uploads = UploadStore(settings.UPLOAD_DIR)
    uploads.ensure_directory()

    application.state.settings = settings
    application.state.engine = engine
    application.state.session_factory = build_session_factory(engine)
    application.state.hasher = PasswordHasher(rounds=settings.PASSWORD_HASH_ROUNDS)
    application.state.sessions = SessionManager(
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        ttl=timedelta(minutes=settings.SESSION_EXPIRE_MINUTES),
    )
    application.state.uploads = uploads

    # Login rate limiting
    limiter.enabled = settings.RATE_LIMIT_ENABLED
    application.state.limiter = limiter

    # CORS
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Global exception handlers (prevent stack-trace leakage)
    register_exception_handlers(application)

    application.include_router(api_router)

    # Uploaded photos, then the dashboard (catch-all mount, must be last)
    application.mount(
        PUBLIC_PREFIX,
        StaticFiles(directory=str(uploads.directory)),
        name="uploads",
    )
    logger.info("Uploads served from %s", uploads.directory.resolve())
    application.mount(
        "/",
        StaticFiles(directory=str(STATIC_DIR), html=True),
        name="dashboard",
    )

    return application


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    configure_logging(env_settings.LOG_LEVEL)
    uvicorn.run(
        create_app(env_settings),
        host=env_settings.HOST,
        port=env_settings.PORT,
        log_level=env_settings.LOG_LEVEL.lower(),
    )
