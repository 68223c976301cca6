"""FastAPI application — main entry point.

Run with: uvicorn app.main:create_app --factory
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI

from app.config import Settings, get_settings
from app.core.exceptions import register_exception_handlers
from app.core.logging import configure_logging
from app.core.middleware import setup_middleware
from app.application.services.token_service import TokenService
from app.application.services.user_service import ensure_default_admin
from app.infrastructure.database import Database
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from app.infrastructure.security import PasswordHasher

# Import all models so SQLAlchemy knows about them
from app.domain.models.user import User
from app.domain.models.gate_action import GateAction
from app.domain.models.system_log import SystemLog

# Import routers
from app.interfaces.api.auth import router as auth_router
from app.interfaces.api.gate import router as gate_router
from app.interfaces.api.admin import router as admin_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    settings: Settings = app.state.settings
    database: Database = app.state.database
    logger.info("Starting SafeGate API...", env=settings.ENVIRONMENT)

    # Fail fast: an unreachable database aborts startup.
    try:
        target = database.ping()
    except Exception:
        logger.exception("Database unreachable")
        raise
    logger.info("Database connection established", database=target)

    if settings.CREATE_TABLES:
        database.create_all()
        logger.info("Database tables created/verified")

    db = database.session()
    try:
        ensure_default_admin(
            SQLAlchemyUserRepository(db, User),
            app.state.password_hasher,
            settings.ADMIN_EMAIL,
            settings.ADMIN_PASSWORD,
            settings.ADMIN_CPF,
        )
    finally:
        db.close()

    yield

    database.dispose()
    logger.info("SafeGate API stopped")


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="SafeGate API",
        description="Controle de portão com autenticação, perfis de acesso e auditoria de comandos",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.database = database or Database.from_settings(settings)
    app.state.password_hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
    app.state.token_service = TokenService(
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        expiration_minutes=settings.JWT_EXPIRATION_MINUTES,
    )

    setup_middleware(app, settings)
    register_exception_handlers(app)

    app.include_router(auth_router)
    app.include_router(gate_router)
    app.include_router(admin_router)

    @app.get("/")
    def root():
        return {"name": "SafeGate API", "version": "1.0.0", "status": "running", "docs": "/docs"}

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app
