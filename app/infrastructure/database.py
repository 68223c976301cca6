"""Database resource — SQLAlchemy engine, session factory and the FastAPI session dependency."""

from typing import Any, Generator, Union

import structlog
from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.config import Settings

logger = structlog.get_logger(__name__)

Base = declarative_base()


class Database:
    """Owns the connection pool for the lifetime of the process."""

    def __init__(self, url: Union[str, URL], **engine_kwargs: Any):
        self.engine: Engine = create_engine(url, **engine_kwargs)
        self.session_factory = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        # Fixed pool, no overflow; checkout waits indefinitely for a free connection.
        return cls(
            settings.database_url,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=0,
            pool_timeout=None,
            pool_pre_ping=True,
            connect_args={"connect_timeout": settings.DB_CONNECT_TIMEOUT},
        )

    def session(self) -> Session:
        return self.session_factory()

    def ping(self) -> str:
        """Open one connection and return the backend name. Raises on failure."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return self.engine.url.render_as_string(hide_password=True)

    def create_all(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield one session per request and always release it."""
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
