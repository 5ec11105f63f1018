"""
Async Database Manager for SQLite with SQLAlchemy
- Lazy engine creation from settings
- Table initialization on startup
- Transaction-scoped sessions
"""
import logging
from importlib import import_module
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
    AsyncEngine
)
from contact_backend.core.config import settings
from contact_backend.core.exceptions import DatabaseNotInitializedError
from contact_backend.models.base import Base

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions and schema setup."""

    def __init__(self):
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker] = None

    async def init(self, database_url: Optional[str] = None):
        """Create the engine and make sure every table exists."""
        db_url = database_url or settings.DATABASE_URL
        engine = create_async_engine(db_url, echo=settings.DB_ECHO)
        try:
            async with engine.begin() as conn:
                await self._setup_database(conn)
        except Exception:
            await engine.dispose()
            raise

        self.engine = engine
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            expire_on_commit=False,
            autoflush=False
        )
        logger.info(f"Connected to the database at {self.engine.url.render_as_string(hide_password=True)}")

    async def _setup_database(self, conn):
        """Initialize database schema"""
        await conn.execute(text("SELECT 1"))
        for model in settings.DB_MODELS:
            import_module(model)

        logger.info(f"Models registered: {list(Base.metadata.tables.keys())}")
        await conn.run_sync(Base.metadata.create_all)

    @property
    def is_initialized(self) -> bool:
        return self.session_factory is not None

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Context manager for one unit of work: commits on success, rolls back on error."""
        if not self.session_factory:
            raise DatabaseNotInitializedError("DatabaseSessionManager not initialized")
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def close(self):
        """Cleanup connection pool"""
        if self.engine:
            await self.engine.dispose()
            self.engine = None
            self.session_factory = None

# Initialize session manager
session_manager = DatabaseSessionManager()
