"""
Database engine and session management.
Builds the async SQLAlchemy engine for the host process and hands out sessions
that are injected into the query layer.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.pool import StaticPool
from sqlalchemy import Integer, event, text
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
from lightbnb.config import Settings, get_settings
import logging

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all database models.
    Every table has an integer surrogate primary key.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    def __repr__(self) -> str:
        """String representation of the model."""
        return f"<{self.__class__.__name__}(id={self.id})>"


def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine for the configured database.

    PostgreSQL gets a sized connection pool; in-memory SQLite shares a single
    connection so every session sees the same database.
    """
    if settings.is_sqlite:
        engine = create_async_engine(
            settings.database_url,
            echo=settings.debug,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

        # SQLite leaves foreign keys unenforced unless asked per connection
        @event.listens_for(engine.sync_engine, "connect")
        def enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_size=10,  # Number of connections to maintain in the pool
        max_overflow=20,  # Additional connections that can be created on demand
        pool_pre_ping=True,  # Validate connections before use
        pool_recycle=3600,  # Recycle connections after 1 hour
        pool_timeout=30,
        connect_args={
            "server_settings": {
                "application_name": settings.app_name.lower(),
            }
        }
    )


class Database:
    """
    Owns the engine and session factory for one process.
    The query layer never touches this object directly; callers open a
    session here and pass it in.
    """

    def __init__(self, settings: Optional[Settings] = None, engine: Optional[AsyncEngine] = None):
        self.settings = settings or get_settings()
        self.engine = engine or build_engine(self.settings)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Yield an async database session and ensure it's closed after use.
        Rolls back if the caller raises.
        """
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def test_connection(self) -> bool:
        """
        Test database connectivity.
        Returns True if connection is successful, False otherwise.
        """
        try:
            async with self.session_factory() as session:
                result = await session.execute(text("SELECT 1"))
                result.scalar()
                logger.info("Database connection successful")
                return True
        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            return False

    async def create_tables(self) -> None:
        """
        Create all tables declared on the models.
        Intended for development and tests; production schema is managed elsewhere.
        """
        # Register every model on Base.metadata
        import lightbnb.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables created successfully")

    async def drop_tables(self) -> None:
        """
        Drop all tables.
        This should only be used in testing or development.
        """
        if self.settings.is_production:
            raise RuntimeError("Cannot drop tables in production environment")

        import lightbnb.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            logger.info("Database tables dropped successfully")

    async def get_database_info(self) -> dict:
        """
        Get database connection information for monitoring.
        Returns the dialect, server version and connection pool status.
        """
        async with self.engine.connect() as conn:
            version_info = conn.dialect.server_version_info

        return {
            "dialect": self.engine.dialect.name,
            "driver": self.engine.dialect.driver,
            "server_version": ".".join(str(part) for part in version_info) if version_info else None,
            "pool_status": self.engine.pool.status(),
        }

    async def close(self) -> None:
        """
        Close database connections.
        This should be called during process shutdown.
        """
        await self.engine.dispose()
        logger.info("Database connections closed")
