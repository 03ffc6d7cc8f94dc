# =============================================
# trainhub/config/database.py
# =============================================
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool
from sqlalchemy import MetaData, event, text
from typing import AsyncGenerator
from datetime import datetime, timezone
import logging
from trainhub.config.settings import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

def engine_options(url: str) -> dict:
    """Engine keyword arguments for the configured driver"""
    if url.startswith("sqlite"):
        # a single shared connection keeps in-memory databases alive
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    return {
        "pool_pre_ping": True,
        "pool_recycle": 3600,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
    }

# Async Engine
engine = create_async_engine(
    settings.get_database_url(),
    echo=settings.DEBUG,
    **engine_options(settings.get_database_url())
)

def enable_sqlite_foreign_keys(async_engine) -> None:
    """sqlite ignores foreign keys unless every connection turns them on"""

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

if settings.uses_sqlite:
    enable_sqlite_foreign_keys(engine)

# Session Factory
async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)

# Base Model with metadata
metadata = MetaData()

class Base(DeclarativeBase):
    metadata = metadata

# =============================================
# DATABASE FUNCTIONS
# =============================================

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency yielding one session per request"""
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()

async def create_tables():
    """
    Create every table registered on Base.metadata.

    Production schemas are managed by Alembic; this is used for sqlite
    development databases.
    """
    # registers every model on the metadata
    import trainhub.database.models  # noqa: F401

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"Tables ready: {len(Base.metadata.tables)}")
    except Exception as e:
        logger.error(f"Error creating tables: {e}")
        raise

async def check_database_health() -> bool:
    """Check if database is accessible"""
    try:
        async with async_session() as session:
            result = await session.execute(text("SELECT 1"))
            return result.scalar() == 1
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return False

async def init_database():
    """Initialize database connection and verify setup"""
    logger.info("Initializing database connection...")

    is_healthy = await check_database_health()
    if not is_healthy:
        raise RuntimeError("Could not connect to the database")

    if settings.uses_sqlite:
        await create_tables()

    logger.info("Database initialized")
    return True

async def close_database():
    """Close database connections"""
    try:
        await engine.dispose()
        logger.info("Database connections closed")
    except Exception as e:
        logger.error(f"Error closing connections: {e}")

# =============================================
# UTILITY FUNCTIONS
# =============================================

def utcnow() -> datetime:
    """Timestamp default for created_at / updated_at columns"""
    return datetime.now(timezone.utc)
