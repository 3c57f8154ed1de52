"""
Database engine (connection pool) management
"""
import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from transactions_api.core.config import settings, get_database_url

logger = logging.getLogger(__name__)

# asyncpg connect failures surface as bare OSError, outside SQLAlchemyError
STORAGE_ERRORS = (SQLAlchemyError, OSError)

# Create engine; it owns the connection pool shared by all requests
engine = create_async_engine(
    get_database_url(),
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
    pool_pre_ping=settings.db_pool_pre_ping,  # Verify connections before using
    echo=settings.db_echo,  # Log SQL queries
)


def get_engine() -> AsyncEngine:
    """
    Dependency for getting the shared engine

    Usage:
        @router.get("/items/{item_id}")
        async def get_item(item_id: int, engine: AsyncEngine = Depends(get_engine)):
            async with engine.connect() as conn:
                ...
    """
    return engine


async def ping(db_engine: AsyncEngine) -> bool:
    """Return True if the database answers a trivial query"""
    try:
        async with db_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except STORAGE_ERRORS as e:
        logger.warning(f"Database ping failed: {e}")
        return False
    return True
