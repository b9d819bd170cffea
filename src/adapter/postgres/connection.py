"""PostgreSQL connection pool lifecycle.

The pool is created once at application startup, stored on app.state,
and closed at shutdown. Repositories acquire a connection per call.
"""

import os
import logging
from pathlib import Path

import asyncpg

logger = logging.getLogger(__name__)

# Suppress verbose driver logs
logging.getLogger('asyncpg').setLevel(logging.WARNING)

USERS_TABLE_NAME = 'users'
SCHEMA_PATH = Path(__file__).parent / "schema.sql"

DB_POOL_MIN_SIZE = int(os.getenv('DB_POOL_MIN_SIZE', '1'))
DB_POOL_MAX_SIZE = int(os.getenv('DB_POOL_MAX_SIZE', '10'))
DB_COMMAND_TIMEOUT = float(os.getenv('DB_COMMAND_TIMEOUT', '60'))


def get_database_url() -> str:
    """Return DATABASE_URL, or build one from the individual POSTGRES_* variables."""
    database_url = os.getenv('DATABASE_URL')
    if database_url:
        return database_url

    host = os.getenv('POSTGRES_HOST', 'localhost')
    port = os.getenv('POSTGRES_PORT', '5432')
    database = os.getenv('POSTGRES_DB', 'blog')
    user = os.getenv('POSTGRES_USER', 'postgres')
    password = os.getenv('POSTGRES_PASSWORD', 'postgres')
    return f"postgresql://{user}:{password}@{host}:{port}/{database}"


async def create_pool(database_url: str | None = None) -> asyncpg.Pool | None:
    """Create the connection pool and verify it with a round-trip.

    Returns:
        asyncpg pool, or None if the database is unreachable
    """
    try:
        pool = await asyncpg.create_pool(
            database_url or get_database_url(),
            min_size=DB_POOL_MIN_SIZE,
            max_size=DB_POOL_MAX_SIZE,
            command_timeout=DB_COMMAND_TIMEOUT,
        )
        async with pool.acquire() as conn:
            await conn.fetchval("SELECT 1")
        logger.info("[POSTGRES] Connection pool initialized",
                    extra={"minSize": DB_POOL_MIN_SIZE, "maxSize": DB_POOL_MAX_SIZE})
        return pool
    except (OSError, asyncpg.PostgresError) as e:
        logger.error(f"[POSTGRES] Initial connection failed: {str(e)[:200]}")
        return None


async def ensure_schema(pool: asyncpg.Pool) -> bool:
    """Create the users table and its unique email constraint if missing."""
    try:
        async with pool.acquire() as conn:
            await conn.execute(SCHEMA_PATH.read_text())
        return True
    except asyncpg.PostgresError as e:
        logger.error("Failed to apply schema", extra={"error": str(e)})
        return False


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return
    await pool.close()
    logger.info("[POSTGRES] Connection pool closed")
