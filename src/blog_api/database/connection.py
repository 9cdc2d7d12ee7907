"""
Database connection and pool management
"""

import asyncpg
import logging
from typing import Optional

from blog_api.config.settings import Settings
from blog_api.services.errors import StoreError

logger = logging.getLogger(__name__)

POSTS_TABLE = "blog_posts"

SCHEMA_SQL = f"""
    CREATE TABLE IF NOT EXISTS {POSTS_TABLE} (
        id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        author_first_name TEXT NOT NULL,
        author_last_name TEXT NOT NULL,
        title TEXT NOT NULL,
        content TEXT NOT NULL,
        created TIMESTAMPTZ NOT NULL DEFAULT now()
    )
"""


class Database:
    """Owns the asyncpg pool for one database URL"""

    def __init__(self, settings: Settings, database_url: Optional[str] = None):
        self.settings = settings
        self.database_url = database_url or settings.database_url
        self._pool: Optional[asyncpg.Pool] = None

    @property
    def is_connected(self) -> bool:
        return self._pool is not None

    async def connect(self):
        """Initialize database connection pool"""
        if self._pool is not None:
            return

        try:
            self._pool = await asyncpg.create_pool(
                self.database_url,
                min_size=self.settings.db_pool_min_size,
                max_size=self.settings.db_pool_max_size,
                command_timeout=self.settings.db_command_timeout,
                statement_cache_size=0  # pgbouncer compatibility
            )

            # Test connection
            async with self._pool.acquire() as conn:
                await conn.fetchval("SELECT 1")
                await conn.execute(SCHEMA_SQL)
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
            logger.error(f"Failed to initialize database: {e}")
            await self.close()
            raise StoreError(f"Failed to initialize database: {e}") from e

        logger.info("Database initialized successfully")

    async def close(self):
        """Close database connection pool"""
        if self._pool is not None:
            pool, self._pool = self._pool, None
            await pool.close()
            logger.info("Database connections closed")

    def acquire(self):
        """Acquire a pooled connection (async context manager)"""
        if self._pool is None:
            raise StoreError("Database is not connected")
        return self._pool.acquire()

    async def drop_database(self):
        """Drop the posts table and recreate it empty. Test harness only."""
        logger.warning("Deleting database")
        try:
            async with self.acquire() as conn:
                await conn.execute(f"DROP TABLE IF EXISTS {POSTS_TABLE}")
                await conn.execute(SCHEMA_SQL)
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
            raise StoreError(f"Failed to drop database: {e}") from e
