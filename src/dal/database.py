import logging
from contextlib import asynccontextmanager
from typing import Optional

import asyncpg

from common.errors import DatabaseConnectionError
from common.sanitization import redact_sensitive_info
from dal.tracing import TracedAsyncpgConnection

logger = logging.getLogger(__name__)

DEFAULT_POOL_MAX_SIZE = 5
DEFAULT_COMMAND_TIMEOUT_SECONDS = 60


class Database:
    """Manages the asyncpg connection pool used by one inspection run."""

    _pool: Optional[asyncpg.Pool] = None

    @classmethod
    async def init(
        cls,
        dsn: str,
        max_size: int = DEFAULT_POOL_MAX_SIZE,
        command_timeout: float = DEFAULT_COMMAND_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the connection pool.

        Raises:
            DatabaseConnectionError: If the pool cannot be established.
        """
        if cls._pool is not None:
            return

        try:
            cls._pool = await asyncpg.create_pool(
                dsn,
                min_size=1,
                max_size=max_size,
                command_timeout=command_timeout,
                server_settings={"application_name": "schemadoc"},
            )
        except Exception as e:
            await cls.close()
            raise DatabaseConnectionError(
                f"Failed to connect to database: {redact_sensitive_info(str(e))}"
            ) from e
        logger.info("Database connection pool established: %s", redact_sensitive_info(dsn))

    @classmethod
    async def close(cls) -> None:
        """Close the connection pool."""
        if cls._pool is not None:
            await cls._pool.close()
            cls._pool = None
            logger.info("Database connection pool closed")

    @classmethod
    def is_initialized(cls) -> bool:
        """Return True when a pool is available."""
        return cls._pool is not None

    @classmethod
    @asynccontextmanager
    async def get_connection(cls):
        """Yield a pooled connection inside a read-only transaction.

        The transaction rolls back or commits when the block exits and the
        connection returns to the pool.
        """
        if cls._pool is None:
            raise RuntimeError("Database pool not initialized. Call Database.init() first.")

        async with cls._pool.acquire() as conn:
            async with conn.transaction(readonly=True):
                yield TracedAsyncpgConnection(conn)
