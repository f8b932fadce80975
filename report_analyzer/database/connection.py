from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg_pool import ConnectionPool

from report_analyzer.config.settings import Settings

_pool: ConnectionPool | None = None


def build_conninfo(settings: Settings) -> str:
    return (
        f"host={settings.db_host} "
        f"port={settings.db_port} "
        f"dbname={settings.db_database} "
        f"user={settings.db_username} "
        f"password={settings.db_password}"
    )


def init_pool(settings: Settings, max_size: int = 4) -> None:
    """Open the process-wide connection pool."""
    global _pool  # noqa: PLW0603
    if _pool is not None:
        return
    _pool = ConnectionPool(build_conninfo(settings), min_size=1, max_size=max_size, open=True)


def close_pool() -> None:
    global _pool  # noqa: PLW0603
    if _pool is not None:
        _pool.close()
        _pool = None


@contextmanager
def get_connection() -> Generator[psycopg.Connection[Any], None, None]:
    """Yield a pooled connection. Caller manages commit/rollback."""
    if _pool is None:
        raise RuntimeError("Connection pool not initialized. Call init_pool() first.")
    with _pool.connection() as conn:
        yield conn
