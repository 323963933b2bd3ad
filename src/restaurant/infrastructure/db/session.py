from __future__ import annotations

import os
from functools import lru_cache

from sqlalchemy import create_engine, event, make_url, text
from sqlalchemy.engine import Engine

DEFAULT_POOL_TIMEOUT_SECONDS = 30.0


def database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if not url:
        raise RuntimeError("DATABASE_URL is not set")
    return url


def _pool_timeout_seconds() -> float:
    raw_value = os.getenv("DB_POOL_TIMEOUT_SECONDS")
    if not raw_value:
        return DEFAULT_POOL_TIMEOUT_SECONDS
    return float(raw_value)


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(
    database_url: str,
    pool_timeout: float = DEFAULT_POOL_TIMEOUT_SECONDS,
) -> Engine:
    """Create an engine whose pool gives up after ``pool_timeout`` seconds.

    SQLite only enforces ``orders.menu_item_id`` when foreign keys are switched
    on for each connection, so that pragma is installed here.
    """
    backend = make_url(database_url).get_backend_name()
    connect_args: dict[str, object] = {}
    if backend == "postgresql":
        connect_args["connect_timeout"] = max(1, int(pool_timeout))
    elif backend == "sqlite":
        connect_args["check_same_thread"] = False

    engine = create_engine(
        database_url,
        pool_pre_ping=True,
        pool_timeout=pool_timeout,
        connect_args=connect_args,
    )
    if backend == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


@lru_cache(maxsize=8)
def _build_engine(database_url: str, pool_timeout: float) -> Engine:
    return build_engine(database_url, pool_timeout)


def get_engine(timeout_seconds: float | None = None) -> Engine:
    pool_timeout = timeout_seconds if timeout_seconds is not None else _pool_timeout_seconds()
    return _build_engine(database_url(), pool_timeout)


def ping_database(timeout_seconds: float = 1.0) -> bool:
    try:
        with get_engine(timeout_seconds).connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
