"""
Postgres connection pool for the users table.

The pool is opened by the app lifespan in `main.py` and shared by every
repository call; queries use asyncpg's `$1, $2, ...` placeholders.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from .config import get_settings

POOL_MIN_SIZE = 1
POOL_MAX_SIZE = 5
COMMAND_TIMEOUT_S = 30

_pool: asyncpg.Pool | None = None


def asyncpg_dsn(db_url: str) -> str:
    """
    Turn a libpq-style `DB_URL` into a DSN asyncpg accepts.

    Connection strings written for `lib/pq` usually carry `sslmode`, which
    asyncpg refuses; every other query parameter is passed through.
    """
    parts = urlsplit(db_url)
    if not parts.query:
        return db_url

    kept = [(key, value) for key, value in parse_qsl(parts.query, keep_blank_values=True) if key != "sslmode"]
    return urlunsplit(parts._replace(query=urlencode(kept)))


def database_url() -> str:
    db_url = get_settings().db_url.strip()
    if not db_url:
        raise RuntimeError("DB_URL is not set.")
    return asyncpg_dsn(db_url)


async def init_pool() -> None:
    global _pool
    if _pool is None:
        _pool = await asyncpg.create_pool(
            dsn=database_url(),
            min_size=POOL_MIN_SIZE,
            max_size=POOL_MAX_SIZE,
            command_timeout=COMMAND_TIMEOUT_S,
        )


async def close_pool() -> None:
    global _pool
    if _pool is not None:
        await _pool.close()
        _pool = None


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("Database pool is closed; the app lifespan opens it.")
    return _pool


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    row = await pool().fetchrow(sql, *args)
    return None if row is None else dict(row)
