"""
User persistence helpers.
"""

from __future__ import annotations

from core import db


async def create_user(*, email: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO users (id, created_at, updated_at, email)
        VALUES (gen_random_uuid(), now(), now(), $1)
        RETURNING id, created_at, updated_at, email
        """,
        email,
    )
    if row is None:
        raise RuntimeError("Failed to create user.")
    return row
