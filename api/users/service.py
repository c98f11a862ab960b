"""
User business logic.
"""

from __future__ import annotations

import logging

import pydantic

from core import errors
from core.payloads import decode_payload

from . import repository, schemas

logger = logging.getLogger(__name__)


def _to_user_response(user_row: dict) -> schemas.UserResponse:
    try:
        return schemas.UserResponse.model_validate(user_row)
    except pydantic.ValidationError as exc:
        raise errors.SerializationError() from exc


async def create_user(raw_body: bytes) -> schemas.UserResponse:
    payload = decode_payload(schemas.CreateUserRequest, raw_body)

    try:
        user_row = await repository.create_user(email=payload.email)
    except Exception as exc:
        # Connectivity or constraint failures; the client only sees a generic message.
        logger.exception("user_create_failed")
        raise errors.PersistenceError() from exc

    return _to_user_response(user_row)
