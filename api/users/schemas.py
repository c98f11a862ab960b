"""
User API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from core.payloads import JSONPayload


class CreateUserRequest(JSONPayload):
    # No format validation here; the database owns any constraints.
    email: str = ""


class UserResponse(BaseModel):
    id: UUID
    created_at: datetime
    updated_at: datetime
    email: str
