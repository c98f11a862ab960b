"""
FastAPI router for user endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Request, Response, status

from core import errors
from core.responses import respond_with_error, respond_with_json

from . import service

router = APIRouter()


@router.post("/api/users", status_code=status.HTTP_201_CREATED)
async def create_user(request: Request) -> Response:
    raw_body = await request.body()
    try:
        user = await service.create_user(raw_body)
    except errors.ChirpyError as exc:
        return respond_with_error(exc.status_code, exc.message)
    return respond_with_json(status.HTTP_201_CREATED, user)
