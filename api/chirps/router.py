"""
FastAPI router for chirp endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Request, Response

from core import errors
from core.responses import respond_with_body, respond_with_error

from . import service

router = APIRouter()


@router.post("/api/validate_chirp")
async def validate_chirp(request: Request) -> Response:
    raw_body = await request.body()
    try:
        cleaned = service.validate_chirp(raw_body)
    except errors.ChirpyError as exc:
        return respond_with_error(exc.status_code, exc.message)
    return respond_with_body(cleaned)
