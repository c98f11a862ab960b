"""
JSON response envelope shared by the API endpoints.

Chirp endpoints answer with `{"cleaned_body": ..., "error": ...}` where exactly
one of the two fields is non-empty. Other JSON payloads go through
`respond_with_json` so they share the same serialization fallback.
"""

from __future__ import annotations

import logging

from fastapi import Response, status
from pydantic import BaseModel

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


class Envelope(BaseModel):
    cleaned_body: str = ""
    error: str = ""


def respond_with_json(status_code: int, payload: BaseModel) -> Response:
    """
    Serialize `payload` and return it with `status_code`.

    If serialization fails the response degrades to a bare 500 with an empty
    body; this path never produces another JSON error.
    """
    try:
        content = payload.model_dump_json()
    except (TypeError, ValueError):
        logger.exception("envelope_serialization_failed status=%s", status_code)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response(content=content, status_code=status_code, media_type=JSON_MEDIA_TYPE)


def respond_with_body(body: str) -> Response:
    return respond_with_json(status.HTTP_200_OK, Envelope(cleaned_body=body))


def respond_with_error(status_code: int, message: str) -> Response:
    return respond_with_json(status_code, Envelope(error=message))
