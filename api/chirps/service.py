"""
Chirp validation: decode -> length check -> profanity mask.
"""

from __future__ import annotations

import logging

from core import errors
from core.payloads import decode_payload

from . import profanity, schemas

# Limit is on the UTF-8 encoded size, not the character count.
MAX_CHIRP_BYTES = 140

logger = logging.getLogger(__name__)


def chirp_size(body: str) -> int:
    return len(body.encode("utf-8"))


def validate_chirp(raw_body: bytes) -> str:
    """
    Return the cleaned chirp body, or raise a `ChirpyError`.
    """
    payload = decode_payload(schemas.ChirpRequest, raw_body)

    size = chirp_size(payload.body)
    if size > MAX_CHIRP_BYTES:
        logger.info("chirp_rejected reason=too_long size=%s", size)
        raise errors.TooLongError()

    return profanity.clean_chirp(payload.body)
