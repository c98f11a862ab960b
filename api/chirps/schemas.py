"""
Chirp API schemas (request models).
"""

from __future__ import annotations

from core.payloads import JSONPayload


class ChirpRequest(JSONPayload):
    body: str = ""
