"""
Request-level failures.

Every error carries the HTTP status and the message the client sees. Routers
catch `ChirpyError` and turn it into an envelope; the underlying cause stays
in the server log.
"""

from __future__ import annotations


class ChirpyError(RuntimeError):
    status_code: int = 500
    message: str = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class DecodeError(ChirpyError):
    # Malformed client JSON is reported as a server error on purpose:
    # existing clients depend on the 500.
    status_code = 500
    message = "Invalid JSON"


class ValidationError(ChirpyError):
    status_code = 400
    message = "Invalid request"


class TooLongError(ValidationError):
    message = "Chirp is too long"


class PersistenceError(ChirpyError):
    status_code = 500
    message = "Error creating user"


class SerializationError(ChirpyError):
    status_code = 500
    message = "Error marshalling response"
