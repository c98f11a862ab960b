"""
File-server hit counting.

`HitCounter` is the only state shared across requests. It is created by the
application factory and handed both to `HitCounterMiddleware` (which wraps the
static-file app) and to the admin endpoints through `app.state`.
"""

from __future__ import annotations

import threading

from starlette.types import ASGIApp, Receive, Scope, Send


class HitCounter:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._hits = 0

    def increment(self) -> int:
        with self._lock:
            self._hits += 1
            return self._hits

    @property
    def value(self) -> int:
        with self._lock:
            return self._hits

    def reset(self) -> int:
        """
        Set the count back to zero and return the previous value.
        """
        with self._lock:
            previous, self._hits = self._hits, 0
            return previous


class HitCounterMiddleware:
    """
    ASGI wrapper that counts every HTTP request before delegating.

    The count is taken up front and is kept even when the wrapped app answers
    with an error (e.g. 404 for a missing file) or raises.
    """

    def __init__(self, app: ASGIApp, counter: HitCounter) -> None:
        self.app = app
        self.counter = counter

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            self.counter.increment()
        await self.app(scope, receive, send)
