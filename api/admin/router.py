"""
Admin endpoints: file-server metrics view and reset.

These are intentionally unauthenticated.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

from .metrics import HitCounter

METRICS_TEMPLATE = (
    "<html><body><h1>Welcome, Chirpy Admin</h1>"
    "<p>Chirpy has been visited {hits} times!</p></body></html>"
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin")


def get_hit_counter(request: Request) -> HitCounter:
    return request.app.state.hit_counter


@router.get("/metrics", response_class=HTMLResponse)
async def metrics(counter: HitCounter = Depends(get_hit_counter)) -> HTMLResponse:
    return HTMLResponse(METRICS_TEMPLATE.format(hits=counter.value))


@router.post("/reset", response_class=PlainTextResponse)
async def reset(counter: HitCounter = Depends(get_hit_counter)) -> PlainTextResponse:
    previous = counter.reset()
    logger.info("metrics_reset previous=%s", previous)
    return PlainTextResponse("")
