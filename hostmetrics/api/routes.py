from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse, Response

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def get_snapshot(request: Request) -> Response:
    """Serve the current Snapshot as JSON."""
    store = request.app.state.store
    snapshot = store.read()
    try:
        body = snapshot.to_json()
    except Exception as exc:
        logger.exception("Failed to serialise snapshot")
        return PlainTextResponse(str(exc), status_code=500)
    return Response(content=body, media_type="application/json")
