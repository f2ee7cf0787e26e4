"""Wake-on-LAN trigger route."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from wold.api.deps import get_wake_handler
from wold.services.wake_service import WakeHandler

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/")
async def wake_on_lan(request: Request, handler: WakeHandler = Depends(get_wake_handler)):
    """Broadcast a magic packet for ``{"target": "aa:bb:cc:dd:ee:ff"}``.

    200 on send, 400 on a bad body or address, 500 when the datagram could
    not be sent.
    """
    body = await request.body()
    logger.debug("got: %r", body)

    # UDP send blocks; keep it off the event loop
    result = await asyncio.to_thread(handler.handle, body)
    return JSONResponse(status_code=result.status_code, content=result.body())
