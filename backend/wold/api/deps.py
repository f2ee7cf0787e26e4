"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Request

from wold.services.wake_service import WakeHandler


def get_wake_handler(request: Request) -> WakeHandler:
    """Handler bound to the app's broadcast destination."""
    return request.app.state.wake_handler
