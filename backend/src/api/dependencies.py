"""FastAPI dependencies for injection."""
from fastapi import Request

from db.session import get_async_session
from services.renderer import DashboardRenderer


def get_renderer(request: Request) -> DashboardRenderer:
    """Return the renderer built at startup."""
    return request.app.state.renderer


__all__ = [
    "get_async_session",
    "get_renderer",
]
