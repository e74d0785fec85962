"""Shared response path: every endpoint answers with the full dashboard fragment."""
import logging

from fastapi import HTTPException
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import RenderError, StoreError
from services.dashboard_service import build_dashboard
from services.renderer import DashboardRenderer


logger = logging.getLogger(__name__)


async def render_dashboard(db: AsyncSession, renderer: DashboardRenderer) -> HTMLResponse:
    """Aggregate the current store state and render it as an HTML fragment."""
    try:
        view = await build_dashboard(db)
    except StoreError:
        logger.exception("Failed to load dashboard")
        raise HTTPException(status_code=500, detail="failed to load dashboard") from None

    try:
        html = renderer.render(view)
    except RenderError:
        logger.exception("Failed to render dashboard")
        raise HTTPException(status_code=500, detail="failed to render template") from None

    return HTMLResponse(content=html)
