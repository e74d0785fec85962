"""Dashboard fragment endpoint."""
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_renderer
from api.rendering import render_dashboard
from services.renderer import DashboardRenderer


router = APIRouter(prefix="/partials", tags=["dashboard"])


@router.get("/dashboard", response_class=HTMLResponse)
async def get_dashboard(
    db: AsyncSession = Depends(get_async_session),
    renderer: DashboardRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """Render every category and its links."""
    return await render_dashboard(db, renderer)
