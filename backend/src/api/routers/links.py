"""Link action endpoints. Each returns the re-rendered dashboard."""
import logging

from fastapi import APIRouter, Depends, Form, HTTPException
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_renderer
from api.forms import parse_id, parse_link_form
from api.rendering import render_dashboard
from core.exceptions import StoreError
from services import link_service
from services.renderer import DashboardRenderer


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/actions/links", tags=["links"])


@router.post("/create", response_class=HTMLResponse)
async def create_link(
    name: str = Form(default=""),
    url: str = Form(default=""),
    category_id: str = Form(default=""),
    db: AsyncSession = Depends(get_async_session),
    renderer: DashboardRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """Create a link in an existing category."""
    form = parse_link_form(name, url, category_id)
    try:
        await link_service.create_link(db, form.name, form.url, form.category_id)
    except StoreError:
        logger.exception("Failed to create link")
        raise HTTPException(status_code=500, detail="failed to create link") from None
    return await render_dashboard(db, renderer)


@router.post("/{link_id}/delete", response_class=HTMLResponse)
async def delete_link(
    link_id: str,
    db: AsyncSession = Depends(get_async_session),
    renderer: DashboardRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """Delete a link."""
    parsed_id = parse_id(link_id, "invalid link id")
    try:
        await link_service.delete_link(db, parsed_id)
    except StoreError:
        logger.exception("Failed to delete link %s", parsed_id)
        raise HTTPException(status_code=500, detail="failed to delete link") from None
    return await render_dashboard(db, renderer)


@router.post("/{link_id}/update", response_class=HTMLResponse)
async def update_link(
    link_id: str,
    name: str = Form(default=""),
    url: str = Form(default=""),
    category_id: str = Form(default=""),
    db: AsyncSession = Depends(get_async_session),
    renderer: DashboardRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """Replace a link's name, url and category."""
    parsed_id = parse_id(link_id, "invalid link id")
    form = parse_link_form(name, url, category_id)
    try:
        await link_service.update_link(
            db, parsed_id, form.name, form.url, form.category_id,
        )
    except StoreError:
        logger.exception("Failed to update link %s", parsed_id)
        raise HTTPException(status_code=500, detail="failed to update link") from None
    return await render_dashboard(db, renderer)
