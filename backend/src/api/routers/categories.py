"""Category action endpoints. Each returns the re-rendered dashboard."""
import logging

from fastapi import APIRouter, Depends, Form, HTTPException
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_renderer
from api.forms import parse_id, require_category_name
from api.rendering import render_dashboard
from core.exceptions import CategoryExistsError, StoreError
from services import category_service
from services.renderer import DashboardRenderer


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/actions/categories", tags=["categories"])


@router.post("/create", response_class=HTMLResponse)
async def create_category(
    name: str = Form(default=""),
    db: AsyncSession = Depends(get_async_session),
    renderer: DashboardRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """Create a category. Names must be unique ignoring case."""
    category_name = require_category_name(name)
    try:
        await category_service.create_category(db, category_name)
    except CategoryExistsError:
        raise HTTPException(status_code=409, detail="category already exists") from None
    except StoreError:
        logger.exception("Failed to create category")
        raise HTTPException(status_code=500, detail="failed to create category") from None
    return await render_dashboard(db, renderer)


@router.post("/{category_id}/delete", response_class=HTMLResponse)
async def delete_category(
    category_id: str,
    db: AsyncSession = Depends(get_async_session),
    renderer: DashboardRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """Delete a category together with all of its links."""
    parsed_id = parse_id(category_id, "invalid category id")
    try:
        await category_service.delete_category(db, parsed_id)
    except StoreError:
        logger.exception("Failed to delete category %s", parsed_id)
        raise HTTPException(status_code=500, detail="failed to delete category") from None
    return await render_dashboard(db, renderer)
