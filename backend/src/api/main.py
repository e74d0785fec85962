"""FastAPI application entry point."""
import logging
import time
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from html import escape

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routers import categories, dashboard, health, links
from core.config import Settings, get_settings
from core.logging_setup import access_logger, configure_logging
from db.session import create_engine_for, create_session_factory, ping
from models import init_schema
from services.renderer import DashboardRenderer


logger = logging.getLogger(__name__)


def _error_page(
    status_code: int,
    message: str,
    headers: dict[str, str] | None = None,
) -> HTMLResponse:
    return HTMLResponse(
        content=f'<p class="error">{escape(message)}</p>',
        status_code=status_code,
        headers=headers,
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    Startup opens the SQLite file, verifies it answers, creates the schema and
    parses the template. Any failure there propagates out of the lifespan, so
    the server exits before it accepts connections.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(settings.log_level)
        engine = create_engine_for(settings)
        try:
            await ping(engine)
            await init_schema(engine)
            app.state.renderer = DashboardRenderer()
            app.state.engine = engine
            app.state.session_factory = create_session_factory(engine)
            logger.info("Using database at %s", settings.sqlite_path)
            yield
        finally:
            await engine.dispose()

    app = FastAPI(
        title="Personal Dash",
        description="Personal link dashboard rendered as HTML fragments.",
        version="0.1.0",
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings

    @app.middleware("http")
    async def log_requests(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            access_logger.info(
                "%s %s -> %s %.1fms",
                request.method,
                request.url.path,
                status_code,
                elapsed_ms,
            )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        _request: Request, exc: StarletteHTTPException,
    ) -> HTMLResponse:
        return _error_page(exc.status_code, str(exc.detail), exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        _request: Request, _exc: RequestValidationError,
    ) -> HTMLResponse:
        return _error_page(400, "invalid form")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, _exc: Exception,
    ) -> HTMLResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error_page(500, "internal server error")

    app.include_router(health.router)
    app.include_router(dashboard.router)
    app.include_router(categories.router)
    app.include_router(links.router)

    return app


app = create_app()
