"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from salary_tracker import __version__
from salary_tracker.api.errors import register_exception_handlers
from salary_tracker.api.routes import health_router, preview_router, salaries_router
from salary_tracker.config import get_settings
from salary_tracker.database import create_tables, dispose_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    await create_tables()
    logger.info("Salary Tracker API started")
    yield
    # Shutdown
    await dispose_db()
    logger.info("Salary Tracker API stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title="Salary Tracker API",
        description="Employee salary records, advance payments and payment status",
        version=__version__,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        logger.info("%s %s", request.method, request.url.path)
        return await call_next(request)

    register_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(salaries_router, prefix="/api")
    app.include_router(preview_router, prefix="/api")

    return app


# Default app instance for uvicorn
app = create_app()
