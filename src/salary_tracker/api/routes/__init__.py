"""API routes."""

from salary_tracker.api.routes.health import router as health_router
from salary_tracker.api.routes.preview import router as preview_router
from salary_tracker.api.routes.salaries import router as salaries_router

__all__ = ["health_router", "preview_router", "salaries_router"]
