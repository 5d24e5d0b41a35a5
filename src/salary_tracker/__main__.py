"""Entry point for running the application with uvicorn."""

import uvicorn

from salary_tracker.config import get_settings
from salary_tracker.logging_config import configure_logging


def main() -> None:
    """Run the application."""
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "salary_tracker.api.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
