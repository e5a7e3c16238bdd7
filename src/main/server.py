"""
Server Entry Point - Main Layer

Runs the FastAPI application under uvicorn with the configured bind
address. Like app.py it loads settings and logging before anything else.
"""

import uvicorn

from src.main.config import get_settings
from src.shared import configure_logging, get_logger, update_logging_from_settings

configure_logging()

settings = get_settings()

update_logging_from_settings(settings)

logger = get_logger(__name__)


def main() -> None:
    """Main entry point for the dashboard API server."""

    settings = get_settings()

    logger.info(
        "server.starting",
        host=settings.dashboard.host,
        port=settings.dashboard.port,
        reload=settings.dashboard.reload,
        devilbox_path=settings.devilbox.path,
    )

    uvicorn.run(
        "src.main.app:app",
        host=settings.dashboard.host,
        port=settings.dashboard.port,
        reload=settings.dashboard.reload,
        log_level=settings.logging.level.value.lower(),
    )


if __name__ == "__main__":
    main()
