"""Entry point for launching the webhook server."""

from __future__ import annotations

import logging

import uvicorn

from gopherbot.config.settings import get_settings
from gopherbot.monitoring.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Configure logging and serve the API with uvicorn."""

    settings = get_settings()
    configure_logging(settings)

    logger.info("Starting server on port : %d", settings.port)
    uvicorn.run(
        "gopherbot.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
