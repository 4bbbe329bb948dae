"""FastAPI entrypoint and HTTP routes."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable

from fastapi import FastAPI
from prometheus_client import make_asgi_app
from starlette.exceptions import HTTPException as StarletteHTTPException

from gopherbot import __version__
from gopherbot.api.context import AppContext, build_context
from gopherbot.api.routes import reject_unsupported_method, router as gopher_router
from gopherbot.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

ContextFactory = Callable[[Settings], AppContext]


def create_app(
    settings: Settings | None = None,
    context_factory: ContextFactory = build_context,
) -> FastAPI:
    """Initialise the FastAPI application."""

    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        context = context_factory(settings)
        context.dispatcher.start()
        app.state.context = context
        logger.info(
            "Random gopher service ready (catalog: %s, verify TLS: %s)",
            settings.gopherize_base_url,
            settings.verify_tls,
        )
        try:
            yield
        finally:
            await context.close()
            logger.info("Random gopher service stopped")

    app = FastAPI(
        title="Random Gopher",
        version=__version__,
        docs_url="/docs" if settings.environment != "prod" else None,
        redoc_url="/redoc" if settings.environment != "prod" else None,
        lifespan=lifespan,
    )

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Simple health endpoint used for readiness probes."""

        return {"status": "ok"}

    app.include_router(gopher_router)
    app.add_exception_handler(StarletteHTTPException, reject_unsupported_method)
    app.mount("/metrics", make_asgi_app())

    return app


app = create_app()
