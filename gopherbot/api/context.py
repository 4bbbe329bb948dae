"""Shared dependencies created once per application lifespan."""

from __future__ import annotations

import random
from dataclasses import dataclass

import httpx

from gopherbot import __version__
from gopherbot.catalog.client import CatalogClient
from gopherbot.config.settings import Settings
from gopherbot.imggen.resolver import ImageResolver
from gopherbot.services.gopher import GopherService
from gopherbot.slack.notifier import CallbackNotifier
from gopherbot.workers.notification_worker import NotificationDispatcher


@dataclass(slots=True)
class AppContext:
    """Container for objects shared across request handlers."""

    settings: Settings
    http_client: httpx.AsyncClient
    gopher_service: GopherService
    notifier: CallbackNotifier
    dispatcher: NotificationDispatcher

    async def close(self) -> None:
        """Stop the workers, then release HTTP resources."""

        await self.dispatcher.stop()
        await self.http_client.aclose()


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    """Outbound client shared by the catalog, the renderer and the Slack callbacks."""

    return httpx.AsyncClient(
        base_url=settings.gopherize_base_url.rstrip("/"),
        timeout=settings.request_timeout,
        verify=settings.verify_tls,
        headers={"User-Agent": f"gopherbot/{__version__}"},
    )


def build_context(
    settings: Settings,
    http_client: httpx.AsyncClient | None = None,
    rng: random.Random | None = None,
) -> AppContext:
    """Wire the components together; the dispatcher is not started here."""

    http_client = http_client or build_http_client(settings)
    gopher_service = GopherService(CatalogClient(http_client), ImageResolver(http_client), rng=rng)
    notifier = CallbackNotifier(gopher_service, http_client)
    dispatcher = NotificationDispatcher(
        notifier.notify,
        workers=settings.notify_workers,
        queue_size=settings.notify_queue_size,
    )
    return AppContext(
        settings=settings,
        http_client=http_client,
        gopher_service=gopher_service,
        notifier=notifier,
        dispatcher=dispatcher,
    )
