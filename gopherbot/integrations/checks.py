"""Connectivity checks for the gopherize.me service."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from gopherbot.api.context import build_http_client
from gopherbot.catalog.client import CatalogClient
from gopherbot.config.settings import get_settings
from gopherbot.services.errors import GopherError

CATALOG_CHECK_NAME = "gopherize.me catalog"


@dataclass(slots=True)
class IntegrationCheckResult:
    """Structured result describing the integration check outcome."""

    name: str
    success: bool
    message: str


async def check_catalog() -> IntegrationCheckResult:
    """Fetch the artwork catalog once and make sure every category can be drawn from."""

    settings = get_settings()
    async with build_http_client(settings) as client:
        try:
            catalog = await CatalogClient(client).fetch()
        except GopherError as exc:
            return IntegrationCheckResult(CATALOG_CHECK_NAME, False, str(exc))

    empty = [category.id for category in catalog.categories if not category.images]
    if not catalog.categories:
        return IntegrationCheckResult(CATALOG_CHECK_NAME, False, "Service responded with an empty catalog.")
    if empty:
        return IntegrationCheckResult(
            CATALOG_CHECK_NAME,
            False,
            f"Categories without images: {', '.join(empty)}.",
        )
    return IntegrationCheckResult(
        CATALOG_CHECK_NAME,
        True,
        f"{len(catalog.categories)} categories reachable at {settings.gopherize_base_url}.",
    )


async def run_all_checks() -> list[IntegrationCheckResult]:
    """Execute all integration checks concurrently."""

    return list(await asyncio.gather(check_catalog()))
