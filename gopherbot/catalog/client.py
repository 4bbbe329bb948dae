"""Async client for the gopherize.me artwork catalog."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from gopherbot.catalog.models import Catalog
from gopherbot.services.errors import DecodeError, NetworkError

logger = logging.getLogger(__name__)

ARTWORK_PATH = "/api/artwork"


class CatalogClient:
    """Fetches the catalog fresh on every call; nothing is cached."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch(self) -> Catalog:
        """Download and validate the artwork catalog."""

        try:
            response = await self._client.get(ARTWORK_PATH)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error("Artwork catalog returned %s", exc.response.status_code)
            raise NetworkError(
                f"artwork catalog returned status {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("Artwork catalog request failed: %s", exc)
            raise NetworkError(f"artwork catalog request failed: {exc}") from exc

        try:
            catalog = Catalog.model_validate_json(response.content)
        except ValidationError as exc:
            logger.error("Artwork catalog body is malformed: %s", exc)
            raise DecodeError(f"malformed artwork catalog: {exc.error_count()} error(s)") from exc

        logger.debug(
            "Fetched catalog with %d categories (%d combinations)",
            len(catalog.categories),
            catalog.total_combinations,
        )
        return catalog
