"""Random gopher pipeline: fetch the catalog, pick a combination, render it."""

from __future__ import annotations

import logging
import random

from gopherbot.catalog.client import CatalogClient
from gopherbot.catalog.selector import choose
from gopherbot.imggen.resolver import ImageResolver
from gopherbot.metrics.prometheus_exporter import gopher_generation_total
from gopherbot.services.errors import GopherError, ImageNotFoundError

logger = logging.getLogger(__name__)


class GopherService:
    """Coordinates the catalog client, the selector and the image resolver."""

    def __init__(
        self,
        catalog_client: CatalogClient,
        resolver: ImageResolver,
        rng: random.Random | None = None,
    ) -> None:
        self._catalog_client = catalog_client
        self._resolver = resolver
        self._rng = rng

    async def generate_key(self) -> str:
        """Return a freshly drawn composite key."""

        catalog = await self._catalog_client.fetch()
        return choose(catalog, self._rng)

    async def generate(self) -> str:
        """Return the URL of a newly rendered random gopher."""

        try:
            key = await self.generate_key()
            image_url = await self._resolver.resolve(key)
            if not image_url:
                raise ImageNotFoundError(f"no image found for gopher {key}")
        except GopherError as exc:
            gopher_generation_total.labels(outcome="error").inc()
            logger.error("Random gopher generation failed: %s", exc)
            raise

        gopher_generation_total.labels(outcome="success").inc()
        logger.info("Generated gopher %s -> %s", key, image_url)
        return image_url
