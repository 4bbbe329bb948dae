"""Render a composite key through gopherize.me and pull out the image URL."""

from __future__ import annotations

import logging
from html.parser import HTMLParser

import httpx

from gopherbot.services.errors import NetworkError

logger = logging.getLogger(__name__)

SAVE_PATH = "/save"


class _FirstImageParser(HTMLParser):
    """Tokenizer that remembers the ``src`` of the first ``<img>`` it meets."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.src: str | None = None

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if self.src is not None or tag != "img":
            return
        for key, value in attrs:
            if key == "src":
                self.src = value or ""
                return

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self.handle_starttag(tag, attrs)

    @property
    def found(self) -> bool:
        return self.src is not None


class ImageResolver:
    """Submits composite keys to the ``/save`` endpoint."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def resolve(self, key: str) -> str:
        """
        Return the rendered image URL for ``key``.

        An empty string means the page carried no image; it is not treated as an error here.
        """

        parser = _FirstImageParser()
        try:
            async with self._client.stream("GET", SAVE_PATH, params={"images": key}) as response:
                response.raise_for_status()
                async for chunk in response.aiter_text():
                    parser.feed(chunk)
                    if parser.found:
                        break
        except httpx.HTTPStatusError as exc:
            logger.error("Gopher rendering returned %s for key %s", exc.response.status_code, key)
            raise NetworkError(
                f"gopher rendering returned status {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("Gopher rendering request failed: %s", exc)
            raise NetworkError(f"gopher rendering request failed: {exc}") from exc

        if not parser.found:
            parser.close()
        if not parser.found:
            logger.warning("No image found in rendered page for key %s", key)
        return parser.src or ""
