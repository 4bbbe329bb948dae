"""Shared fixtures: a fake gopherize.me served through ``httpx.MockTransport``."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from gopherbot.config.settings import Settings, get_settings

BASE_URL = "https://gopherize.test"

CATALOG_PAYLOAD: dict[str, Any] = {
    "categories": [
        {
            "id": "body",
            "name": "Body",
            "images": [
                {"id": "body/blue", "name": "Blue", "href": "/b/blue.png", "thumbnail_href": "/t/blue.png"},
                {"id": "body/pink", "name": "Pink", "href": "/b/pink.png", "thumbnail_href": "/t/pink.png"},
            ],
        },
        {
            "id": "eyes",
            "name": "Eyes",
            "images": [
                {"id": "eyes/crazy", "name": "Crazy", "href": "/e/crazy.png", "thumbnail_href": "/t/crazy.png"},
            ],
        },
        {
            "id": "hats",
            "name": "Hats",
            "images": [
                {"id": "hats/cap", "name": "Cap", "href": "/h/cap.png", "thumbnail_href": "/t/cap.png"},
                {"id": "hats/crown", "name": "Crown", "href": "/h/crown.png", "thumbnail_href": "/t/crown.png"},
                {"id": "hats/fez", "name": "Fez", "href": "/h/fez.png", "thumbnail_href": "/t/fez.png"},
            ],
        },
    ],
    "total_combinations": 6,
}

RENDERED_IMAGE_URL = "https://storage.test/gophers/abc123.png"

Handler = Callable[[httpx.Request], httpx.Response]


def rendered_page(image_url: str = RENDERED_IMAGE_URL) -> str:
    return (
        "<!doctype html><html><head><title>Your gopher</title></head><body>"
        '<a href="/"><span class="logo">Gopherize.me</span></a>'
        f'<div class="gopher"><img src="{image_url}" alt="your gopher"></div>'
        '<img src="https://storage.test/footer.png">'
        "</body></html>"
    )


def gopherize_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/api/artwork":
        return httpx.Response(200, json=CATALOG_PAYLOAD)
    if request.url.path == "/save":
        return httpx.Response(200, text=rendered_page(), headers={"content-type": "text/html"})
    return httpx.Response(404)


@pytest.fixture
def settings() -> Settings:
    return Settings(gopherize_base_url=BASE_URL, notify_workers=1, notify_queue_size=4)


@pytest.fixture
def make_http_client() -> Callable[[Handler], httpx.AsyncClient]:
    def _factory(handler: Handler = gopherize_handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))

    return _factory


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> None:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
