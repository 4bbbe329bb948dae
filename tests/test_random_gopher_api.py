"""End-to-end tests for ``/random-gopher`` against a fake gopherize.me."""

from __future__ import annotations

import json
import random
import threading

import httpx
import pytest
import pytest_mock
from fastapi import Request
from fastapi.testclient import TestClient
from starlette.requests import ClientDisconnect

from conftest import BASE_URL, RENDERED_IMAGE_URL, gopherize_handler
from gopherbot.api.context import build_context
from gopherbot.api.main import create_app
from gopherbot.config.settings import Settings

SLASH_COMMAND_BODY = "token=abc&command=%2Fgopher&response_url=http%3A%2F%2Fexample.com%2Fcb&trigger_id=1"


def _client(settings: Settings, handler) -> TestClient:
    def context_factory(app_settings: Settings):
        http_client = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))
        return build_context(app_settings, http_client=http_client, rng=random.Random(1))

    return TestClient(create_app(settings, context_factory=context_factory))


def test_get_json_returns_image(settings: Settings) -> None:
    with _client(settings, gopherize_handler) as client:
        response = client.get("/random-gopher", params={"format": "json"})

    assert response.status_code == 200
    assert response.json() == {"img": RENDERED_IMAGE_URL}


def test_get_without_format_redirects_to_image(settings: Settings) -> None:
    with _client(settings, gopherize_handler) as client:
        response = client.get("/random-gopher", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == RENDERED_IMAGE_URL


def test_get_with_other_format_redirects(settings: Settings) -> None:
    with _client(settings, gopherize_handler) as client:
        response = client.get("/random-gopher", params={"format": "xml"}, follow_redirects=False)

    assert response.status_code == 303


def test_get_failure_returns_error_body(settings: Settings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502)

    with _client(settings, handler) as client:
        response = client.get("/random-gopher", params={"format": "json"})

    assert response.status_code == 500
    assert response.json() == {"error": "artwork catalog returned status 502"}


def test_get_failure_without_format_is_also_json(settings: Settings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/artwork":
            return httpx.Response(200, json={"categories": [{"id": "eyes", "images": []}]})
        return httpx.Response(404)

    with _client(settings, handler) as client:
        response = client.get("/random-gopher", follow_redirects=False)

    assert response.status_code == 500
    assert "eyes" in response.json()["error"]


def test_post_acknowledges_and_delivers_later(settings: Settings) -> None:
    delivered = threading.Event()
    callbacks: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "example.com":
            callbacks.append(request)
            delivered.set()
            return httpx.Response(200)
        return gopherize_handler(request)

    with _client(settings, handler) as client:
        response = client.post(
            "/random-gopher",
            content=SLASH_COMMAND_BODY,
            headers={"content-type": "application/x-www-form-urlencoded"},
        )
        assert response.status_code == 200
        assert response.text == "_New Gopher incoming_"
        assert delivered.wait(timeout=5)

    assert str(callbacks[0].url) == "http://example.com/cb"
    assert json.loads(callbacks[0].content) == {
        "response_type": "in_channel",
        "attachments": [
            {
                "fallback": "Gopher !!",
                "image_url": RENDERED_IMAGE_URL,
                "title": "gopher",
                "title_link": RENDERED_IMAGE_URL,
            },
        ],
    }


def test_post_without_response_url_still_acknowledges(settings: Settings) -> None:
    with _client(settings, gopherize_handler) as client:
        response = client.post("/random-gopher", content="hello")

    assert response.status_code == 200
    assert response.text == "_New Gopher incoming_"


def test_post_when_queue_is_full_reports_failure(settings: Settings) -> None:
    with _client(settings, gopherize_handler) as client:
        client.app.state.context.dispatcher.submit = lambda raw_body: False
        response = client.post("/random-gopher", content=SLASH_COMMAND_BODY)

    assert response.status_code == 200
    assert response.text == "_Something went wrong :(_"


def test_post_with_unreadable_body_reports_failure(
    settings: Settings,
    mocker: pytest_mock.MockerFixture,
) -> None:
    with _client(settings, gopherize_handler) as client:
        submit = mocker.patch.object(client.app.state.context.dispatcher, "submit", return_value=True)
        mocker.patch.object(Request, "body", side_effect=ClientDisconnect())
        response = client.post("/random-gopher", content=SLASH_COMMAND_BODY)

    assert response.status_code == 200
    assert response.text == "_Something went wrong :(_"
    submit.assert_not_called()


def test_unsupported_method_elsewhere_keeps_default_status(settings: Settings) -> None:
    with _client(settings, gopherize_handler) as client:
        response = client.delete("/health")

    assert response.status_code == 405


@pytest.mark.parametrize(
    "method",
    ["PUT", "PATCH", "DELETE", "HEAD", "OPTIONS", "TRACE", "CONNECT", "PURGE"],
)
def test_other_methods_are_not_implemented(settings: Settings, method: str) -> None:
    with _client(settings, gopherize_handler) as client:
        response = client.request(method, "/random-gopher")

    assert response.status_code == 501
