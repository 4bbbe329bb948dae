"""Delayed responses for Slack slash commands."""

from __future__ import annotations

import logging
from urllib.parse import parse_qs, urlsplit

import httpx

from gopherbot.metrics.prometheus_exporter import gopher_callback_total
from gopherbot.services.errors import GopherError, NetworkError
from gopherbot.services.gopher import GopherService
from gopherbot.slack.payloads import SlackResponse, gopher_message

logger = logging.getLogger(__name__)

RESPONSE_URL_FIELD = "response_url"


def extract_response_url(raw_body: str | bytes) -> str | None:
    """
    Pull the callback URL out of a form-encoded slash-command body.

    Returns ``None`` when the body has no usable ``response_url`` field.
    Raises ``ValueError`` when the body is not valid form-encoded UTF-8.
    """

    if isinstance(raw_body, bytes):
        raw_body = raw_body.decode("utf-8")
    fields = parse_qs(raw_body, errors="strict")
    values = fields.get(RESPONSE_URL_FIELD)
    if not values:
        return None
    response_url = values[0].strip()
    if urlsplit(response_url).scheme not in {"http", "https"}:
        return None
    return response_url


class CallbackNotifier:
    """Generates a gopher and posts it to the caller-supplied ``response_url``."""

    def __init__(self, gopher_service: GopherService, client: httpx.AsyncClient) -> None:
        self._gopher_service = gopher_service
        self._client = client

    async def notify(self, raw_body: str | bytes) -> None:
        """Best-effort delivery; decoding, generation and delivery failures are logged and swallowed."""

        try:
            response_url = extract_response_url(raw_body)
        except ValueError as exc:
            logger.error("Could not decode slash-command body: %s", exc)
            return
        if response_url is None:
            logger.debug("Slash-command body has no response_url; nothing to do.")
            return

        try:
            image_url = await self._gopher_service.generate()
            await self.send_delayed_response(response_url, gopher_message(image_url))
        except GopherError as exc:
            gopher_callback_total.labels(outcome="error").inc()
            logger.error("Delayed response to %s failed: %s", response_url, exc)
            return

        gopher_callback_total.labels(outcome="success").inc()

    async def send_delayed_response(self, response_url: str, message: SlackResponse) -> None:
        """POST ``message`` as JSON to ``response_url``."""

        try:
            response = await self._client.post(response_url, json=message.to_payload())
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NetworkError(f"posting delayed response failed: {exc}") from exc

        if not response.is_success:
            raise NetworkError(
                f"delayed response returned a non-success status {response.status_code}",
                status_code=response.status_code,
            )
        logger.info("Delivered gopher to %s", response_url)
