"""HTTP routes for the ``/random-gopher`` webhook."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import ClientDisconnect

from gopherbot.api.context import AppContext
from gopherbot.services.errors import GopherError

logger = logging.getLogger(__name__)

WEBHOOK_PATH = "/random-gopher"
JSON_FORMAT = "json"
ACK_TEXT = "_New Gopher incoming_"
FAILURE_TEXT = "_Something went wrong :(_"

router = APIRouter(tags=["gopher"])


def get_context(request: Request) -> AppContext:
    """Return the context built during application startup."""

    return request.app.state.context


@router.get(WEBHOOK_PATH)
async def get_random_gopher(
    output_format: str | None = Query(default=None, alias="format"),
    context: AppContext = Depends(get_context),
) -> Response:
    """Render a random gopher and return it as JSON or as a redirect."""

    try:
        image_url = await context.gopher_service.generate()
    except GopherError as exc:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc)},
        )

    if output_format == JSON_FORMAT:
        return JSONResponse(content={"img": image_url})
    return RedirectResponse(image_url, status_code=status.HTTP_303_SEE_OTHER)


@router.post(WEBHOOK_PATH)
async def post_random_gopher(
    request: Request,
    context: AppContext = Depends(get_context),
) -> PlainTextResponse:
    """Acknowledge a slash command at once; the gopher is delivered later."""

    try:
        raw_body = await request.body()
    except ClientDisconnect as exc:
        logger.error("Could not read slash-command body: %r", exc)
        return PlainTextResponse(FAILURE_TEXT)

    if not context.dispatcher.submit(raw_body):
        return PlainTextResponse(FAILURE_TEXT)
    return PlainTextResponse(ACK_TEXT)


async def reject_unsupported_method(request: Request, exc: StarletteHTTPException) -> Response:
    """Answer 501 for any verb other than GET or POST on the webhook."""

    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED and request.url.path == WEBHOOK_PATH:
        return Response(status_code=status.HTTP_501_NOT_IMPLEMENTED)
    return await http_exception_handler(request, exc)
