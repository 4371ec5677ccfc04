"""
HTTP transport adapter.

:class:`HTTPHandler` binds an endpoint to a decode function (Starlette
request to request model) and an encode function (response model to
Starlette response).  Each incoming request goes through the same
three steps::

    decode  ->  endpoint  ->  encode

Any step that fails ends the request with a ``text/plain`` body of the
form ``err: <message>``.  No distinct status code is set, so the
response keeps the default ``200``.  Clients have to inspect the body
to tell a failure from a success.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse, Response

from .endpoint import Endpoint, RequestContext

logger = logging.getLogger(__name__)

DecodeRequestFunc = Callable[[Request], Awaitable[object]]
EncodeResponseFunc = Callable[[object], Response]


def error_response(exc: object) -> PlainTextResponse:
    """Render any failure as the plain‑text ``err: <message>`` body."""
    return PlainTextResponse(f"err: {exc}")


class HTTPHandler:
    """Serve an endpoint as a Starlette request handler."""

    def __init__(
        self,
        endpoint: Endpoint,
        decode: DecodeRequestFunc,
        encode: EncodeResponseFunc,
        timeout: Optional[float] = None,
    ) -> None:
        self.endpoint = endpoint
        self.decode = decode
        self.encode = encode
        self.timeout = timeout or None

    async def __call__(self, request: Request) -> Response:
        ctx = RequestContext.with_timeout(self.timeout, path=request.url.path)

        try:
            payload = await self.decode(request)
        except Exception as exc:
            logger.warning("[%s] %s decode failed: %s", ctx.request_id, ctx.path, exc)
            return error_response(exc)

        try:
            response = await asyncio.wait_for(self.endpoint(ctx, payload), ctx.remaining())
        except asyncio.TimeoutError:
            logger.warning("[%s] %s deadline exceeded", ctx.request_id, ctx.path)
            return error_response("deadline exceeded")
        except Exception as exc:
            logger.warning("[%s] %s endpoint failed: %s", ctx.request_id, ctx.path, exc)
            return error_response(exc)

        try:
            return self.encode(response)
        except Exception as exc:
            logger.warning("[%s] %s encode failed: %s", ctx.request_id, ctx.path, exc)
            return error_response(exc)


def register(
    router: APIRouter,
    path: str,
    endpoint: Endpoint,
    decode: DecodeRequestFunc,
    encode: EncodeResponseFunc,
    timeout: Optional[float] = None,
) -> HTTPHandler:
    """Mount ``endpoint`` on ``POST <path>`` of ``router`` and return its handler."""
    handler = HTTPHandler(endpoint, decode, encode, timeout=timeout)

    async def route(request: Request) -> Response:
        return await handler(request)

    router.add_api_route(
        path,
        route,
        methods=["POST"],
        include_in_schema=True,
        response_class=Response,
        name=path.strip("/") or "root",
    )
    return handler
