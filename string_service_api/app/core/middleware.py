"""
Reusable endpoint middleware.

``annotate`` brackets every call with a ``pre`` and a ``post`` marker,
which is handy for tracing the order in which a chain runs.
``logging_middleware`` logs the rendering of the request and of the
response; it only accepts request and response types providing the
:class:`~string_service_api.app.core.endpoint.Renderable` capability
and refuses any other type as soon as it is built.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Type, TypeVar

from .endpoint import Endpoint, Middleware, Renderable, RequestContext

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Renderable)
S = TypeVar("S", bound=Renderable)


def annotate(label: str, emit: Optional[Callable[[str], None]] = None) -> Middleware:
    """Return a middleware emitting ``"<label> pre"`` and ``"<label> post"``.

    The post marker is emitted on every exit path, including when the
    wrapped endpoint raises.  ``emit`` defaults to ``logger.info``.
    """
    sink = emit or logger.info

    def middleware(next_endpoint: Endpoint) -> Endpoint:
        async def endpoint(ctx: RequestContext, request):
            sink(f"{label} pre")
            try:
                return await next_endpoint(ctx, request)
            finally:
                sink(f"{label} post")

        return endpoint

    return middleware


def _require_render(kind: str, model: type) -> None:
    if not callable(getattr(model, "render", None)):
        raise TypeError(
            f"logging_middleware requires a renderable {kind} type; "
            f"{model.__name__} has no render() method"
        )


def logging_middleware(
    request_type: Type[R],
    response_type: Type[S],
    log: Optional[logging.Logger] = None,
) -> Middleware[R, S]:
    """Build a middleware logging requests and responses of the given types.

    Raises ``TypeError`` immediately if either type lacks ``render()``.
    """
    _require_render("request", request_type)
    _require_render("response", response_type)
    log = log or logger

    def middleware(next_endpoint: Endpoint[R, S]) -> Endpoint[R, S]:
        async def endpoint(ctx: RequestContext, request: R) -> S:
            log.info("[%s] %s request: %s", ctx.request_id, ctx.path, request.render())
            response = await next_endpoint(ctx, request)
            log.info("[%s] %s response: %s", ctx.request_id, ctx.path, response.render())
            return response

        return endpoint

    return middleware
