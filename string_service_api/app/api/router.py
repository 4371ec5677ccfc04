"""
Router exposing the string operations.

``build_router`` wires the service into endpoints, optionally wraps
them with middleware and mounts them through the HTTP transport
adapter.  Routes are served at the root: ``POST /uppercase`` and
``POST /count``.
"""

from typing import Optional

from fastapi import APIRouter

from string_service_api.app.api.codecs import (
    decode_count_request,
    decode_uppercase_request,
    encode_response,
)
from string_service_api.app.api.endpoints import make_count_endpoint, make_uppercase_endpoint
from string_service_api.app.core.config import Settings, settings as default_settings
from string_service_api.app.core.endpoint import Endpoint, Middleware, chain
from string_service_api.app.core.middleware import annotate, logging_middleware
from string_service_api.app.core.transport import register
from string_service_api.app.schemas.strings import (
    CountRequest,
    CountResponse,
    UppercaseRequest,
    UppercaseResponse,
)
from string_service_api.app.services.string_service import StringOperations


def _middleware(enabled: bool, label: str, request_type: type, response_type: type) -> Middleware:
    if not enabled:
        return chain()
    return chain(annotate(label), logging_middleware(request_type, response_type))


def build_router(svc: StringOperations, settings: Optional[Settings] = None) -> APIRouter:
    """Return a router serving ``svc`` over HTTP."""
    settings = settings or default_settings
    router = APIRouter()

    uppercase: Endpoint = _middleware(
        settings.endpoint_logging, "uppercase", UppercaseRequest, UppercaseResponse
    )(make_uppercase_endpoint(svc))
    count: Endpoint = _middleware(
        settings.endpoint_logging, "count", CountRequest, CountResponse
    )(make_count_endpoint(svc))

    register(
        router,
        "/uppercase",
        uppercase,
        decode_uppercase_request,
        encode_response,
        timeout=settings.request_timeout,
    )
    register(
        router,
        "/count",
        count,
        decode_count_request,
        encode_response,
        timeout=settings.request_timeout,
    )
    return router
