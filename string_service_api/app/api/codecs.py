"""
Wire codecs for the string routes.

Request bodies are JSON objects validated by the pydantic request
models.  Responses are written as compact JSON objects terminated by a
newline, with ``None`` fields left out.  ``<``, ``>``, ``&``, U+2028 and
U+2029 are written as ``\\u`` escapes so the body is safe to embed in
HTML; everything else is written as UTF‑8.
"""

import json
from typing import Type, TypeVar

from fastapi import Request
from fastapi.responses import Response
from pydantic import BaseModel, ValidationError

from string_service_api.app.core.errors import DecodeError, EncodeError
from string_service_api.app.schemas.strings import CountRequest, UppercaseRequest

M = TypeVar("M", bound=BaseModel)

_HTML_ESCAPES = {
    ord("<"): "\\u003c",
    ord(">"): "\\u003e",
    ord("&"): "\\u0026",
    0x2028: "\\u2028",
    0x2029: "\\u2029",
}


async def _decode(request: Request, model: Type[M]) -> M:
    body = await request.body()
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        detail = errors[0]["msg"] if errors else str(exc)
        raise DecodeError(f"invalid {model.__name__}: {detail}") from exc


async def decode_uppercase_request(request: Request) -> UppercaseRequest:
    return await _decode(request, UppercaseRequest)


async def decode_count_request(request: Request) -> CountRequest:
    return await _decode(request, CountRequest)


def encode_response(response: BaseModel) -> Response:
    """Serialise a response model into an ``application/json`` response."""
    try:
        payload = json.dumps(
            response.model_dump(mode="json", exclude_none=True),
            separators=(",", ":"),
            ensure_ascii=False,
        )
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"cannot encode {type(response).__name__}: {exc}") from exc
    return Response(content=payload.translate(_HTML_ESCAPES) + "\n", media_type="application/json")
