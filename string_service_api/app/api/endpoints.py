"""
Endpoint factories for the string service.

Each factory closes over a service instance and returns an endpoint.
The returned endpoints are immutable and can be shared by any number of
concurrent requests.
"""

from string_service_api.app.core.endpoint import Endpoint, RequestContext
from string_service_api.app.core.errors import StringServiceError
from string_service_api.app.schemas.strings import (
    CountRequest,
    CountResponse,
    UppercaseRequest,
    UppercaseResponse,
)
from string_service_api.app.services.string_service import StringOperations


def make_uppercase_endpoint(svc: StringOperations) -> Endpoint[UppercaseRequest, UppercaseResponse]:
    """Endpoint for ``StringService.uppercase``.

    Business errors are returned inside the response (``v=""`` and
    ``err`` set to the error message) instead of being raised, so the
    transport treats them as a normal result.
    """

    async def uppercase_endpoint(_: RequestContext, request: UppercaseRequest) -> UppercaseResponse:
        try:
            v = svc.uppercase(request.s)
        except StringServiceError as exc:
            return UppercaseResponse(v="", err=str(exc))
        return UppercaseResponse(v=v)

    return uppercase_endpoint


def make_count_endpoint(svc: StringOperations) -> Endpoint[CountRequest, CountResponse]:
    """Endpoint for ``StringService.count``."""

    async def count_endpoint(_: RequestContext, request: CountRequest) -> CountResponse:
        return CountResponse(v=svc.count(request.s))

    return count_endpoint
