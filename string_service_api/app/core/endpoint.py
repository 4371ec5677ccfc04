"""
Endpoint and middleware primitives.

An *endpoint* is the uniform shape every business operation is exposed
through: an async callable taking a :class:`RequestContext` and a typed
request model and returning a typed response model.  Failures are
raised as exceptions.  Endpoints know nothing about HTTP; the
``transport`` module adapts them to routes.

A *middleware* turns one endpoint into another endpoint of the same
request and response types, so middleware can be stacked freely::

    endpoint = chain(annotate("first"), annotate("second"))(endpoint)

The first middleware passed to :func:`chain` is the outermost one.  Its
pre‑logic runs first and its post‑logic runs last.
"""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from functools import reduce
from typing import Awaitable, Callable, Optional, Protocol, TypeVar, runtime_checkable

Req = TypeVar("Req")
Resp = TypeVar("Resp")


@runtime_checkable
class Renderable(Protocol):
    """Capability of producing a human readable, single line rendering."""

    def render(self) -> str:
        ...


@dataclass(frozen=True)
class RequestContext:
    """Per‑request values handed to every endpoint.

    ``deadline`` is a :func:`time.monotonic` timestamp, or ``None`` when
    the request has no deadline.
    """

    request_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    path: str = ""
    deadline: Optional[float] = None

    @classmethod
    def with_timeout(cls, timeout: Optional[float], **kwargs) -> "RequestContext":
        if not timeout:
            return cls(**kwargs)
        return cls(deadline=time.monotonic() + timeout, **kwargs)

    def remaining(self) -> Optional[float]:
        """Seconds left until the deadline, never negative."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline


Endpoint = Callable[[RequestContext, Req], Awaitable[Resp]]
Middleware = Callable[[Endpoint[Req, Resp]], Endpoint[Req, Resp]]


def chain(*middlewares: Middleware[Req, Resp]) -> Middleware[Req, Resp]:
    """Compose middlewares into a single middleware.

    ``chain(a, b, c)(e)`` is ``a(b(c(e)))``: requests pass through
    ``a`` first and responses pass through ``a`` last.  Calling
    ``chain()`` with no arguments returns the identity middleware.
    """

    def apply(endpoint: Endpoint[Req, Resp]) -> Endpoint[Req, Resp]:
        return reduce(lambda inner, mw: mw(inner), reversed(middlewares), endpoint)

    return apply
