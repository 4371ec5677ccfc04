"""
Service layer for the string operations.

``StringService`` implements the two operations offered by the API.
It holds no state, so a single instance is created at startup and
shared by every request.

``LoggingStringService`` wraps any object with the same two methods
and logs each call (method, input, output, error and duration) before
handing the result back unchanged.
"""

from __future__ import annotations

import logging
import time
from typing import Optional, Protocol

from string_service_api.app.core.errors import EmptyStringError


class StringOperations(Protocol):
    """Interface shared by the service and its decorators."""

    def uppercase(self, s: str) -> str:
        ...

    def count(self, s: str) -> int:
        ...


class StringService:
    """Stateless string operations."""

    def uppercase(self, s: str) -> str:
        """Return ``s`` upper‑cased.

        Each character is mapped on its own; a character whose upper
        case form spans several characters (``"ß"``) is kept as is, so the
        result always has the same length as ``s``.  Raises
        ``EmptyStringError`` when ``s`` is empty.
        """
        if s == "":
            raise EmptyStringError()
        return "".join(u if len(u := c.upper()) == 1 else c for c in s)

    def count(self, s: str) -> int:
        """Return the number of characters in ``s``."""
        return len(s)


class LoggingStringService:
    """Log every call made to the wrapped service."""

    def __init__(self, next_service: StringOperations, logger: Optional[logging.Logger] = None) -> None:
        self.next = next_service
        self.logger = logger or logging.getLogger(__name__)

    def uppercase(self, s: str) -> str:
        started = time.perf_counter()
        output, err = "", None
        try:
            output = self.next.uppercase(s)
            return output
        except Exception as exc:
            err = exc
            raise
        finally:
            self.logger.info(
                "method=uppercase input=%r output=%r err=%s took=%.6fs",
                s,
                output,
                err,
                time.perf_counter() - started,
            )

    def count(self, s: str) -> int:
        started = time.perf_counter()
        n = self.next.count(s)
        self.logger.info(
            "method=count input=%r n=%d took=%.6fs",
            s,
            n,
            time.perf_counter() - started,
        )
        return n
