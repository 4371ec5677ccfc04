"""
Exception hierarchy for the String Service API.

``EmptyStringError`` is the only business error.  It is part of the
normal result contract of the uppercase operation and therefore ends
up inside a successful response body.  The remaining exceptions are
transport failures which the HTTP adapter renders as plain text.
"""

# Message of the "empty input" error.  Read only, shared by the whole
# process.
ERR_EMPTY = "Empty string"


class StringServiceError(Exception):
    """Base class for all errors raised by this package."""


class EmptyStringError(StringServiceError):
    """Raised when an operation that needs input receives ``""``."""

    def __init__(self, message: str = ERR_EMPTY) -> None:
        super().__init__(message)


class DecodeError(StringServiceError):
    """The request body could not be turned into a request model."""


class EncodeError(StringServiceError):
    """The response model could not be serialised."""


class RemoteServiceError(StringServiceError):
    """A remote string service answered with a plain‑text error body."""
