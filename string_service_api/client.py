"""String service API client.

A thin wrapper around a running String Service API instance, built on
the ``requests`` library.  It turns the wire format back into plain
Python values:

* :meth:`StringServiceClient.uppercase` returns the upper‑cased string
  and raises :class:`EmptyStringError` when the server reports the
  empty input error inside the response body.
* :meth:`StringServiceClient.count` returns the character count.

The server signals transport failures with a ``text/plain`` body of the
form ``err: <message>`` and a ``200`` status.  The client detects these
bodies and raises :class:`RemoteServiceError`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from string_service_api.app.core.errors import ERR_EMPTY, EmptyStringError, RemoteServiceError
from string_service_api.app.schemas.strings import CountResponse, UppercaseResponse

logger = logging.getLogger(__name__)

ERROR_PREFIX = "err: "


class StringServiceClient:
    """Call the uppercase and count routes of a remote string service."""

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds for every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _post(self, path: str, s: str) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        logger.debug("Sending POST request to %s", url)
        response = self.session.post(url, json={"s": s}, timeout=self.timeout)
        response.raise_for_status()
        text = response.text
        if text.startswith(ERROR_PREFIX):
            message = text[len(ERROR_PREFIX):].strip()
            logger.error("String service %s failed: %s", path, message)
            raise RemoteServiceError(message)
        return response.json()

    def uppercase(self, s: str) -> str:
        """Return ``s`` upper‑cased by the remote service."""
        result = UppercaseResponse.model_validate(self._post("/uppercase", s))
        if result.err:
            if result.err == ERR_EMPTY:
                raise EmptyStringError(result.err)
            raise RemoteServiceError(result.err)
        return result.v

    def count(self, s: str) -> int:
        """Return the number of characters in ``s`` as counted remotely."""
        return CountResponse.model_validate(self._post("/count", s)).v

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "StringServiceClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
