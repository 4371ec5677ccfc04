"""
Top‑level package for the String Service API.

The HTTP application lives in ``app``; a small ``requests`` based
client for talking to a running instance lives in ``client``.  Import
them with fully qualified names such as
``string_service_api.app.main``.
"""

__all__ = []
