"""
Application package initializer.

The application is split into a few small layers.  ``core`` holds the
generic endpoint, middleware and transport machinery together with
configuration, logging and errors.  ``services`` contains the business
logic, ``schemas`` the request and response models, and ``api`` wires
them into HTTP routes.
"""

from .main import app  # noqa: F401
