"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all and listens on port 8080.
"""

import os
from dataclasses import dataclass, field


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "String Service API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG", "false"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    # Address the uvicorn server binds to in ``run.py``.
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8080")))

    # Deadline in seconds applied to every endpoint invocation.  ``0``
    # disables the deadline; the endpoint then runs until it returns.
    request_timeout: float = field(default_factory=lambda: float(os.getenv("REQUEST_TIMEOUT", "0")))

    # Wrap each endpoint with the annotate and logging middleware.
    endpoint_logging: bool = field(default_factory=lambda: _env_bool("ENDPOINT_LOGGING", "false"))

    # Wrap the string service with ``LoggingStringService`` so that
    # every call is logged with its input, output and duration.
    service_logging: bool = field(default_factory=lambda: _env_bool("SERVICE_LOGGING", "true"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Tests build their own
# ``Settings()`` after patching the environment.
settings = Settings()
