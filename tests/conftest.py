"""Shared fixtures for the String Service API tests."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from string_service_api.app.core.config import Settings
from string_service_api.app.main import create_app


@pytest.fixture
def settings() -> Settings:
    """Settings with every optional feature left at its default."""
    return Settings()


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
