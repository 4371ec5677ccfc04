"""Tests for settings and logging setup (app.core)."""

import logging

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from string_service_api.app.core.config import Settings
from string_service_api.app.core.logging_config import CONSOLE_HANDLER, FILE_HANDLER, setup_logging
from string_service_api.app.main import create_app
from string_service_api.app.schemas.strings import UppercaseRequest, UppercaseResponse


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("PORT", "HOST", "REQUEST_TIMEOUT", "ENDPOINT_LOGGING", "SERVICE_LOGGING"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings()
        assert settings.host == "0.0.0.0"
        assert settings.port == 8080
        assert settings.request_timeout == 0
        assert settings.endpoint_logging is False
        assert settings.service_logging is True

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "9090")
        monkeypatch.setenv("REQUEST_TIMEOUT", "2.5")
        monkeypatch.setenv("ENDPOINT_LOGGING", "yes")
        monkeypatch.setenv("SERVICE_LOGGING", "0")
        settings = Settings()
        assert settings.port == 9090
        assert settings.request_timeout == 2.5
        assert settings.endpoint_logging is True
        assert settings.service_logging is False


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def remove_file_handler(self):
        yield
        root = logging.getLogger()
        for handler in [h for h in root.handlers if h.get_name() == FILE_HANDLER]:
            root.removeHandler(handler)
            handler.close()

    def test_is_idempotent(self):
        root = logging.getLogger()
        setup_logging(Settings(log_level="INFO", log_file=""))
        handlers = list(root.handlers)
        setup_logging(Settings(log_level="INFO", log_file=""))
        assert root.handlers == handlers
        assert [h.get_name() for h in handlers].count(CONSOLE_HANDLER) == 1

    def test_file_handler_added_despite_foreign_handlers(self, tmp_path):
        root = logging.getLogger()
        foreign = logging.NullHandler()
        root.addHandler(foreign)
        try:
            setup_logging(Settings(log_level="INFO", log_file=str(tmp_path / "a.log")))
            setup_logging(Settings(log_level="INFO", log_file=str(tmp_path / "a.log")))
            names = [h.get_name() for h in root.handlers]
            assert names.count(FILE_HANDLER) == 1
        finally:
            root.removeHandler(foreign)

    def test_changed_log_file_replaces_handler(self, tmp_path):
        setup_logging(Settings(log_level="INFO", log_file=str(tmp_path / "a.log")))
        setup_logging(Settings(log_level="INFO", log_file=str(tmp_path / "b.log")))
        files = [h.baseFilename for h in logging.getLogger().handlers if h.get_name() == FILE_HANDLER]
        assert files == [str((tmp_path / "b.log").resolve())]

    def test_log_file_receives_service_records(self, tmp_path):
        log_file = tmp_path / "service.log"
        app = create_app(Settings(log_level="INFO", log_file=str(log_file), service_logging=True))

        assert TestClient(app).post("/uppercase", json={"s": "abc"}).json() == {"v": "ABC"}

        for handler in logging.getLogger().handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "method=uppercase input='abc' output='ABC'" in content
        assert "[INFO] string_service_api.service" in content


class TestSchemas:
    def test_render(self):
        assert UppercaseRequest(s="abc").render() == "UppercaseRequest(s='abc')"
        assert (
            UppercaseResponse(v="", err="Empty string").render()
            == "UppercaseResponse(v='', err='Empty string')"
        )

    def test_models_are_frozen(self):
        request = UppercaseRequest(s="abc")
        with pytest.raises(ValidationError):
            request.s = "other"
        assert request.s == "abc"
