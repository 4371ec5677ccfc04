"""Tests for the service layer (app.services.string_service)."""

import logging

import pytest

from string_service_api.app.core.errors import ERR_EMPTY, EmptyStringError
from string_service_api.app.services.string_service import LoggingStringService, StringService


class TestStringService:
    @pytest.mark.parametrize(
        "s, expected",
        [
            ("abc", "ABC"),
            ("go kit", "GO KIT"),
            ("MiXeD 123", "MIXED 123"),
            ("straße", "STRAßE"),
            ("ﬁne", "ﬁNE"),
        ],
    )
    def test_uppercase(self, s, expected):
        assert StringService().uppercase(s) == expected

    @pytest.mark.parametrize("s", ["straße", "ﬁx", "héllo wörld", "ǆ"])
    def test_uppercase_preserves_length(self, s):
        assert len(StringService().uppercase(s)) == len(s)

    def test_uppercase_empty_raises(self):
        with pytest.raises(EmptyStringError) as excinfo:
            StringService().uppercase("")
        assert str(excinfo.value) == ERR_EMPTY == "Empty string"

    @pytest.mark.parametrize("s, expected", [("", 0), ("abc", 3), ("go kit", 6), ("héllo", 5)])
    def test_count(self, s, expected):
        assert StringService().count(s) == expected

    def test_is_stateless(self):
        svc = StringService()
        assert [svc.uppercase("x") for _ in range(3)] == ["X", "X", "X"]
        assert [svc.count("xy") for _ in range(3)] == [2, 2, 2]


class TestLoggingStringService:
    def test_passes_results_through(self, caplog):
        caplog.set_level(logging.INFO)
        svc = LoggingStringService(StringService(), logging.getLogger("test.svc"))

        assert svc.uppercase("abc") == "ABC"
        assert svc.count("abcd") == 4

        messages = [r.getMessage() for r in caplog.records if r.name == "test.svc"]
        assert any("method=uppercase input='abc' output='ABC' err=None" in m for m in messages)
        assert any("method=count input='abcd' n=4" in m for m in messages)

    def test_logs_and_reraises_errors(self, caplog):
        caplog.set_level(logging.INFO)
        svc = LoggingStringService(StringService(), logging.getLogger("test.svc"))

        with pytest.raises(EmptyStringError):
            svc.uppercase("")

        messages = [r.getMessage() for r in caplog.records if r.name == "test.svc"]
        assert any("method=uppercase input='' output='' err=Empty string" in m for m in messages)
