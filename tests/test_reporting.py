"""Tests for the failure reporters."""

from __future__ import annotations

import logging

import pytest

from httpexpect import Response, new_response
from httpexpect.reporting import (
    AssertReporter,
    LoggingReporter,
    RecordingReporter,
    Reporter,
)
from httpexpect.transport import RawResponse


class TestReporters:
    """Tests for the Reporter implementations."""

    def test_reporter_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Reporter()

    def test_assert_reporter_raises(self) -> None:
        with pytest.raises(AssertionError, match="unexpected status code"):
            AssertReporter().report("unexpected status code")

    def test_recording_reporter(self) -> None:
        reporter = RecordingReporter()
        assert not reporter.failed

        reporter.report("one")
        reporter.report("two")

        assert reporter.failed
        assert reporter.messages == ["one", "two"]

        reporter.clear()
        assert not reporter.failed

    def test_logging_reporter(self, caplog: pytest.LogCaptureFixture) -> None:
        reporter = LoggingReporter("httpexpect.test")

        with caplog.at_level(logging.ERROR, logger="httpexpect.test"):
            reporter.report("header not found")

        assert reporter.messages == ["header not found"]
        assert caplog.records[0].name == "httpexpect.test"
        assert caplog.records[0].levelno == logging.ERROR
        assert "Assertion failed: header not found" in caplog.text

    def test_logging_reporter_default_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR):
            LoggingReporter().report("boom")

        assert caplog.records[0].name == "httpexpect.reporting.reporter"


class TestReportingThroughResponse:
    """Reporters plugged into a Response chain."""

    def test_assert_reporter_stops_at_first_failure(self) -> None:
        resp = Response(AssertReporter(), RawResponse.from_bytes(404))

        with pytest.raises(AssertionError, match="404 Not Found"):
            resp.status(200)

        resp.chain.assert_failed()

    def test_logging_reporter_carries_on(self, caplog: pytest.LogCaptureFixture) -> None:
        reporter = LoggingReporter()
        resp = new_response(
            reporter,
            RawResponse.from_bytes(200, {"Content-Type": "text/plain"}, "hi"),
        )

        with caplog.at_level(logging.ERROR):
            resp.header("Content-Type").equal("application/json")
            resp.json().object().value("id")

        assert len(reporter.messages) == 2
        assert len(caplog.records) == 2
        assert "string values are not equal" in reporter.messages[0]
        assert "unexpected Content-Type media type" in reporter.messages[1]
