"""
Failure reporters.

A Reporter receives one message per failing assertion and decides what
happens next: raise and stop the test, log and carry on, or just keep
the message.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class Reporter(ABC):
    """Sink for assertion failures."""

    @abstractmethod
    def report(self, message: str) -> None:
        """Handle one failure message."""
        pass


class AssertReporter(Reporter):
    """
    Raises AssertionError on the first failure.

    This is the reporter to use inside pytest tests: the failing
    assertion aborts the test with the failure message.
    """

    def report(self, message: str) -> None:
        raise AssertionError(message)

    def __repr__(self) -> str:
        return "AssertReporter()"


class RecordingReporter(Reporter):
    """
    Keeps every failure message and lets execution continue.

    Example:
        reporter = RecordingReporter()
        Response(reporter, raw).status(200).content_type_json()
        assert not reporter.failed, reporter.messages
    """

    def __init__(self) -> None:
        self.messages: list[str] = []

    def report(self, message: str) -> None:
        self.messages.append(message)

    @property
    def failed(self) -> bool:
        return len(self.messages) > 0

    def clear(self) -> None:
        self.messages.clear()

    def __repr__(self) -> str:
        return f"RecordingReporter(failures={len(self.messages)})"


class LoggingReporter(RecordingReporter):
    """Logs every failure at ERROR level, keeping the messages as well."""

    def __init__(self, logger_name: str | None = None) -> None:
        super().__init__()
        self._logger = logging.getLogger(logger_name) if logger_name else logger

    def report(self, message: str) -> None:
        super().report(message)
        self._logger.error(f"Assertion failed: {message}")

    def __repr__(self) -> str:
        return f"LoggingReporter(logger={self._logger.name!r}, failures={len(self.messages)})"
