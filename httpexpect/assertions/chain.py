"""
Failure state shared along an assertion chain.

A Chain is created for every Response and cloned into each wrapper the
response hands out. Cloning copies the failed flag as it is at that
moment; failures recorded later on the parent never reach children
that already exist, and failures on a child never reach the parent.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .models import MISSING, Failure

if TYPE_CHECKING:
    from ..reporting import Reporter

logger = logging.getLogger(__name__)


class Chain:
    """
    Pass/fail flag bound to a reporter.

    Example:
        chain = Chain(RecordingReporter())
        chain.fail("status mismatch")
        assert chain.failed
    """

    def __init__(self, reporter: Reporter, failed: bool = False):
        self.reporter = reporter
        self._failed = failed

    @property
    def failed(self) -> bool:
        return self._failed

    def is_failed(self) -> bool:
        return self._failed

    def fail(
        self,
        message: str | Failure,
        *,
        path: str | None = None,
        expected: Any = MISSING,
        actual: Any = MISSING,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Mark the chain failed and report the failure.

        Every call is reported, even when the chain had already failed.
        The flag is set before the reporter runs, so a reporter that
        raises still leaves the chain failed.
        """
        if isinstance(message, Failure):
            failure = message
        else:
            failure = Failure(
                message=message,
                path=path,
                expected=expected,
                actual=actual,
                details=details or {},
            )

        self._failed = True
        logger.debug(f"Assertion failed: {failure.message}")
        self.reporter.report(str(failure))

    def clone(self) -> Chain:
        """Derive a chain for a wrapper, inheriting the current failed flag."""
        return Chain(self.reporter, failed=self._failed)

    # Test-only helpers

    def reset(self) -> None:
        self._failed = False

    def assert_ok(self) -> None:
        if self._failed:
            raise AssertionError("expected chain to be ok, but it has failed")

    def assert_failed(self) -> None:
        if not self._failed:
            raise AssertionError("expected chain to have failed, but it is ok")

    def __repr__(self) -> str:
        status = "failed" if self._failed else "ok"
        return f"Chain(reporter={self.reporter!r}, status={status})"
