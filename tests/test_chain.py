"""Tests for the failure chain."""

from __future__ import annotations

import pytest

from httpexpect.assertions import Chain, Failure
from httpexpect.reporting import AssertReporter, RecordingReporter


class TestChain:
    """Tests for Chain state and reporting."""

    def test_new_chain_is_ok(self, chain: Chain) -> None:
        assert not chain.failed
        assert not chain.is_failed()
        chain.assert_ok()

    def test_fail_sets_flag_and_reports(self, chain: Chain, reporter: RecordingReporter) -> None:
        chain.fail("boom")

        assert chain.failed
        chain.assert_failed()
        assert reporter.messages == ["boom"]

    def test_every_fail_is_reported(self, chain: Chain, reporter: RecordingReporter) -> None:
        chain.fail("first")
        chain.fail("second")

        assert reporter.messages == ["first", "second"]

    def test_fail_renders_expected_and_actual(
        self, chain: Chain, reporter: RecordingReporter
    ) -> None:
        chain.fail("values differ", expected=1, actual="1")

        message = reporter.messages[0]
        assert message.startswith("values differ")
        assert "Expected: 1" in message
        assert "Actual:   '1'" in message

    def test_fail_accepts_failure_record(self, chain: Chain, reporter: RecordingReporter) -> None:
        chain.fail(Failure.mismatch("mismatch", expected=True, actual=1))

        message = reporter.messages[0]
        assert "Expected: true" in message
        assert "Type mismatch: expected boolean, got number" in message

    def test_reset_clears_flag(self, chain: Chain) -> None:
        chain.fail("boom")
        chain.reset()

        chain.assert_ok()

    def test_assert_helpers_raise_on_wrong_state(self, chain: Chain) -> None:
        with pytest.raises(AssertionError):
            chain.assert_failed()

        chain.fail("boom")
        with pytest.raises(AssertionError):
            chain.assert_ok()

    def test_raising_reporter_still_marks_failed(self) -> None:
        chain = Chain(AssertReporter())

        with pytest.raises(AssertionError, match="boom"):
            chain.fail("boom")

        assert chain.failed


class TestChainClone:
    """Tests for failure propagation through clones."""

    def test_clone_of_ok_chain_is_ok(self, chain: Chain) -> None:
        chain.clone().assert_ok()

    def test_clone_inherits_prior_failure(self, chain: Chain) -> None:
        chain.fail("boom")

        chain.clone().assert_failed()

    def test_clone_shares_reporter(self, chain: Chain, reporter: RecordingReporter) -> None:
        child = chain.clone()
        child.fail("child")

        assert child.reporter is reporter
        assert reporter.messages == ["child"]

    def test_later_parent_failure_does_not_reach_child(self, chain: Chain) -> None:
        child = chain.clone()
        chain.fail("parent")

        child.assert_ok()

    def test_child_failure_does_not_reach_parent(self, chain: Chain) -> None:
        child = chain.clone()
        child.fail("child")

        chain.assert_ok()
