"""Tests for String, Number and Boolean."""

from __future__ import annotations

import math

import pytest

from httpexpect.assertions import Boolean, Chain, Number, String
from httpexpect.reporting import RecordingReporter


class TestString:
    """Tests for String assertions."""

    def test_equal(self, chain: Chain) -> None:
        String(chain, "foo").equal("foo").not_equal("FOO").chain.assert_ok()

    def test_equal_mismatch(self, chain: Chain, reporter: RecordingReporter) -> None:
        String(chain, "foo").equal("bar")

        chain.assert_failed()
        assert "Expected: 'bar'" in reporter.messages[0]
        assert "Actual:   'foo'" in reporter.messages[0]

    def test_not_equal_mismatch(self, chain: Chain) -> None:
        String(chain, "foo").not_equal("foo").chain.assert_failed()

    def test_equal_fold(self, chain: Chain) -> None:
        String(chain, "Foo").equal_fold("fOO").chain.assert_ok()
        String(chain, "Foo").equal_fold("bar").chain.assert_failed()

    def test_empty(self, chain: Chain) -> None:
        String(chain, "").empty().chain.assert_ok()
        String(chain, " ").empty().chain.assert_failed()

    def test_not_empty(self, chain: Chain) -> None:
        String(chain, "x").not_empty().chain.assert_ok()
        String(chain, "").not_empty().chain.assert_failed()

    def test_contains(self, chain: Chain) -> None:
        s = String(chain, "hello world")

        s.contains("lo w").not_contains("bye").chain.assert_ok()
        s.contains("bye").chain.assert_failed()

    def test_not_contains_mismatch(self, chain: Chain) -> None:
        String(chain, "hello").not_contains("ell").chain.assert_failed()

    def test_matches(self, chain: Chain) -> None:
        String(chain, "id-42").matches(r"\d+").chain.assert_ok()
        String(chain, "id-42").matches(r"^\d+$").chain.assert_failed()

    def test_invalid_pattern_fails(self, chain: Chain, reporter: RecordingReporter) -> None:
        String(chain, "x").matches("(")

        chain.assert_failed()
        assert "invalid regular expression" in reporter.messages[0]

    def test_length(self, chain: Chain) -> None:
        length = String(chain, "héllo").length()

        assert length.raw() == 5
        length.equal(5).chain.assert_ok()

    def test_failed_chain_short_circuits(self, chain: Chain, reporter: RecordingReporter) -> None:
        s = String(chain, "foo").equal("bar")

        s.equal("baz").contains("q").matches("(").empty()

        assert len(reporter.messages) == 1


class TestNumber:
    """Tests for Number assertions."""

    def test_value_is_float(self, chain: Chain) -> None:
        n = Number(chain, 3)

        assert isinstance(n.raw(), float)
        n.equal(3).equal(3.0).chain.assert_ok()

    def test_equal_mismatch(self, chain: Chain) -> None:
        Number(chain, 3).equal(4).chain.assert_failed()

    def test_equal_rejects_bool(self, chain: Chain) -> None:
        Number(chain, 1).equal(True).chain.assert_failed()

    def test_not_equal(self, chain: Chain) -> None:
        Number(chain, 3).not_equal(4).chain.assert_ok()
        Number(chain, 3).not_equal(3).chain.assert_failed()

    def test_equal_delta(self, chain: Chain) -> None:
        Number(chain, 1.0).equal_delta(1.05, 0.1).chain.assert_ok()
        Number(chain, 1.0).equal_delta(1.5, 0.1).chain.assert_failed()

    def test_not_equal_delta(self, chain: Chain) -> None:
        Number(chain, 1.0).not_equal_delta(1.5, 0.1).chain.assert_ok()
        Number(chain, 1.0).not_equal_delta(1.05, 0.1).chain.assert_failed()

    def test_nan_is_never_within_delta(self, chain: Chain) -> None:
        Number(chain, math.nan).not_equal_delta(0, math.inf).chain.assert_ok()
        Number(chain, math.nan).equal_delta(0, math.inf).chain.assert_failed()

    @pytest.mark.parametrize(
        "method,bound,ok",
        [
            ("gt", 9, True),
            ("gt", 10, False),
            ("ge", 10, True),
            ("ge", 11, False),
            ("lt", 11, True),
            ("lt", 10, False),
            ("le", 10, True),
            ("le", 9, False),
        ],
    )
    def test_comparisons(self, chain: Chain, method: str, bound: float, ok: bool) -> None:
        getattr(Number(chain, 10), method)(bound)

        assert chain.failed is not ok

    def test_in_range(self, chain: Chain) -> None:
        Number(chain, 5).in_range(5, 10).in_range(0, 5).chain.assert_ok()
        Number(chain, 5).in_range(6, 10).chain.assert_failed()

    def test_failed_chain_short_circuits(self, chain: Chain, reporter: RecordingReporter) -> None:
        Number(chain, 1).gt(2).lt(0).equal(5)

        assert len(reporter.messages) == 1


class TestBoolean:
    """Tests for Boolean assertions."""

    def test_true(self, chain: Chain) -> None:
        Boolean(chain, True).true().equal(True).not_equal(False).chain.assert_ok()

    def test_false(self, chain: Chain) -> None:
        Boolean(chain, False).false().chain.assert_ok()
        Boolean(chain, False).true().chain.assert_failed()

    def test_not_equal_mismatch(self, chain: Chain) -> None:
        Boolean(chain, True).not_equal(True).chain.assert_failed()

    def test_rejects_number(self, chain: Chain, reporter: RecordingReporter) -> None:
        Boolean(chain, True).equal(1)

        chain.assert_failed()
        assert "Type mismatch: expected number, got boolean" in reporter.messages[0]
