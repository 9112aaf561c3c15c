"""
Scalar wrappers: String, Number and Boolean.

Every assertion returns the wrapper itself so calls can be chained.
Once the wrapper's chain has failed, assertions return immediately
without evaluating or reporting anything.
"""

from __future__ import annotations

import math
import re

from .chain import Chain
from .compare import deep_equal
from .models import Failure


class String:
    """
    Assertions on a string: a response body, a header value or a JSON string.

    Example:
        resp.header("Content-Type").equal("application/json")
        resp.body().contains("hello").not_empty()
    """

    def __init__(self, chain: Chain, value: str):
        self.chain = chain
        self._value = value

    def raw(self) -> str:
        return self._value

    def equal(self, expected: str) -> String:
        if self.chain.failed:
            return self
        if self._value != expected:
            self.chain.fail(Failure.mismatch("string values are not equal", expected, self._value))
        return self

    def not_equal(self, expected: str) -> String:
        if self.chain.failed:
            return self
        if self._value == expected:
            self.chain.fail(
                "string values are equal, but expected to differ",
                actual=self._value,
            )
        return self

    def equal_fold(self, expected: str) -> String:
        """Case-insensitive equality."""
        if self.chain.failed:
            return self
        if self._value.casefold() != expected.casefold():
            self.chain.fail(
                Failure.mismatch(
                    "string values are not equal (ignoring case)",
                    expected,
                    self._value,
                )
            )
        return self

    def empty(self) -> String:
        if self.chain.failed:
            return self
        if self._value != "":
            self.chain.fail("expected empty string", actual=self._value)
        return self

    def not_empty(self) -> String:
        if self.chain.failed:
            return self
        if self._value == "":
            self.chain.fail("expected non-empty string", actual=self._value)
        return self

    def contains(self, substring: str) -> String:
        if self.chain.failed:
            return self
        if substring not in self._value:
            self.chain.fail(
                "string does not contain expected substring",
                expected=f"string containing {substring!r}",
                actual=self._value,
            )
        return self

    def not_contains(self, substring: str) -> String:
        if self.chain.failed:
            return self
        if substring in self._value:
            self.chain.fail(
                "string contains unexpected substring",
                expected=f"string not containing {substring!r}",
                actual=self._value,
            )
        return self

    def matches(self, pattern: str) -> String:
        """Assert the string matches a regular expression (re.search semantics)."""
        if self.chain.failed:
            return self
        try:
            matched = re.search(pattern, self._value) is not None
        except re.error as e:
            self.chain.fail(
                "invalid regular expression",
                details={"pattern": pattern, "error": str(e)},
            )
            return self
        if not matched:
            self.chain.fail(
                "string does not match pattern",
                expected=f"match for {pattern!r}",
                actual=self._value,
            )
        return self

    def length(self) -> Number:
        return Number(self.chain.clone(), len(self._value))

    def __repr__(self) -> str:
        return f"String({self._value!r})"


class Number:
    """
    Assertions on a JSON number.

    The value is kept as a float, matching JSON's single number type.

    Example:
        resp.json().object().value("count").number().gt(0).le(100)
    """

    def __init__(self, chain: Chain, value: float):
        self.chain = chain
        self._value = float(value)

    def raw(self) -> float:
        return self._value

    def equal(self, expected: float) -> Number:
        if self.chain.failed:
            return self
        if not deep_equal(expected, self._value):
            self.chain.fail(Failure.mismatch("numbers are not equal", expected, self._value))
        return self

    def not_equal(self, expected: float) -> Number:
        if self.chain.failed:
            return self
        if deep_equal(expected, self._value):
            self.chain.fail(
                "numbers are equal, but expected to differ",
                actual=self._value,
            )
        return self

    def equal_delta(self, expected: float, delta: float) -> Number:
        if self.chain.failed:
            return self
        if math.isnan(self._value) or abs(self._value - expected) > delta:
            self.chain.fail(
                "number is not within delta of expected",
                expected=f"{expected} ± {delta}",
                actual=self._value,
            )
        return self

    def not_equal_delta(self, expected: float, delta: float) -> Number:
        if self.chain.failed:
            return self
        if not math.isnan(self._value) and abs(self._value - expected) <= delta:
            self.chain.fail(
                "number is within delta of expected, but expected to differ",
                expected=f"not {expected} ± {delta}",
                actual=self._value,
            )
        return self

    def gt(self, bound: float) -> Number:
        if self.chain.failed:
            return self
        if not self._value > bound:
            self.chain.fail("number is not greater than bound", expected=f"> {bound}", actual=self._value)
        return self

    def ge(self, bound: float) -> Number:
        if self.chain.failed:
            return self
        if not self._value >= bound:
            self.chain.fail(
                "number is not greater than or equal to bound",
                expected=f">= {bound}",
                actual=self._value,
            )
        return self

    def lt(self, bound: float) -> Number:
        if self.chain.failed:
            return self
        if not self._value < bound:
            self.chain.fail("number is not less than bound", expected=f"< {bound}", actual=self._value)
        return self

    def le(self, bound: float) -> Number:
        if self.chain.failed:
            return self
        if not self._value <= bound:
            self.chain.fail(
                "number is not less than or equal to bound",
                expected=f"<= {bound}",
                actual=self._value,
            )
        return self

    def in_range(self, low: float, high: float) -> Number:
        """Assert low <= value <= high."""
        if self.chain.failed:
            return self
        if not low <= self._value <= high:
            self.chain.fail(
                "number is out of range",
                expected=f"[{low}, {high}]",
                actual=self._value,
            )
        return self

    def __repr__(self) -> str:
        return f"Number({self._value!r})"


class Boolean:
    """Assertions on a JSON boolean."""

    def __init__(self, chain: Chain, value: bool):
        self.chain = chain
        self._value = value

    def raw(self) -> bool:
        return self._value

    def equal(self, expected: bool) -> Boolean:
        if self.chain.failed:
            return self
        if not deep_equal(expected, self._value):
            self.chain.fail(Failure.mismatch("booleans are not equal", expected, self._value))
        return self

    def not_equal(self, expected: bool) -> Boolean:
        if self.chain.failed:
            return self
        if deep_equal(expected, self._value):
            self.chain.fail(
                "booleans are equal, but expected to differ",
                actual=self._value,
            )
        return self

    def true(self) -> Boolean:
        return self.equal(True)

    def false(self) -> Boolean:
        return self.equal(False)

    def __repr__(self) -> str:
        return f"Boolean({self._value!r})"
