"""
Wrapper over a decoded JSON tree.

A Value is tagged with the JSON kind of the data it holds. Narrowing
accessors (object(), array(), ...) check the tag and fail the chain on
a mismatch instead of raising, handing back an empty wrapper of the
requested type so the caller can keep chaining.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from .chain import Chain
from .compare import deep_equal
from .models import Failure
from .path import evaluate_path
from .scalars import Boolean, Number, String

if TYPE_CHECKING:
    from .containers import Array, Object


class ValueKind(str, Enum):
    """JSON kind of a decoded value."""
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    INVALID = "invalid"  # decoding or a precondition failed


_INVALID = object()


def kind_of(data: Any) -> ValueKind:
    """Classify a Python value as a JSON kind."""
    if data is _INVALID:
        return ValueKind.INVALID
    if data is None:
        return ValueKind.NULL
    # bool is a subclass of int, so it must be checked first
    if isinstance(data, bool):
        return ValueKind.BOOLEAN
    if isinstance(data, (int, float)):
        return ValueKind.NUMBER
    if isinstance(data, str):
        return ValueKind.STRING
    if isinstance(data, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(data, dict):
        return ValueKind.OBJECT
    return ValueKind.INVALID


class Value:
    """
    Any JSON value: object, array, string, number, boolean or null.

    Example:
        value = resp.json()
        value.object().value("name").string().equal("alice")
        value.path("$.items[0].id").number().equal(1)
    """

    def __init__(self, chain: Chain, data: Any):
        self.chain = chain
        self.kind = kind_of(data)

        if self.kind is ValueKind.INVALID:
            if data is not _INVALID:
                chain.fail(
                    "value is not a JSON value",
                    actual=repr(data),
                    details={"type": type(data).__name__},
                )
            self._value = None
        elif self.kind is ValueKind.ARRAY:
            self._value = list(data)
        else:
            self._value = data

    @classmethod
    def invalid(cls, chain: Chain) -> Value:
        """A Value standing in for data that could not be obtained."""
        return cls(chain, _INVALID)

    def raw(self) -> Any:
        """The underlying data; None if the value is null or invalid."""
        return self._value

    def path(self, expr: str) -> Value:
        """Select a sub-value with a JSONPath expression."""
        if self.chain.failed:
            return Value.invalid(self.chain.clone())
        return evaluate_path(self.chain, self._value, expr)

    # Narrowing

    def object(self) -> Object:
        from .containers import Object

        if self._narrow(ValueKind.OBJECT):
            return Object(self.chain.clone(), self._value)
        return Object(self.chain.clone(), {})

    def array(self) -> Array:
        from .containers import Array

        if self._narrow(ValueKind.ARRAY):
            return Array(self.chain.clone(), self._value)
        return Array(self.chain.clone(), [])

    def string(self) -> String:
        if self._narrow(ValueKind.STRING):
            return String(self.chain.clone(), self._value)
        return String(self.chain.clone(), "")

    def number(self) -> Number:
        if self._narrow(ValueKind.NUMBER):
            try:
                return Number(self.chain.clone(), self._value)
            except OverflowError:
                self.chain.fail("number out of float range", actual=self._value)
        return Number(self.chain.clone(), 0)

    def boolean(self) -> Boolean:
        if self._narrow(ValueKind.BOOLEAN):
            return Boolean(self.chain.clone(), self._value)
        return Boolean(self.chain.clone(), False)

    def _narrow(self, kind: ValueKind) -> bool:
        if self.chain.failed:
            return False
        if self.kind is not kind:
            self.chain.fail(
                f"expected {kind.value} value, got {self.kind.value}",
                expected=kind.value,
                actual=self.kind.value,
            )
            return False
        return True

    # Assertions

    def null(self) -> Value:
        if self.chain.failed:
            return self
        if self.kind is not ValueKind.NULL:
            self.chain.fail("expected null value", expected=None, actual=self._value)
        return self

    def not_null(self) -> Value:
        if self.chain.failed:
            return self
        if self.kind is ValueKind.NULL:
            self.chain.fail("expected non-null value", actual=None)
        return self

    def equal(self, expected: Any) -> Value:
        if self.chain.failed:
            return self
        if not deep_equal(expected, self._value):
            self.chain.fail(Failure.mismatch("values are not equal", expected, self._value))
        return self

    def not_equal(self, expected: Any) -> Value:
        if self.chain.failed:
            return self
        if deep_equal(expected, self._value):
            self.chain.fail("values are equal, but expected to differ", actual=self._value)
        return self

    def __repr__(self) -> str:
        return f"Value(kind={self.kind.value}, value={self._value!r})"
