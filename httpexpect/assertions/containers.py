"""
Container wrappers: Object and Array.
"""

from __future__ import annotations

from typing import Any

from .chain import Chain
from .compare import contains_subset, deep_equal, index_of
from .models import Failure
from .path import evaluate_path
from .scalars import Number
from .value import Value


class Object:
    """
    Assertions on a JSON object.

    Example:
        obj = resp.json().object()
        obj.contains_key("id").value("name").string().equal("alice")
        obj.contains_map({"active": True})
    """

    def __init__(self, chain: Chain, data: dict[str, Any]):
        self.chain = chain
        self._value = data

    def raw(self) -> dict[str, Any]:
        return self._value

    def path(self, expr: str) -> Value:
        if self.chain.failed:
            return Value.invalid(self.chain.clone())
        return evaluate_path(self.chain, self._value, expr)

    def keys(self) -> Array:
        if self.chain.failed:
            return Array(self.chain.clone(), [])
        return Array(self.chain.clone(), list(self._value.keys()))

    def values(self) -> Array:
        if self.chain.failed:
            return Array(self.chain.clone(), [])
        return Array(self.chain.clone(), list(self._value.values()))

    def value(self, key: str) -> Value:
        """Sub-value for ``key``; a missing key fails the chain."""
        if self.chain.failed:
            return Value.invalid(self.chain.clone())
        if key not in self._value:
            self.chain.fail(
                "object does not contain expected key",
                expected=f"object with key {key!r}",
                actual=list(self._value.keys()),
            )
            return Value.invalid(self.chain.clone())
        return Value(self.chain.clone(), self._value[key])

    def empty(self) -> Object:
        if self.chain.failed:
            return self
        if self._value:
            self.chain.fail("expected empty object", actual=self._value)
        return self

    def not_empty(self) -> Object:
        if self.chain.failed:
            return self
        if not self._value:
            self.chain.fail("expected non-empty object", actual=self._value)
        return self

    def equal(self, expected: dict[str, Any]) -> Object:
        if self.chain.failed:
            return self
        if not deep_equal(expected, self._value):
            self.chain.fail(Failure.mismatch("objects are not equal", expected, self._value))
        return self

    def not_equal(self, expected: dict[str, Any]) -> Object:
        if self.chain.failed:
            return self
        if deep_equal(expected, self._value):
            self.chain.fail("objects are equal, but expected to differ", actual=self._value)
        return self

    def contains_key(self, key: str) -> Object:
        if self.chain.failed:
            return self
        if key not in self._value:
            self.chain.fail(
                "object does not contain expected key",
                expected=f"object with key {key!r}",
                actual=list(self._value.keys()),
            )
        return self

    def not_contains_key(self, key: str) -> Object:
        if self.chain.failed:
            return self
        if key in self._value:
            self.chain.fail(
                "object contains unexpected key",
                expected=f"object without key {key!r}",
                actual=list(self._value.keys()),
            )
        return self

    def contains_map(self, submap: dict[str, Any]) -> Object:
        """Assert every key of ``submap`` is present with a matching value."""
        if self.chain.failed:
            return self
        if not contains_subset(self._value, submap):
            self.chain.fail(
                "object does not contain expected sub-object",
                expected=submap,
                actual=self._value,
            )
        return self

    def not_contains_map(self, submap: dict[str, Any]) -> Object:
        if self.chain.failed:
            return self
        if contains_subset(self._value, submap):
            self.chain.fail(
                "object contains unexpected sub-object",
                expected=f"object not containing {submap!r}",
                actual=self._value,
            )
        return self

    def __repr__(self) -> str:
        return f"Object({self._value!r})"


class Array:
    """
    Assertions on a JSON array.

    Example:
        arr = resp.json().path("$.items").array()
        arr.length().equal(3)
        arr.contains({"id": 1}).element(0).object().contains_key("id")
    """

    def __init__(self, chain: Chain, data: list[Any]):
        self.chain = chain
        self._value = list(data)

    def raw(self) -> list[Any]:
        return self._value

    def path(self, expr: str) -> Value:
        if self.chain.failed:
            return Value.invalid(self.chain.clone())
        return evaluate_path(self.chain, self._value, expr)

    def length(self) -> Number:
        return Number(self.chain.clone(), len(self._value))

    def element(self, index: int) -> Value:
        """Sub-value at ``index``; an out-of-range index fails the chain."""
        if self.chain.failed:
            return Value.invalid(self.chain.clone())
        if not 0 <= index < len(self._value):
            self.chain.fail(
                "array index out of bounds",
                expected=f"index in [0, {len(self._value)})",
                actual=index,
            )
            return Value.invalid(self.chain.clone())
        return Value(self.chain.clone(), self._value[index])

    def first(self) -> Value:
        if not self.chain.failed and not self._value:
            self.chain.fail("array is empty, has no first element", actual=self._value)
            return Value.invalid(self.chain.clone())
        return self.element(0)

    def last(self) -> Value:
        if not self.chain.failed and not self._value:
            self.chain.fail("array is empty, has no last element", actual=self._value)
            return Value.invalid(self.chain.clone())
        return self.element(len(self._value) - 1)

    def empty(self) -> Array:
        if self.chain.failed:
            return self
        if self._value:
            self.chain.fail("expected empty array", actual=self._value)
        return self

    def not_empty(self) -> Array:
        if self.chain.failed:
            return self
        if not self._value:
            self.chain.fail("expected non-empty array", actual=self._value)
        return self

    def equal(self, expected: list[Any]) -> Array:
        if self.chain.failed:
            return self
        if not deep_equal(expected, self._value):
            self.chain.fail(Failure.mismatch("arrays are not equal", expected, self._value))
        return self

    def not_equal(self, expected: list[Any]) -> Array:
        if self.chain.failed:
            return self
        if deep_equal(expected, self._value):
            self.chain.fail("arrays are equal, but expected to differ", actual=self._value)
        return self

    def elements(self, *items: Any) -> Array:
        """Assert the array holds exactly ``items``, in order."""
        return self.equal(list(items))

    def contains(self, *items: Any) -> Array:
        """Assert every one of ``items`` is present, in any order."""
        if self.chain.failed:
            return self
        missing = [item for item in items if index_of(self._value, item) < 0]
        if missing:
            self.chain.fail(
                "array does not contain expected elements",
                expected=list(items),
                actual=self._value,
                details={"missing": missing},
            )
        return self

    def not_contains(self, *items: Any) -> Array:
        """Assert none of ``items`` is present."""
        if self.chain.failed:
            return self
        present = [item for item in items if index_of(self._value, item) >= 0]
        if present:
            self.chain.fail(
                "array contains unexpected elements",
                actual=self._value,
                details={"unexpected": present},
            )
        return self

    def contains_only(self, *items: Any) -> Array:
        """Assert the array holds ``items`` and nothing else, in any order."""
        if self.chain.failed:
            return self
        remaining = list(self._value)
        for item in items:
            i = index_of(remaining, item)
            if i < 0:
                break
            remaining.pop(i)
        else:
            if not remaining:
                return self
        self.chain.fail(
            "array does not contain only expected elements",
            expected=list(items),
            actual=self._value,
        )
        return self

    def __repr__(self) -> str:
        return f"Array({self._value!r})"
