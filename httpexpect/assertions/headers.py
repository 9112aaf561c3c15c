"""
Wrapper over an HTTP header multimap.
"""

from __future__ import annotations

from .chain import Chain
from .models import Failure
from .scalars import String


def lookup_header(headers: dict[str, list[str]], name: str) -> list[str]:
    """
    All values of a header, matching the name case-insensitively.

    Values of keys that differ only in case are concatenated in
    mapping order. Returns an empty list when the header is absent.
    """
    wanted = name.lower()
    values: list[str] = []
    for key, key_values in headers.items():
        if key.lower() == wanted:
            values.extend(key_values)
    return values


class Headers:
    """
    Assertions on response headers.

    The map is compared exactly as received: keys keep their case, and
    the values of each key are compared positionally.

    Example:
        resp.headers().contains_key("etag").value("Cache-Control").equal("no-store")
    """

    def __init__(self, chain: Chain, values: dict[str, list[str]]):
        self.chain = chain
        self.values = values

    def raw(self) -> dict[str, list[str]]:
        return self.values

    def equal(self, expected: dict[str, list[str]]) -> Headers:
        if self.chain.failed:
            return self
        normalized = {key: list(vals) for key, vals in expected.items()}
        actual = {key: list(vals) for key, vals in self.values.items()}
        if normalized != actual:
            self.chain.fail(Failure.mismatch("headers are not equal", normalized, actual))
        return self

    def empty(self) -> Headers:
        if self.chain.failed:
            return self
        if self.values:
            self.chain.fail("expected no headers", actual=self.values)
        return self

    def not_empty(self) -> Headers:
        if self.chain.failed:
            return self
        if not self.values:
            self.chain.fail("expected at least one header", actual=self.values)
        return self

    def contains_key(self, name: str) -> Headers:
        if self.chain.failed:
            return self
        if not lookup_header(self.values, name):
            self.chain.fail(
                "header not found",
                path=name,
                expected=f"header {name!r}",
                actual=list(self.values.keys()),
            )
        return self

    def not_contains_key(self, name: str) -> Headers:
        if self.chain.failed:
            return self
        if lookup_header(self.values, name):
            self.chain.fail(
                "unexpected header present",
                path=name,
                actual=lookup_header(self.values, name),
            )
        return self

    def value(self, name: str) -> String:
        """First value of ``name``, or an empty String if the header is absent."""
        values = lookup_header(self.values, name)
        return String(self.chain.clone(), values[0] if values else "")

    def __repr__(self) -> str:
        return f"Headers({self.values!r})"
