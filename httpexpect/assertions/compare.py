"""
Type-aware deep equality for decoded JSON values.

Plain ``==`` treats ``True == 1`` and ``{"a": False} == {"a": 0}`` as
equal. JSON booleans and numbers are distinct types, so comparisons
here keep them apart while still letting ``1 == 1.0``.
"""

from __future__ import annotations

from typing import Any


def deep_equal(expected: Any, actual: Any) -> bool:
    """Return True if two JSON-like values are structurally equal."""
    if isinstance(expected, bool) or isinstance(actual, bool):
        return (
            isinstance(expected, bool)
            and isinstance(actual, bool)
            and expected == actual
        )

    if _is_number(expected) or _is_number(actual):
        return _is_number(expected) and _is_number(actual) and expected == actual

    if isinstance(expected, dict) or isinstance(actual, dict):
        if not (isinstance(expected, dict) and isinstance(actual, dict)):
            return False
        if expected.keys() != actual.keys():
            return False
        return all(deep_equal(expected[k], actual[k]) for k in expected)

    if isinstance(expected, (list, tuple)) or isinstance(actual, (list, tuple)):
        if not (isinstance(expected, (list, tuple)) and isinstance(actual, (list, tuple))):
            return False
        if len(expected) != len(actual):
            return False
        return all(deep_equal(e, a) for e, a in zip(expected, actual))

    return expected == actual


def contains_subset(superset: Any, subset: Any) -> bool:
    """
    Check that ``subset`` is recursively contained in ``superset``.

    Objects match if every key of the subset is present with a matching
    value; arrays match if they have the same length and every element
    matches positionally; scalars must be deep-equal.
    """
    if isinstance(subset, dict):
        if not isinstance(superset, dict):
            return False
        return all(
            key in superset and contains_subset(superset[key], value)
            for key, value in subset.items()
        )

    if isinstance(subset, (list, tuple)):
        if not isinstance(superset, (list, tuple)) or len(superset) != len(subset):
            return False
        return all(contains_subset(sup, sub) for sup, sub in zip(superset, subset))

    return deep_equal(subset, superset)


def index_of(items: list[Any], item: Any) -> int:
    """Position of the first element deep-equal to ``item``, or -1."""
    for i, candidate in enumerate(items):
        if deep_equal(item, candidate):
            return i
    return -1


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
