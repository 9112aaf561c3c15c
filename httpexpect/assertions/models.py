"""
Failure models.

This module defines the record built for every failing assertion,
and how it is rendered into the message handed to a reporter.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

MAX_VALUE_LENGTH = 100


class _Missing:
    """Marker for "no value given", distinct from a JSON null."""

    def __repr__(self) -> str:
        return "<missing>"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass
class Failure:
    """
    A single failed assertion.

    Attributes:
        message: Human-readable headline of what went wrong
        path: Where in the response the check was applied (JSONPath, header name)
        expected: What was expected, or MISSING
        actual: What was actually found, or MISSING
        details: Additional context for debugging
    """
    message: str
    path: str | None = None
    expected: Any = MISSING
    actual: Any = MISSING
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        lines = [self.message]

        if self.path:
            lines.append(f"   Path: {self.path}")

        if self.expected is not MISSING:
            lines.append(f"   Expected: {format_value(self.expected)}")

        if self.actual is not MISSING:
            lines.append(f"   Actual:   {format_value(self.actual)}")

        for key, value in self.details.items():
            lines.append(f"   {key}: {format_value(value)}")

        return "\n".join(lines)

    @classmethod
    def mismatch(
        cls,
        message: str,
        expected: Any,
        actual: Any,
        path: str | None = None,
    ) -> Failure:
        """Create a failure for an expected/actual comparison."""
        return cls(
            message=message,
            path=path,
            expected=expected,
            actual=actual,
            details=type_mismatch_hint(expected, actual),
        )


def format_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """Format a value for display, truncating if too long."""
    if value is None:
        return "null"

    if isinstance(value, str):
        formatted = repr(value)
    elif isinstance(value, (list, dict, bool)):
        try:
            formatted = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError):
            formatted = repr(value)
    else:
        formatted = repr(value)

    if len(formatted) > max_length:
        return formatted[: max_length - 3] + "..."

    return formatted


def type_mismatch_hint(expected: Any, actual: Any) -> dict[str, Any]:
    """Generate a hint if types don't match."""
    if expected is MISSING or actual is MISSING:
        return {}
    if _json_type(expected) != _json_type(actual):
        return {
            "hint": f"Type mismatch: expected {_json_type(expected)}, got {_json_type(actual)}"
        }
    return {}


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
