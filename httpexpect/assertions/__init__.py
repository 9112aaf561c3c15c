"""
Assertion Chain and Value Wrappers

This package provides the chained assertions applied to response data.
Every wrapper carries a Chain: once it has failed, further assertions on
that wrapper and anything derived from it are skipped.

Wrappers:
    - Headers: header multimap
    - String: body text, header values, JSON strings
    - Value: any decoded JSON value, narrowed with object()/array()/...
    - Object, Array, Number, Boolean: typed JSON views

Usage:
    from httpexpect.assertions import Chain, Value
    from httpexpect.reporting import RecordingReporter

    reporter = RecordingReporter()
    value = Value(Chain(reporter), {"results": [{"id": 1}, {"id": 2}]})

    value.object().value("results").array().length().equal(2)
    value.path("$.results[0].id").number().equal(1)

    if reporter.failed:
        print(reporter.messages)
"""

# Chain and failure records
from .chain import Chain
from .models import MISSING, Failure, format_value

# Comparison
from .compare import contains_subset, deep_equal

# Wrappers
from .containers import Array, Object
from .headers import Headers, lookup_header
from .scalars import Boolean, Number, String
from .value import Value, ValueKind

__all__ = [
    # Chain and failure records
    "Chain",
    "Failure",
    "MISSING",
    "format_value",
    # Comparison
    "contains_subset",
    "deep_equal",
    # Wrappers
    "Array",
    "Boolean",
    "Headers",
    "Number",
    "Object",
    "String",
    "Value",
    "ValueKind",
    "lookup_header",
]
