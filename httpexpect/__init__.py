"""
httpexpect - Fluent Assertions for HTTP Responses

This package provides chained, typed assertions over already-received
HTTP responses. Failures are reported through a pluggable reporter;
once part of a chain has failed, everything derived from it is skipped.

Subpackages:
    - assertions: Chain and value wrappers (headers, strings, JSON values)
    - reporting: Failure reporters
    - transport: Raw response record and aiohttp adapter

Usage:
    from httpexpect import Expect, RawResponse

    expect = Expect()  # AssertReporter: failures raise AssertionError
    resp = expect.response(RawResponse.from_bytes(
        200,
        {"Content-Type": "application/json; charset=utf-8"},
        b'{"key": "value"}',
    ))

    resp.status(200).content_type_json()
    resp.json().object().value("key").string().equal("value")
"""

__version__ = "0.1.0"

# Re-export assertions for convenience
from .assertions import (
    # Chain and failures
    Chain,
    Failure,
    # Wrappers
    Array,
    Boolean,
    Headers,
    Number,
    Object,
    String,
    Value,
    ValueKind,
)

# Re-export reporting for convenience
from .reporting import (
    # Reporters
    AssertReporter,
    LoggingReporter,
    RecordingReporter,
    Reporter,
)

# Re-export transport for convenience
from .transport import RawResponse, capture_response

# Entry points
from .expect import Expect
from .response import Response, new_response, parse_content_type

__all__ = [
    # Package info
    "__version__",
    # Assertions
    "Chain",
    "Failure",
    "Array",
    "Boolean",
    "Headers",
    "Number",
    "Object",
    "String",
    "Value",
    "ValueKind",
    # Reporting
    "AssertReporter",
    "LoggingReporter",
    "RecordingReporter",
    "Reporter",
    # Transport
    "RawResponse",
    "capture_response",
    # Entry points
    "Expect",
    "Response",
    "new_response",
    "parse_content_type",
]
