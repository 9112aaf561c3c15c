"""
Reporting for Assertion Failures

This package provides the Reporter capability every assertion chain
reports failures to.

Reporters:
    - AssertReporter: raise AssertionError (stop the test)
    - RecordingReporter: keep the messages and continue
    - LoggingReporter: log at ERROR, keep the messages and continue

Usage:
    from httpexpect import Response
    from httpexpect.reporting import RecordingReporter

    reporter = RecordingReporter()
    resp = Response(reporter, raw_response)
    resp.status(200).content_type_json()

    for message in reporter.messages:
        print(message)
"""

from .reporter import (
    AssertReporter,
    LoggingReporter,
    RecordingReporter,
    Reporter,
)

__all__ = [
    "AssertReporter",
    "LoggingReporter",
    "RecordingReporter",
    "Reporter",
]
