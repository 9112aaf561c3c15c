"""Pytest fixtures for httpexpect tests."""

from __future__ import annotations

import io
from typing import Any

import pytest

from httpexpect.assertions import Chain
from httpexpect.reporting import RecordingReporter
from httpexpect.response import Response
from httpexpect.transport import RawResponse


class CountingStream(io.BytesIO):
    """In-memory body that counts how often it is read."""

    def __init__(self, data: bytes) -> None:
        super().__init__(data)
        self.reads = 0

    def read(self, *args: Any) -> bytes:
        self.reads += 1
        return super().read(*args)


class BrokenStream:
    """Body stream whose read always fails."""

    def __init__(self) -> None:
        self.closed = False

    def read(self, *args: Any) -> bytes:
        raise OSError("connection reset by peer")

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def chain(reporter: RecordingReporter) -> Chain:
    return Chain(reporter)


@pytest.fixture
def make_response(reporter: RecordingReporter):
    """Build a Response over in-memory data, reporting to ``reporter``."""

    def _make(
        status: int = 200,
        headers: dict[str, str | list[str]] | None = None,
        body: bytes | str | None = None,
    ) -> Response:
        return Response(reporter, RawResponse.from_bytes(status, headers, body))

    return _make


@pytest.fixture
def counting_stream() -> CountingStream:
    return CountingStream(b"body")


@pytest.fixture
def broken_stream() -> BrokenStream:
    return BrokenStream()
