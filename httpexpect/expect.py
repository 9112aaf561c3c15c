"""
Expect: builds Responses bound to one reporter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .reporting import AssertReporter, Reporter
from .response import Response
from .transport import RawResponse, capture_response

if TYPE_CHECKING:
    import aiohttp


class Expect:
    """
    Factory for Response assertion chains sharing a reporter.

    Defaults to AssertReporter, so a failing assertion raises
    AssertionError and fails the enclosing pytest test.

    Example:
        expect = Expect()

        async with session.get(f"{base_url}/users/1") as resp:
            r = await expect.capture(resp)

        r.status(200).content_type_json()
        r.json().object().value("id").number().equal(1)
    """

    def __init__(self, reporter: Reporter | None = None):
        self.reporter = reporter if reporter is not None else AssertReporter()

    def response(self, raw: RawResponse) -> Response:
        return Response(self.reporter, raw)

    async def capture(self, resp: aiohttp.ClientResponse) -> Response:
        """Read an aiohttp response and start a chain on it."""
        raw = await capture_response(resp)
        return self.response(raw)

    def __repr__(self) -> str:
        return f"Expect(reporter={self.reporter!r})"
