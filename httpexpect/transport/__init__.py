"""
Transport Boundary

This package defines the raw response record the assertion core works
on, and an adapter that turns an aiohttp response into one. Issuing
requests is left to the caller.

Usage:
    from httpexpect.transport import RawResponse, capture_response

    # From in-memory data (tests, recorded responses)
    raw = RawResponse.from_bytes(200, {"Content-Type": "application/json"}, b"{}")

    # From aiohttp
    async with session.get(url) as resp:
        raw = await capture_response(resp)
"""

from .capture import capture_response
from .models import RawResponse

__all__ = [
    "RawResponse",
    "capture_response",
]
