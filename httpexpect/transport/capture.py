"""
Adapter from aiohttp responses to RawResponse.

The request itself is issued by the caller; this only drains the
response it got back.
"""

from __future__ import annotations

import io
import logging

import aiohttp

from .models import RawResponse

logger = logging.getLogger(__name__)


async def capture_response(resp: aiohttp.ClientResponse) -> RawResponse:
    """
    Read an aiohttp response into a RawResponse.

    Repeated headers keep every value, in the order received. The body
    is read in full and the response released.

    Example:
        async with aiohttp.ClientSession() as session:
            async with session.get(url) as resp:
                raw = await capture_response(resp)
    """
    headers: dict[str, list[str]] = {}
    for name, value in resp.headers.items():
        headers.setdefault(name, []).append(value)

    try:
        body = await resp.read()
    finally:
        resp.release()

    logger.debug(f"Captured HTTP {resp.status} with {len(body)} body bytes")

    return RawResponse(
        status_code=resp.status,
        headers=headers,
        body=io.BytesIO(body),
    )
