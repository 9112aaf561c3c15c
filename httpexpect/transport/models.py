"""
Raw HTTP response record.

This is what the transport hands over: the exchange has already
happened, the body may still be an unread stream.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import BinaryIO


@dataclass
class RawResponse:
    """
    An already-received HTTP response.

    Attributes:
        status_code: HTTP status code
        headers: Header name to the ordered list of its values
        body: Readable binary stream, or None when there is no body
    """
    status_code: int
    headers: dict[str, list[str]] = field(default_factory=dict)
    body: BinaryIO | None = None

    @classmethod
    def from_bytes(
        cls,
        status_code: int,
        headers: dict[str, str | list[str]] | None = None,
        body: bytes | str | None = None,
    ) -> RawResponse:
        """
        Build a response from in-memory data.

        Single header values are wrapped in a list; a str body is
        encoded as UTF-8.
        """
        multimap: dict[str, list[str]] = {}
        for name, value in (headers or {}).items():
            multimap[name] = [value] if isinstance(value, str) else list(value)

        if isinstance(body, str):
            body = body.encode("utf-8")
        stream = io.BytesIO(body) if body is not None else None

        return cls(status_code=status_code, headers=multimap, body=stream)
