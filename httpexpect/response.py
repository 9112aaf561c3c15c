"""
Response: the entry point of an assertion chain.

A Response wraps one received HTTP response and a Chain. Accessors
build a fresh wrapper on every call, each with a clone of the
response's chain taken at that moment. The body stream is read once,
on first use, and the text is cached.
"""

from __future__ import annotations

import json
import logging
import math
from http import HTTPStatus
from typing import Any

from .assertions import Chain, Failure, Headers, String, Value, lookup_header
from .reporting import Reporter
from .transport import RawResponse

logger = logging.getLogger(__name__)

CONTENT_TYPE = "Content-Type"
JSON_MEDIA_TYPE = "application/json"
JSON_CHARSET = "utf-8"


class Response:
    """
    Assertions on an HTTP response.

    Example:
        resp = Response(AssertReporter(), raw)
        resp.status(200).content_type_json()
        resp.header("Cache-Control").equal("no-store")
        resp.json().object().value("id").number().equal(42)
    """

    def __init__(
        self,
        reporter: Reporter,
        raw: RawResponse,
        *,
        chain: Chain | None = None,
    ):
        """
        Args:
            reporter: Receives a message for every failing assertion
            raw: The received response
            chain: Existing chain to continue; a fresh one is created if omitted
        """
        self.chain = chain if chain is not None else Chain(reporter)
        self._raw = raw
        self._body: str | None = None

    def raw(self) -> RawResponse:
        return self._raw

    def status(self, expected: int) -> Response:
        if self.chain.failed:
            return self
        actual = self._raw.status_code
        if actual != expected:
            self.chain.fail(
                Failure(
                    message="unexpected status code",
                    expected=_describe_status(expected),
                    actual=_describe_status(actual),
                )
            )
        return self

    def headers(self) -> Headers:
        return Headers(self.chain.clone(), self._raw.headers)

    def header(self, name: str) -> String:
        """
        First value of a header, matched case-insensitively.

        An absent header yields an empty String; that alone is not a failure.
        """
        values = lookup_header(self._raw.headers, name)
        return String(self.chain.clone(), values[0] if values else "")

    def body(self) -> String:
        text = self._get_body()
        return String(self.chain.clone(), text)

    def no_content(self) -> Response:
        """Assert an empty body and an absent or empty Content-Type."""
        if self.chain.failed:
            return self

        content_type = self._content_type()
        body = self._get_body()
        if self.chain.failed:
            return self

        problems: dict[str, Any] = {}
        if content_type:
            problems["Content-Type"] = content_type
        if body:
            problems["body"] = body

        if problems:
            self.chain.fail(
                f"expected no content, but {' and '.join(problems)} not empty",
                expected="empty body and no Content-Type",
                details=problems,
            )
        return self

    def content_type_json(self) -> Response:
        """Assert Content-Type is application/json, with utf-8 charset if any."""
        if self.chain.failed:
            return self
        self._check_json_content_type()
        return self

    def json(self) -> Value:
        """
        Decode the body as JSON.

        Requires a JSON Content-Type and a decodable body. If either is
        missing the response chain fails and the returned Value is
        invalid, with raw() giving None.
        """
        if self.chain.failed:
            return Value.invalid(self.chain.clone())

        if not self._check_json_content_type():
            return Value.invalid(self.chain.clone())

        body = self._get_body()
        if self.chain.failed:
            return Value.invalid(self.chain.clone())

        try:
            data = json.loads(
                body,
                parse_int=_parse_int,
                parse_float=_parse_float,
                parse_constant=_reject_constant,
            )
        except ValueError as e:
            self.chain.fail(
                "failed to decode body as JSON",
                actual=body,
                details={"error": str(e)},
            )
            return Value.invalid(self.chain.clone())

        logger.debug(f"Decoded JSON body of {len(body)} characters")
        return Value(self.chain.clone(), data)

    def _content_type(self) -> str:
        values = lookup_header(self._raw.headers, CONTENT_TYPE)
        return values[0] if values else ""

    def _check_json_content_type(self) -> bool:
        content_type = self._content_type()
        if not content_type:
            self.chain.fail(
                "missing Content-Type header",
                expected=JSON_MEDIA_TYPE,
                actual=content_type,
            )
            return False

        try:
            media_type, params = parse_content_type(content_type)
        except ValueError as e:
            self.chain.fail(
                "malformed Content-Type header",
                actual=content_type,
                details={"error": str(e)},
            )
            return False

        logger.debug(f"Content-Type media type {media_type!r}, params {params!r}")

        if media_type != JSON_MEDIA_TYPE:
            self.chain.fail(
                "unexpected Content-Type media type",
                expected=JSON_MEDIA_TYPE,
                actual=content_type,
            )
            return False

        charset = params.get("charset")
        if charset is not None and charset.lower() != JSON_CHARSET:
            self.chain.fail(
                "unexpected Content-Type charset",
                expected=JSON_CHARSET,
                actual=charset,
            )
            return False

        return True

    def _get_body(self) -> str:
        if self._body is None:
            self._body = self._read_body()
        return self._body

    def _read_body(self) -> str:
        stream = self._raw.body
        if stream is None:
            return ""

        try:
            data = stream.read()
        except Exception as e:
            self.chain.fail(f"failed to read body: {type(e).__name__}: {e}")
            return ""
        finally:
            stream.close()

        logger.debug(f"Read {len(data)} body bytes")

        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            self.chain.fail(f"failed to decode body as UTF-8: {e}")
            return ""

    def __repr__(self) -> str:
        status = "failed" if self.chain.failed else "ok"
        return f"Response(status_code={self._raw.status_code}, chain={status})"


def new_response(reporter: Reporter, raw: RawResponse) -> Response:
    return Response(reporter, raw)


def parse_content_type(value: str) -> tuple[str, dict[str, str]]:
    """
    Split a Content-Type value into media type and parameters.

    The media type is returned as written (trimmed, case kept).
    Parameter names are lower-cased and quoted values unquoted.

    Raises:
        ValueError: If a parameter is not of the form name=value
    """
    # Parameters other than charset are returned but never checked.
    media_type, *raw_params = value.split(";")
    params: dict[str, str] = {}

    for raw_param in raw_params:
        raw_param = raw_param.strip()
        if not raw_param:
            continue
        name, sep, param_value = raw_param.partition("=")
        name = name.strip().lower()
        if not sep or not name:
            raise ValueError(f"invalid media type parameter {raw_param!r}")
        param_value = param_value.strip()
        if len(param_value) >= 2 and param_value[0] == param_value[-1] == '"':
            param_value = param_value[1:-1]
        params[name] = param_value

    return media_type.strip(), params


def _describe_status(code: int) -> str:
    try:
        return f"{code} {HTTPStatus(code).phrase}"
    except ValueError:
        return str(code)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name!r}")


def _parse_int(text: str) -> int:
    value = int(text)
    try:
        float(value)
    except OverflowError:
        raise ValueError(f"number {text[:20]}... out of float range") from None
    return value


def _parse_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number {text!r} out of float range")
    return value
