"""JSON encoding, request building and error-body accumulation."""

from __future__ import annotations

import dataclasses
import io
import json
from dataclasses import dataclass, field
from typing import Any, Optional

_TOKEN_CHARS = frozenset(
    "!#$%&'*+-.^_`|~0123456789"
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def _json_default(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"object of type {type(value).__name__} is not JSON serializable")


class JSONMarshaller:
    """Encodes values as compact UTF-8 JSON."""

    def marshal(self, value: Any) -> bytes:
        return json.dumps(
            value, default=_json_default, separators=(",", ":"), ensure_ascii=False
        ).encode("utf-8")


class JSONUnmarshaller:
    """Decodes JSON text."""

    def unmarshal(self, data: str | bytes) -> Any:
        return json.loads(data)


@dataclass
class HTTPRequest:
    """A request ready to be sent."""

    method: str
    url: str
    body: Optional[bytes] = None
    headers: dict[str, str] = field(default_factory=dict)


class RequestBuilder:
    """Builds HTTP requests, encoding bodies with a marshaller."""

    def __init__(self, marshaller: Any = None) -> None:
        self.marshaller = marshaller if marshaller is not None else JSONMarshaller()

    def build(
        self,
        method: str,
        url: str,
        body: Any,
        headers: Optional[dict[str, str]],
    ) -> HTTPRequest:
        """Create a request; raw bytes and readable objects are sent as they are."""
        if body is None:
            payload = None
        elif isinstance(body, (bytes, bytearray, memoryview)):
            payload = bytes(body)
        elif callable(getattr(body, "read", None)):
            payload = body.read()
            if isinstance(payload, str):
                payload = payload.encode("utf-8")
        else:
            payload = self.marshaller.marshal(body)

        method = method or "GET"
        if not set(method) <= _TOKEN_CHARS:
            raise ValueError(f"invalid method {method!r}")
        return HTTPRequest(method, url, payload, dict(headers) if headers else {})


class ErrorAccumulator:
    """Collects the raw bytes of an error response."""

    def __init__(self, buffer: Any = None) -> None:
        self.buffer = buffer if buffer is not None else io.BytesIO()

    def write(self, data: bytes) -> None:
        try:
            self.buffer.write(data)
        except OSError as exc:
            raise OSError(f"error accumulator write error, {exc}") from exc

    def bytes(self) -> bytes:
        """Return what was written, or empty bytes if nothing was."""
        return bytes(self.buffer.getvalue())