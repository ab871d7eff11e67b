"""Errors reported by the API and by failed HTTP requests."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class InnerError:
    """Content-filtering details attached to some Azure errors."""

    code: str = ""
    content_filter_results: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> InnerError:
        """Build an inner error from decoded JSON, rejecting malformed input."""
        if not isinstance(data, dict):
            raise ValueError(
                f"innererror must be an object, not {type(data).__name__}"
            )
        code = data.get("code")
        if code is None:
            code = ""
        elif not isinstance(code, str):
            raise ValueError("innererror code must be a string")
        results = data.get("content_filter_result")
        if results is None:
            results = {}
        elif not isinstance(results, dict):
            raise ValueError("content_filter_result must be an object")
        return cls(code=code, content_filter_results=dict(results))


def _decode_message(raw: Any) -> str:
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, list) and all(item is None or isinstance(item, str) for item in raw):
        return ", ".join(item or "" for item in raw)
    raise ValueError("error message must be a string or a list of strings")


def _decode_code(raw: Any) -> Any:
    # A null code decodes to 0, as an integer target left untouched would.
    if raw is None:
        return 0
    return raw


class APIError(Exception):
    """An error object returned by the API."""

    def __init__(
        self,
        message: str = "",
        *,
        code: Any = None,
        param: str | None = None,
        type: str = "",
        http_status: str = "",
        http_status_code: int = 0,
        inner_error: InnerError | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.param = param
        self.type = type
        self.http_status = http_status
        self.http_status_code = http_status_code
        self.inner_error = inner_error

    def __str__(self) -> str:
        if self.http_status_code > 0:
            return (
                f"error, status code: {self.http_status_code}, "
                f"status: {self.http_status}, message: {self.message}"
            )
        return self.message

    @classmethod
    def from_json(cls, data: str | bytes) -> APIError:
        """Parse an error object from its JSON text."""
        return cls.from_dict(json.loads(data))

    @classmethod
    def from_dict(cls, data: Any) -> APIError:
        """Build an error from a decoded JSON object."""
        if not isinstance(data, dict):
            raise ValueError("error payload must be a JSON object")
        if "message" not in data:
            raise ValueError("error payload has no message")
        message = _decode_message(data["message"])

        error_type = ""
        if "type" in data:
            raw_type = data["type"]
            if raw_type is not None and not isinstance(raw_type, str):
                raise ValueError("error type must be a string")
            error_type = raw_type or ""

        inner_error = None
        if "innererror" in data and data["innererror"] is not None:
            inner_error = InnerError.from_dict(data["innererror"])

        param = None
        if "param" in data:
            param = data["param"]
            if param is not None and not isinstance(param, str):
                raise ValueError("error param must be a string")

        code = _decode_code(data["code"]) if "code" in data else None

        return cls(
            message,
            code=code,
            param=param,
            type=error_type,
            inner_error=inner_error,
        )


class RequestError(Exception):
    """A generic failure of an HTTP request."""

    def __init__(
        self,
        *,
        http_status: str = "",
        http_status_code: int = 0,
        err: BaseException | None = None,
        body: bytes = b"",
    ) -> None:
        super().__init__(err)
        self.http_status = http_status
        self.http_status_code = http_status_code
        self.err = err
        self.body = body
        self.__cause__ = err

    def __str__(self) -> str:
        body = self.body.decode("utf-8", "replace")
        return (
            f"error, status code: {self.http_status_code}, status: {self.http_status}, "
            f"message: {self.err}, body: {body}"
        )

    def unwrap(self) -> BaseException | None:
        """Return the underlying error."""
        return self.err