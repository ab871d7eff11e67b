"""Writing multipart/form-data request bodies."""

from __future__ import annotations

import secrets
from typing import Any, BinaryIO

_CHUNK_SIZE = 64 * 1024
_MAX_BOUNDARY = 70


def _escape_quotes(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _path_base(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


class FormBuilder:
    """Writes form fields and files to a binary stream as multipart data."""

    def __init__(self, body: BinaryIO, boundary: str | None = None) -> None:
        if boundary is None:
            boundary = secrets.token_hex(30)
        if not 1 <= len(boundary) <= _MAX_BOUNDARY:
            raise ValueError("invalid boundary length")
        self._body = body
        self._boundary = boundary
        self._started = False

    @property
    def boundary(self) -> str:
        return self._boundary

    def _begin_part(self, headers: list[tuple[str, str]]) -> None:
        prefix = "\r\n" if self._started else ""
        lines = [f"{prefix}--{self._boundary}"]
        lines.extend(f"{name}: {value}" for name, value in headers)
        self._body.write(("\r\n".join(lines) + "\r\n\r\n").encode("utf-8"))
        self._started = True

    def create_form_file(self, fieldname: str, file: Any) -> None:
        """Add a file part named after the open file."""
        self._create_form_file(fieldname, file, str(getattr(file, "name", "")))

    def create_form_file_reader(self, fieldname: str, reader: Any, filename: str) -> None:
        """Add a file part from any readable object, named by the last path element."""
        self._create_form_file(fieldname, reader, _path_base(filename))

    def _create_form_file(self, fieldname: str, reader: Any, filename: str) -> None:
        if not filename:
            raise ValueError("filename cannot be empty")
        disposition = (
            f'form-data; name="{_escape_quotes(fieldname)}"; '
            f'filename="{_escape_quotes(filename)}"'
        )
        self._begin_part(
            [
                ("Content-Disposition", disposition),
                ("Content-Type", "application/octet-stream"),
            ]
        )
        while chunk := reader.read(_CHUNK_SIZE):
            if isinstance(chunk, str):
                chunk = chunk.encode("utf-8")
            self._body.write(chunk)

    def write_field(self, fieldname: str, value: str) -> None:
        """Add a plain text field."""
        disposition = f'form-data; name="{_escape_quotes(fieldname)}"'
        self._begin_part([("Content-Disposition", disposition)])
        self._body.write(value.encode("utf-8"))

    def close(self) -> None:
        """Write the closing boundary."""
        self._body.write(f"\r\n--{self._boundary}--\r\n".encode("utf-8"))

    def form_data_content_type(self) -> str:
        """Return the Content-Type header value for the body."""
        return f"multipart/form-data; boundary={self._boundary}"