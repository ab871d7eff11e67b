"""File upload requests and file metadata."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from gptkit.formdata import FormBuilder

FILES_SUFFIX = "/files"


class PurposeType(str, Enum):
    """What an uploaded file is for."""

    FINE_TUNE = "fine-tune"
    FINE_TUNE_RESULTS = "fine-tune-results"
    ASSISTANTS = "assistants"
    ASSISTANTS_OUTPUT = "assistants_output"
    BATCH = "batch"


def _text(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return value or ""


@dataclass
class FileRequest:
    """Upload of a local file."""

    file_name: str = ""
    file_path: str = ""
    purpose: Union[PurposeType, str] = ""

    def build_form(self) -> tuple[bytes, str]:
        """Return the multipart body and its content type.

        Raises FileNotFoundError (or another OSError) if the file cannot be opened.
        """
        body = io.BytesIO()
        builder = FormBuilder(body)
        builder.write_field("purpose", _text(self.purpose))
        with open(self.file_path, "rb") as handle:
            builder.create_form_file("file", handle)
        builder.close()
        return body.getvalue(), builder.form_data_content_type()


@dataclass
class FileBytesRequest:
    """Upload of bytes held in memory."""

    name: str = ""
    data: bytes = b""
    purpose: Union[PurposeType, str] = ""

    def build_form(self) -> tuple[bytes, str]:
        """Return the multipart body and its content type."""
        body = io.BytesIO()
        builder = FormBuilder(body)
        builder.write_field("purpose", _text(self.purpose))
        builder.create_form_file_reader("file", io.BytesIO(self.data), self.name)
        builder.close()
        return body.getvalue(), builder.form_data_content_type()


@dataclass
class File:
    """A stored file."""

    bytes: int = 0
    created_at: int = 0
    id: str = ""
    filename: str = ""
    object: str = ""
    status: str = ""
    purpose: str = ""
    status_details: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> File:
        return cls(
            bytes=data.get("bytes") or 0,
            created_at=data.get("created_at") or 0,
            id=data.get("id") or "",
            filename=data.get("filename") or "",
            object=data.get("object") or "",
            status=data.get("status") or "",
            purpose=data.get("purpose") or "",
            status_details=data.get("status_details") or "",
        )


@dataclass
class FilesList:
    """Files that belong to the user or organisation."""

    files: list[File] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FilesList:
        return cls(files=[File.from_dict(item) for item in data.get("data") or []])