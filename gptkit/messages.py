"""Assistant thread messages: requests, responses and URL paths."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import urlencode

MESSAGES_SUFFIX = "messages"


@dataclass
class MessageText:
    """The text of a message part."""

    value: str = ""
    annotations: list[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> MessageText:
        data = data or {}
        return cls(
            value=data.get("value") or "",
            annotations=list(data.get("annotations") or []),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.value, "annotations": list(self.annotations)}


@dataclass
class ImageFile:
    """A reference to an image file in a message."""

    file_id: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> ImageFile:
        data = data or {}
        return cls(file_id=data.get("file_id") or "")

    def to_dict(self) -> dict[str, Any]:
        return {"file_id": self.file_id}


@dataclass
class MessageContent:
    """One part of a message: text or an image file."""

    type: str = ""
    text: Optional[MessageText] = None
    image_file: Optional[ImageFile] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MessageContent:
        text = data.get("text")
        image_file = data.get("image_file")
        return cls(
            type=data.get("type") or "",
            text=MessageText.from_dict(text) if text is not None else None,
            image_file=ImageFile.from_dict(image_file) if image_file is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": self.type}
        if self.text is not None:
            out["text"] = self.text.to_dict()
        if self.image_file is not None:
            out["image_file"] = self.image_file.to_dict()
        return out


@dataclass
class Message:
    """A message in a thread."""

    id: str = ""
    object: str = ""
    created_at: int = 0
    thread_id: str = ""
    role: str = ""
    content: list[MessageContent] = field(default_factory=list)
    file_ids: list[str] = field(default_factory=list)
    assistant_id: Optional[str] = None
    run_id: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Message:
        metadata = data.get("metadata")
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created_at=data.get("created_at") or 0,
            thread_id=data.get("thread_id") or "",
            role=data.get("role") or "",
            content=[MessageContent.from_dict(c) for c in data.get("content") or []],
            file_ids=list(data.get("file_ids") or []),
            assistant_id=data.get("assistant_id"),
            run_id=data.get("run_id"),
            metadata=dict(metadata) if metadata is not None else None,
        )


@dataclass
class MessagesList:
    """A page of messages in a thread."""

    messages: list[Message] = field(default_factory=list)
    object: str = ""
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MessagesList:
        return cls(
            messages=[Message.from_dict(m) for m in data.get("data") or []],
            object=data.get("object") or "",
            first_id=data.get("first_id"),
            last_id=data.get("last_id"),
            has_more=bool(data.get("has_more")),
        )


@dataclass
class MessageRequest:
    """A request to add a message to a thread."""

    role: str = ""
    content: str = ""
    file_ids: list[str] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    attachments: list[Any] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body, leaving out empty optional fields."""
        out: dict[str, Any] = {"role": self.role, "content": self.content}
        if self.file_ids:
            out["file_ids"] = list(self.file_ids)
        if self.metadata:
            out["metadata"] = dict(self.metadata)
        if self.attachments:
            out["attachments"] = list(self.attachments)
        return out


@dataclass
class MessageFile:
    """A file attached to a message."""

    id: str = ""
    object: str = ""
    created_at: int = 0
    message_id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MessageFile:
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created_at=data.get("created_at") or 0,
            message_id=data.get("message_id") or "",
        )


@dataclass
class MessageFilesList:
    """Files attached to a message."""

    message_files: list[MessageFile] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MessageFilesList:
        return cls(
            message_files=[MessageFile.from_dict(f) for f in data.get("data") or []]
        )


@dataclass
class MessageDeletionStatus:
    """The result of deleting a message."""

    id: str = ""
    object: str = ""
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MessageDeletionStatus:
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            deleted=bool(data.get("deleted")),
        )


def messages_path(
    thread_id: str,
    limit: Optional[int] = None,
    order: Optional[str] = None,
    after: Optional[str] = None,
    before: Optional[str] = None,
    run_id: Optional[str] = None,
) -> str:
    """Return the URL path of a thread's messages, with optional paging."""
    params: list[tuple[str, str]] = []
    if limit is not None:
        params.append(("limit", str(limit)))
    if order is not None:
        params.append(("order", order))
    if after is not None:
        params.append(("after", after))
    if before is not None:
        params.append(("before", before))
    if run_id is not None:
        params.append(("run_id", run_id))
    query = f"?{urlencode(sorted(params))}" if params else ""
    return f"/threads/{thread_id}/{MESSAGES_SUFFIX}{query}"


def message_path(thread_id: str, message_id: str) -> str:
    """Return the URL path of one message."""
    return f"/threads/{thread_id}/{MESSAGES_SUFFIX}/{message_id}"


def message_file_path(thread_id: str, message_id: str, file_id: str = "") -> str:
    """Return the URL path of a message's files, or of one file if an id is given."""
    base = f"{message_path(thread_id, message_id)}/files"
    return f"{base}/{file_id}" if file_id else base