"""Embedding requests and responses, including base64-encoded vectors."""

from __future__ import annotations

import base64
import struct
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from gptkit.completion import Usage

_FLOAT32_SIZE = 4


class VectorLengthMismatchError(ValueError):
    """Raised when two vectors of different lengths are combined."""

    def __init__(self, message: str = "vector length mismatch") -> None:
        super().__init__(message)


class EmbeddingModel(str, Enum):
    """Models that produce embeddings."""

    ADA_SIMILARITY = "text-similarity-ada-001"
    BABBAGE_SIMILARITY = "text-similarity-babbage-001"
    CURIE_SIMILARITY = "text-similarity-curie-001"
    DAVINCI_SIMILARITY = "text-similarity-davinci-001"
    ADA_SEARCH_DOCUMENT = "text-search-ada-doc-001"
    ADA_SEARCH_QUERY = "text-search-ada-query-001"
    BABBAGE_SEARCH_DOCUMENT = "text-search-babbage-doc-001"
    BABBAGE_SEARCH_QUERY = "text-search-babbage-query-001"
    CURIE_SEARCH_DOCUMENT = "text-search-curie-doc-001"
    CURIE_SEARCH_QUERY = "text-search-curie-query-001"
    DAVINCI_SEARCH_DOCUMENT = "text-search-davinci-doc-001"
    DAVINCI_SEARCH_QUERY = "text-search-davinci-query-001"
    ADA_CODE_SEARCH_CODE = "code-search-ada-code-001"
    ADA_CODE_SEARCH_TEXT = "code-search-ada-text-001"
    BABBAGE_CODE_SEARCH_CODE = "code-search-babbage-code-001"
    BABBAGE_CODE_SEARCH_TEXT = "code-search-babbage-text-001"
    ADA_EMBEDDING_V2 = "text-embedding-ada-002"
    SMALL_EMBEDDING_3 = "text-embedding-3-small"
    LARGE_EMBEDDING_3 = "text-embedding-3-large"


class EmbeddingEncodingFormat(str, Enum):
    """How embedding vectors are encoded in a response."""

    FLOAT = "float"
    BASE64 = "base64"


ModelName = Union[EmbeddingModel, str]


def _text(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return value or ""


def decode_base64_floats(encoded: str) -> list[float]:
    """Decode base64 text holding little-endian 32-bit floats; trailing bytes are ignored."""
    raw = base64.b64decode(encoded, validate=True)
    usable = len(raw) - len(raw) % _FLOAT32_SIZE
    return [value for (value,) in struct.iter_unpack("<f", raw[:usable])]


@dataclass
class Embedding:
    """A vector produced for one input."""

    object: str = ""
    embedding: list[float] = field(default_factory=list)
    index: int = 0

    def dot_product(self, other: Embedding) -> float:
        """Return the dot product with another vector of the same length."""
        if len(self.embedding) != len(other.embedding):
            raise VectorLengthMismatchError()
        return sum(a * b for a, b in zip(self.embedding, other.embedding))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Embedding:
        return cls(
            object=data.get("object") or "",
            embedding=[float(x) for x in data.get("embedding") or []],
            index=data.get("index") or 0,
        )


@dataclass
class EmbeddingResponse:
    """The response of a create-embeddings request."""

    object: str = ""
    data: list[Embedding] = field(default_factory=list)
    model: ModelName = ""
    usage: Usage = field(default_factory=Usage)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EmbeddingResponse:
        return cls(
            object=data.get("object") or "",
            data=[Embedding.from_dict(item) for item in data.get("data") or []],
            model=data.get("model") or "",
            usage=Usage.from_dict(data.get("usage")),
        )


@dataclass
class Base64Embedding:
    """A vector delivered as base64 text."""

    object: str = ""
    embedding: str = ""
    index: int = 0

    def decode(self) -> list[float]:
        """Decode the vector."""
        return decode_base64_floats(self.embedding)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Base64Embedding:
        return cls(
            object=data.get("object") or "",
            embedding=data.get("embedding") or "",
            index=data.get("index") or 0,
        )


@dataclass
class EmbeddingResponseBase64:
    """A create-embeddings response with base64-encoded vectors."""

    object: str = ""
    data: list[Base64Embedding] = field(default_factory=list)
    model: ModelName = ""
    usage: Usage = field(default_factory=Usage)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EmbeddingResponseBase64:
        return cls(
            object=data.get("object") or "",
            data=[Base64Embedding.from_dict(item) for item in data.get("data") or []],
            model=data.get("model") or "",
            usage=Usage.from_dict(data.get("usage")),
        )

    def to_embedding_response(self) -> EmbeddingResponse:
        """Decode every vector into a plain embedding response."""
        return EmbeddingResponse(
            object=self.object,
            model=self.model,
            data=[
                Embedding(object=item.object, embedding=item.decode(), index=item.index)
                for item in self.data
            ],
            usage=self.usage,
        )


@dataclass
class EmbeddingRequest:
    """A create-embeddings request with any kind of input."""

    input: Any = None
    model: ModelName = ""
    user: str = ""
    encoding_format: Optional[EmbeddingEncodingFormat] = None
    dimensions: int = 0

    def convert(self) -> EmbeddingRequest:
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body, leaving out unset optional fields."""
        out: dict[str, Any] = {"input": self.input, "model": _text(self.model)}
        if self.user:
            out["user"] = self.user
        if self.encoding_format:
            out["encoding_format"] = _text(self.encoding_format)
        if self.dimensions:
            out["dimensions"] = self.dimensions
        return out


@dataclass
class EmbeddingRequestStrings:
    """A create-embeddings request for a list of strings."""

    input: list[str] = field(default_factory=list)
    model: ModelName = ""
    user: str = ""
    encoding_format: Optional[EmbeddingEncodingFormat] = None
    dimensions: int = 0

    def convert(self) -> EmbeddingRequest:
        return EmbeddingRequest(
            input=self.input,
            model=self.model,
            user=self.user,
            encoding_format=self.encoding_format,
            dimensions=self.dimensions,
        )


@dataclass
class EmbeddingRequestTokens:
    """A create-embeddings request for lists of token ids."""

    input: list[list[int]] = field(default_factory=list)
    model: ModelName = ""
    user: str = ""
    encoding_format: Optional[EmbeddingEncodingFormat] = None
    dimensions: int = 0

    def convert(self) -> EmbeddingRequest:
        return EmbeddingRequest(
            input=self.input,
            model=self.model,
            user=self.user,
            encoding_format=self.encoding_format,
            dimensions=self.dimensions,
        )