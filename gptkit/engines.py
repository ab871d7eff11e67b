"""Engine metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ENGINES_SUFFIX = "/engines"


@dataclass
class Engine:
    """An engine and its availability."""

    id: str = ""
    object: str = ""
    owner: str = ""
    ready: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Engine:
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            owner=data.get("owner") or "",
            ready=bool(data.get("ready")),
        )


@dataclass
class EnginesList:
    """The available engines."""

    engines: list[Engine] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EnginesList:
        return cls(engines=[Engine.from_dict(e) for e in data.get("data") or []])


def engine_path(engine_id: str) -> str:
    """Return the URL path of one engine."""
    return f"{ENGINES_SUFFIX}/{engine_id}"