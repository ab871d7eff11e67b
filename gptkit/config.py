"""Client configuration."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

OPENAI_API_URL_V1 = "https://api.openai.com/v1"
DEFAULT_EMPTY_MESSAGES_LIMIT = 300
AZURE_API_PREFIX = "openai"
AZURE_DEPLOYMENTS_PREFIX = "deployments"
AZURE_AUTH_HEADER = "api-key"
DEFAULT_ASSISTANT_VERSION = "v2"
DEFAULT_AZURE_API_VERSION = "2023-05-15"

_AZURE_STRIP = re.compile(r"[.:]")


class APIType(str, Enum):
    """Kind of service the client talks to."""

    OPEN_AI = "OPEN_AI"
    AZURE = "AZURE"
    AZURE_AD = "AZURE_AD"
    CLOUDFLARE_AZURE = "CLOUDFLARE_AZURE"


@dataclass(repr=False)
class ClientConfig:
    """Settings a client is built from."""

    auth_token: str = field(default_factory=str)
    base_url: str = OPENAI_API_URL_V1
    org_id: str = ""
    api_type: APIType = APIType.OPEN_AI
    api_version: str = ""
    assistant_version: str = ""
    azure_model_mapper: Optional[Callable[[str], str]] = None
    empty_messages_limit: int = DEFAULT_EMPTY_MESSAGES_LIMIT

    def __str__(self) -> str:
        return "<OpenAI API ClientConfig>"

    __repr__ = __str__

    def azure_deployment_by_model(self, model: str) -> str:
        """Return the Azure deployment name used for a model."""
        if self.azure_model_mapper is not None:
            return self.azure_model_mapper(model)
        return model


def _strip_azure_model(model: str) -> str:
    return _AZURE_STRIP.sub("", model)


def default_config(auth_token: str) -> ClientConfig:
    """Configuration for the public API."""
    return ClientConfig(
        auth_token=auth_token,
        base_url=OPENAI_API_URL_V1,
        api_type=APIType.OPEN_AI,
        assistant_version=DEFAULT_ASSISTANT_VERSION,
        org_id="",
        empty_messages_limit=DEFAULT_EMPTY_MESSAGES_LIMIT,
    )


def default_azure_config(api_key: str, base_url: str) -> ClientConfig:
    """Configuration for an Azure-hosted endpoint."""
    return ClientConfig(
        auth_token=api_key,
        base_url=base_url,
        org_id="",
        api_type=APIType.AZURE,
        api_version=DEFAULT_AZURE_API_VERSION,
        azure_model_mapper=_strip_azure_model,
        empty_messages_limit=DEFAULT_EMPTY_MESSAGES_LIMIT,
    )