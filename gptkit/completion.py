"""Text completion requests, responses and the checks applied before sending them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

COMPLETIONS_SUFFIX = "/completions"
CHAT_COMPLETIONS_SUFFIX = "/chat/completions"

ERR_COMPLETION_UNSUPPORTED_MODEL = (
    "this model is not supported with this method, "
    "please use CreateChatCompletion client method instead"
)
ERR_COMPLETION_STREAM_NOT_SUPPORTED = (
    "streaming is not supported with this method, please use CreateCompletionStream"
)
ERR_COMPLETION_PROMPT_TYPE_NOT_SUPPORTED = (
    "the type of CompletionRequest.Prompt only supports string and []string"
)

O1_MINI = "o1-mini"
O1_MINI_20240912 = "o1-mini-2024-09-12"
O1_PREVIEW = "o1-preview"
O1_PREVIEW_20240912 = "o1-preview-2024-09-12"
GPT4_32K_0613 = "gpt-4-32k-0613"
GPT4_32K_0314 = "gpt-4-32k-0314"
GPT4_32K = "gpt-4-32k"
GPT4_0613 = "gpt-4-0613"
GPT4_0314 = "gpt-4-0314"
GPT4O = "gpt-4o"
GPT4O_20240513 = "gpt-4o-2024-05-13"
GPT4O_20240806 = "gpt-4o-2024-08-06"
GPT4O_20241120 = "gpt-4o-2024-11-20"
GPT4O_LATEST = "chatgpt-4o-latest"
GPT4O_MINI = "gpt-4o-mini"
GPT4O_MINI_20240718 = "gpt-4o-mini-2024-07-18"
GPT4_TURBO = "gpt-4-turbo"
GPT4_TURBO_20240409 = "gpt-4-turbo-2024-04-09"
GPT4_TURBO_0125 = "gpt-4-0125-preview"
GPT4_TURBO_1106 = "gpt-4-1106-preview"
GPT4_TURBO_PREVIEW = "gpt-4-turbo-preview"
GPT4_VISION_PREVIEW = "gpt-4-vision-preview"
GPT4 = "gpt-4"
GPT3DOT5_TURBO_0125 = "gpt-3.5-turbo-0125"
GPT3DOT5_TURBO_1106 = "gpt-3.5-turbo-1106"
GPT3DOT5_TURBO_0613 = "gpt-3.5-turbo-0613"
GPT3DOT5_TURBO_0301 = "gpt-3.5-turbo-0301"
GPT3DOT5_TURBO_16K = "gpt-3.5-turbo-16k"
GPT3DOT5_TURBO_16K_0613 = "gpt-3.5-turbo-16k-0613"
GPT3DOT5_TURBO = "gpt-3.5-turbo"
GPT3DOT5_TURBO_INSTRUCT = "gpt-3.5-turbo-instruct"
GPT3_TEXT_DAVINCI_003 = "text-davinci-003"
GPT3_TEXT_DAVINCI_002 = "text-davinci-002"
GPT3_TEXT_CURIE_001 = "text-curie-001"
GPT3_TEXT_BABBAGE_001 = "text-babbage-001"
GPT3_TEXT_ADA_001 = "text-ada-001"
GPT3_TEXT_DAVINCI_001 = "text-davinci-001"
GPT3_DAVINCI_INSTRUCT_BETA = "davinci-instruct-beta"
GPT3_DAVINCI = "davinci"
GPT3_DAVINCI_002 = "davinci-002"
GPT3_CURIE_INSTRUCT_BETA = "curie-instruct-beta"
GPT3_CURIE = "curie"
GPT3_CURIE_002 = "curie-002"
GPT3_ADA = "ada"
GPT3_ADA_002 = "ada-002"
GPT3_BABBAGE = "babbage"
GPT3_BABBAGE_002 = "babbage-002"

CODEX_CODE_DAVINCI_002 = "code-davinci-002"
CODEX_CODE_CUSHMAN_001 = "code-cushman-001"
CODEX_CODE_DAVINCI_001 = "code-davinci-001"

O1_SERIES_MODELS = frozenset(
    {O1_MINI, O1_MINI_20240912, O1_PREVIEW, O1_PREVIEW_20240912}
)

_DISABLED_MODELS_FOR_ENDPOINTS: dict[str, frozenset[str]] = {
    COMPLETIONS_SUFFIX: frozenset(
        {
            O1_MINI,
            O1_MINI_20240912,
            O1_PREVIEW,
            O1_PREVIEW_20240912,
            GPT3DOT5_TURBO,
            GPT3DOT5_TURBO_0301,
            GPT3DOT5_TURBO_0613,
            GPT3DOT5_TURBO_1106,
            GPT3DOT5_TURBO_0125,
            GPT3DOT5_TURBO_16K,
            GPT3DOT5_TURBO_16K_0613,
            GPT4,
            GPT4O,
            GPT4O_20240513,
            GPT4O_20240806,
            GPT4O_20241120,
            GPT4O_LATEST,
            GPT4O_MINI,
            GPT4O_MINI_20240718,
            GPT4_TURBO_PREVIEW,
            GPT4_VISION_PREVIEW,
            GPT4_TURBO_1106,
            GPT4_TURBO_0125,
            GPT4_TURBO,
            GPT4_TURBO_20240409,
            GPT4_0314,
            GPT4_0613,
            GPT4_32K,
            GPT4_32K_0314,
            GPT4_32K_0613,
        }
    ),
    CHAT_COMPLETIONS_SUFFIX: frozenset(
        {
            CODEX_CODE_DAVINCI_002,
            CODEX_CODE_CUSHMAN_001,
            CODEX_CODE_DAVINCI_001,
            GPT3_TEXT_DAVINCI_003,
            GPT3_TEXT_DAVINCI_002,
            GPT3_TEXT_CURIE_001,
            GPT3_TEXT_BABBAGE_001,
            GPT3_TEXT_ADA_001,
            GPT3_TEXT_DAVINCI_001,
            GPT3_DAVINCI_INSTRUCT_BETA,
            GPT3_DAVINCI,
            GPT3_CURIE_INSTRUCT_BETA,
            GPT3_CURIE,
            GPT3_ADA,
            GPT3_BABBAGE,
        }
    ),
}


class CompletionError(ValueError):
    """Raised when a completion request cannot be sent as it is."""


def check_endpoint_supports_model(endpoint: str, model: str) -> bool:
    """Report whether a model may be used with an endpoint."""
    return model not in _DISABLED_MODELS_FOR_ENDPOINTS.get(endpoint, frozenset())


def check_prompt_type(prompt: Any) -> bool:
    """Report whether a prompt is a string or a list of strings."""
    if isinstance(prompt, str):
        return True
    if isinstance(prompt, (list, tuple)):
        return all(isinstance(item, str) for item in prompt)
    return False


@dataclass
class Usage:
    """Token counts for a request."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> Usage:
        data = data or {}
        return cls(
            prompt_tokens=data.get("prompt_tokens") or 0,
            completion_tokens=data.get("completion_tokens") or 0,
            total_tokens=data.get("total_tokens") or 0,
        )


@dataclass
class CompletionRequest:
    """A request to the completions endpoint."""

    model: str = ""
    prompt: Any = None
    best_of: int = 0
    echo: bool = False
    frequency_penalty: float = 0.0
    logit_bias: dict[str, int] = field(default_factory=dict)
    store: bool = False
    metadata: dict[str, str] = field(default_factory=dict)
    logprobs: int = 0
    max_tokens: int = 0
    n: int = 0
    presence_penalty: float = 0.0
    seed: Optional[int] = None
    stop: list[str] = field(default_factory=list)
    stream: bool = False
    suffix: str = ""
    temperature: float = 0.0
    top_p: float = 0.0
    user: str = ""

    def validate(self) -> None:
        """Raise CompletionError if the request cannot go to the completions endpoint."""
        if self.stream:
            raise CompletionError(ERR_COMPLETION_STREAM_NOT_SUPPORTED)
        if not check_endpoint_supports_model(COMPLETIONS_SUFFIX, self.model):
            raise CompletionError(ERR_COMPLETION_UNSUPPORTED_MODEL)
        if not check_prompt_type(self.prompt):
            raise CompletionError(ERR_COMPLETION_PROMPT_TYPE_NOT_SUPPORTED)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body, leaving out unset fields."""
        out: dict[str, Any] = {"model": self.model}
        if self.prompt is not None:
            out["prompt"] = list(self.prompt) if isinstance(self.prompt, tuple) else self.prompt
        optional: list[tuple[str, Any]] = [
            ("best_of", self.best_of),
            ("echo", self.echo),
            ("frequency_penalty", self.frequency_penalty),
            ("logit_bias", dict(self.logit_bias)),
            ("store", self.store),
            ("metadata", dict(self.metadata)),
            ("logprobs", self.logprobs),
            ("max_tokens", self.max_tokens),
            ("n", self.n),
            ("presence_penalty", self.presence_penalty),
        ]
        out.update((key, value) for key, value in optional if value)
        if self.seed is not None:
            out["seed"] = self.seed
        rest: list[tuple[str, Any]] = [
            ("stop", list(self.stop)),
            ("stream", self.stream),
            ("suffix", self.suffix),
            ("temperature", self.temperature),
            ("top_p", self.top_p),
            ("user", self.user),
        ]
        out.update((key, value) for key, value in rest if value)
        return out


@dataclass
class LogprobResult:
    """Log probabilities attached to a completion choice."""

    tokens: list[str] = field(default_factory=list)
    token_logprobs: list[float] = field(default_factory=list)
    top_logprobs: list[dict[str, float]] = field(default_factory=list)
    text_offset: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> LogprobResult:
        data = data or {}
        return cls(
            tokens=list(data.get("tokens") or []),
            token_logprobs=list(data.get("token_logprobs") or []),
            top_logprobs=[dict(item or {}) for item in data.get("top_logprobs") or []],
            text_offset=list(data.get("text_offset") or []),
        )


@dataclass
class CompletionChoice:
    """One of the returned completions."""

    text: str = ""
    index: int = 0
    finish_reason: str = ""
    logprobs: LogprobResult = field(default_factory=LogprobResult)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CompletionChoice:
        return cls(
            text=data.get("text") or "",
            index=data.get("index") or 0,
            finish_reason=data.get("finish_reason") or "",
            logprobs=LogprobResult.from_dict(data.get("logprobs")),
        )


@dataclass
class CompletionResponse:
    """The response of the completions endpoint."""

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: list[CompletionChoice] = field(default_factory=list)
    usage: Usage = field(default_factory=Usage)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CompletionResponse:
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created=data.get("created") or 0,
            model=data.get("model") or "",
            choices=[CompletionChoice.from_dict(c) for c in data.get("choices") or []],
            usage=Usage.from_dict(data.get("usage")),
        )