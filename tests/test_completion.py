import pytest

from gptkit.completion import (
    CHAT_COMPLETIONS_SUFFIX,
    COMPLETIONS_SUFFIX,
    ERR_COMPLETION_PROMPT_TYPE_NOT_SUPPORTED,
    ERR_COMPLETION_STREAM_NOT_SUPPORTED,
    ERR_COMPLETION_UNSUPPORTED_MODEL,
    GPT3DOT5_TURBO,
    CompletionError,
    CompletionRequest,
    CompletionResponse,
    LogprobResult,
    Usage,
    check_endpoint_supports_model,
    check_prompt_type,
)


def test_completions_wrong_model():
    req = CompletionRequest(max_tokens=5, model=GPT3DOT5_TURBO)
    with pytest.raises(CompletionError) as info:
        req.validate()
    assert str(info.value) == ERR_COMPLETION_UNSUPPORTED_MODEL


def test_completion_with_stream():
    with pytest.raises(CompletionError) as info:
        CompletionRequest(stream=True).validate()
    assert str(info.value) == ERR_COMPLETION_STREAM_NOT_SUPPORTED


def test_multiple_prompts_wrong_type():
    req = CompletionRequest(max_tokens=5, model="ada", prompt=["Lorem ipsum", 9])
    with pytest.raises(CompletionError) as info:
        req.validate()
    assert str(info.value) == ERR_COMPLETION_PROMPT_TYPE_NOT_SUPPORTED


def test_missing_prompt_is_rejected():
    with pytest.raises(CompletionError) as info:
        CompletionRequest(model="ada").validate()
    assert str(info.value) == ERR_COMPLETION_PROMPT_TYPE_NOT_SUPPORTED


def test_single_prompt_request_body():
    req = CompletionRequest(max_tokens=5, model="ada", prompt="Lorem ipsum")
    req.validate()
    assert req.to_dict() == {"model": "ada", "prompt": "Lorem ipsum", "max_tokens": 5}


def test_multiple_prompts_request_body():
    req = CompletionRequest(max_tokens=5, model="ada", prompt=["Lorem ipsum", "Lorem ipsum"])
    req.validate()
    assert req.to_dict()["prompt"] == ["Lorem ipsum", "Lorem ipsum"]


def test_to_dict_includes_zero_seed_and_set_fields():
    req = CompletionRequest(model="ada", seed=0, stop=["\n"], echo=True, temperature=0.5)
    assert req.to_dict() == {
        "model": "ada",
        "echo": True,
        "seed": 0,
        "stop": ["\n"],
        "temperature": 0.5,
    }


@pytest.mark.parametrize(
    "endpoint, model, expected",
    [
        (COMPLETIONS_SUFFIX, "gpt-3.5-turbo", False),
        (COMPLETIONS_SUFFIX, "o1-mini", False),
        (COMPLETIONS_SUFFIX, "ada", True),
        (COMPLETIONS_SUFFIX, "babbage-002", True),
        (CHAT_COMPLETIONS_SUFFIX, "ada", False),
        (CHAT_COMPLETIONS_SUFFIX, "gpt-4", True),
        ("/unknown", "gpt-4", True),
    ],
)
def test_check_endpoint_supports_model(endpoint, model, expected):
    assert check_endpoint_supports_model(endpoint, model) is expected


@pytest.mark.parametrize(
    "prompt, expected",
    [
        ("text", True),
        (["a", "b"], True),
        ([], True),
        (["a", 1], False),
        (None, False),
        (5, False),
        ({"a": "b"}, False),
    ],
)
def test_check_prompt_type(prompt, expected):
    assert check_prompt_type(prompt) is expected


def test_completion_response_from_dict():
    data = {
        "id": "123",
        "object": "test-object",
        "created": 1700000000,
        "model": "ada",
        "choices": [
            {"text": "aaaaa", "index": 0, "finish_reason": "length", "logprobs": None},
            {"text": "aaaaa", "index": 1},
        ],
        "usage": {"prompt_tokens": 4, "completion_tokens": 10, "total_tokens": 14},
    }
    res = CompletionResponse.from_dict(data)
    assert res.id == "123"
    assert [c.text for c in res.choices] == ["aaaaa", "aaaaa"]
    assert [c.index for c in res.choices] == [0, 1]
    assert res.choices[0].finish_reason == "length"
    assert res.choices[0].logprobs == LogprobResult()
    assert res.usage == Usage(prompt_tokens=4, completion_tokens=10, total_tokens=14)


def test_logprob_result_from_dict():
    result = LogprobResult.from_dict(
        {
            "tokens": ["a"],
            "token_logprobs": [-0.5],
            "top_logprobs": [{"a": -0.5}],
            "text_offset": [3],
        }
    )
    assert result.tokens == ["a"]
    assert result.token_logprobs == [-0.5]
    assert result.top_logprobs == [{"a": -0.5}]
    assert result.text_offset == [3]