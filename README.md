# gptkit

Request and response models for an OpenAI-compatible HTTP API, with checks
that run before a request is sent and helpers that build JSON bodies,
multipart forms and URL paths. Plain Python with no runtime dependencies.

## Modules

- `gptkit.config`: `default_config(auth_token)` and
  `default_azure_config(api_key, base_url)` return a `ClientConfig` that holds
  the token, base URL, organisation id, `APIType`, API version, assistant
  version and an optional Azure model mapper.
  `ClientConfig.azure_deployment_by_model(model)` applies the mapper. The Azure
  default removes `.` and `:`, so `gpt-3.5-turbo` becomes `gpt-35-turbo`.
  Without a mapper the model name is returned as it is.
- `gptkit.errors`: `APIError.from_json` and `APIError.from_dict` parse error
  bodies. A message can be a string, a list of strings (joined with `", "`) or
  null. The code can be an integer or a string. The optional `type`, `param`
  and `innererror` fields are read into the error, and malformed fields raise
  `ValueError`. `RequestError` carries an HTTP status, a body and the
  underlying error, which `unwrap()` returns.
- `gptkit.jsonschema`: `Definition` describes a schema. `to_dict` and
  `to_json` always include `properties`. `validate(schema, data)` checks
  decoded JSON against a schema. `verify_schema_and_unmarshal(schema, content)`
  (or `Definition.unmarshal`) parses JSON text, checks it, and either returns
  the data or raises `SchemaValidationError`.
  `generate_schema_for_type` builds a schema from `str`, `int`, `float`,
  `bool`, sequence types, `Optional[...]` and dataclasses. Dataclass field
  metadata keys `json`, `description` and `required` control property names
  and which properties are required.
- `gptkit.completion`: `CompletionRequest.validate()` raises `CompletionError`
  in three cases: the request asks for streaming, the model belongs to the chat
  endpoint, or the prompt is neither a string nor a list of strings.
  `to_dict()` leaves out unset fields. The module also defines the response
  dataclasses and `Usage`, and provides `check_endpoint_supports_model` and
  `check_prompt_type`.
- `gptkit.embeddings`: request and response dataclasses and the
  `EmbeddingModel` and `EmbeddingEncodingFormat` enums.
  `Embedding.dot_product` raises `VectorLengthMismatchError` when the two
  lengths differ. `decode_base64_floats` reads little-endian float32 values
  from base64 text. `EmbeddingResponseBase64.to_embedding_response()` decodes
  every vector.
- `gptkit.files`: `FileRequest.build_form()` reads a local file and
  `FileBytesRequest.build_form()` uses bytes held in memory. Both return a
  multipart body and its content type. Also provides `File`, `FilesList` and
  `PurposeType`.
- `gptkit.fine_tunes`, `gptkit.fine_tuning_job`: models for the legacy
  fine-tunes API and for fine-tuning jobs.
  `fine_tuning_job_events_path(job_id, after, limit)` builds the events path
  with its query string.
- `gptkit.image`: models for image generation, edits and variations.
  `ImageEditRequest.build_form(builder)` and
  `ImageVariRequest.build_form(builder)` write a form through a `FormBuilder`.
- `gptkit.messages`: thread message models, plus `messages_path`,
  `message_path` and `message_file_path`.
- `gptkit.models`, `gptkit.engines`, `gptkit.edits`: models for listing models
  and engines and for the edits endpoint. `engine_path` builds an engine's
  path.
- `gptkit.formdata`: `FormBuilder` writes multipart/form-data to a binary
  stream. A file part with an empty name raises `ValueError`.
- `gptkit.transport`: `JSONMarshaller` and `JSONUnmarshaller` encode and
  decode JSON. `RequestBuilder.build(method, url, body, headers)` returns an
  `HTTPRequest`. Bytes and readable bodies are used as they are, and any other
  body is encoded as JSON. `ErrorAccumulator` collects the bytes of an error
  response.

## Example

```python
from gptkit.config import default_config
from gptkit.completion import CompletionRequest
from gptkit.embeddings import Embedding
from gptkit.jsonschema import DataType, Definition, validate

config = default_config("token")

request = CompletionRequest(model="babbage-002", prompt="Lorem ipsum", max_tokens=5)
request.validate()
payload = request.to_dict()

a = Embedding(embedding=[1.0, 2.0, 3.0])
b = Embedding(embedding=[2.0, 4.0, 6.0])
assert a.dot_product(b) == 28.0

schema = Definition(type=DataType.STRING)
assert validate(schema, "abc")
```

## What it does not do

gptkit has no client that sends requests over the network. `RequestBuilder`
produces an `HTTPRequest` value, and you pass that to an HTTP library yourself.
The package has no chat-completion models, no streaming and no command-line
program.

## Running the tests

```
pip install -e ".[test]"
pytest
```