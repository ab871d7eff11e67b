"""Request and response models, schema validation and request-building helpers for an OpenAI-compatible HTTP API."""

__version__ = "0.1.0"