"""Request body parsing and validation for /convert.

Checks run in a fixed order and the first failure wins:

1. the body must be valid JSON
2. `text` must be present and a string
3. `text` must not be empty after trimming

Any truthy `source` is kept as sent; a missing or falsy one becomes the default.
"""

import json
from typing import Any

from voice_inbox.convert.models import DEFAULT_SOURCE, ConvertRequest


class ConvertError(Exception):
    """Base exception for rejected convert requests."""

    pass


class MalformedBodyError(ConvertError):
    """Raised when the request body is not valid JSON."""

    pass


class InvalidFieldError(ConvertError):
    """Raised when a field is missing or has the wrong type."""

    pass


class EmptyTextError(ConvertError):
    """Raised when `text` is blank after trimming."""

    pass


def parse_body(body: bytes) -> Any:
    """Decode a raw request body as JSON.

    Raises:
        MalformedBodyError: If the body is empty, not UTF-8 or not JSON
    """
    try:
        return json.loads(body)
    except ValueError as e:
        raise MalformedBodyError("Failed to parse request: body is not valid JSON") from e


def validate_payload(payload: Any) -> ConvertRequest:
    """Validate a decoded JSON payload.

    Args:
        payload: Result of parse_body (any JSON value)

    Returns:
        ConvertRequest with trimmed text and resolved source

    Raises:
        InvalidFieldError: If `text` is missing or not a string
        EmptyTextError: If `text` is whitespace only
    """
    text = payload.get("text") if isinstance(payload, dict) else None
    if not isinstance(text, str):
        raise InvalidFieldError('Missing or invalid "text" field')

    text = text.strip()
    if not text:
        raise EmptyTextError("Text cannot be empty")

    source = payload.get("source") or DEFAULT_SOURCE
    return ConvertRequest(text=text, source=source)


def parse_convert_request(body: bytes) -> ConvertRequest:
    """Parse and validate a raw /convert body."""
    return validate_payload(parse_body(body))
