"""Request body encoding and JSON response decoding."""

import json
from typing import Any

from ..config import JSON_MARKER


def encode_body(body: Any, content_type: str) -> Any:
    """
    Serialize a structured *body* (dict or list) to a JSON string when
    *content_type* is a JSON type.  Anything else is returned untouched and
    left for requests to encode.
    """
    if isinstance(body, (dict, list)) and JSON_MARKER in content_type:
        return json.dumps(body)
    return body


def decode_json_body(text: str) -> Any:
    """Return the decoded JSON value of *text*, or None when it is not JSON."""
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError, ValueError):
        return None
