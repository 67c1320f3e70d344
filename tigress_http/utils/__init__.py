"""Helper subpackage for the tigress-http facade."""

from .body import encode_body, decode_json_body
from .multipart import build_multipart

__all__ = [
    "encode_body",
    "decode_json_body",
    "build_multipart",
]
