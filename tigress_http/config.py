"""Configuration constants for the tigress-http request facade."""

import os

VERSION = "2025.09.15"

DEFAULT_CONTENT_TYPE = "application/json"
# Base URI and credentials can also be supplied via HTTP_BASE_URI /
# HTTP_USER / HTTP_PASSWORD env vars (used by the CLI only)
DEFAULT_BASE_URI = os.environ.get("HTTP_BASE_URI", "")
DEFAULT_USER = os.environ.get("HTTP_USER", "")
DEFAULT_PASSWORD = os.environ.get("HTTP_PASSWORD", "")

USER_AGENT = f"tigress-http/{VERSION}"

# Substrings of the content type that switch body encoding / header injection
JSON_MARKER      = "json"
MULTIPART_MARKER = "multipart"

# urllib3 Retry tuning, only applied when build_session(retries=N) is asked for
RETRY_BACKOFF_FACTOR = 0.5
RETRY_STATUS_FORCELIST = (500, 502, 503, 504)
