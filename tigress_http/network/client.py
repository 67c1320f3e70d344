"""
HTTP transport configuration.

The facade never retries on its own; a retry policy only exists when the
caller asks for one here, and then it lives inside the transport.
"""

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from tigress_http.config import (
    RETRY_BACKOFF_FACTOR,
    RETRY_STATUS_FORCELIST,
    USER_AGENT,
)


def build_session(verify_ssl: bool = True, retries: int = 0) -> requests.Session:
    """
    Return a requests.Session with keep-alive and a package User-Agent.

    Args:
        verify_ssl: Whether to verify TLS certificates
        retries: Total urllib3 retries to mount on http/https (0 = none)

    Returns:
        Configured requests.Session instance
    """
    session = requests.Session()
    if retries > 0:
        retry = Retry(
            total=retries,
            backoff_factor=RETRY_BACKOFF_FACTOR,
            status_forcelist=list(RETRY_STATUS_FORCELIST),
        )
        adapter = HTTPAdapter(max_retries=retry)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
    session.verify = verify_ssl
    session.headers.update({
        "User-Agent": USER_AGENT,
        "Connection": "keep-alive",
    })
    return session
