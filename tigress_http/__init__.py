"""
tigress_http
============
Verb-named convenience facade over a requests.Session: builds headers,
query parameters, JSON or raw bodies, basic auth and multipart uploads,
and logs each request/response when given a logger.

Package structure
-----------------
tigress_http/
├── __init__.py       – package init and public API
├── config.py         – configuration constants
├── logging_setup.py  – colorlog logger configuration
├── cli.py            – argparse CLI (``python -m tigress_http``)
├── core/
│   └── http_requests.py – HttpRequests facade
├── network/
│   └── client.py     – requests.Session factory
└── utils/
    ├── body.py       – JSON body encoding / decoding
    └── multipart.py  – multipart part assembly for uploads

Quick start
-----------
    import logging
    from tigress_http import HttpRequests

    http = HttpRequests("https://api.example.com", logging.getLogger("api"))
    response = http.get("/endpoint")
    data = http.get_json_body(response)
"""

from .config  import VERSION
from .core    import HttpRequests
from .network import build_session
from .utils   import build_multipart, decode_json_body, encode_body

__version__ = VERSION

__all__ = [
    "HttpRequests",
    "build_session",
    "build_multipart",
    "decode_json_body",
    "encode_body",
    "__version__",
]
