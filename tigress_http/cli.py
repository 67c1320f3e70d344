"""
Command-line interface for the tigress-http facade.

Sends one request through HttpRequests and prints the response body.
"""

import argparse
import json
import sys
from typing import Optional

import requests
import urllib3

from tigress_http.config import (
    DEFAULT_BASE_URI,
    DEFAULT_CONTENT_TYPE,
    DEFAULT_PASSWORD,
    DEFAULT_USER,
    VERSION,
)
from tigress_http.core.http_requests import HttpRequests
from tigress_http.logging_setup import _setup_logging, log
from tigress_http.network.client import build_session

METHODS = ("get", "post", "put", "patch", "delete", "upload")


def _parse_pairs(
    parser: argparse.ArgumentParser, items: list[str], sep: str, what: str,
) -> dict[str, str]:
    """Split ``name<sep>value`` arguments into a dict, erroring on bad input."""
    pairs: dict[str, str] = {}
    for item in items:
        name, found, value = item.partition(sep)
        if not found or not name.strip():
            parser.error(f"invalid {what} {item!r}: expected NAME{sep}VALUE")
        pairs[name.strip()] = value.strip() if sep == ":" else value
    return pairs


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tigress-http",
        description="Send a single HTTP request and print the response body.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "The base URI and credentials can also be provided via the\n"
            "HTTP_BASE_URI, HTTP_USER and HTTP_PASSWORD env vars."
        ),
    )
    parser.add_argument("method", choices=METHODS, help="HTTP verb to use")
    parser.add_argument("url", help="URL, appended verbatim to the base URI")
    parser.add_argument(
        "--base-uri", default=DEFAULT_BASE_URI,
        help="Prefix for the URL (default: $HTTP_BASE_URI)",
    )
    parser.add_argument("--data", default=None, help="Raw request body")
    parser.add_argument(
        "--header", action="append", default=[], metavar="'NAME: VALUE'",
        help="Extra request header (repeatable)",
    )
    parser.add_argument(
        "--query", action="append", default=[], metavar="KEY=VALUE",
        help="Query parameter, GET only (repeatable)",
    )
    parser.add_argument("--user", default=DEFAULT_USER or None, help="Basic-auth username")
    parser.add_argument("--password", default=DEFAULT_PASSWORD or None, help="Basic-auth password")
    parser.add_argument(
        "--content-type", default=DEFAULT_CONTENT_TYPE,
        help=f"Request content type (default: {DEFAULT_CONTENT_TYPE})",
    )
    parser.add_argument(
        "--file", action="append", default=[], metavar="NAME=PATH",
        help="File part, upload only (repeatable)",
    )
    parser.add_argument(
        "--field", action="append", default=[], metavar="NAME=VALUE",
        help="Form field, upload only (repeatable)",
    )
    parser.add_argument(
        "--no-verify-ssl", dest="verify_ssl", action="store_false", default=True,
        help="Disable TLS certificate verification (use for self-signed certs)",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def _print_body(http: HttpRequests, response: requests.Response) -> None:
    data = http.get_json_body(response)
    if data is None:
        print(response.text)
    else:
        print(json.dumps(data, indent=2))


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Process exit status: 0 for a status below 400, 1 otherwise
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    headers = _parse_pairs(parser, args.header, ":", "header")
    query = _parse_pairs(parser, args.query, "=", "query parameter")
    files = _parse_pairs(parser, args.file, "=", "file")
    fields = _parse_pairs(parser, args.field, "=", "field")

    if args.method == "upload" and not files:
        parser.error("upload needs at least one --file NAME=PATH")
    if args.method in ("post", "put", "patch") and args.data is None:
        parser.error(f"{args.method} needs --data")

    _setup_logging(debug=args.debug)

    if not args.verify_ssl:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        log.warning("TLS certificate verification is DISABLED (--no-verify-ssl)")

    http = HttpRequests(args.base_uri, log, build_session(verify_ssl=args.verify_ssl))

    try:
        if args.method == "get":
            response = http.get(
                args.url, args.data, query, headers or None,
                args.user, args.password, args.content_type,
            )
        elif args.method == "delete":
            response = http.delete(
                args.url, args.data, headers or None, args.user, args.password,
            )
        elif args.method == "upload":
            response = http.upload(
                args.url, files, fields, headers or None, args.user, args.password,
            )
        else:
            verb = getattr(http, args.method)
            response = verb(
                args.url, args.data, headers or None,
                args.user, args.password, args.content_type,
            )
    except requests.exceptions.RequestException:
        # Already logged by the facade
        return 1
    except OSError as exc:
        log.error("Cannot open upload file: %s", exc)
        return 1

    _print_body(http, response)
    return 0 if response.status_code < 400 else 1


if __name__ == "__main__":
    sys.exit(main())
