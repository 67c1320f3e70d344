"""
HttpRequests facade.

Verb-named methods that assemble requests keyword arguments (headers, query
parameters, body, basic auth, multipart parts) and hand them to a
requests.Session, logging each exchange when a logger is supplied.
"""

import logging
from typing import Any, Mapping, Optional

import requests

from tigress_http.config import DEFAULT_CONTENT_TYPE, MULTIPART_MARKER, VERSION
from tigress_http.network.client import build_session
from tigress_http.utils.body import decode_json_body, encode_body
from tigress_http.utils.multipart import build_multipart


class HttpRequests:
    """
    Thin convenience layer over a requests.Session.

    Every URL is appended verbatim to ``base_uri``; no slash handling is
    done.  Transport errors are logged and re-raised unchanged, and non-2xx
    responses are returned like any other response.
    """

    def __init__(
        self,
        base_uri: str = "",
        logger: Optional[logging.Logger] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._base_uri = base_uri
        self._logger = logger
        self._session = session if session is not None else build_session()

    @staticmethod
    def version() -> str:
        return VERSION

    @property
    def base_uri(self) -> str:
        return self._base_uri

    @base_uri.setter
    def base_uri(self, base_uri: str) -> None:
        self._base_uri = base_uri

    # ------------------------------------------------------------------
    # Verbs
    # ------------------------------------------------------------------

    def get(
        self,
        url: str,
        body: Any = None,
        query_params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        content_type: str = DEFAULT_CONTENT_TYPE,
    ) -> requests.Response:
        return self._send_request(
            "GET", url, body, headers, username, password, content_type, query_params,
        )

    def post(
        self,
        url: str,
        body: Any,
        headers: Optional[Mapping[str, str]] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        content_type: str = DEFAULT_CONTENT_TYPE,
    ) -> requests.Response:
        return self._send_request("POST", url, body, headers, username, password, content_type)

    def put(
        self,
        url: str,
        body: Any,
        headers: Optional[Mapping[str, str]] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        content_type: str = DEFAULT_CONTENT_TYPE,
    ) -> requests.Response:
        return self._send_request("PUT", url, body, headers, username, password, content_type)

    def patch(
        self,
        url: str,
        body: Any,
        headers: Optional[Mapping[str, str]] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        content_type: str = DEFAULT_CONTENT_TYPE,
    ) -> requests.Response:
        return self._send_request("PATCH", url, body, headers, username, password, content_type)

    def delete(
        self,
        url: str,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> requests.Response:
        return self._send_request("DELETE", url, body, headers, username, password)

    def upload(
        self,
        url: str,
        files: Mapping[str, str],
        fields: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> requests.Response:
        """
        POST a multipart body built from form *fields* and *files*
        (part name → local path).  No Content-Type default is injected so
        requests can set the multipart boundary itself.
        """
        options: dict[str, Any] = {
            "files": build_multipart(files, fields),
            "headers": dict(headers or {}),
        }

        if username is not None and password is not None:
            options["auth"] = (username, password)

        return self._send_raw_request("POST", url, options)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def get_json_body(self, response: requests.Response) -> Any:
        """Decode the response body as JSON; None when it is not valid JSON."""
        return decode_json_body(response.text)

    def _send_request(
        self,
        method: str,
        url: str,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        content_type: str = DEFAULT_CONTENT_TYPE,
        query_params: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        options: dict[str, Any] = {
            "headers": self._build_headers(headers, content_type),
            "params": dict(query_params or {}),
        }

        if body is not None:
            options["data"] = encode_body(body, content_type)

        if username is not None and password is not None:
            options["auth"] = (username, password)

        return self._send_raw_request(method, url, options)

    def _send_raw_request(
        self, method: str, url: str, options: dict[str, Any],
    ) -> requests.Response:
        full_url = self._base_uri + url

        if self._logger:
            self._logger.info(
                "HTTP %s request to %s", method, full_url, extra={"options": options},
            )

        try:
            response = self._session.request(method, full_url, **options)
        except requests.exceptions.RequestException as exc:
            if self._logger:
                self._logger.error("HTTP request failed: %s", exc)
            raise

        if self._logger:
            self._logger.info("Received response with status %s", response.status_code)

        return response

    @staticmethod
    def _build_headers(
        headers: Optional[Mapping[str, str]], content_type: str,
    ) -> dict[str, str]:
        merged = dict(headers or {})

        # Multipart bodies get their Content-Type (with boundary) from requests
        if MULTIPART_MARKER not in content_type:
            present = {name.lower() for name in merged}
            if "content-type" not in present:
                merged["Content-Type"] = content_type
            if "accept" not in present:
                merged["Accept"] = content_type

        return merged
