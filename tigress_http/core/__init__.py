"""Core subpackage – the HttpRequests facade."""

from tigress_http.core.http_requests import HttpRequests

__all__ = ["HttpRequests"]
