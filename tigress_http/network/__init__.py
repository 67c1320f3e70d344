"""
Transport construction: the requests.Session the facade delegates to.
"""

from tigress_http.network.client import build_session

__all__ = ["build_session"]
