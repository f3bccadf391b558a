"""REST runtime abstractions."""

from .http_client import HTTPClient, RawResponse
from .transport import HTTPRequest, HTTPResponse, RESTTransport

__all__ = [
    "HTTPClient",
    "RawResponse",
    "RESTTransport",
    "HTTPRequest",
    "HTTPResponse",
]
