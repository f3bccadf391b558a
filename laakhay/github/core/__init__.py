"""Core components."""

from .auth import AuthToken
from .enums import PaginationState, ParamLocation, Shape
from .exceptions import (
    ConstructionError,
    GitHubError,
    HTTPStatusError,
    ResponseDecodeError,
    TransportConnectionError,
    TransportError,
    TransportTimeoutError,
)

__all__ = [
    "AuthToken",
    "Shape",
    "ParamLocation",
    "PaginationState",
    "GitHubError",
    "ConstructionError",
    "TransportError",
    "TransportConnectionError",
    "TransportTimeoutError",
    "HTTPStatusError",
    "ResponseDecodeError",
]
