"""Custom exception hierarchy."""

from __future__ import annotations


class GitHubError(Exception):
    """Base exception for all library errors."""

    pass


class ConstructionError(GitHubError):
    """Endpoint declaration or argument binding mismatch.

    Raised before any request is sent: wrong number of arguments, wrong
    argument type, or a path template that disagrees with its declared
    path parameters.
    """

    def __init__(self, message: str, endpoint_id: str | None = None) -> None:
        super().__init__(message)
        self.endpoint_id = endpoint_id


class TransportError(GitHubError):
    """A single HTTP call failed.

    Subclasses distinguish connection failures, timeouts, non-success
    statuses and undecodable bodies.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportConnectionError(TransportError):
    """Connection could not be established or was dropped."""

    pass


class TransportTimeoutError(TransportError):
    """Transport gave up waiting for the response."""

    pass


class HTTPStatusError(TransportError):
    """Remote API answered with a non-success status."""

    def __init__(self, message: str, status_code: int, body: str | None = None) -> None:
        super().__init__(message, status_code=status_code)
        self.body = body


class ResponseDecodeError(TransportError):
    """Response body is not valid JSON or does not match the payload model."""

    pass
