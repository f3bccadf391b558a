"""REST transport: the single send-request primitive used by the engine."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ...config import BASE_URL, DEFAULT_TIMEOUT
from .http_client import HTTPClient


@dataclass(frozen=True)
class HTTPRequest:
    """Fully built request, ready to send."""

    method: str
    path: str
    params: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    body: dict[str, Any] | None = None


@dataclass(frozen=True)
class HTTPResponse:
    """Response returned by the transport."""

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any = None

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        name = name.lower()
        for key, value in self.headers.items():
            if key.lower() == name:
                return value
        return None


class RESTTransport:
    """Thin wrapper over HTTPClient exposing ``send``.

    Connection pooling, TLS and timeouts are left to the underlying client.
    """

    def __init__(self, base_url: str = BASE_URL, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout)

    @property
    def base_url(self) -> str | None:
        return self._http.base_url

    async def send(self, request: HTTPRequest) -> HTTPResponse:
        raw = await self._http.request(
            request.method,
            request.path,
            params=request.params or None,
            headers=request.headers or None,
            json_body=request.body,
        )
        return HTTPResponse(status=raw.status, headers=raw.headers, body=raw.body)

    async def close(self) -> None:
        await self._http.close()
