"""HTTP client helper."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import aiohttp

from ...config import DEFAULT_TIMEOUT
from ...core.exceptions import (
    HTTPStatusError,
    ResponseDecodeError,
    TransportConnectionError,
    TransportTimeoutError,
)

logger = logging.getLogger(__name__)

_ERROR_BODY_LIMIT = 500


@dataclass(frozen=True)
class RawResponse:
    """Status, headers and decoded JSON body of a successful response."""

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any = None


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(self, base_url: str | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    @property
    def closed(self) -> bool:
        return self._session is None or self._session.closed

    def _url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url.rstrip('/')}{url}"
        return url

    async def request(
        self,
        method: str,
        url: str,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
        json_body: Any = None,
    ) -> RawResponse:
        """Send one request and decode its JSON body.

        Raises:
            HTTPStatusError: Status is 400 or above
            TransportTimeoutError: The configured timeout expired
            TransportConnectionError: Any other aiohttp client failure
            ResponseDecodeError: Body is not valid JSON
        """
        full_url = self._url(url)
        try:
            async with self.session.request(
                method.upper(),
                full_url,
                params=dict(params) if params else None,
                headers=dict(headers) if headers else None,
                json=json_body,
            ) as response:
                status = response.status
                resp_headers = dict(response.headers)
                text = await response.text()
        except asyncio.TimeoutError as e:
            raise TransportTimeoutError(f"{method.upper()} {full_url} timed out") from e
        except aiohttp.ClientError as e:
            raise TransportConnectionError(f"{method.upper()} {full_url} failed: {e}") from e
        except UnicodeDecodeError as e:
            raise ResponseDecodeError(
                f"{method.upper()} {full_url} returned undecodable text"
            ) from e

        if status >= 400:
            logger.debug(
                "http_error_status",
                extra={"method": method.upper(), "url": full_url, "status": status},
            )
            raise HTTPStatusError(
                f"{method.upper()} {full_url} returned {status}",
                status_code=status,
                body=text[:_ERROR_BODY_LIMIT] if text else None,
            )

        body: Any = None
        if text.strip():
            try:
                body = json.loads(text)
            except ValueError as e:
                raise ResponseDecodeError(
                    f"{method.upper()} {full_url} returned invalid JSON: {e}",
                    status_code=status,
                ) from e

        return RawResponse(status=status, headers=resp_headers, body=body)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
