"""Shared fixtures for unit tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from laakhay.github.runtime.rest import HTTPResponse, RESTTransport

ITEMS_URL = "https://api.github.com/items"


@pytest.fixture
def transport():
    """Create mock REST transport; configure ``send`` per test."""
    mock = MagicMock(spec=RESTTransport)
    mock.send = AsyncMock(return_value=HTTPResponse(status=200, body={}))
    mock.close = AsyncMock()
    return mock


@pytest.fixture
def make_page():
    """Factory for list responses with an optional Link header."""

    def _make(
        items: list[Any],
        *,
        next_page: int | None = None,
        last_page: int | None = None,
        status: int = 200,
    ) -> HTTPResponse:
        links = []
        if next_page is not None:
            links.append(f'<{ITEMS_URL}?page={next_page}>; rel="next"')
        if last_page is not None:
            links.append(f'<{ITEMS_URL}?page={last_page}>; rel="last"')
        headers = {"Link": ", ".join(links)} if links else {}
        return HTTPResponse(status=status, headers=headers, body=items)

    return _make


@pytest.fixture
def sent_requests(transport):
    """Return a callable listing HTTPRequests passed to ``transport.send``, in order."""

    def _sent() -> list:
        return [call.args[0] for call in transport.send.await_args_list]

    return _sent
