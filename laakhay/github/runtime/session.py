"""GitHub session: the entry point that owns one execution context.

Architecture:
    A GitHubSession owns an ExecutionContext and the transport inside it.
    It is an async context manager; leaving the ``async with`` block closes
    the transport on every exit path, including errors raised half-way
    through a paginated call and task cancellation.

    Calls issued on one session run strictly in issue order: an
    ``asyncio.Lock`` serializes them, so a context is never mutated by two
    calls at once. Separate sessions share nothing.

Example:
    >>> async def main(session: GitHubSession) -> list[Repository]:
    ...     session.set_page_size(50)
    ...     return await session.call(USER_REPOSITORIES, None)
    >>> repos = await run_github(main, token="ghp_...")
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from ..config import BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from ..core.auth import AuthToken
from ..core.enums import Shape
from .context import ExecutionContext
from .endpoint import Action, EndpointSpec, bind
from .executor import RequestExecutor
from .links import ContinuationSet
from .pagination import PaginationAccumulator
from .rest.transport import RESTTransport

logger = logging.getLogger(__name__)

A = TypeVar("A")


class GitHubSession:
    """One bounded run with its own context, transport and credential."""

    def __init__(
        self,
        token: AuthToken | str | None = None,
        *,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: RESTTransport | None = None,
        executor: RequestExecutor | None = None,
    ) -> None:
        """Initialize session.

        Args:
            token: Optional credential; a plain string is wrapped in AuthToken
            base_url: API host (ignored when a transport is supplied)
            timeout: Total request timeout in seconds (ignored with transport)
            user_agent: Initial User-Agent value
            transport: Pre-built transport, mainly for tests
            executor: Pre-built executor, e.g. with custom response adapters
        """
        self._context = ExecutionContext(
            transport=transport or RESTTransport(base_url=base_url, timeout=timeout),
            token=AuthToken.coerce(token),
            user_agent=user_agent,
        )
        self._executor = executor or RequestExecutor()
        self._lock = asyncio.Lock()
        self._closed = False

    @property
    def context(self) -> ExecutionContext:
        return self._context

    @property
    def closed(self) -> bool:
        return self._closed

    # Context mutators

    def set_user_agent(self, user_agent: str) -> None:
        """Override the User-Agent header. GitHub requires one on every call."""
        self._context.user_agent = user_agent

    def set_page_size(self, size: int) -> None:
        self._context.set_page_size(size)

    def set_page(self, page: int) -> None:
        self._context.set_page(page)

    def reset_pagination(self) -> None:
        self._context.reset_pagination()

    def recurse_on(self) -> None:
        self._context.recurse = True

    def recurse_off(self) -> None:
        self._context.recurse = False

    def get_links(self) -> ContinuationSet | None:
        """Link header of the most recent list response, if any."""
        return self._context.links

    # Execution

    async def run(self, action: Action) -> Any:
        """Execute an already bound action."""
        if self._closed:
            raise RuntimeError("GitHubSession is closed")
        async with self._lock:
            if action.shape is Shape.PAGINATED:
                return await PaginationAccumulator(self._executor).accumulate(
                    self._context, action
                )
            return await self._executor.execute_single(self._context, action)

    async def call(self, endpoint: EndpointSpec, *args: Any) -> Any:
        """Bind ``args`` to ``endpoint`` and execute it."""
        return await self.run(bind(endpoint, *args))

    def github(self, endpoint: EndpointSpec) -> Callable[..., Awaitable[Any]]:
        """Embed an endpoint into this session.

        The returned callable takes the endpoint's arguments. Binding happens
        eagerly, so argument errors raise before anything is awaited.
        """

        def embedded(*args: Any) -> Awaitable[Any]:
            return self.run(bind(endpoint, *args))

        embedded.__name__ = endpoint.id
        return embedded

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self._context.transport.close()
        logger.debug("Session closed")

    async def __aenter__(self) -> GitHubSession:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def create_session(token: AuthToken | str | None = None, **options: Any) -> GitHubSession:
    """Create an unentered session; use it with ``async with``."""
    return GitHubSession(token, **options)


async def run_github(
    computation: Callable[[GitHubSession], Awaitable[A]],
    token: AuthToken | str | None = None,
    **options: Any,
) -> A:
    """Run a computation inside a fresh session.

    Args:
        computation: Async function receiving the session
        token: Optional credential for the session
        **options: Forwarded to GitHubSession

    Returns:
        Whatever the computation returns

    Raises:
        The first error raised by the computation (TransportError,
        ConstructionError, ...); the transport is closed either way.
    """
    async with create_session(token, **options) as session:
        return await computation(session)
