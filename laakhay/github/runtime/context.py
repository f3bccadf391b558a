"""Per-session execution state.

The context is owned by exactly one session. The executor and the
pagination accumulator read and update it after every HTTP call; nothing
outside that sequential call chain touches it.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config import DEFAULT_PAGE_SIZE, DEFAULT_USER_AGENT
from ..core.auth import AuthToken
from .links import ContinuationSet, has_next
from .rest.transport import RESTTransport


@dataclass
class ExecutionContext:
    """Mutable session state threaded through sequential calls.

    Attributes:
        transport: Transport owned by the session for its lifetime
        token: Optional credential; None sends requests unauthenticated
        user_agent: Value of the User-Agent header
        page_size: Records requested per page (sent as per_page)
        page: Page requested by the next paginated fetch (1-based)
        links: Link header of the most recent list response, if any
        recurse: Follow ``next`` links and concatenate pages automatically
    """

    transport: RESTTransport
    token: AuthToken | None = None
    user_agent: str = DEFAULT_USER_AGENT
    page_size: int = DEFAULT_PAGE_SIZE
    page: int = 1
    links: ContinuationSet | None = None
    recurse: bool = True

    def reset_pagination(self) -> None:
        """Set next page back to 1 and drop the stored links."""
        self.page = 1
        self.links = None

    def set_page_size(self, size: int) -> None:
        # Values above 100 are passed through; GitHub enforces its own cap
        _check_int("page_size", size)
        if size < 1:
            raise ValueError("page_size must be at least 1")
        self.page_size = size

    def set_page(self, page: int) -> None:
        _check_int("page", page)
        if page < 1:
            raise ValueError("page must be at least 1")
        self.page = page

    @property
    def has_next(self) -> bool:
        return has_next(self.links)


def _check_int(name: str, value: object) -> None:
    # bool is an int subclass and would be sent as "True"
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
