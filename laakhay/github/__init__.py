"""Laakhay GitHub - execution engine for the GitHub REST API.

The engine injects the User-Agent and Authorization headers into any
declared endpoint, keeps pagination state per session and follows the
``Link`` header to concatenate paginated results.
"""

from . import catalog
from .config import BASE_URL, DEFAULT_PAGE_SIZE, DEFAULT_USER_AGENT
from .core import (
    AuthToken,
    ConstructionError,
    GitHubError,
    HTTPStatusError,
    PaginationState,
    ParamLocation,
    ResponseDecodeError,
    Shape,
    TransportConnectionError,
    TransportError,
    TransportTimeoutError,
)
from .models import (
    Commit,
    Content,
    Issue,
    Member,
    Organisation,
    Repository,
    Team,
    User,
)
from .runtime import (
    Action,
    ContinuationSet,
    EndpointSpec,
    ExecutionContext,
    GitHubSession,
    Link,
    Param,
    PartialEndpoint,
    RequestExecutor,
    ResponseAdapter,
    bind,
    body_param,
    create_session,
    has_next,
    parse_link_header,
    path_param,
    query_param,
    run_github,
)

__version__ = "0.1.0"

__all__ = [
    "BASE_URL",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_USER_AGENT",
    # Core
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
    # Runtime
    "Action",
    "ContinuationSet",
    "EndpointSpec",
    "ExecutionContext",
    "GitHubSession",
    "Link",
    "Param",
    "PartialEndpoint",
    "RequestExecutor",
    "ResponseAdapter",
    "bind",
    "body_param",
    "create_session",
    "has_next",
    "parse_link_header",
    "path_param",
    "query_param",
    "run_github",
    # Models
    "Commit",
    "Content",
    "Issue",
    "Member",
    "Organisation",
    "Repository",
    "Team",
    "User",
    # Catalog
    "catalog",
]
