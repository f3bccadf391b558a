"""Runtime orchestration components."""

from .context import ExecutionContext
from .endpoint import (
    Action,
    EndpointSpec,
    Param,
    PartialEndpoint,
    bind,
    body_param,
    path_param,
    query_param,
)
from .executor import ModelAdapter, PageResult, RequestExecutor, ResponseAdapter
from .links import ContinuationSet, Link, has_next, parse_link_header
from .pagination import PaginationAccumulator
from .session import GitHubSession, create_session, run_github

__all__ = [
    "Action",
    "ContinuationSet",
    "EndpointSpec",
    "ExecutionContext",
    "GitHubSession",
    "Link",
    "ModelAdapter",
    "PageResult",
    "PaginationAccumulator",
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
]
