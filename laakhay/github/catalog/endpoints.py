"""GitHub endpoint definitions.

Each entry is a declarative EndpointSpec; the runtime injects headers and
pagination parameters, so specs only declare what the endpoint itself takes.
"""

from __future__ import annotations

from datetime import datetime

from ..core.enums import Shape
from ..models import Commit, Content, Issue, Member, Organisation, Repository, Team, User
from ..runtime.endpoint import EndpointSpec, path_param, query_param

USER_ORGANISATIONS = EndpointSpec(
    id="user_organisations",
    method="GET",
    path="/user/orgs",
    shape=Shape.PAGINATED,
    model=Organisation,
)

ORGANISATION_TEAMS = EndpointSpec(
    id="organisation_teams",
    method="GET",
    path="/orgs/{org}/teams",
    shape=Shape.PAGINATED,
    params=(path_param("org"),),
    model=Team,
)

GET_TEAM = EndpointSpec(
    id="get_team",
    method="GET",
    path="/teams/{team_id}",
    shape=Shape.SINGLE,
    params=(path_param("team_id", int),),
    model=Team,
)

TEAM_MEMBERS = EndpointSpec(
    id="team_members",
    method="GET",
    path="/teams/{team_id}/members",
    shape=Shape.PAGINATED,
    params=(path_param("team_id", int),),
    model=Member,
)

TEAM_REPOSITORIES = EndpointSpec(
    id="team_repositories",
    method="GET",
    path="/teams/{team_id}/repos",
    shape=Shape.PAGINATED,
    params=(path_param("team_id", int),),
    model=Repository,
)

GET_USER = EndpointSpec(
    id="user",
    method="GET",
    path="/user",
    shape=Shape.SINGLE,
    model=User,
)

USER_REPOSITORIES = EndpointSpec(
    id="user_repositories",
    method="GET",
    path="/user/repos",
    shape=Shape.PAGINATED,
    params=(query_param("type"),),
    model=Repository,
)

GET_COMMIT = EndpointSpec(
    id="get_commit",
    method="GET",
    path="/repos/{owner}/{repo}/commits/{sha}",
    shape=Shape.SINGLE,
    params=(path_param("owner"), path_param("repo"), path_param("sha")),
    model=Commit,
)

GET_CONTENT = EndpointSpec(
    id="get_content",
    method="GET",
    path="/repos/{owner}/{repo}/contents/{path}",
    shape=Shape.SINGLE,
    params=(
        path_param("owner"),
        path_param("repo"),
        # nested paths keep their slashes
        path_param("path", safe="/"),
        query_param("ref"),
    ),
    model=Content,
)

# Order matters: get_issues passes options positionally in this order
ISSUE_FILTERS = (
    "milestone",
    "state",
    "assignee",
    "creator",
    "mentioned",
    "labels",
    "sort",
    "direction",
    "since",
)

GET_ISSUES = EndpointSpec(
    id="get_issues",
    method="GET",
    path="/repos/{owner}/{repo}/issues",
    shape=Shape.PAGINATED,
    params=(
        path_param("owner"),
        path_param("repo"),
        query_param("milestone", (str, int)),
        query_param("state"),
        query_param("assignee"),
        query_param("creator"),
        query_param("mentioned"),
        query_param("labels", (str, list, tuple)),
        query_param("sort"),
        query_param("direction"),
        query_param("since", (str, datetime)),
    ),
    model=Issue,
)

ENDPOINTS: dict[str, EndpointSpec] = {
    spec.id: spec
    for spec in (
        USER_ORGANISATIONS,
        ORGANISATION_TEAMS,
        GET_TEAM,
        TEAM_MEMBERS,
        TEAM_REPOSITORIES,
        GET_USER,
        USER_REPOSITORIES,
        GET_COMMIT,
        GET_CONTENT,
        GET_ISSUES,
    )
}


def get_endpoint_spec(endpoint_id: str) -> EndpointSpec | None:
    """Look up an endpoint spec by id."""
    return ENDPOINTS.get(endpoint_id)
