"""Bundled catalog of GitHub REST endpoints."""

from .api import (
    get_commit,
    get_content,
    get_issues,
    get_team,
    organisation_teams,
    team_members,
    team_repositories,
    user,
    user_organisations,
    user_repositories,
)
from .endpoints import ENDPOINTS, ISSUE_FILTERS, get_endpoint_spec

__all__ = [
    "ENDPOINTS",
    "ISSUE_FILTERS",
    "get_endpoint_spec",
    "get_commit",
    "get_content",
    "get_issues",
    "get_team",
    "organisation_teams",
    "team_members",
    "team_repositories",
    "user",
    "user_organisations",
    "user_repositories",
]
