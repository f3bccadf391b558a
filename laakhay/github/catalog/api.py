"""Functions that directly access the GitHub API.

Every function takes the session it runs in. List results follow the
session's pagination settings: with recursion on (the default) all pages
are fetched and concatenated.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..core.exceptions import ConstructionError
from ..models import Commit, Content, Issue, Member, Organisation, Repository, Team, User
from ..runtime.session import GitHubSession
from .endpoints import (
    GET_COMMIT,
    GET_CONTENT,
    GET_ISSUES,
    GET_TEAM,
    GET_USER,
    ISSUE_FILTERS,
    ORGANISATION_TEAMS,
    TEAM_MEMBERS,
    TEAM_REPOSITORIES,
    USER_ORGANISATIONS,
    USER_REPOSITORIES,
)


async def user_organisations(session: GitHubSession) -> list[Organisation]:
    """Organisations of the authorised user."""
    return await session.call(USER_ORGANISATIONS)


async def organisation_teams(session: GitHubSession, org: str) -> list[Team]:
    return await session.call(ORGANISATION_TEAMS, org)


async def get_team(session: GitHubSession, team_id: int) -> Team:
    return await session.call(GET_TEAM, team_id)


async def team_members(session: GitHubSession, team_id: int) -> list[Member]:
    return await session.call(TEAM_MEMBERS, team_id)


async def team_repositories(session: GitHubSession, team_id: int) -> list[Repository]:
    return await session.call(TEAM_REPOSITORIES, team_id)


async def user(session: GitHubSession) -> User:
    """The authorised user."""
    return await session.call(GET_USER)


async def user_repositories(
    session: GitHubSession, repo_type: str | None = None
) -> list[Repository]:
    """Repositories of the authorised user, optionally filtered by ``type``."""
    return await session.call(USER_REPOSITORIES, repo_type)


async def get_commit(session: GitHubSession, owner: str, repo: str, sha: str) -> Commit:
    return await session.call(GET_COMMIT, owner, repo, sha)


async def get_content(
    session: GitHubSession, owner: str, repo: str, path: str, ref: str | None = None
) -> Content:
    return await session.call(GET_CONTENT, owner, repo, path, ref)


async def get_issues(
    session: GitHubSession,
    owner: str,
    repo: str,
    options: Mapping[str, Any] | None = None,
) -> list[Issue]:
    """Issues of a repository.

    Args:
        session: Session to run in
        owner: Repository owner login
        repo: Repository name
        options: Optional filters keyed by GitHub query name (state, labels,
            since, ...); missing keys are not sent

    Raises:
        ConstructionError: Unknown option key or wrongly typed value
    """
    options = dict(options or {})
    unknown = sorted(set(options) - set(ISSUE_FILTERS))
    if unknown:
        raise ConstructionError(f"get_issues: unknown options: {', '.join(unknown)}", "get_issues")
    return await session.call(GET_ISSUES, owner, repo, *(options.get(k) for k in ISSUE_FILTERS))
