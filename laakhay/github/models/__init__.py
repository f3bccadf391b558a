"""Payload models for the bundled GitHub endpoint catalog.

All models are Pydantic v2, frozen, and ignore fields they do not declare
so that additions to the GitHub API do not break decoding.
"""

from .commit import Commit, CommitDetail, CommitFile, CommitStats, GitActor
from .content import Content
from .issue import Issue, Label, Milestone
from .organisation import Organisation
from .repository import Repository
from .team import Team
from .user import Member, User

__all__ = [
    "Commit",
    "CommitDetail",
    "CommitFile",
    "CommitStats",
    "Content",
    "GitActor",
    "Issue",
    "Label",
    "Member",
    "Milestone",
    "Organisation",
    "Repository",
    "Team",
    "User",
]
