"""Commit data models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .user import Member


class GitActor(BaseModel):
    """Author or committer as recorded in git."""

    name: str
    email: str | None = None
    date: datetime | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class CommitDetail(BaseModel):
    """The git-level part of a commit."""

    message: str
    author: GitActor | None = None
    committer: GitActor | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class CommitStats(BaseModel):
    additions: int = Field(0, ge=0)
    deletions: int = Field(0, ge=0)
    total: int = Field(0, ge=0)

    model_config = ConfigDict(frozen=True, extra="ignore")


class CommitFile(BaseModel):
    filename: str
    status: str
    additions: int = Field(0, ge=0)
    deletions: int = Field(0, ge=0)
    changes: int = Field(0, ge=0)
    patch: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class Commit(BaseModel):
    """Commit for a repository and reference."""

    sha: str = Field(..., min_length=1)
    commit: CommitDetail
    html_url: str | None = None
    author: Member | None = None
    committer: Member | None = None
    stats: CommitStats | None = None
    files: list[CommitFile] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def message(self) -> str:
        return self.commit.message
