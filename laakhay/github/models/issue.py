"""Issue data models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .user import Member


class Label(BaseModel):
    name: str
    color: str | None = None
    description: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class Milestone(BaseModel):
    number: int
    title: str
    state: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class Issue(BaseModel):
    """Repository issue.

    GitHub also lists pull requests through the issues endpoint; those carry
    a ``pull_request`` object.
    """

    id: int
    number: int = Field(..., ge=1)
    title: str
    state: str
    body: str | None = None
    user: Member | None = None
    labels: list[Label] = Field(default_factory=list)
    assignee: Member | None = None
    assignees: list[Member] = Field(default_factory=list)
    milestone: Milestone | None = None
    comments: int = Field(0, ge=0)
    html_url: str | None = None
    pull_request: dict | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def is_pull_request(self) -> bool:
        return self.pull_request is not None
