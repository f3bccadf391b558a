"""Repository data model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .user import Member


class Repository(BaseModel):
    """Repository summary as returned by list endpoints."""

    id: int
    name: str = Field(..., min_length=1)
    full_name: str
    owner: Member | None = None
    private: bool = False
    fork: bool = False
    description: str | None = None
    html_url: str | None = None
    language: str | None = None
    default_branch: str | None = None
    stargazers_count: int = Field(0, ge=0)
    forks_count: int = Field(0, ge=0)
    open_issues_count: int = Field(0, ge=0)
    pushed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")
