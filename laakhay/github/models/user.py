"""GitHub user data models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Member(BaseModel):
    """Abbreviated account record as returned in lists (team members, issue authors)."""

    login: str = Field(..., min_length=1)
    id: int
    type: str = "User"
    site_admin: bool = False
    avatar_url: str | None = None
    html_url: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class User(Member):
    """Full profile of a user account."""

    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    bio: str | None = None
    public_repos: int = Field(0, ge=0)
    followers: int = Field(0, ge=0)
    following: int = Field(0, ge=0)
    created_at: datetime | None = None
    updated_at: datetime | None = None
