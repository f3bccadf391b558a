"""Team data model."""

from pydantic import BaseModel, ConfigDict, Field


class Team(BaseModel):
    """Organisation team."""

    id: int
    name: str = Field(..., min_length=1)
    slug: str
    description: str | None = None
    privacy: str | None = None
    permission: str | None = None
    url: str | None = None
    members_count: int | None = Field(None, ge=0)
    repos_count: int | None = Field(None, ge=0)

    model_config = ConfigDict(frozen=True, extra="ignore")
