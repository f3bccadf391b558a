"""Organisation data model."""

from pydantic import BaseModel, ConfigDict, Field


class Organisation(BaseModel):
    """Organisation the authorised user belongs to."""

    login: str = Field(..., min_length=1)
    id: int
    url: str | None = None
    description: str | None = None
    avatar_url: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")
