"""Repository content data model."""

import base64

from pydantic import BaseModel, ConfigDict, Field


class Content(BaseModel):
    """File (or other entry) fetched from a repository path."""

    type: str
    name: str
    path: str
    sha: str
    size: int = Field(0, ge=0)
    encoding: str | None = None
    content: str | None = None
    html_url: str | None = None
    download_url: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    def decoded(self) -> bytes:
        """Raw file bytes; GitHub sends file bodies base64 encoded."""
        if self.content is None:
            return b""
        if self.encoding == "base64":
            return base64.b64decode(self.content)
        return self.content.encode()
