from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field


class ChangeType(StrEnum):
    """Kinds of comment changelog entries."""

    CREATED = "cc"
    EDITED = "ec"
    HIDDEN = "hc"  # Comment hidden by a moderator
    SHOWN = "sc"  # Hidden comment made visible again; bookkeeping only
    DELETED = "dc"


class ChangelogRecord(BaseModel):
    """One line of the comment changelog."""

    timestamp: datetime
    ip: str = ""
    type: str = Field(..., description="ChangeType value; unknown types are kept as is")
    page_id: str
    user: str = ""
    summary: str = ""
    extra: str = Field("", description="Comment id for comment entries")
    size_change: int | None = None

    @property
    def comment_id(self) -> str:
        return self.extra

    @property
    def key(self) -> tuple[str, str]:
        """Identity of the comment this entry refers to."""
        return self.page_id, self.extra
