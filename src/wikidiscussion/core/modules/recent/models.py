from datetime import datetime

from pydantic import BaseModel, Field


class CommentSummary(BaseModel):
    """A recently posted or edited comment, as shown in recent comment feeds."""

    date: datetime = Field(..., description="Time of the changelog entry")
    type: str = Field(..., description="Changelog entry type")
    page_id: str
    comment_id: str
    ip: str = ""
    user: str = Field("", description="User who made the change")
    summary: str = ""
    perm: int = Field(..., description="Caller's permission level on the page")
    file: str = Field(..., description="Path of the page source")
    exists: bool = True
    name: str = Field(..., description="Display name of the comment author")
    desc: str = Field(..., description="Comment text without markup")
    anchor: str = Field(..., description="Anchor of the comment on its page")
