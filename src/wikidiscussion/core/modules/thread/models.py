from datetime import datetime

from pydantic import BaseModel, Field

from wikidiscussion.core.modules.comment.models import DiscussionStatus


class ThreadLink(BaseModel):
    """Link to a page's discussion section."""

    href: str = Field(..., description="Page URL with the discussion section anchor")
    title: str = Field(..., description="Page id with the discussion section anchor")
    label: str = Field(..., description="Comment count phrase, e.g. '3 Comments'")
    css_class: str = Field("wikilink1", description="CSS class for the rendered link")


class ThreadSummary(BaseModel):
    """A page with an active discussion, as listed in thread overviews and feeds."""

    page_id: str
    file: str = Field(..., description="Path of the comment record")
    title: str
    date: datetime = Field(..., description="Time of the last comment, or of the last record change")
    user: str = Field(..., description="Page creator")
    desc: str = Field(..., description="Page abstract")
    num: int = Field(..., description="Number of comments")
    comments: str = Field(..., description="Comment count phrase")
    link: ThreadLink
    status: DiscussionStatus
    perm: int = Field(..., description="Caller's permission level on the page")
    exists: bool = True
    anchor: str
