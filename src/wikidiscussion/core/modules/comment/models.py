from datetime import datetime
from enum import IntEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from wikidiscussion.core.storage import StoredModel


class DiscussionStatus(IntEnum):
    """Whether a page's discussion section is shown and accepts comments."""

    OFF = 0
    OPEN = 1
    CLOSED = 2  # Closed for new comments, existing ones stay visible


class StructuredAuthor(BaseModel):
    """Author of a comment written by a logged in user."""

    kind: Literal["user"] = "user"
    id: str = ""
    name: str = ""
    mail: str = ""
    address: str = ""


class BareAuthor(BaseModel):
    """Author of an anonymous comment, only the entered display name is known."""

    kind: Literal["name"] = "name"
    name: str = ""


Author = Annotated[StructuredAuthor | BareAuthor, Field(discriminator="kind")]


def _stored_timestamp(value: Any) -> Any:
    # Stored dates are unix seconds; false or 0 means "not set"
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    return value or None


class Comment(BaseModel):
    """One discussion entry of a page."""

    id: str
    parent_id: str = ""  # Empty for top level comments
    visible: bool = False
    author: Author = Field(default_factory=BareAuthor)
    raw: str = ""
    body_html: str = ""
    created_at: datetime | None = None
    modified_at: datetime | None = None

    @model_validator(mode="before")
    @classmethod
    def from_stored(cls, data: Any) -> Any:
        """Map the stored comment layout (show/parent/user/name/xhtml/date) onto the model fields."""
        if not isinstance(data, dict) or "author" in data:
            return data
        data = dict(data)
        if "show" in data:
            data["visible"] = data.pop("show")
        if "parent" in data:
            data["parent_id"] = data.pop("parent")
        if "xhtml" in data:
            data["body_html"] = data.pop("xhtml") or ""

        # The author is either a user record or a bare name, resolved here once
        user = data.pop("user", None)
        name = data.pop("name", None)
        if isinstance(user, dict):
            data["author"] = {"kind": "user", **{k: v for k, v in user.items() if v is not None}}
        else:
            data["author"] = {"kind": "name", "name": name or user or ""}

        date = data.pop("date", None)
        if isinstance(date, dict):
            data["created_at"] = _stored_timestamp(date.get("created"))
            data["modified_at"] = _stored_timestamp(date.get("modified"))
        return data

    @field_validator("parent_id", mode="before")
    @classmethod
    def parent_or_empty(cls, value: Any) -> Any:
        return value or ""

    @property
    def author_name(self) -> str:
        return self.author.name


class PageCommentRecord(StoredModel):
    """Discussion data of one page: status, visible comment count and comments in posting order."""

    status: DiscussionStatus = DiscussionStatus.OFF
    count: int = 0
    comments: dict[str, Comment] = Field(default_factory=dict)
    modified_at: datetime | None = None  # Modification time of the stored record

    @model_validator(mode="before")
    @classmethod
    def from_stored(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if "number" in data:
            data["count"] = data.pop("number") or 0
        comments = data.get("comments")
        if not comments:
            # An empty mapping may have been stored as a list
            data["comments"] = {}
        elif isinstance(comments, dict):
            data["comments"] = {
                cid: {**comment, "id": cid} if isinstance(comment, dict) else comment for cid, comment in comments.items()
            }
        return data

    @property
    def is_listed(self) -> bool:
        """Off threads and closed threads without comments count as having no discussion."""
        if self.status == DiscussionStatus.OFF:
            return False
        return not (self.status == DiscussionStatus.CLOSED and self.count == 0)

    @property
    def last_activity(self) -> datetime | None:
        """Creation time of the last posted comment, else the record's modification time."""
        if self.comments:
            latest = next(reversed(self.comments.values()))
            if latest.created_at is not None:
                return latest.created_at
        return self.modified_at

    def has_visible_chain(self, comment_id: str) -> bool:
        """Check that a comment and all of its ancestors exist and are visible."""
        visited: set[str] = set()
        current = comment_id
        while True:
            comment = self.comments.get(current)
            if comment is None or not comment.visible:
                return False
            visited.add(current)
            # Self references and longer cycles end the walk as if top level
            if not comment.parent_id or comment.parent_id in visited:
                return True
            current = comment.parent_id
