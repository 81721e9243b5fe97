from enum import IntEnum

from pydantic import BaseModel, Field


class AuthLevel(IntEnum):
    """Page permission levels, compared with >=."""

    NONE = 0
    READ = 1
    EDIT = 2
    CREATE = 4
    UPLOAD = 8
    DELETE = 16
    ADMIN = 255


class UserContext(BaseModel):
    """Identity of the caller of a query, as announced by the reverse proxy."""

    name: str | None = Field(None, description="Login name, None for anonymous callers")
    groups: list[str] = Field(default_factory=list, description="Group names without the '@' prefix")

    @property
    def is_anonymous(self) -> bool:
        return self.name is None
