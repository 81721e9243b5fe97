from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PaginationResult(BaseModel, Generic[T]):
    """Pagination result wrapper for feed endpoints."""

    items: list[T] = Field(..., description="List of items in current page")
    limit: int = Field(..., description="Maximum items per page", ge=1)
    offset: int = Field(..., description="Number of matching items skipped before this page", ge=0)

    @property
    def next_offset(self) -> int:
        """Offset of the following page."""
        return self.offset + len(self.items)
