from typing import Any

from pydantic import BaseModel, Field, model_validator

from wikidiscussion.core.storage import StoredModel


class PageDescription(BaseModel):
    abstract: str | None = None


class PageMetadata(StoredModel):
    """Rendered page metadata; every field defaults to an empty string."""

    title: str = ""
    creator: str = ""
    description: PageDescription = Field(default_factory=PageDescription)

    @model_validator(mode="before")
    @classmethod
    def unwrap_current(cls, data: Any) -> Any:
        """Accept both the {"current": {...}} layout and a flat mapping."""
        if isinstance(data, dict) and isinstance(data.get("current"), dict):
            data = data["current"]
        if isinstance(data, dict):
            # null values mean "unknown" in stored metadata
            data = {key: value for key, value in data.items() if value is not None}
        return data

    @property
    def abstract(self) -> str:
        return self.description.abstract or ""
