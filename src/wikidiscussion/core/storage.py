from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict

from wikidiscussion.utils import page_id_to_path

COMMENTS_CHANGELOG = "_comments.changes"


class StoredModel(BaseModel):
    """Base for records deserialized from JSON files of the data directory."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    @classmethod
    def load_file(cls, path: Path) -> Self:
        """Read and validate a JSON record. Raises OSError or pydantic.ValidationError."""
        return cls.model_validate_json(path.read_bytes())


class WikiStorage:
    """Paths of a DokuWiki-style data directory."""

    def __init__(self, pages_path: str, meta_path: str) -> None:
        self.pages_dir = Path(pages_path)
        self.meta_dir = Path(meta_path)

    def namespace_dir(self, namespace: str) -> Path:
        """Get the pages directory of a namespace; the root namespace is ''."""
        if not namespace:
            return self.pages_dir
        return self.pages_dir / page_id_to_path(namespace)

    def page_file(self, page_id: str) -> Path:
        return self.pages_dir / f"{page_id_to_path(page_id)}.txt"

    def meta_file(self, page_id: str, ext: str) -> Path:
        """Get a per-page metadata file, e.g. meta_file("wiki:start", ".comments")."""
        return self.meta_dir / f"{page_id_to_path(page_id)}{ext}"

    @property
    def changelog_file(self) -> Path:
        return self.meta_dir / COMMENTS_CHANGELOG
