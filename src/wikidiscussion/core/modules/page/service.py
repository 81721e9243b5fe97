import re
from functools import cached_property
from pathlib import Path

import pydantic
import structlog

from wikidiscussion.core.core import Service
from wikidiscussion.core.modules.page.models import PageMetadata
from wikidiscussion.utils import is_page_id, path_to_page_id

logger = structlog.get_logger(__name__)


class PageService(Service):
    """Page traversal, existence and metadata lookups on the pages/meta directories."""

    async def on_start(self) -> None:
        if not self.storage.pages_dir.is_dir():
            logger.warning("pages_dir_missing", path=str(self.storage.pages_dir))
        if not self.storage.meta_dir.is_dir():
            logger.warning("meta_dir_missing", path=str(self.storage.meta_dir))

    @cached_property
    def _hidden_re(self) -> re.Pattern[str] | None:
        pattern = self.core.config.hidden_pages
        if not pattern:
            return None
        return re.compile(pattern, re.IGNORECASE)

    def list_pages(self, namespace: str) -> list[str]:
        """List ids of all pages under a namespace and its sub namespaces, unordered, without ACL checks."""
        root = self.storage.namespace_dir(namespace)
        if not root.is_dir():
            return []
        page_ids = []
        for path in root.rglob("*.txt"):
            if not path.is_file():
                continue
            relative = path.relative_to(self.storage.pages_dir).with_suffix("").as_posix()
            page_id = path_to_page_id(relative)
            if is_page_id(page_id):
                page_ids.append(page_id)
        return page_ids

    def locate(self, page_id: str) -> Path:
        return self.storage.page_file(page_id)

    def exists(self, page_id: str) -> bool:
        return self.locate(page_id).is_file()

    def is_hidden(self, page_id: str) -> bool:
        if self._hidden_re is None:
            return False
        return self._hidden_re.search(f":{page_id}") is not None

    def metadata(self, page_id: str) -> PageMetadata:
        """Get title, creator and abstract of a page; missing or broken metadata yields empty fields."""
        path = self.storage.meta_file(page_id, ".meta")
        if not path.is_file():
            return PageMetadata()
        try:
            return PageMetadata.load_file(path)
        except (OSError, pydantic.ValidationError) as e:
            logger.warning("page_metadata_invalid", page_id=page_id, error=str(e))
            return PageMetadata()
