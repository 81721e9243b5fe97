from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import PackageNotFoundError, version

from wikidiscussion.config import Config
from wikidiscussion.core.core import Core
from wikidiscussion.core.modules.access.models import UserContext
from wikidiscussion.core.modules.recent.models import CommentSummary
from wikidiscussion.core.modules.thread.models import ThreadLink, ThreadSummary
from wikidiscussion.core.pagination import PaginationResult
from wikidiscussion.errors import AccessDeniedError, NotFoundError
from wikidiscussion.utils import clean_page_id


class App:
    """Facade for all discussion queries, normalizes input and passes the caller explicitly to Core."""

    def __init__(self, config: Config) -> None:
        self._core = Core(config)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    def resolve_user(self, name: str | None, groups: str | None) -> UserContext:
        """Build the caller context from the values announced by the reverse proxy."""
        group_names = [group.strip().lstrip("@") for group in (groups or "").split(",") if group.strip()]
        return UserContext(name=name or None, groups=group_names)

    def render_column_header(self) -> str:
        """Get the header of the comments column for page lists."""
        return self._core.services.thread.column_header()

    def render_thread_link(self, user: UserContext, page_id: str, count: int | None = None) -> ThreadLink | None:
        """Get the link to a page's discussion section (readable existing pages only)."""
        page_id = clean_page_id(page_id)
        if not self._core.services.page.exists(page_id):
            raise NotFoundError(f"Page '{page_id}' not found")
        if not self._core.services.access.can_read(page_id, user):
            raise AccessDeniedError(f"Access denied: page '{page_id}'")
        return self._core.services.thread.get_thread_link(page_id, count)

    def list_threads(
        self, user: UserContext, namespace: str = "", limit: int | None = None, skip_empty: bool = False
    ) -> list[ThreadSummary]:
        """Get pages with discussions in a namespace, most recently commented first."""
        namespace = clean_page_id(namespace) if namespace.strip(" :") else ""
        return self._core.services.thread.list_threads(user, namespace, limit, skip_empty)

    def list_recent_comments(
        self, user: UserContext, namespace: str | None = None, limit: int | None = None, offset: int = 0
    ) -> PaginationResult[CommentSummary]:
        """Get recently added or edited comments, newest first."""
        namespace = clean_page_id(namespace) if namespace and namespace.strip(" :") else None
        return self._core.services.recent.list_recent_comments(user, namespace, limit, offset)

    def is_moderator(self, user: UserContext) -> bool:
        """Check if the caller may moderate discussions."""
        return self._core.services.access.is_moderator(user)

    def get_version(self) -> dict[str, str]:
        """Get package version and build information."""
        try:
            package_version = version("wikidiscussion")
        except PackageNotFoundError:
            package_version = "unknown"
        config = self._core.config
        return {
            "version": package_version,
            "git_commit_hash": config.git_commit_hash,
            "git_commit_date": config.git_commit_date,
            "build_time": config.build_time,
        }
