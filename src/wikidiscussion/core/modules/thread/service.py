from datetime import datetime

import structlog

from wikidiscussion.core.core import Service
from wikidiscussion.core.modules.access.models import AuthLevel, UserContext
from wikidiscussion.core.modules.thread.labels import DISCUSSION_ANCHOR, build_thread_link, format_comment_count, get_phrase
from wikidiscussion.core.modules.thread.models import ThreadLink, ThreadSummary
from wikidiscussion.utils import from_timestamp

logger = structlog.get_logger(__name__)


class ThreadService(Service):
    """Lists pages with active discussions, most recently commented first."""

    def column_header(self) -> str:
        """Header of the comments column in page lists."""
        return get_phrase("discussion", self.core.config.lang)

    def get_thread_link(self, page_id: str, count: int | None = None) -> ThreadLink | None:
        """Link to the discussion section of a page.

        Without a count, the count is read from the page's comment record; pages
        without a listed discussion get no link at all.
        """
        if count is None:
            record = self.core.services.comment.load(page_id)
            if record is None or not record.is_listed:
                return None
            count = record.count
        return self._build_link(page_id, count)

    def _build_link(self, page_id: str, count: int) -> ThreadLink:
        config = self.core.config
        return build_thread_link(page_id, count, config.lang, config.base_url, config.url_rewrite)

    def list_threads(
        self, user: UserContext, namespace: str, limit: int | None = None, skip_empty: bool = False
    ) -> list[ThreadSummary]:
        """Get pages under a namespace that have a discussion, sorted by last activity.

        Args:
            user: Caller, used for permission checks
            namespace: Namespace to search, including sub namespaces; '' for the whole wiki
            limit: Maximum number of threads to return, None for all
            skip_empty: Leave out discussions without comments

        Returns:
            Thread summaries, most recent activity first
        """
        services = self.core.services
        lang = self.core.config.lang
        threads: dict[tuple[datetime, str], ThreadSummary] = {}

        for page_id in services.page.list_pages(namespace):
            perm = services.access.permission_level(page_id, user)
            if perm < AuthLevel.READ:
                continue
            record = services.comment.load(page_id)
            if record is None or not record.is_listed:
                continue
            if skip_empty and record.count == 0:
                continue

            date = record.last_activity or from_timestamp(0)
            meta = services.page.metadata(page_id)
            # Page id in the key keeps threads with equal timestamps apart
            threads[(date, page_id)] = ThreadSummary(
                page_id=page_id,
                file=str(self.storage.meta_file(page_id, ".comments")),
                title=meta.title,
                date=date,
                user=meta.creator,
                desc=meta.abstract,
                num=record.count,
                comments=format_comment_count(record.count, lang),
                link=self._build_link(page_id, record.count),
                status=record.status,
                perm=perm,
                anchor=DISCUSSION_ANCHOR,
            )

        result = [threads[key] for key in sorted(threads, reverse=True)]
        if limit is not None and limit >= 0:
            result = result[:limit]

        logger.debug("list_threads", namespace=namespace, count=len(result))
        return result
