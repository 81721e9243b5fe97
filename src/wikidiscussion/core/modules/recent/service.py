import structlog
from bs4 import BeautifulSoup

from wikidiscussion.core.core import Service
from wikidiscussion.core.modules.access.models import AuthLevel, UserContext
from wikidiscussion.core.modules.changelog.models import ChangelogRecord, ChangeType
from wikidiscussion.core.modules.changelog.parser import parse_changelog_line
from wikidiscussion.core.modules.comment.models import Comment, DiscussionStatus
from wikidiscussion.core.modules.recent.models import CommentSummary
from wikidiscussion.core.pagination import PaginationResult
from wikidiscussion.utils import is_in_namespace, is_page_id

logger = structlog.get_logger(__name__)


def strip_markup(html: str) -> str:
    """Plain text of a rendered comment."""
    if not html:
        return ""
    return BeautifulSoup(html, "html.parser").get_text()


class RecentCommentService(Service):
    """Lists recently added or edited comments by scanning the comment changelog backwards."""

    def list_recent_comments(
        self, user: UserContext, namespace: str | None = None, limit: int | None = None, offset: int = 0
    ) -> PaginationResult[CommentSummary]:
        """Get the most recent comments, newest first.

        Each comment appears at most once, represented by its newest changelog
        entry. The scan stops as soon as a full page is collected, or after
        ``max_scan_lines`` lines.

        Args:
            user: Caller, used for permission checks
            namespace: Only comments on pages in this namespace (or on this page id)
            limit: Page size; None or non-positive selects the configured default
            offset: Number of matching comments to skip first
        """
        config = self.core.config
        page_size = limit if limit is not None and limit > 0 else config.recent
        offset = max(offset, 0)

        seen: set[tuple[str, str]] = set()
        items: list[CommentSummary] = []
        to_skip = offset
        examined = 0

        for line in self.core.services.changelog.read_newest_first():
            if examined >= config.max_scan_lines:
                logger.warning("recent_comments_scan_truncated", examined=examined, found=len(items))
                break
            examined += 1

            summary = self._resolve_line(line, namespace, user, seen)
            if summary is None:
                continue
            if to_skip > 0:
                to_skip -= 1
                continue
            items.append(summary)
            if len(items) >= page_size:
                break

        # Newest first even if the log holds entries out of order
        items.sort(key=lambda item: item.date, reverse=True)

        logger.debug("list_recent_comments", namespace=namespace, examined=examined, count=len(items))
        return PaginationResult(items=items, limit=page_size, offset=offset)

    def _resolve_line(
        self, line: str, namespace: str | None, user: UserContext, seen: set[tuple[str, str]]
    ) -> CommentSummary | None:
        """Turn one changelog line into a comment summary, or None if it must not be shown."""
        record = parse_changelog_line(line)
        if record is None:
            return None

        # Only the newest entry per comment counts; "shown" entries never mark a comment as seen
        if record.key in seen:
            return None
        if record.type == ChangeType.SHOWN:
            return None
        seen.add(record.key)

        if not is_page_id(record.page_id):
            return None
        services = self.core.services
        if services.page.is_hidden(record.page_id) or record.type == ChangeType.HIDDEN:
            return None
        if not is_in_namespace(record.page_id, namespace):
            return None

        perm = services.access.permission_level(record.page_id, user)
        if perm < AuthLevel.READ:
            return None

        if not services.page.exists(record.page_id):
            return None
        if record.type == ChangeType.DELETED:
            return None

        thread = services.comment.load(record.page_id)
        if thread is None or thread.status == DiscussionStatus.OFF:
            return None
        if not thread.has_visible_chain(record.comment_id):
            return None

        return self._summarize(record, perm, thread.comments[record.comment_id])

    def _summarize(self, record: ChangelogRecord, perm: int, comment: Comment) -> CommentSummary:
        return CommentSummary(
            date=record.timestamp,
            type=record.type,
            page_id=record.page_id,
            comment_id=record.comment_id,
            ip=record.ip,
            user=record.user,
            summary=record.summary,
            perm=perm,
            file=str(self.core.services.page.locate(record.page_id)),
            exists=True,
            name=comment.author_name,
            desc=strip_markup(comment.body_html),
            anchor=f"comment_{record.comment_id}",
        )
