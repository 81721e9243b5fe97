import pydantic
import structlog

from wikidiscussion.core.core import Service
from wikidiscussion.core.modules.comment.models import PageCommentRecord
from wikidiscussion.utils import from_timestamp

logger = structlog.get_logger(__name__)


class CommentService(Service):
    """Read access to the per-page comment records."""

    def load(self, page_id: str) -> PageCommentRecord | None:
        """Load a page's comment record.

        Returns None if the page never had discussion data. A record that cannot
        be read or validated is logged and also returned as None.
        """
        path = self.storage.meta_file(page_id, ".comments")
        if not path.is_file():
            return None
        try:
            record = PageCommentRecord.load_file(path)
            modified_at = from_timestamp(path.stat().st_mtime)
        except (OSError, pydantic.ValidationError) as e:
            logger.warning("comment_record_invalid", page_id=page_id, error=str(e))
            return None
        return record.model_copy(update={"modified_at": modified_at})
