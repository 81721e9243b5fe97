from collections.abc import Iterator

import structlog

from wikidiscussion.core.core import Service
from wikidiscussion.core.modules.changelog.reader import read_lines_reversed

logger = structlog.get_logger(__name__)


class ChangelogService(Service):
    """Access to the append-only comment changelog."""

    def read_newest_first(self) -> Iterator[str]:
        """Yield raw changelog lines, newest first.

        A missing changelog yields nothing; a read failure ends the iteration
        after logging, so callers see a shorter log rather than an error.
        """
        path = self.storage.changelog_file
        if not path.is_file():
            return
        try:
            yield from read_lines_reversed(path)
        except OSError as e:
            logger.warning("changelog_read_failed", path=str(path), error=str(e))
