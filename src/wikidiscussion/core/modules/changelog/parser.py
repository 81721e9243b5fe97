"""Changelog line format.

A line holds tab separated fields::

    timestamp  ip  type  page_id  user  summary  extra  [size_change]

``timestamp`` is in unix seconds, ``extra`` carries the comment id.
"""

from wikidiscussion.core.modules.changelog.models import ChangelogRecord
from wikidiscussion.utils import from_timestamp

FIELD_SEPARATOR = "\t"
REQUIRED_FIELDS = 7


def parse_changelog_line(line: str) -> ChangelogRecord | None:
    """Parse one changelog line, returning None for empty or malformed lines."""
    line = line.rstrip("\r\n")
    if not line.strip():
        return None
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) < REQUIRED_FIELDS:
        return None

    timestamp, ip, change_type, page_id, user, summary, extra = parts[:REQUIRED_FIELDS]
    try:
        date = from_timestamp(int(timestamp))
    except (ValueError, OverflowError, OSError):
        return None
    if not page_id or not change_type:
        return None

    size_change = None
    if len(parts) > REQUIRED_FIELDS and parts[REQUIRED_FIELDS]:
        try:
            size_change = int(parts[REQUIRED_FIELDS])
        except ValueError:
            size_change = None

    return ChangelogRecord(
        timestamp=date,
        ip=ip,
        type=change_type,
        page_id=page_id,
        user=user,
        summary=summary,
        extra=extra,
        size_change=size_change,
    )


def format_changelog_line(record: ChangelogRecord) -> str:
    """Serialize a record back into a changelog line, without the trailing newline."""
    fields = [
        str(int(record.timestamp.timestamp())),
        record.ip,
        record.type,
        record.page_id,
        record.user,
        record.summary,
        record.extra,
    ]
    if record.size_change is not None:
        fields.append(str(record.size_change))
    return FIELD_SEPARATOR.join(fields)
