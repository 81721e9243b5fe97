import re
from datetime import UTC, datetime

from wikidiscussion.errors import ValidationError

PAGE_ID_SEGMENT_RE = re.compile(r"^[a-z0-9._-]+$")


def now() -> datetime:
    return datetime.now(UTC)


def from_timestamp(value: float) -> datetime:
    """Convert unix seconds to an aware UTC datetime."""
    return datetime.fromtimestamp(value, UTC)


def is_page_id(value: str) -> bool:
    """Check that every colon separated segment is a safe, non-empty name."""
    if not value:
        return False
    for segment in value.split(":"):
        if not PAGE_ID_SEGMENT_RE.fullmatch(segment) or segment.strip(".") == "":
            return False
    return True


def clean_page_id(value: str) -> str:
    """Normalize a page id or namespace, raising ValidationError when it cannot map to a file path."""
    page_id = value.strip().strip(":").lower()
    if not is_page_id(page_id):
        raise ValidationError(f"Invalid page id: '{value}'")
    return page_id


def is_in_namespace(page_id: str, namespace: str | None) -> bool:
    """Match whole namespace segments: 'foo' covers 'foo:bar' and 'foo' but not 'foobar:baz'."""
    if not namespace:
        return True
    return f"{page_id}:".startswith(f"{namespace}:")


def page_id_to_path(page_id: str) -> str:
    return page_id.replace(":", "/")


def path_to_page_id(relative_path: str) -> str:
    return relative_path.replace("/", ":")
