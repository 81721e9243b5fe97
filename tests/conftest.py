"""Shared pytest fixtures."""

import json
import os
from pathlib import Path
from typing import Any

import pytest

from wikidiscussion.config import Config
from wikidiscussion.core.core import Core
from wikidiscussion.core.modules.access.models import UserContext
from wikidiscussion.core.modules.changelog.models import ChangelogRecord
from wikidiscussion.core.modules.changelog.parser import format_changelog_line
from wikidiscussion.utils import from_timestamp, page_id_to_path


def make_comment(
    cid: str,
    *,
    parent: str | None = None,
    show: bool = True,
    name: str = "Alice",
    user: dict[str, str] | None = None,
    created: int = 1700000000,
    xhtml: str = "<p>Nice page</p>",
) -> dict[str, Any]:
    """Build a comment in the stored layout."""
    comment: dict[str, Any] = {
        "cid": cid,
        "parent": parent,
        "show": show,
        "date": {"created": created},
        "raw": "Nice page",
        "xhtml": xhtml,
    }
    if user is not None:
        comment["user"] = user
    else:
        comment["name"] = name
    return comment


class WikiDir:
    """Writes pages, metadata, comment records and changelog lines into a temporary data directory."""

    def __init__(self, root: Path) -> None:
        self.pages_path = root / "pages"
        self.meta_path = root / "meta"
        self.pages_path.mkdir(parents=True)
        self.meta_path.mkdir(parents=True)

    def add_page(self, page_id: str, text: str = "====== Page ======") -> Path:
        path = self.pages_path / f"{page_id_to_path(page_id)}.txt"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
        return path

    def add_meta(self, page_id: str, title: str = "", creator: str = "", abstract: str = "") -> None:
        path = self.meta_path / f"{page_id_to_path(page_id)}.meta"
        path.parent.mkdir(parents=True, exist_ok=True)
        data = {"current": {"title": title, "creator": creator, "description": {"abstract": abstract}}}
        path.write_text(json.dumps(data))

    def add_comments(
        self,
        page_id: str,
        comments: list[dict[str, Any]],
        status: int = 1,
        number: int | None = None,
        mtime: int | None = None,
    ) -> Path:
        path = self.meta_path / f"{page_id_to_path(page_id)}.comments"
        path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "status": status,
            "number": len(comments) if number is None else number,
            "comments": {comment["cid"]: comment for comment in comments},
        }
        path.write_text(json.dumps(data))
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    def write_raw_comments(self, page_id: str, content: str) -> None:
        path = self.meta_path / f"{page_id_to_path(page_id)}.comments"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)

    def log(self, timestamp: int, change_type: str, page_id: str, cid: str, user: str = "alice") -> None:
        record = ChangelogRecord(
            timestamp=from_timestamp(timestamp),
            ip="127.0.0.1",
            type=change_type,
            page_id=page_id,
            user=user,
            summary="",
            extra=cid,
        )
        self.log_raw(format_changelog_line(record))

    def log_raw(self, line: str) -> None:
        with (self.meta_path / "_comments.changes").open("a", encoding="utf-8") as fh:
            fh.write(line + "\n")


@pytest.fixture
def wiki(tmp_path):
    """Empty wiki data directory."""
    return WikiDir(tmp_path)


@pytest.fixture
def make_core(wiki):
    """Create a Core over the test wiki, with optional config overrides."""

    def factory(**overrides: Any) -> Core:
        config = Config(pages_path=str(wiki.pages_path), meta_path=str(wiki.meta_path), **overrides)
        return Core(config)

    return factory


@pytest.fixture
def core(make_core):
    return make_core()


@pytest.fixture
def anonymous():
    """Anonymous caller."""
    return UserContext()


@pytest.fixture
def comment():
    """Factory for comments in the stored layout."""
    return make_comment
