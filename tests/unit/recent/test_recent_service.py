"""Tests for the recent comments feed."""

from datetime import UTC, datetime

import pytest

from wikidiscussion.core.modules.recent.service import strip_markup


@pytest.fixture
def page_a(wiki, comment):
    """Page 'a' with three visible top level comments."""
    wiki.add_page("a")
    wiki.add_comments("a", [comment("c1"), comment("c2"), comment("c3")])


def comment_ids(result):
    return [(item.page_id, item.comment_id) for item in result.items]


class TestListRecentComments:
    """Tests for RecentCommentService.list_recent_comments."""

    def test_hide_action_suppresses_older_entries(self, core, wiki, page_a, anonymous):
        """Test that a later hide entry removes the comment from the feed."""
        wiki.log(1, "cc", "a", "c1")
        wiki.log(2, "cc", "a", "c2")
        wiki.log(3, "hc", "a", "c1")

        result = core.services.recent.list_recent_comments(anonymous, limit=10)

        assert comment_ids(result) == [("a", "c2")]

    def test_newest_first_without_duplicates(self, core, wiki, page_a, anonymous):
        wiki.log(1, "cc", "a", "c1")
        wiki.log(2, "cc", "a", "c2")
        wiki.log(3, "ec", "a", "c1")
        wiki.log(4, "ec", "a", "c1")

        result = core.services.recent.list_recent_comments(anonymous, limit=10)

        assert comment_ids(result) == [("a", "c1"), ("a", "c2")]
        assert result.items[0].date == datetime.fromtimestamp(4, UTC)
        assert result.items[0].type == "ec"

    def test_show_entries_are_skipped_but_do_not_hide(self, core, wiki, page_a, anonymous):
        """Test that a 'shown' entry lets the older entry of the same comment through."""
        wiki.log(1, "cc", "a", "c1")
        wiki.log(2, "hc", "a", "c1")
        wiki.log(3, "sc", "a", "c1")

        result = core.services.recent.list_recent_comments(anonymous, limit=10)

        # Newest non-"shown" entry is the hide action
        assert comment_ids(result) == []

    def test_show_entry_before_edit(self, core, wiki, page_a, anonymous):
        wiki.log(1, "cc", "a", "c1")
        wiki.log(2, "sc", "a", "c1")

        result = core.services.recent.list_recent_comments(anonymous, limit=10)

        assert comment_ids(result) == [("a", "c1")]
        assert result.items[0].type == "cc"

    def test_deleted_comment_entry(self, core, wiki, page_a, anonymous):
        wiki.log(1, "cc", "a", "c1")
        wiki.log(2, "dc", "a", "c1")

        assert comment_ids(core.services.recent.list_recent_comments(anonymous)) == []

    def test_namespace_filter(self, core, wiki, comment, anonymous):
        for page_id in ["foo:bar", "foobar:baz", "foo"]:
            wiki.add_page(page_id)
            wiki.add_comments(page_id, [comment("c1")])
            wiki.log(1, "cc", page_id, "c1")

        result = core.services.recent.list_recent_comments(anonymous, namespace="foo")

        assert sorted(comment_ids(result)) == [("foo", "c1"), ("foo:bar", "c1")]

    def test_namespace_filter_does_not_match_name_prefix(self, core, wiki, comment, anonymous):
        wiki.add_page("foo:bar")
        wiki.add_comments("foo:bar", [comment("c1")])
        wiki.log(1, "cc", "foo:bar", "c1")

        assert comment_ids(core.services.recent.list_recent_comments(anonymous, namespace="foo:ba")) == []

    def test_invisible_parent_excludes_reply(self, core, wiki, comment, anonymous):
        wiki.add_page("a")
        wiki.add_comments("a", [comment("c1", show=False), comment("c2", parent="c1")])
        wiki.log(1, "cc", "a", "c2")

        assert comment_ids(core.services.recent.list_recent_comments(anonymous)) == []

    def test_missing_parent_excludes_reply(self, core, wiki, comment, anonymous):
        wiki.add_page("a")
        wiki.add_comments("a", [comment("c2", parent="gone")])
        wiki.log(1, "cc", "a", "c2")

        assert comment_ids(core.services.recent.list_recent_comments(anonymous)) == []

    def test_visible_reply_chain(self, core, wiki, comment, anonymous):
        wiki.add_page("a")
        wiki.add_comments("a", [comment("c1"), comment("c2", parent="c1"), comment("c3", parent="c2")])
        wiki.log(1, "cc", "a", "c3")

        assert comment_ids(core.services.recent.list_recent_comments(anonymous)) == [("a", "c3")]

    def test_removed_comment(self, core, wiki, page_a, anonymous):
        wiki.log(1, "cc", "a", "c9")
        assert comment_ids(core.services.recent.list_recent_comments(anonymous)) == []

    def test_discussion_off(self, core, wiki, comment, anonymous):
        wiki.add_page("a")
        wiki.add_comments("a", [comment("c1")], status=0)
        wiki.log(1, "cc", "a", "c1")

        assert comment_ids(core.services.recent.list_recent_comments(anonymous)) == []

    def test_closed_discussion_keeps_comments(self, core, wiki, comment, anonymous):
        wiki.add_page("a")
        wiki.add_comments("a", [comment("c1")], status=2)
        wiki.log(1, "cc", "a", "c1")

        assert comment_ids(core.services.recent.list_recent_comments(anonymous)) == [("a", "c1")]

    def test_deleted_page_and_missing_record(self, core, wiki, comment, anonymous):
        wiki.add_comments("gone", [comment("c1")])
        wiki.log(1, "cc", "gone", "c1")
        wiki.add_page("norecord")
        wiki.log(2, "cc", "norecord", "c1")

        assert comment_ids(core.services.recent.list_recent_comments(anonymous)) == []

    def test_hidden_pages(self, make_core, wiki, comment, anonymous):
        core = make_core(hidden_pages="^:secret")
        wiki.add_page("secret")
        wiki.add_comments("secret", [comment("c1")])
        wiki.log(1, "cc", "secret", "c1")

        assert comment_ids(core.services.recent.list_recent_comments(anonymous)) == []

    def test_permission_denied(self, make_core, wiki, page_a, anonymous):
        core = make_core(acl={"a": 0})
        wiki.log(1, "cc", "a", "c1")

        assert comment_ids(core.services.recent.list_recent_comments(anonymous)) == []

    def test_malformed_lines_are_skipped(self, core, wiki, page_a, anonymous):
        wiki.log(1, "cc", "a", "c1")
        wiki.log_raw("this is not a changelog line")
        wiki.log_raw("")
        wiki.log_raw("12\t::1\tcc\t../../etc\tx\t\tc1")
        wiki.log(2, "cc", "a", "c2")

        assert comment_ids(core.services.recent.list_recent_comments(anonymous)) == [("a", "c2"), ("a", "c1")]

    def test_missing_changelog(self, core, anonymous):
        result = core.services.recent.list_recent_comments(anonymous)
        assert result.items == []


class TestPagination:
    """Tests for offset and limit handling."""

    @pytest.fixture
    def five_comments(self, wiki, comment):
        wiki.add_page("a")
        wiki.add_comments("a", [comment(f"c{i}") for i in range(5)])
        for i in range(5):
            wiki.log(i + 1, "cc", "a", f"c{i}")

    def test_limit_bounds_result(self, core, five_comments, anonymous):
        result = core.services.recent.list_recent_comments(anonymous, limit=2)

        assert [item.comment_id for item in result.items] == ["c4", "c3"]
        assert result.limit == 2

    def test_offset_skips_passing_entries(self, core, five_comments, anonymous):
        result = core.services.recent.list_recent_comments(anonymous, limit=2, offset=2)

        assert [item.comment_id for item in result.items] == ["c2", "c1"]
        assert result.offset == 2
        assert result.next_offset == 4

    def test_offset_counts_only_passing_entries(self, core, wiki, five_comments, anonymous):
        wiki.log(6, "hc", "a", "c4")
        wiki.log(7, "cc", "a", "missing")

        result = core.services.recent.list_recent_comments(anonymous, limit=10, offset=1)

        assert [item.comment_id for item in result.items] == ["c2", "c1", "c0"]

    def test_offset_past_end(self, core, five_comments, anonymous):
        assert core.services.recent.list_recent_comments(anonymous, offset=10).items == []

    @pytest.mark.parametrize("limit", [None, 0, -3])
    def test_default_page_size(self, make_core, five_comments, anonymous, limit):
        core = make_core(recent=3)
        result = core.services.recent.list_recent_comments(anonymous, limit=limit)

        assert len(result.items) == 3
        assert result.limit == 3

    def test_scan_cap_truncates(self, make_core, five_comments, anonymous):
        core = make_core(max_scan_lines=2)
        result = core.services.recent.list_recent_comments(anonymous, limit=10)

        assert [item.comment_id for item in result.items] == ["c4", "c3"]


class TestEnrichment:
    """Tests for the fields added to each comment."""

    def test_structured_author_and_plain_text(self, core, wiki, comment, anonymous):
        wiki.add_page("wiki:start")
        wiki.add_comments(
            "wiki:start",
            [comment("c1", user={"id": "bob", "name": "Bob", "mail": "bob@example.org"}, xhtml="<p>Hello <b>world</b></p>")],
        )
        wiki.log(1700000000, "cc", "wiki:start", "c1", user="bob")

        item = core.services.recent.list_recent_comments(anonymous).items[0]

        assert item.name == "Bob"
        assert item.desc == "Hello world"
        assert item.anchor == "comment_c1"
        assert item.user == "bob"
        assert item.perm == 1
        assert item.exists is True
        assert item.file.endswith("wiki/start.txt")

    def test_bare_author(self, core, wiki, comment, anonymous):
        wiki.add_page("a")
        wiki.add_comments("a", [comment("c1", name="Guest")])
        wiki.log(1, "cc", "a", "c1", user="")

        assert core.services.recent.list_recent_comments(anonymous).items[0].name == "Guest"


def test_strip_markup():
    assert strip_markup("<div class='x'><p>a &amp; b</p></div>") == "a & b"
    assert strip_markup("") == ""
    assert strip_markup("plain") == "plain"
