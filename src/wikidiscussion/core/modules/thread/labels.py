"""Comment count labels and discussion links."""

from urllib.parse import quote

from wikidiscussion.core.modules.thread.models import ThreadLink

DISCUSSION_ANCHOR = "discussion__section"
NBSP = "\u00a0"

DEFAULT_LANG = "en"
LANG: dict[str, dict[str, str]] = {
    "en": {
        "discussion": "Discussion",
        "comment": "Comment",
        "comments": "Comments",
        "nocomments": "Comments",
    },
    "de": {
        "discussion": "Diskussion",
        "comment": "Kommentar",
        "comments": "Kommentare",
        "nocomments": "Kommentare",
    },
}


def get_phrase(key: str, lang: str) -> str:
    return LANG.get(lang, LANG[DEFAULT_LANG]).get(key, LANG[DEFAULT_LANG][key])


def format_comment_count(count: int, lang: str = DEFAULT_LANG) -> str:
    """Phrase for a number of comments, e.g. '0 Comments', '1 Comment', '5 Comments'."""
    if count == 0:
        phrase = get_phrase("nocomments", lang)
    elif count == 1:
        phrase = get_phrase("comment", lang)
    else:
        phrase = get_phrase("comments", lang)
    return f"{count}{NBSP}{phrase}"


def page_url(page_id: str, base_url: str = "", url_rewrite: bool = False) -> str:
    base_url = base_url.rstrip("/")
    if url_rewrite:
        return f"{base_url}/{quote(page_id, safe=':')}"
    return f"{base_url}/doku.php?id={quote(page_id, safe=':')}"


def build_thread_link(page_id: str, count: int, lang: str = DEFAULT_LANG, base_url: str = "", url_rewrite: bool = False) -> ThreadLink:
    """Link to the discussion section of a page, labelled with its comment count."""
    section = f"#{DISCUSSION_ANCHOR}"
    return ThreadLink(
        href=page_url(page_id, base_url, url_rewrite) + section,
        title=page_id + section,
        label=format_comment_count(count, lang),
    )
